# src/facet/common/serializer.py
"""Turns entities and collections into JSON-ready structures."""

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Type
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoInspectionAvailable


class Serializer:
    """
    Converts entities to plain dicts/lists.

    Mapped SQLAlchemy instances are read column by column; when a pydantic
    `schema` is given, entities are validated through it first
    (`from_attributes`), so the schema decides which fields are exposed.
    """

    def __init__(self, schema: Optional[Type[BaseModel]] = None):
        self.schema = schema

    def to_array(self, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, (list, tuple, set)):
            return [self.to_array(item) for item in value]
        if isinstance(value, dict):
            return {key: self._scalar(item) for key, item in value.items()}
        if self.schema is not None and not isinstance(value, BaseModel):
            value = self.schema.model_validate(value, from_attributes=True)
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json")

        columns = self._columns(value)
        if columns is not None:
            return columns
        return self._scalar(value)

    def _columns(self, entity: Any) -> Optional[Dict[str, Any]]:
        try:
            mapper = sa_inspect(entity).mapper
        except NoInspectionAvailable:
            return None
        return {
            attr.key: self._scalar(getattr(entity, attr.key))
            for attr in mapper.column_attrs
        }

    def _scalar(self, value: Any) -> Any:
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        if isinstance(value, (Decimal, UUID)):
            return str(value)
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, (list, tuple, dict, BaseModel)):
            return self.to_array(value)
        return value


_default = Serializer()


def serializer() -> Serializer:
    """Process-wide default serializer."""
    return _default
