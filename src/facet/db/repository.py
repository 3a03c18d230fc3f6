# src/facet/db/repository.py
"""Field metadata of a declarative SQLAlchemy model."""

from typing import Any, List, Type

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import InstrumentedAttribute


class ModelRepository:
    """Exposes the permit set (`field_mappings`) and primary key (`identifier`) of a model."""

    def __init__(self, model: Type[Any]):
        self.model = model
        self.mapper = sa_inspect(model)

    @property
    def name(self) -> str:
        return self.model.__name__

    @property
    def field_mappings(self) -> List[str]:
        return [attr.key for attr in self.mapper.column_attrs]

    @property
    def identifier(self) -> List[str]:
        return [
            self.mapper.get_property_by_column(column).key
            for column in self.mapper.primary_key
        ]

    def column(self, field: str) -> InstrumentedAttribute:
        return getattr(self.model, field)

    def python_type(self, field: str) -> Any:
        """Python type of a mapped column, or None when the type does not declare one."""
        column = self.mapper.get_property(field).columns[0]
        try:
            return column.type.python_type
        except NotImplementedError:
            return None
