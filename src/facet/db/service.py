# src/facet/db/service.py
"""Entity service over a SQLAlchemy model."""

from typing import Any, Dict, List, Mapping

from sqlalchemy import delete as sa_delete
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from facet.common.errors import ResourceNotFoundError
from facet.core.logging import color_palette, log
from facet.core.query.builder import QueryBuilder
from facet.db.client import DbClient
from facet.db.repository import ModelRepository


class ModelService:
    """CRUD for one model; each call runs in its own session."""

    def __init__(self, repository: ModelRepository, db_client: DbClient):
        self.repository = repository
        self.db_client = db_client

    @property
    def model(self):
        return self.repository.model

    # ===== Listing =====

    def paginate(self, criteria: Dict[str, Any]) -> Dict[str, Any]:
        builder = QueryBuilder(self.repository, criteria)
        with self.db_client.session() as db:
            total = self._count(db, builder)
            items = db.scalars(builder.build(select(self.model))).all()

        return {
            "items": list(items),
            "total": total,
            "per_page": criteria.get("per_page", len(items)),
            "current_page": criteria.get("page", 1),
        }

    def search(self, criteria: Dict[str, Any]) -> Dict[str, Any]:
        builder = QueryBuilder(self.repository, criteria)
        with self.db_client.session() as db:
            items = db.scalars(builder.build(select(self.model), paginate=False)).all()
        return {"items": list(items), "total": len(items)}

    # ===== Single entity =====

    def create(self, data: Mapping[str, Any]) -> Any:
        entity = self.model(**self._writable(data))
        with self.db_client.session() as db:
            db.add(entity)
            db.commit()
            db.refresh(entity)
        log.debug(f"Created {color_palette['resource'](self.repository.name)}")
        return entity

    def read(self, id: Any) -> Any:
        with self.db_client.session() as db:
            return self._get_or_raise(db, id)

    def update(self, id: Any, data: Mapping[str, Any]) -> Any:
        with self.db_client.session() as db:
            entity = self._get_or_raise(db, id)
            for field, value in self._writable(data).items():
                setattr(entity, field, value)
            db.commit()
            db.refresh(entity)
        return entity

    def delete(self, id: Any) -> Any:
        """
        Delete by primary key, or by a `{field: [values]}` mapping.

        The mapping form deletes every row where each field is IN its list and
        returns the deleted entities.
        """
        with self.db_client.session() as db:
            if isinstance(id, dict):
                deleted = self._delete_matching(db, id)
            else:
                deleted = self._get_or_raise(db, id)
                db.delete(deleted)
            db.commit()
        return deleted

    # ===== Helper Methods =====

    def _count(self, db: Session, builder: QueryBuilder) -> int:
        query = select(func.count()).select_from(self.model)
        for clause in builder.conditions():
            query = query.where(clause)
        return db.scalar(query) or 0

    def _delete_matching(self, db: Session, keys: Dict[str, List[Any]]) -> List[Any]:
        criteria = {
            "filters": [(field, "in", values) for field, values in keys.items()]
        }
        conditions = QueryBuilder(self.repository, criteria).conditions()
        deleted = list(db.scalars(select(self.model).where(*conditions)).all())
        if deleted:
            db.execute(sa_delete(self.model).where(*conditions))
        return deleted

    def _get_or_raise(self, db: Session, id: Any) -> Any:
        entity = db.get(self.model, self._primary_key(id))
        if entity is None:
            raise ResourceNotFoundError(self.repository.name, id)
        return entity

    def _primary_key(self, id: Any) -> Any:
        """
        Coerce a route id to the key `Session.get` expects.

        A composite key arrives as `"1,2"`, one part per identifier field in
        order; a part count that does not match the key finds nothing.
        """
        fields = self.repository.identifier
        if isinstance(id, dict):
            if not all(field in id for field in fields):
                raise ResourceNotFoundError(self.repository.name, id)
            parts = [id[field] for field in fields]
        elif isinstance(id, str):
            parts = [part.strip() for part in id.split(",")]
        elif isinstance(id, (list, tuple)):
            parts = list(id)
        else:
            parts = [id]

        if len(parts) != len(fields) or any(part == "" for part in parts):
            raise ResourceNotFoundError(self.repository.name, id)
        key = tuple(self._coerce(field, part) for field, part in zip(fields, parts))
        return key[0] if len(key) == 1 else key

    def _coerce(self, field: str, value: Any) -> Any:
        return QueryBuilder(self.repository, {}).coerce(field, value)

    def _writable(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        permit = set(self.repository.field_mappings)
        return {
            key: self._coerce(key, value)
            for key, value in data.items()
            if key in permit
        }
