# src/facet/core/query/builder.py
from datetime import date, datetime
from typing import Any, Dict, List

from sqlalchemy import Select

from facet.core.query.operators import FLAG_OPERATORS, LIST_OPERATORS, OPERATOR_MAP, parse_flag


class QueryBuilder:
    """
    Builds a filtered and sorted SQLAlchemy select from resolved criteria.

    `criteria` is what the resolvers produce: `filters` as
    `(field, operator, value)` triples, `order` as `(field, direction)` pairs,
    and optionally `limit`/`offset`.
    """
    def __init__(self, repository, criteria: Dict[str, Any]):
        self.repository = repository
        self.criteria = criteria

    def conditions(self) -> List[Any]:
        """WHERE clauses for every filter triple; they are AND-combined."""
        clauses = []
        for field, operator, value in self.criteria.get("filters", []):
            column = self.repository.column(field)
            if operator in FLAG_OPERATORS:
                clauses.append(column.is_(None) if parse_flag(value) else column.is_not(None))
                continue
            if operator in LIST_OPERATORS:
                value = [self.coerce(field, item) for item in value]
            elif operator not in ("like", "ilike"):
                value = self.coerce(field, value)
            clauses.append(getattr(column, OPERATOR_MAP[operator])(value))
        return clauses

    def build(self, query: Select, paginate: bool = True) -> Select:
        """Applies filters, sorting, and (unless `paginate` is False) limit/offset."""
        for clause in self.conditions():
            query = query.where(clause)

        for field, direction in self.criteria.get("order", []):
            column = self.repository.column(field)
            query = query.order_by(column.desc() if direction == "desc" else column.asc())

        if paginate:
            if self.criteria.get("limit"):
                query = query.limit(self.criteria["limit"])
            if self.criteria.get("offset"):
                query = query.offset(self.criteria["offset"])
        return query

    def coerce(self, field: str, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        python_type = self.repository.python_type(field)
        try:
            if python_type is bool:
                return parse_flag(value)
            if python_type is datetime:
                return datetime.fromisoformat(value)
            if python_type is date:
                return date.fromisoformat(value)
            if python_type is not None and python_type is not str:
                return python_type(value)
        except (TypeError, ValueError, ArithmeticError):
            # Left as-is; the database reports the mismatch.
            pass
        return value
