# src/facet/common/paginator.py
"""Length-aware pagination metadata for `index` responses."""

import math
from typing import Any, Dict, List, Mapping, Optional

from fastapi.datastructures import URL, QueryParams


class LengthAwarePaginator:
    """
    A page of items plus the total count needed to describe every other page.

    `to_array()` yields `current_page, data, first_page_url, from, last_page,
    last_page_url, next_page_url, path, per_page, prev_page_url, to, total`.
    """

    page_name = "page"

    def __init__(
        self,
        items: List[Any],
        total: int,
        per_page: int,
        current_page: int = 1,
        options: Optional[Mapping[str, Any]] = None,
    ):
        options = dict(options or {})
        self.items = list(items)
        self.total = max(int(total), 0)
        self.per_page = max(int(per_page), 1)
        self.current_page = max(int(current_page), 1)
        self.path = options.get("path", "/")
        self.page_name = options.get("page_name", self.page_name)
        self.query: Dict[str, Any] = {}

    @property
    def last_page(self) -> int:
        return max(math.ceil(self.total / self.per_page), 1)

    @property
    def first_item(self) -> Optional[int]:
        if not self.items:
            return None
        return (self.current_page - 1) * self.per_page + 1

    @property
    def last_item(self) -> Optional[int]:
        if not self.items:
            return None
        return self.first_item + len(self.items) - 1

    def appends(self, query: Mapping[str, Any]) -> "LengthAwarePaginator":
        """Carry extra query params into every generated page URL."""
        self.query.update({k: v for k, v in query.items() if k != self.page_name})
        return self

    def url(self, page: int) -> str:
        pairs = []
        for key, value in self.query.items():
            values = value if isinstance(value, (list, tuple)) else [value]
            pairs.extend((key, str(v)) for v in values)
        pairs.append((self.page_name, str(max(page, 1))))
        return str(URL(self.path).replace(query=str(QueryParams(pairs))))

    def to_array(self) -> Dict[str, Any]:
        has_next = self.current_page < self.last_page
        has_prev = self.current_page > 1
        return {
            "current_page": self.current_page,
            "data": self.items,
            "first_page_url": self.url(1),
            "from": self.first_item,
            "last_page": self.last_page,
            "last_page_url": self.url(self.last_page),
            "next_page_url": self.url(self.current_page + 1) if has_next else None,
            "path": self.path,
            "per_page": self.per_page,
            "prev_page_url": self.url(self.current_page - 1) if has_prev else None,
            "to": self.last_item,
            "total": self.total,
        }
