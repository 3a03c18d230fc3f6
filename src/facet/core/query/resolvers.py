# src/facet/core/query/resolvers.py
"""
Resolvers that turn untrusted query input into service criteria.

Each resolver reads a query mapping and writes into a shared criteria dict:

    criteria = {}
    FilterResolver(permit).resolve(query, criteria)
    OrderResolver(permit).resolve(query, criteria)
    paginate = PagerResolver().resolve(query, criteria)

Only fields in the permit set ever reach the criteria; anything else is
dropped without raising.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from rich.markup import escape

from facet.core.config import QueryConfig
from facet.core.logging import log
from facet.core.query.operators import (
    DEFAULT_OPERATOR,
    FALSY,
    FLAG_OPERATORS,
    LIST_OPERATORS,
    OPERATOR_MAP,
    last_value,
    parse_flag,
    split_list,
)

Criteria = Dict[str, Any]
FilterTriple = Tuple[str, str, Any]
OrderPair = Tuple[str, str]

# `price[gte]` style keys
_BRACKET_KEY = re.compile(r"^(?P<field>[^\[\]]+)\[(?P<op>[a-z]+)\]$")
_SUFFIX_SEPARATOR = "__"


class FilterResolver:
    """Translates permitted query fields into `(field, operator, value)` triples."""

    def __init__(self, permit: Iterable[str], config: Optional[QueryConfig] = None):
        self.permit = list(permit)
        self.config = config or QueryConfig()

    def resolve(self, input: Mapping[str, Any], criteria: Criteria) -> Criteria:
        filters: List[FilterTriple] = criteria.setdefault("filters", [])
        reserved = self.config.reserved_params()

        for key, value in input.items():
            if key in reserved:
                continue

            parsed = self._parse_key(key)
            if parsed is None:
                log.debug(f"Dropped filter key: {escape(key)}")
                continue

            field, operator = parsed
            filters.append((field, operator, self._parse_value(operator, value)))

        return criteria

    def _parse_key(self, key: str) -> Optional[Tuple[str, str]]:
        if key in self.permit:
            return key, DEFAULT_OPERATOR

        match = _BRACKET_KEY.match(key)
        if match:
            field, operator = match.group("field"), match.group("op")
        elif _SUFFIX_SEPARATOR in key:
            field, operator = key.rsplit(_SUFFIX_SEPARATOR, 1)
        else:
            return None

        if field not in self.permit or operator not in OPERATOR_MAP:
            return None
        return field, operator

    @staticmethod
    def _parse_value(operator: str, value: Any) -> Any:
        if operator in LIST_OPERATORS:
            return split_list(value)
        if operator in FLAG_OPERATORS:
            return parse_flag(last_value(value))
        return last_value(value)


class OrderResolver:
    """Translates a `sort=-created,name` specification into `(field, direction)` pairs."""

    def __init__(self, permit: Iterable[str], config: Optional[QueryConfig] = None):
        self.permit = list(permit)
        self.config = config or QueryConfig()

    def resolve(self, input: Mapping[str, Any], criteria: Criteria) -> Criteria:
        order: List[OrderPair] = criteria.setdefault("order", [])
        seen = {field for field, _ in order}

        for token in self._tokens(input.get(self.config.sort_param)):
            direction = "asc"
            if token[0] in "+-":
                direction = "desc" if token[0] == "-" else "asc"
                token = token[1:].strip()

            if token not in self.permit or token in seen:
                log.debug(f"Dropped sort token: {escape(token)}")
                continue

            seen.add(token)
            order.append((token, direction))

        return criteria

    @staticmethod
    def _tokens(raw: Any) -> List[str]:
        if raw is None:
            return []
        values = raw if isinstance(raw, (list, tuple)) else [raw]
        tokens = []
        for value in values:
            tokens.extend(split_list(value))
        return tokens


class PagerResolver:
    """
    Translates page/per-page params into pagination criteria.

    `resolve()` returns False when the request explicitly disables pagination
    (e.g. `?paginate=false`); callers switch to an unpaginated search then.
    """

    def __init__(self, config: Optional[QueryConfig] = None):
        self.config = config or QueryConfig()

    def resolve(self, input: Mapping[str, Any], criteria: Criteria) -> bool:
        cfg = self.config

        flag = last_value(input.get(cfg.paginate_param))
        if flag is not None and str(flag).strip().lower() in FALSY:
            return False

        page = _positive_int(last_value(input.get(cfg.page_param))) or 1
        page = min(page, cfg.max_page)
        per_page = _positive_int(last_value(input.get(cfg.per_page_param))) or cfg.default_per_page
        per_page = min(per_page, cfg.max_per_page)

        criteria.update(
            page=page,
            per_page=per_page,
            limit=per_page,
            offset=(page - 1) * per_page,
        )
        return True


def _positive_int(value: Any) -> Optional[int]:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None
