# src/facet/core/query/operators.py

# Maps operator tokens from API query params to SQLAlchemy column methods.
# For example, `?age__gte=18` (or `?age[gte]=18`) calls `Column.__ge__(18)`.
OPERATOR_MAP = {
    'eq': '__eq__',      # Equal
    'neq': '__ne__',     # Not Equal
    'gt': '__gt__',      # Greater Than
    'gte': '__ge__',     # Greater Than or Equal
    'lt': '__lt__',      # Less Than
    'lte': '__le__',     # Less Than or Equal
    'like': 'like',      # String LIKE
    'ilike': 'ilike',    # String ILIKE (case-insensitive)
    'in': 'in_',         # In a list of values
    'notin': 'not_in',   # Not in a list of values
    'isnull': 'is_',     # Is Null (or `is_not` when the value is false)
}

DEFAULT_OPERATOR = 'eq'

# Operators that expect a list of values, comma-separated in the query string.
LIST_OPERATORS = {'in', 'notin'}

# Operators whose value is a boolean flag rather than a comparison operand.
FLAG_OPERATORS = {'isnull'}

TRUTHY = {'1', 'true', 'yes', 'on'}
FALSY = {'0', 'false', 'no', 'off'}


def parse_flag(value) -> bool:
    """Interpret a query-string flag (`1`, `true`, `yes`, `on`) as a bool."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY


def split_list(value) -> list:
    """Split a comma-separated value, dropping empty parts."""
    if isinstance(value, (list, tuple)):
        return [part for item in value for part in split_list(item)]
    return [part.strip() for part in str(value).split(',') if part.strip()]


def last_value(value):
    """Last of a repeated query param (`?page=1&page=2` -> `'2'`)."""
    if isinstance(value, (list, tuple)):
        return value[-1] if value else None
    return value
