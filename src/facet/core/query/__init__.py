from facet.core.query.builder import QueryBuilder
from facet.core.query.resolvers import FilterResolver, OrderResolver, PagerResolver

__all__ = ["FilterResolver", "OrderResolver", "PagerResolver", "QueryBuilder"]
