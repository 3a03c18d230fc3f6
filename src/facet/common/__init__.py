"""Serialization, pagination and errors shared by the API and service layers."""

from facet.common.errors import FacetError, ResourceNotFoundError
from facet.common.paginator import LengthAwarePaginator
from facet.common.serializer import Serializer, serializer

__all__ = [
    "FacetError",
    "ResourceNotFoundError",
    "LengthAwarePaginator",
    "Serializer",
    "serializer",
]
