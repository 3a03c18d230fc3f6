"""
facet-py: REST resource controllers for FastAPI with query-driven filtering, sorting and pagination.
"""

from facet.api import ResourceController, ResourceOps
from facet.common import LengthAwarePaginator, Serializer, serializer
from facet.core import FacetConfig, QueryConfig, log
from facet.db import DbClient, DbConfig, ModelRepository, ModelService
from facet.facet import Facet

__version__ = "0.1.0"

__all__ = [
    "Facet",
    "FacetConfig",
    "QueryConfig",
    "ResourceController",
    "ResourceOps",
    "LengthAwarePaginator",
    "Serializer",
    "serializer",
    "DbClient",
    "DbConfig",
    "ModelRepository",
    "ModelService",
    "log",
]
