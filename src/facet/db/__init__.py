"""SQLAlchemy-backed repository and service for facet resources."""

from facet.db.client import DbClient, DbConfig
from facet.db.repository import ModelRepository
from facet.db.service import ModelService

__all__ = ["DbClient", "DbConfig", "ModelRepository", "ModelService"]
