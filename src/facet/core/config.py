# src/facet/core/config.py
"""Configuration models for facet applications."""

from typing import Dict, Optional, Set

from pydantic import BaseModel, Field, field_validator


class QueryConfig(BaseModel):
    """Names and limits of the query-string parameters understood by `index`."""

    page_param: str = "page"
    per_page_param: str = "per_page"
    sort_param: str = "sort"
    paginate_param: str = "paginate"
    default_per_page: int = Field(default=15, ge=1)
    max_per_page: int = Field(default=100, ge=1)
    # Keeps offsets inside a 64-bit database integer.
    max_page: int = Field(default=1_000_000, ge=1)

    def reserved_params(self) -> Set[str]:
        """Params that drive paging/sorting and are never treated as filters."""
        return {
            self.page_param,
            self.per_page_param,
            self.sort_param,
            self.paginate_param,
        }


class FacetConfig(BaseModel):
    """Application-level settings."""

    project_name: str = "Facet API"
    version: str = "0.1.0"
    description: Optional[str] = None
    author: Optional[str] = None
    email: Optional[str] = None
    license_info: Optional[Dict[str, str]] = None
    debug_mode: bool = False
    log_level: str = "INFO"
    query: QueryConfig = Field(default_factory=QueryConfig)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()
