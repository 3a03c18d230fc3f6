"""Core utilities: configuration, logging, collaborator contracts and query resolution."""

from facet.core.config import FacetConfig, QueryConfig
from facet.core.logging import Logger, log, color_palette

__all__ = ["FacetConfig", "QueryConfig", "Logger", "log", "color_palette"]
