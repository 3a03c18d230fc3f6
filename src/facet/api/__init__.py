"""HTTP layer: resource controller and its routes."""

from facet.api.controller import ResourceController, parse_identifier
from facet.api.resource import ResourceOps

__all__ = ["ResourceController", "ResourceOps", "parse_identifier"]
