# src/facet/common/errors.py
"""Exceptions raised by facet services and turned into JSON by the app handlers."""

from typing import Any


class FacetError(Exception):
    """Base error carrying the HTTP status it should be reported with."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ResourceNotFoundError(FacetError):
    """No entity matches the requested identifier."""

    status_code = 404

    def __init__(self, resource: str, identifier: Any):
        super().__init__(f"{resource} '{identifier}' not found")
        self.resource = resource
        self.identifier = identifier
