# src/facet/core/contracts.py
"""Collaborator contracts a `ResourceController` is wired against."""

from typing import Any, Dict, List, Mapping, Protocol, Union, runtime_checkable


@runtime_checkable
class Repository(Protocol):
    """Knows which fields an entity exposes and which of them form its key."""

    @property
    def field_mappings(self) -> List[str]: ...

    @property
    def identifier(self) -> List[str]: ...


@runtime_checkable
class EntityService(Protocol):
    """CRUD operations for one entity type."""

    repository: Repository

    def paginate(self, criteria: Dict[str, Any]) -> Dict[str, Any]:
        """Return `{items, total, per_page, current_page}`."""
        ...

    def search(self, criteria: Dict[str, Any]) -> Dict[str, Any]:
        """Return `{items, total}` without paging."""
        ...

    def create(self, data: Mapping[str, Any]) -> Any: ...

    def read(self, id: Any) -> Any: ...

    def update(self, id: Any, data: Mapping[str, Any]) -> Any: ...

    def delete(self, id: Union[Any, Dict[str, List[Any]]]) -> Any: ...


@runtime_checkable
class Serializer(Protocol):
    def to_array(self, value: Any) -> Any: ...
