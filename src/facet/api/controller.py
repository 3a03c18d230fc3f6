# src/facet/api/controller.py
"""Default REST resource actions backed by an entity service."""

import re
from typing import Any, Dict, List, Mapping, Optional

from facet.common.paginator import LengthAwarePaginator
from facet.common.serializer import serializer as default_serializer
from facet.core.config import QueryConfig
from facet.core.contracts import EntityService, Serializer
from facet.core.query.resolvers import FilterResolver, OrderResolver, PagerResolver

_INTEGER = re.compile(r"^-?\d+$")


def parse_identifier(value: str) -> Any:
    """`"12"` -> `12`; anything non-numeric is kept as a string."""
    value = value.strip()
    return int(value) if _INTEGER.match(value) else value


class ResourceController:
    """
    The seven conventional resource actions.

    Each action is a default; subclass and override where an entity needs
    something else. The controller can reach other services through
    attributes set by the subclass, e.g.::

        class DashboardController(ResourceController):
            def __init__(self, lookup_service, dashboard_service):
                super().__init__(lookup_service)
                self.dashboard_service = dashboard_service
    """

    def __init__(
        self,
        service: EntityService,
        serializer: Optional[Serializer] = None,
        query_config: Optional[QueryConfig] = None,
    ):
        self.service = service
        self.serializer = serializer or default_serializer()
        self.query_config = query_config or QueryConfig()

    @property
    def permit(self) -> List[str]:
        """Fields that query input may filter or sort on."""
        return list(self.service.repository.field_mappings)

    @property
    def identifier(self) -> List[str]:
        return list(self.service.repository.identifier)

    def index_action(self, query: Mapping[str, Any], path: str = "/") -> Dict[str, Any]:
        """
        Displays a listing of the resource.

        GET /resource
        """
        permit = self.permit
        criteria: Dict[str, Any] = {}

        FilterResolver(permit, self.query_config).resolve(query, criteria)
        OrderResolver(permit, self.query_config).resolve(query, criteria)

        if PagerResolver(self.query_config).resolve(query, criteria):
            result = self.service.paginate(criteria)
            paginator = LengthAwarePaginator(
                items=result["items"],
                total=result["total"],
                per_page=result.get("per_page", criteria["per_page"]),
                current_page=result.get("current_page", criteria["page"]),
                options={"path": path, "page_name": self.query_config.page_param},
            )
            meta = paginator.appends(query).to_array()
            del meta["data"]
        else:
            result = self.service.search(criteria)
            meta = {"total": result["total"]}

        return {
            "data": self.serializer.to_array(result["items"]),
            "meta": meta,
        }

    def create_action(self) -> Any:
        """
        Shows the form for creating a new resource.

        GET /resource/create
        """
        return ["XXX"]

    def store_action(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Stores a newly created resource.

        POST /resource
        """
        result = self.service.create(data)
        return {"data": self.serializer.to_array(result)}

    def show_action(self, id: Any) -> Dict[str, Any]:
        """
        Displays the specified resource.

        GET /resource/:id
        """
        result = self.service.read(id)
        return {"data": self.serializer.to_array(result)}

    def edit_action(self, id: Any) -> Any:
        """
        Shows the form for editing the specified resource.

        GET /resource/:id/edit
        """
        return [f"XXX: {id}"]

    def update_action(self, id: Any, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Updates the specified resource.

        PUT/PATCH /resource/:id
        """
        result = self.service.update(id, data)
        return {"data": self.serializer.to_array(result)}

    def destroy_action(self, id: Any) -> Dict[str, Any]:
        """
        Removes the specified resource(s).

        DELETE /resource/:id[,:id2,:id3,..]

        A comma-separated id is split and the same value list is given to
        every identifier field: `"1,2"` with identifier `["a", "b"]` deletes
        by `{"a": [1, 2], "b": [1, 2]}`.
        """
        if isinstance(id, str) and "," in id:
            values = [parse_identifier(part) for part in id.split(",")]
            id = {field: list(values) for field in self.identifier}

        result = self.service.delete(id)
        return {"data": self.serializer.to_array(result)}
