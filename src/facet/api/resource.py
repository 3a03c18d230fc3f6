# src/facet/api/resource.py
"""REST resource routes bound to a `ResourceController`."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Request

from facet.api.controller import ResourceController


def query_mapping(request: Request) -> Dict[str, Any]:
    """Query params as a dict; a repeated key keeps all of its values as a list."""
    params = request.query_params
    mapping: Dict[str, Any] = {}
    for key in params.keys():
        values = params.getlist(key)
        mapping[key] = values[0] if len(values) == 1 else values
    return mapping


class ResourceOps:
    """Registers the seven resource routes for one controller on a router."""

    def __init__(
        self,
        name: str,
        controller: ResourceController,
        router: APIRouter,
        prefix: str = "",
    ):
        self.name = name
        self.controller = controller
        self.router = router
        self.prefix = prefix

    def _get_route_path(self, operation: str = "") -> str:
        """Generate route path with optional prefix."""
        base_path = f"/{self.name.lower()}"
        if operation:
            base_path = f"{base_path}/{operation}"
        return f"{self.prefix}{base_path}"

    def index(self) -> None:
        """Add INDEX route (filter, sort, paginate)."""
        controller = self.controller

        @self.router.get(
            self._get_route_path(),
            summary=f"List {self.name}",
            description=f"Retrieve {self.name} records with optional filtering, sorting and pagination",
        )
        def index_resources(request: Request) -> Dict[str, Any]:
            path = str(request.url.replace(query=""))
            return controller.index_action(query_mapping(request), path=path)

    def create(self) -> None:
        """Add CREATE form route."""
        controller = self.controller

        @self.router.get(self._get_route_path("create"), summary=f"New {self.name} form")
        def create_resource_form() -> Any:
            return controller.create_action()

    def store(self) -> None:
        """Add STORE route."""
        controller = self.controller

        @self.router.post(
            self._get_route_path(),
            status_code=201,
            summary=f"Create {self.name}",
            description=f"Create a new {self.name} record",
        )
        def store_resource(data: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
            return controller.store_action(data)

    def show(self) -> None:
        """Add SHOW route."""
        controller = self.controller

        @self.router.get(self._get_route_path("{id}"), summary=f"Get {self.name}")
        def show_resource(id: str) -> Dict[str, Any]:
            return controller.show_action(id)

    def edit(self) -> None:
        """Add EDIT form route."""
        controller = self.controller

        @self.router.get(self._get_route_path("{id}/edit"), summary=f"Edit {self.name} form")
        def edit_resource_form(id: str) -> Any:
            return controller.edit_action(id)

    def update(self) -> None:
        """Add UPDATE route (PUT and PATCH)."""
        controller = self.controller

        @self.router.api_route(
            self._get_route_path("{id}"),
            methods=["PUT", "PATCH"],
            summary=f"Update {self.name}",
        )
        def update_resource(id: str, data: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
            return controller.update_action(id, data)

    def destroy(self) -> None:
        """Add DESTROY route; `{id}` may be a comma-separated composite key."""
        controller = self.controller

        @self.router.delete(self._get_route_path("{id}"), summary=f"Delete {self.name}")
        def destroy_resource(id: str) -> Dict[str, Any]:
            return controller.destroy_action(id)

    def generate_all(self) -> None:
        """Generate all resource routes; `create` precedes `{id}` so it is matched first."""
        self.index()
        self.create()
        self.store()
        self.show()
        self.edit()
        self.update()
        self.destroy()

    def routes(self) -> list[tuple[str, str]]:
        """(methods, path) pairs, for display."""
        return [
            ("GET", self._get_route_path()),
            ("GET", self._get_route_path("create")),
            ("POST", self._get_route_path()),
            ("GET", self._get_route_path("{id}")),
            ("GET", self._get_route_path("{id}/edit")),
            ("PUT|PATCH", self._get_route_path("{id}")),
            ("DELETE", self._get_route_path("{id}")),
        ]
