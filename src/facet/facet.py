"""Main facet application builder."""

from typing import Dict, Optional

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from rich.markup import escape

from facet.api.controller import ResourceController
from facet.api.resource import ResourceOps
from facet.common.errors import FacetError
from facet.core.config import FacetConfig
from facet.core.logging import color_palette, log
from facet.ui import display_resource_routes, print_welcome


class Facet:
    """Builds a FastAPI app out of resource controllers."""

    def __init__(self, config: FacetConfig, app: Optional[FastAPI] = None):
        """Initialize the Facet instance."""
        self.config = config
        self.app = app or FastAPI()
        self.routers: Dict[str, APIRouter] = {}
        log.set_level(config.log_level)
        self._initialize_app()

    def _initialize_app(self) -> None:
        """Initialize FastAPI app configuration."""
        self.app.title = self.config.project_name
        self.app.version = self.config.version
        if self.config.description:
            self.app.description = self.config.description

        if self.config.author:
            self.app.contact = {"name": self.config.author, "email": self.config.email}

        if self.config.license_info:
            self.app.license_info = self.config.license_info

        # Add CORS middleware by default
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def print_welcome(self, host: str = "localhost", port: int = 8000) -> None:
        """Print welcome message with app information."""
        print_welcome(self.config.project_name, self.config.version, host, port)

    def add_resource(
        self,
        name: str,
        controller: Optional[ResourceController] = None,
        prefix: str = "",
        tags: Optional[list] = None,
        *,
        service=None,
    ) -> ResourceController:
        """
        Register the resource routes for `name`.

        Pass either a ready `controller` or a `service`, in which case a
        default `ResourceController` is built with the app's query settings.
        """
        if controller is None:
            if service is None:
                raise ValueError("add_resource() needs a controller or a service")
            controller = ResourceController(service, query_config=self.config.query)

        log.info(f"Generating resource routes for: {color_palette['resource'](name)}")

        router = APIRouter(tags=tags or [name.capitalize()])
        ops = ResourceOps(name=name, controller=controller, router=router, prefix=prefix)
        ops.generate_all()

        self.routers[name] = router
        self.app.include_router(router)

        with log.indented():
            display_resource_routes(ops.routes(), controller.permit, controller.identifier)

        log.success(f"Generated 7 routes for {color_palette['resource'](name)}")
        return controller

    def configure_error_handlers(self) -> None:
        """
        Configure global error handlers for the API.

        Sets up custom exception handlers for common error types.
        """
        @self.app.exception_handler(FacetError)
        async def facet_error_handler(request, exc: FacetError):
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": True,
                    "message": exc.message,
                    "status_code": exc.status_code,
                },
            )

        @self.app.exception_handler(HTTPException)
        async def http_exception_handler(request, exc):
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": True,
                    "message": exc.detail,
                    "status_code": exc.status_code,
                },
            )

        @self.app.exception_handler(Exception)
        async def general_exception_handler(request, exc):
            log.error(f"Unhandled exception on {request.url.path}: {escape(str(exc))}")

            return JSONResponse(
                status_code=500,
                content={
                    "error": True,
                    "message": "Internal server error",
                    "detail": str(exc) if self.config.debug_mode else None,
                    "status_code": 500,
                },
            )

        log.success("Configured global error handlers")
