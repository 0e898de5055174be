"""Ordered, first-match-wins router.

Routes are appended during setup and checked in registration order.
The first route whose conditions all hold handles the request; there is
no specificity ranking. ``OPTIONS`` requests never reach user routes.
"""

import json as json_module
import logging
from collections.abc import Iterable
from typing import Any

from edgeroute._internal.invoke import invoke
from edgeroute._internal.types import Handler
from edgeroute.config import RouterConfig
from edgeroute.errors import ConfigurationError, SerializationError
from edgeroute.http.request import Request
from edgeroute.http.response import Response
from edgeroute.routing.conditions import (
    Condition,
    Connect,
    Delete,
    Get,
    Head,
    Options,
    Patch,
    Path,
    Post,
    Put,
    Trace,
)
from edgeroute.routing.cors import options_response
from edgeroute.routing.route import Route, conditions_from

logger = logging.getLogger("edgeroute.routing")


def render_json(value: Any) -> str:
    """Encode a handler result with compact separators.

    Raises ``SerializationError`` if *value* is not JSON-serializable,
    including NaN and infinite floats, which have no JSON form.
    """
    try:
        return json_module.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        msg = f"Handler result is not JSON-serializable: {exc}"
        raise SerializationError(msg) from exc


class Router:
    """Ordered route table with a built-in OPTIONS responder.

    Usage::

        router = Router()
        router.get(r".*/articles", list_articles).all(fallback)
        response = await router.route(request)

    Register every route before the first ``route()`` call. The table is
    never locked; share a router across tasks only once it is fully built.
    """

    __slots__ = ("_routes", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or RouterConfig()
        self._routes: list[Route] = []

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in priority order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    # -- Registration --

    def handle(self, conditions: Iterable[Condition] | None, handler: Handler) -> "Router":
        """Append a route and return the router for chaining.

        Every condition must hold for the route to match. ``None`` or an
        empty collection matches every request.
        """
        if not callable(handler):
            msg = f"Route handler must be callable, got {handler!r}."
            raise ConfigurationError(msg)
        self._routes.append(Route(conditions=conditions_from(conditions), handler=handler))
        return self

    def connect(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Connect, Path(pattern)], handler)

    def delete(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Delete, Path(pattern)], handler)

    def get(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Get, Path(pattern)], handler)

    def head(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Head, Path(pattern)], handler)

    def options(self, pattern: str, handler: Handler) -> "Router":
        """Register an OPTIONS route.

        Only reachable through ``resolve()``: ``route()`` answers OPTIONS
        requests itself.
        """
        return self.handle([Options, Path(pattern)], handler)

    def patch(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Patch, Path(pattern)], handler)

    def post(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Post, Path(pattern)], handler)

    def put(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Put, Path(pattern)], handler)

    def trace(self, pattern: str, handler: Handler) -> "Router":
        return self.handle([Trace, Path(pattern)], handler)

    def all(self, handler: Handler) -> "Router":
        """Register a catch-all route.

        Routes are tried in order, so register this last.
        """
        return self.handle(None, handler)

    # -- Resolution --

    def resolve(self, request: Request) -> Route | None:
        """Return the first route whose conditions all hold, or ``None``."""
        for route in self._routes:
            if route.matches(request):
                return route
        return None

    async def route(self, request: Request) -> Response:
        """Dispatch *request* and build the response.

        Handler exceptions propagate unchanged.
        """
        if request.method == "OPTIONS":
            logger.debug("OPTIONS %s answered by the CORS responder", request.url)
            return options_response(request, self.config)

        route = self.resolve(request)
        cfg = self.config

        if route is None:
            logger.debug("No route matches %s %s", request.method, request.url)
            return Response(
                body=cfg.not_found_body,
                status=cfg.not_found_status,
                status_text=cfg.not_found_status_text,
                headers=(("content-type", cfg.not_found_content_type),),
            )

        result = await invoke(route.handler, request)
        return (
            Response(body=render_json(result))
            .with_header("content-type", cfg.json_content_type)
            .with_headers(cfg.cors.headers())
        )
