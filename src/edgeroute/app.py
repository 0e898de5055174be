"""ASGI entry point.

Receives raw ASGI events, builds a Router through the user's ``setup``
callable, routes the request, and hands the Response back to the server.
"""

import logging
from collections.abc import Callable
from typing import Any

from edgeroute._internal.invoke import invoke
from edgeroute._internal.types import Receive, Scope, Send
from edgeroute.config import RouterConfig
from edgeroute.http.request import Request
from edgeroute.http.response import Response
from edgeroute.routing.router import Router
from edgeroute.server.sender import send_response

logger = logging.getLogger("edgeroute.server")


class App:
    """ASGI 3.0 application wrapping a router factory.

    By default a fresh Router is built for every request, so the route
    table is never shared between concurrent requests::

        def setup(router: Router) -> None:
            router.get(r".*/articles", list_articles)
            router.get(r".*/articles/getBySlug", article_by_slug)

        app = App(setup)

    With ``reuse_router=True`` the router is built on first use and then
    only read.
    """

    __slots__ = ("_router", "config", "reuse_router", "setup")

    def __init__(
        self,
        setup: Callable[[Router], Any],
        config: RouterConfig | None = None,
        *,
        reuse_router: bool = False,
    ) -> None:
        self.setup = setup
        self.config = config or RouterConfig()
        self.reuse_router = reuse_router
        self._router: Router | None = None

    async def build_router(self) -> Router:
        """Create a Router and let ``setup`` register its routes.

        With ``reuse_router``, concurrent first requests may each run an
        async ``setup``; the first router to finish is kept and every
        caller gets that one.
        """
        if self.reuse_router and self._router is not None:
            return self._router
        router = Router(self.config)
        await invoke(self.setup, router)
        if not self.reuse_router:
            return router
        if self._router is None:
            self._router = router
        return self._router

    async def handle(self, request: Request) -> Response:
        """Route a single request. Handler errors propagate."""
        router = await self.build_router()
        return await router.route(request)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Acknowledges the lifespan protocol, routes HTTP scopes, and
        ignores everything else.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope)
        try:
            response = await self.handle(request)
        except Exception:
            logger.exception("Unhandled error while routing %s %s", request.method, request.url)
            raise

        await send_response(response, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol (no startup work to do)."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
