"""edgeroute — first-match-wins request routing for edge functions.

Match one inbound request against an ordered list of routes, each guarded
by method, path, and header conditions, and answer CORS preflights before
any route is consulted.

Basic usage::

    from edgeroute import Request, Router

    router = Router()
    router.get(r".*/articles", lambda request: [{"slug": "hello"}])
    router.all(lambda request: {"error": "unknown"})

    response = await router.route(
        Request.build("GET", "https://example.com/v1/articles")
    )

Serving over ASGI::

    from edgeroute import App

    app = App(lambda router: router.get(r"/ping", lambda request: "pong"))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "CORSConfig",
    "ConfigurationError",
    "EdgeRouteError",
    "Headers",
    "Request",
    "Response",
    "Route",
    "Router",
    "RouterConfig",
    "SerializationError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import edgeroute`` fast while providing a clean top-level API.
    """
    if name == "App":
        from edgeroute.app import App

        return App

    if name in ("CORSConfig", "RouterConfig"):
        from edgeroute import config as _config

        return getattr(_config, name)

    if name in ("ConfigurationError", "EdgeRouteError", "SerializationError"):
        from edgeroute import errors as _errors

        return getattr(_errors, name)

    if name == "Headers":
        from edgeroute.http.headers import Headers

        return Headers

    if name == "Request":
        from edgeroute.http.request import Request

        return Request

    if name == "Response":
        from edgeroute.http.response import Response

        return Response

    if name == "Route":
        from edgeroute.routing.route import Route

        return Route

    if name == "Router":
        from edgeroute.routing.router import Router

        return Router

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
