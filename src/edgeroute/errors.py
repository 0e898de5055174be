"""edgeroute exception hierarchy.

Shared across the router, the predicate library, and the ASGI entry point
so every module raises and catches the same types.

A request that matches no route is not an error: ``Router.resolve`` returns
``None`` and ``Router.route`` answers with the fixed 404 response.
"""


class EdgeRouteError(Exception):
    """Base for all edgeroute-specific errors."""


class ConfigurationError(EdgeRouteError):
    """Raised when a route registration is invalid.

    Typically raised while the router is being built: an uncompilable
    path pattern, a handler that is not callable, or a condition that
    is not a predicate.
    """


class SerializationError(EdgeRouteError):
    """Raised when a handler's return value cannot be encoded as JSON.

    Chained from the underlying ``TypeError`` or ``ValueError``. The router
    does not catch it; it surfaces to the hosting runtime like any other
    handler failure.
    """
