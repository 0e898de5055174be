"""OPTIONS responder.

Answers every ``OPTIONS`` request before the route table is consulted:
a CORS preflight gets the allow-header trio, anything else gets ``Allow``.
"""

from edgeroute.config import RouterConfig
from edgeroute.http.request import Request
from edgeroute.http.response import Response

PREFLIGHT_HEADERS = (
    "Origin",
    "Access-Control-Request-Method",
    "Access-Control-Request-Headers",
)


def is_preflight(request: Request) -> bool:
    """True if the request carries all three preflight headers."""
    return all(request.headers.get(name) is not None for name in PREFLIGHT_HEADERS)


def options_response(request: Request, config: RouterConfig) -> Response:
    """Build the empty-bodied response for an ``OPTIONS`` request."""
    if is_preflight(request):
        return Response(headers=config.cors.headers())
    return Response(headers=(("Allow", ", ".join(config.allow_methods)),))
