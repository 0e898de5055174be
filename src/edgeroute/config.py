"""Router configuration.

Frozen dataclasses: immutable after creation, one definition for the
fixed wire-level constants instead of copies scattered through the router.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CORSConfig:
    """Cross-origin header set attached to successful and preflight responses.

    The defaults allow GET, HEAD, POST, and OPTIONS from any origin and
    accept the ``Content-Type`` request header::

        CORSConfig(allow_origin="https://example.com")
    """

    allow_origin: str = "*"
    allow_methods: tuple[str, ...] = ("GET", "HEAD", "POST", "OPTIONS")
    allow_headers: tuple[str, ...] = ("Content-Type",)

    def headers(self) -> tuple[tuple[str, str], ...]:
        """Render the ``Access-Control-Allow-*`` header trio."""
        return (
            ("Access-Control-Allow-Origin", self.allow_origin),
            ("Access-Control-Allow-Methods", ", ".join(self.allow_methods)),
            ("Access-Control-Allow-Headers", ", ".join(self.allow_headers)),
        )


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields default to the values browsers and clients of the edge
    function expect. Override what you need::

        config = RouterConfig(not_found_body="nothing here")
    """

    cors: CORSConfig = field(default_factory=CORSConfig)

    # Bare OPTIONS (no preflight headers)
    allow_methods: tuple[str, ...] = ("GET", "HEAD", "POST", "OPTIONS")

    # Successful dispatch
    json_content_type: str = "application/json"

    # No matching route
    not_found_status: int = 404
    not_found_status_text: str = "not found"
    not_found_body: str = "resource not found"
    not_found_content_type: str = "text/plain"
