"""Immutable HTTP request.

The router only ever reads a request: method, URL, and headers are
frozen at creation and never change during dispatch.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

from edgeroute._internal.types import Scope
from edgeroute.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable inbound request.

    ``url`` is normally absolute (``https://example.com/v1/articles``).
    A relative URL is still parsed for its path.
    """

    method: str
    url: str
    headers: Headers

    @property
    def path(self) -> str | None:
        """The path component of ``url``, or ``None`` if it cannot be parsed.

        An absolute URL with an empty path has the path ``"/"``.
        """
        try:
            parts = urlsplit(self.url)
        except ValueError:
            return None
        if not parts.path and parts.netloc:
            return "/"
        return parts.path

    @classmethod
    def build(
        cls,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        """Create a Request from plain values."""
        return cls(method=method, url=url, headers=Headers.from_mapping(headers or {}))

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope.

        The absolute URL is rebuilt from the scheme, the ``Host`` header
        (falling back to the server address), the root path, the raw path,
        and the query string.
        """
        headers = Headers.from_asgi(scope.get("headers", ()))
        scheme = scope.get("scheme", "http")

        host = headers.get("host")
        if host is None:
            server = scope.get("server")
            if server:
                host = f"{server[0]}:{server[1]}"
            else:
                host = "localhost"

        raw_path = scope.get("raw_path")
        if raw_path:
            path = raw_path.decode("latin-1")
        else:
            path = quote(scope.get("root_path", "") + scope["path"])

        url = f"{scheme}://{host}{path}"
        query_string = scope.get("query_string", b"")
        if query_string:
            url = f"{url}?{query_string.decode('latin-1')}"

        return cls(method=scope["method"], url=url, headers=headers)
