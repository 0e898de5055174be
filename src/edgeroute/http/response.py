"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Built fresh per request,
handed back to the runtime, and never inspected by the router again.
"""

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Headers are kept as ordered name/value pairs exactly as the router
    produced them; ``header()`` looks one up case-insensitively.
    """

    body: str | bytes = ""
    status: int = 200
    status_text: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str] | tuple[tuple[str, str], ...]) -> "Response":
        """Return a new Response with additional headers."""
        new = tuple(headers.items()) if isinstance(headers, Mapping) else tuple(headers)
        return replace(self, headers=(*self.headers, *new))

    # -- Header access --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name*, or *default*."""
        name_lower = name.lower()
        for key, value in self.headers:
            if key.lower() == name_lower:
                return value
        return default

    @property
    def content_type(self) -> str | None:
        """The ``content-type`` header value, if any."""
        return self.header("content-type")

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.text)
