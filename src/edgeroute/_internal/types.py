"""Shared type aliases used across edgeroute modules."""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# Route handler: receives the Request, returns a JSON-serializable value
# (or an awaitable resolving to one)
Handler: TypeAlias = Callable[..., Any]

# Raw ASGI 3.0 callables and scope
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
