"""Predicate library — boolean tests over an inbound request.

Every condition is a frozen dataclass implementing ``__call__(request)``
and never raises: a missing header or an unparseable URL is a non-match.
Any other ``(Request) -> bool`` callable satisfies the same protocol::

    router.handle([Get, Path(r"/articles"), Host("example.com")], handler)
"""

import re
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from edgeroute.errors import ConfigurationError
from edgeroute.http.request import Request


@runtime_checkable
class Condition(Protocol):
    """A pure, side-effect-free test over a request."""

    def __call__(self, request: Request) -> bool: ...


@dataclass(frozen=True, slots=True)
class Method:
    """True iff the request method equals *name*, ignoring case."""

    name: str

    def __call__(self, request: Request) -> bool:
        return request.method.lower() == self.name.lower()


Connect = Method("connect")
Delete = Method("delete")
Get = Method("get")
Head = Method("head")
Options = Method("options")
Patch = Method("patch")
Post = Method("post")
Put = Method("put")
Trace = Method("trace")


@dataclass(frozen=True, slots=True)
class Header:
    """True iff the request carries header *name* with exactly *value*."""

    name: str
    value: str

    def __call__(self, request: Request) -> bool:
        return request.headers.get(self.name) == self.value


def Host(host: str) -> Header:  # noqa: N802
    """Match the ``host`` header against *host*, lower-cased.

    Only the expected value is lower-cased; the request's header value is
    compared as received.
    """
    return Header("host", host.lower())


def Referrer(host: str) -> Header:  # noqa: N802
    """Match the ``referrer`` header against *host*, lower-cased.

    Same comparison rules as ``Host``.
    """
    return Header("referrer", host.lower())


@dataclass(frozen=True, slots=True)
class Path:
    """True iff *pattern* matches the entire request path.

    The leftmost match must cover the whole path: ``.*/articles`` accepts
    ``/v1/articles`` but not ``/v1/articles/getBySlug``. The pattern is
    compiled once; an invalid pattern raises ``ConfigurationError``.
    """

    pattern: str | re.Pattern[str]
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            regex = re.compile(self.pattern)
        except re.error as exc:
            msg = f"Invalid path pattern {self.pattern!r}: {exc}"
            raise ConfigurationError(msg) from exc
        object.__setattr__(self, "regex", regex)

    def __call__(self, request: Request) -> bool:
        path = request.path
        if path is None:
            return False
        match = self.regex.search(path)
        return match is not None and match.group(0) == path
