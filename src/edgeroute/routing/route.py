"""Route and its condition set.

A route's conditions are one of two variants: ``Empty`` (matches every
request) or ``AllOf`` (every predicate must hold, checked in order).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from edgeroute._internal.types import Handler
from edgeroute.errors import ConfigurationError
from edgeroute.http.request import Request
from edgeroute.routing.conditions import Condition


@dataclass(frozen=True, slots=True)
class Empty:
    """No conditions — the catch-all variant."""

    def __call__(self, request: Request) -> bool:  # noqa: ARG002
        return True


@dataclass(frozen=True, slots=True)
class AllOf:
    """Logical AND over an ordered, non-empty tuple of predicates.

    Evaluation stops at the first predicate that returns false.
    """

    predicates: tuple[Condition, ...]

    def __call__(self, request: Request) -> bool:
        for predicate in self.predicates:
            if not predicate(request):
                return False
        return True


Conditions = Empty | AllOf


def conditions_from(predicates: Iterable[Condition] | None) -> Conditions:
    """Build the condition variant for a registration call.

    ``None`` or an empty collection yields ``Empty``. Raises
    ``ConfigurationError`` if any item is not callable.
    """
    items = tuple(predicates or ())
    if not items:
        return Empty()
    for item in items:
        if not callable(item):
            msg = f"Route condition must be callable, got {item!r}."
            raise ConfigurationError(msg)
    return AllOf(items)


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition: a condition set and its handler.

    Created at registration time and only ever appended to a Router.
    """

    conditions: Conditions
    handler: Handler

    def matches(self, request: Request) -> bool:
        """True if every condition holds for *request*."""
        return self.conditions(request)
