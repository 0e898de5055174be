"""Call a route handler or router setup function, sync or async alike.

``Router.route`` and ``App.build_router`` both accept plain functions and
coroutine functions; this is the one place that tells them apart.
"""

import inspect
from collections.abc import Callable
from typing import Any


async def invoke(func: Callable[..., Any], *args: Any) -> Any:
    """Call *func* with *args*, awaiting the outcome when it is awaitable.

    A handler that returns a coroutine, a task, or any other awaitable is
    resolved to its final value before the caller serializes it.
    """
    outcome = func(*args)
    return await outcome if inspect.isawaitable(outcome) else outcome
