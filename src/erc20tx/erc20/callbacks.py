"""Bridge from coroutines to the ``(error, result)`` callback convention."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from erc20tx.exceptions import Erc20Error

T = TypeVar("T")

Callback = Callable[[Any, Any], None]


async def deliver(operation: Awaitable[T], cb: Callback) -> None:
    """Await ``operation`` and report through ``cb`` exactly once.

    Success -> ``cb(None, result)``; an ``Erc20Error`` -> ``cb(error, None)``
    with the error's payload. Anything else is a bug and propagates.
    """
    try:
        result = await operation
    except Erc20Error as exc:
        cb(exc.error, None)
        return
    cb(None, result)
