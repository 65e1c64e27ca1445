"""Connection-level retries for HTTP calls.

Only ``httpx.TransportError`` (connect/read failures, timeouts) is retried.
JSON-RPC errors are answers, not failures, and are left to the caller.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

T = TypeVar("T")


async def with_transport_retry(
    send: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    backoff_seconds: float = 1.0,
) -> T:
    retrying = AsyncRetrying(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_exponential(multiplier=backoff_seconds, max=30),
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            return await send()
    raise RuntimeError("unreachable")  # pragma: no cover
