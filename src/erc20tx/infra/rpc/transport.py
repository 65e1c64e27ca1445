"""Raw JSON-RPC transport for log queries.

Some public endpoints do not serve eth_getLogs through the regular provider,
so log queries go out as pre-serialized payloads over a separate channel.
"""

import json
import logging
from typing import Any

import httpx

from erc20tx.exceptions import ProviderError, RpcError
from erc20tx.infra.http.rate_limited_client import RateLimitedClient
from erc20tx.infra.http.retry import with_transport_retry
from erc20tx.infra.rpc.base import Transport

logger = logging.getLogger(__name__)


def _rpc_error(response: httpx.Response) -> Any:
    """JSON-RPC ``error`` carried in an HTTP error reply, or None."""
    try:
        body = json.loads(response.text)
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if error == "" or error is False:
        return None
    return error


class HttpTransport(Transport):
    def __init__(
        self,
        rpc_url: str,
        http_client: RateLimitedClient,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
    ) -> None:
        self._rpc_url = rpc_url
        self._http = http_client
        self._max_attempts = max_attempts
        self._backoff_seconds = backoff_seconds

    async def send(self, payload: str) -> str:
        logger.debug("POST %s: %s", self._rpc_url, payload)
        try:
            resp = await with_transport_retry(
                lambda: self._http.post_raw(self._rpc_url, content=payload),
                max_attempts=self._max_attempts,
                backoff_seconds=self._backoff_seconds,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            error = _rpc_error(exc.response)
            logger.warning("Log query got HTTP %d: %s", exc.response.status_code, error or exc)
            if error is not None:
                raise RpcError(error) from exc
            raise ProviderError(str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.warning("Log query transport failed: %s", exc)
            raise ProviderError(str(exc)) from exc
        return resp.text
