"""Ethereum JSON-RPC provider over HTTP."""

import logging
from typing import Any

import httpx

from erc20tx.codec import hex_to_int
from erc20tx.domain.models import CallParams
from erc20tx.exceptions import ProviderError
from erc20tx.infra.http.rate_limited_client import RateLimitedClient
from erc20tx.infra.http.retry import with_transport_retry
from erc20tx.infra.rpc.base import Provider

logger = logging.getLogger(__name__)


class JsonRpcProvider(Provider):
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

    async def _call(self, method: str, params: list) -> Any:
        """Execute a JSON-RPC call and return the result field."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }
        try:
            resp = await with_transport_retry(
                lambda: self._http.post(self._rpc_url, json=payload),
                max_attempts=self._max_attempts,
                backoff_seconds=self._backoff_seconds,
            )
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("RPC %s failed: %s", method, exc)
            raise ProviderError(str(exc)) from exc

        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected JSON-RPC response for {method}: {data!r}")
        if data.get("error") is not None:
            raise ProviderError(data["error"])
        if data.get("result") is None:
            raise ProviderError(f"JSON-RPC response for {method} has no result")
        return data["result"]

    async def call(self, params: CallParams) -> str:
        return await self._call("eth_call", [params.model_dump(), "latest"])

    async def send_transaction(self, tx: dict[str, Any]) -> str:
        logger.info("Sending transaction to %s", tx.get("to"))
        return await self._call("eth_sendTransaction", [tx])

    async def get_block_number(self) -> int:
        result = await self._call("eth_blockNumber", [])
        return hex_to_int(result)
