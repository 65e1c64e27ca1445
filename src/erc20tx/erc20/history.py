"""Token transfer history rebuilt from Transfer event logs."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable

from erc20tx.domain.enums import Chain, Direction
from erc20tx.domain.models import TransferRecord
from erc20tx.erc20.logs import (
    LogsErr,
    build_transfer_logs_request,
    decode_logs_response,
    index_by_hash,
    now_ms,
    parse_transfer_entries,
)
from erc20tx.exceptions import ParseError, RpcError
from erc20tx.infra.rpc.base import Provider, Transport
from erc20tx.tokens import TokenRegistry

logger = logging.getLogger(__name__)


class TransactionHistory:
    """Answers "which ERC-20 transfers in or out has this address made" since genesis.

    Block number comes from the provider; logs go through the raw transport
    because the provider endpoint does not serve eth_getLogs.
    """

    def __init__(
        self,
        provider: Provider,
        transport: Transport,
        registry: TokenRegistry,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._provider = provider
        self._transport = transport
        self._registry = registry
        self._clock = clock or now_ms

    async def get_token_transactions(
        self,
        network: str | Chain,
        contracts: list[str],
        direction: Direction,
        address: str,
    ) -> dict[str, TransferRecord]:
        """Transfer records keyed by transaction hash."""
        block_number = await self._provider.get_block_number()
        return await self.get_token_transfer_logs(block_number, network, contracts, direction, address)

    async def get_token_transfers(
        self,
        network: str | Chain,
        contracts: list[str],
        direction: Direction,
        address: str,
    ) -> list[TransferRecord]:
        """Every Transfer event as its own record, ordered by (hash, log index)."""
        block_number = await self._provider.get_block_number()
        records = await self._fetch(block_number, network, contracts, direction, address)
        return sorted(records, key=lambda r: (r.hash, r.log_index if r.log_index is not None else -1))

    async def get_token_transfer_logs(
        self,
        block_number: int,
        network: str | Chain,
        contracts: list[str],
        direction: Direction,
        address: str,
    ) -> dict[str, TransferRecord]:
        records = await self._fetch(block_number, network, contracts, direction, address)
        return index_by_hash(records)

    async def _fetch(
        self,
        block_number: int,
        network: str | Chain,
        contracts: list[str],
        direction: Direction,
        address: str,
    ) -> list[TransferRecord]:
        chain = Chain.from_network(network)
        direction = Direction(direction)
        request = build_transfer_logs_request(contracts, direction, address)
        logger.info(
            "Querying %s Transfer logs for %s on %s (%d contracts, block %d)",
            direction.value, address, chain.value, len(contracts), block_number,
        )

        raw = await self._transport.send(json.dumps(request))
        decoded = decode_logs_response(raw)
        if isinstance(decoded, LogsErr):
            logger.warning("Transfer log query failed (%s): %s", decoded.kind, decoded.error)
            if decoded.kind == "rpc":
                raise RpcError(decoded.error)
            raise ParseError(decoded.error)

        records = parse_transfer_entries(
            block_number, chain, direction, decoded.entries, self._registry, self._clock,
        )
        logger.info("Parsed %d Transfer logs for %s", len(records), address)
        return records
