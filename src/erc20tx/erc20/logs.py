"""Transfer event log queries and their responses.

Request filter for eth_getLogs:

- address   - token contract addresses
- fromBlock - must be given, the node default is "latest"
- topics[0] - keccak of the Transfer event signature
- topics[1] - sender, left-padded to 32 bytes (None = any)
- topics[2] - recipient, left-padded to 32 bytes (None = any)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from erc20tx.codec import (
    TRANSFER_EVENT_HASH,
    add_padding,
    hex_to_bignumber,
    hex_to_int,
    normalized_address,
    remove_padding,
)
from erc20tx.domain.enums import Chain, Direction
from erc20tx.domain.models import TransferLogEntry, TransferRecord
from erc20tx.exceptions import InvalidArgumentError
from erc20tx.tokens import TokenRegistry

logger = logging.getLogger(__name__)

GET_LOGS_METHOD = "eth_getLogs"
LOGS_REQUEST_ID = 2
GENESIS_BLOCK = "0x0"


def now_ms() -> int:
    return int(datetime.now(UTC).timestamp() * 1000)


def build_transfer_logs_request(contracts: list[str], direction: Direction, address: str) -> dict[str, Any]:
    """JSON-RPC request for Transfer logs to (inbound) or from (outbound) ``address``."""
    direction = Direction(direction)
    target = normalized_address(address)
    if target is None:
        raise InvalidArgumentError("address is required")
    if direction == Direction.INBOUND:
        from_topic, to_topic = None, add_padding(target)
    else:
        from_topic, to_topic = add_padding(target), None
    return {
        "jsonrpc": "2.0",
        "id": LOGS_REQUEST_ID,
        "method": GET_LOGS_METHOD,
        "params": [
            {
                "address": list(contracts),
                "fromBlock": GENESIS_BLOCK,
                "topics": [TRANSFER_EVENT_HASH, from_topic, to_topic],
            }
        ],
    }


class LogsResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error: Any = None
    result: list[TransferLogEntry] | None = None


class LogsOk(BaseModel):
    ok: Literal[True] = True
    entries: list[TransferLogEntry]


class LogsErr(BaseModel):
    ok: Literal[False] = False
    kind: Literal["rpc", "parse"]
    error: Any


def decode_logs_response(raw: str) -> LogsOk | LogsErr:
    """Decode a raw eth_getLogs response. Never raises.

    ``"error": ""`` and ``"error": false`` are success: some endpoints always
    send the field and leave it empty when nothing went wrong.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        return LogsErr(kind="parse", error=str(exc))
    if not isinstance(data, dict):
        return LogsErr(kind="parse", error=f"Expected a JSON object, got {type(data).__name__}")

    error = data.get("error")
    if error == "" or error is False:
        error = None
    if error is not None:
        return LogsErr(kind="rpc", error=error)

    try:
        response = LogsResponse.model_validate(data)
    except ValidationError as exc:
        return LogsErr(kind="parse", error=str(exc))
    return LogsOk(entries=response.result or [])


def parse_transfer_entries(
    block_number: int,
    chain: Chain,
    direction: Direction,
    entries: Iterable[TransferLogEntry],
    registry: TokenRegistry,
    clock: Callable[[], int] = now_ms,
) -> list[TransferRecord]:
    """Map raw Transfer logs to history records, in input order."""
    direction = Direction(direction)
    records: list[TransferRecord] = []
    for entry in entries:
        token = registry.address_to_token(chain, entry.address)
        if token is None:
            logger.warning("No %s token for contract %s (tx %s)", chain.value, entry.address, entry.transaction_hash)
        entry_block = hex_to_int(entry.block_number)
        confirmations = block_number - entry_block
        if confirmations < 0:
            logger.warning("Log block %d is ahead of query block %d (tx %s)",
                           entry_block, block_number, entry.transaction_hash)
        records.append(TransferRecord(
            hash=entry.transaction_hash,
            block=str(entry_block),
            symbol=token.symbol if token else None,
            from_=remove_padding(entry.topics[1]),
            to=remove_padding(entry.topics[-1]),
            value=hex_to_bignumber(entry.data),
            type=direction,
            confirmations=str(confirmations),
            # Placeholder so the entry sorts as "now" until the block timestamp arrives
            timestamp=str(clock()),
            token=token,
            log_index=hex_to_int(entry.log_index) if entry.log_index is not None else None,
        ))
    return records


def index_by_hash(records: Iterable[TransferRecord]) -> dict[str, TransferRecord]:
    """Key records by transaction hash. A later record with the same hash replaces the earlier one."""
    indexed: dict[str, TransferRecord] = {}
    for record in records:
        if record.hash in indexed:
            logger.warning(
                "Transaction %s emitted several Transfer events, keeping log %s",
                record.hash, record.log_index,
            )
        indexed[record.hash] = record
    return indexed
