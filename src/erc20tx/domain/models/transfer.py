"""Raw Transfer log entries and the normalized records built from them."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from erc20tx.domain.enums import Direction
from erc20tx.tokens.models import Token

# Filled later from block/transaction data, never by the log query
ENRICHED_FIELDS = ("gas_price", "nonce", "data", "gas_limit", "gas_used")


class TransferLogEntry(BaseModel):
    """One item of an eth_getLogs result for the Transfer event."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    transaction_hash: str = Field(alias="transactionHash")
    block_number: str = Field(alias="blockNumber")  # hex quantity
    topics: list[str] = Field(min_length=3)  # [event hash, padded from, padded to]
    data: str  # hex value
    address: str  # emitting token contract
    log_index: str | None = Field(default=None, alias="logIndex")


class TransferRecord(BaseModel):
    """A token transfer as shown in transaction history.

    ``timestamp`` is the parse-time wall clock (ms) until the real block
    timestamp is merged in. ``transfer`` marks the record as log-derived so
    it can be told apart when merged with a full transaction entry.
    """

    model_config = ConfigDict(populate_by_name=True)

    hash: str
    block: str
    symbol: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    value: int
    type: Direction
    confirmations: str
    timestamp: str
    token: Token | None = None
    transfer: bool = True
    log_index: int | None = None

    gas_price: int | None = None
    nonce: int | None = None
    data: str | None = None
    gas_limit: int | None = None
    gas_used: int | None = None

    def merge_into(self, existing: TransferRecord | None) -> TransferRecord:
        """Merge this fresh record with a previously stored one.

        Fresh confirmations (and everything else from the log) win; enriched
        fields and the real timestamp are kept from the stored record.
        """
        if existing is None:
            return self
        kept: dict[str, Any] = {
            name: getattr(existing, name)
            for name in ENRICHED_FIELDS
            if getattr(existing, name) is not None
        }
        # Stored timestamp is either a real block time or an older placeholder
        kept["timestamp"] = existing.timestamp
        return self.model_copy(update=kept)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
