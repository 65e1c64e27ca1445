"""Collaborator interfaces used by the ERC-20 helpers."""

from abc import ABC, abstractmethod
from typing import Any

from erc20tx.domain.models import CallParams


class Provider(ABC):
    """Standard read/write/query primitives of an Ethereum node."""

    @abstractmethod
    async def call(self, params: CallParams) -> str:
        """eth_call without state change. Returns the raw hex result."""

    @abstractmethod
    async def send_transaction(self, tx: dict[str, Any]) -> str:
        """Submit a state-changing transaction. Returns the raw hex result."""

    @abstractmethod
    async def get_block_number(self) -> int:
        """Current block number."""


class Transport(ABC):
    """Raw JSON-RPC channel for requests the provider cannot serve (eth_getLogs)."""

    @abstractmethod
    async def send(self, payload: str) -> str:
        """Submit a serialized JSON-RPC request and return the raw response text."""
