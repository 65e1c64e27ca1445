"""Error kinds surfaced by ERC-20 operations.

Every error carries ``.error``: the value handed to the error side of a
``(error, result)`` callback (see ``erc20tx.erc20.callbacks.deliver``).
"""

from typing import Any


class Erc20Error(Exception):
    """Base class for all errors raised by erc20tx."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(str(error))


class ProviderError(Erc20Error):
    """Provider or transport failure (block number, call, HTTP). Opaque provider value."""


class RpcError(Erc20Error):
    """Non-empty ``error`` field in a JSON-RPC response, surfaced as-is."""


class ParseError(Erc20Error):
    """Malformed JSON-RPC response. ``.error`` is the parser's message."""


class InvalidArgumentError(Erc20Error, ValueError):
    """Bad input to a pure builder (address, direction, network)."""
