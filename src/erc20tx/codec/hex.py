"""Address and hex helpers on top of eth-utils.

Topics are 32-byte words: an address topic is the 20-byte address
left-padded with 12 zero bytes (24 hex chars).
"""

from __future__ import annotations

from eth_utils import encode_hex, keccak, remove_0x_prefix, to_normalized_address

from erc20tx.exceptions import InvalidArgumentError

TRANSFER_EVENT_SIGNATURE = "Transfer(address,address,uint256)"
TRANSFER_EVENT_HASH = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"

_ADDRESS_PADDING = "0" * 24
_WORD_CHARS = 64


def normalized_address(address: str | None) -> str | None:
    """Lower-case, 0x-prefixed, no checksum. None passes through."""
    if address is None:
        return None
    try:
        return to_normalized_address(address)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid address: {address!r}") from exc


def add_padding(address: str | None) -> str | None:
    if address is None:
        return None
    return "0x" + _ADDRESS_PADDING + remove_0x_prefix(address)


def remove_padding(topic: str | None) -> str | None:
    if topic is None:
        return None
    return "0x" + topic[26:]


def pad_word(value: str) -> str:
    """Left-pad a hex value (0x optional) with zeros to one 32-byte ABI word, no prefix."""
    digits = remove_0x_prefix(value)
    if len(digits) > _WORD_CHARS:
        raise InvalidArgumentError(f"Value does not fit in 32 bytes: {value}")
    return digits.rjust(_WORD_CHARS, "0")


def method_selector(signature: str) -> str:
    """0x + first 4 bytes of keccak-256(signature)."""
    return encode_hex(keccak(text=signature)[:4])


def hex_to_int(value: str | int | None) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    digits = remove_0x_prefix(value)
    return int(digits, 16) if digits else 0


def hex_to_bignumber(value: str | None) -> int:
    """Unsigned big integer; empty (``0x``) results decode to 0."""
    return hex_to_int(value)


def hex_to_boolean(value: str | None) -> bool:
    return hex_to_int(value) != 0


def int_to_hex(value: int) -> str:
    if value < 0:
        raise InvalidArgumentError(f"Negative values cannot be encoded: {value}")
    return hex(value)
