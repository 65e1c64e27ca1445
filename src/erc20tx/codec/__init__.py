from erc20tx.codec.hex import (
    TRANSFER_EVENT_HASH,
    TRANSFER_EVENT_SIGNATURE,
    add_padding,
    hex_to_bignumber,
    hex_to_boolean,
    hex_to_int,
    int_to_hex,
    method_selector,
    normalized_address,
    pad_word,
    remove_padding,
)

__all__ = [
    "TRANSFER_EVENT_HASH",
    "TRANSFER_EVENT_SIGNATURE",
    "add_padding",
    "hex_to_bignumber",
    "hex_to_boolean",
    "hex_to_int",
    "int_to_hex",
    "method_selector",
    "normalized_address",
    "pad_word",
    "remove_padding",
]
