from enum import Enum


class Direction(str, Enum):
    """Side of a token transfer relative to the queried address."""

    INBOUND = "inbound"  # address is the recipient (filter on topics[2])
    OUTBOUND = "outbound"  # address is the sender (filter on topics[1])
