from erc20tx.domain.enums.chain import Chain
from erc20tx.domain.enums.direction import Direction

__all__ = [
    "Chain",
    "Direction",
]
