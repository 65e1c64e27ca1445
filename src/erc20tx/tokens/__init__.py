from erc20tx.tokens.models import Token
from erc20tx.tokens.registry import TokenRegistry, default_registry

__all__ = [
    "Token",
    "TokenRegistry",
    "default_registry",
]
