from pydantic import BaseModel, ConfigDict

from erc20tx.domain.enums import Chain


class Token(BaseModel):
    """Static ERC-20 token metadata. Immutable for the life of the process."""

    model_config = ConfigDict(frozen=True)

    address: str  # normalized contract address
    symbol: str
    name: str
    decimals: int = 18
    chain: Chain
