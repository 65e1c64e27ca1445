from enum import Enum

from erc20tx.exceptions import InvalidArgumentError

CHAIN_IDS: dict[str, int] = {
    "mainnet": 1,
    "testnet": 3,
    "rinkeby": 4,
}


class Chain(str, Enum):
    """Networks with a token table. ``testnet`` is Ropsten."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    RINKEBY = "rinkeby"

    @property
    def chain_id(self) -> int:
        return CHAIN_IDS[self.value]

    @classmethod
    def from_network(cls, network: "str | Chain") -> "Chain":
        """Resolve a network name (``mainnet``, ``testnet_rpc``, ...) to a Chain."""
        if isinstance(network, Chain):
            return network
        name = (network or "").strip().lower()
        if name.endswith("_rpc"):
            name = name[: -len("_rpc")]
        try:
            return cls(name)
        except ValueError:
            raise InvalidArgumentError(f"Unknown network: {network!r}") from None
