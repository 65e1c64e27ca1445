"""Static chain -> token table with contract-address lookup."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from erc20tx.domain.enums import Chain
from erc20tx.tokens.models import Token

logger = logging.getLogger(__name__)

DEFAULT_TOKENS: dict[Chain, list[dict]] = {
    Chain.MAINNET: [
        {"symbol": "SNT", "name": "Status Network Token", "decimals": 18,
         "address": "0x744d70fdbe2ba4cf95131626614a1763df805b9e"},
        {"symbol": "DAI", "name": "Dai Stablecoin", "decimals": 18,
         "address": "0x89d24a6b4ccb1b6faa2625fe562bdd9a23260359"},
        {"symbol": "USDC", "name": "USD Coin", "decimals": 6,
         "address": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"},
        {"symbol": "USDT", "name": "Tether USD", "decimals": 6,
         "address": "0xdac17f958d2ee523a2206206994597c13d831ec7"},
    ],
    Chain.TESTNET: [
        {"symbol": "STT", "name": "Status Test Token", "decimals": 18,
         "address": "0xc55cf4b03948d7ebc8b9e8bad92643703811d162"},
    ],
    Chain.RINKEBY: [],
}


class TokenRegistry:
    """Token metadata keyed by chain and lower-cased contract address."""

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._by_chain: dict[Chain, dict[str, Token]] = {}
        for token in tokens:
            self.add(token)

    def add(self, token: Token) -> None:
        by_address = self._by_chain.setdefault(token.chain, {})
        key = token.address.lower()
        if key in by_address:
            logger.warning("Replacing token %s on %s (%s)", key, token.chain.value, token.symbol)
        by_address[key] = token

    def address_to_token(self, chain: Chain, address: str | None) -> Token | None:
        if not address:
            return None
        return self._by_chain.get(chain, {}).get(address.lower())

    def tokens_for(self, chain: Chain) -> list[Token]:
        return list(self._by_chain.get(chain, {}).values())

    def contracts_for(self, chain: Chain) -> list[str]:
        return [t.address for t in self.tokens_for(chain)]

    @classmethod
    def from_table(cls, table: dict[Chain, list[dict]]) -> TokenRegistry:
        return cls(
            Token(chain=chain, **{**item, "address": item["address"].lower()})
            for chain, items in table.items()
            for item in items
        )


def default_registry() -> TokenRegistry:
    return TokenRegistry.from_table(DEFAULT_TOKENS)
