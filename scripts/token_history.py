"""Print inbound + outbound ERC-20 transfers for an address.

Usage:
    ERC20TX_RPC_URL=http://localhost:8545 PYTHONPATH=src python scripts/token_history.py 0xADDRESS
"""

import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


async def main(address: str) -> None:
    from erc20tx.container import Container
    from erc20tx.domain.enums import Chain, Direction

    container = Container()
    settings = container.settings()
    chain = Chain.from_network(settings.network)
    contracts = container.token_registry().contracts_for(chain)
    history = container.history()
    print(f"Address: {address}  network: {chain.value}  contracts: {len(contracts)}")

    try:
        for direction in (Direction.INBOUND, Direction.OUTBOUND):
            records = await history.get_token_transactions(chain, contracts, direction, address)
            print(f"\n--- {direction.value}: {len(records)} ---")
            for r in sorted(records.values(), key=lambda r: int(r.block)):
                decimals = r.token.decimals if r.token else 18
                amount = r.value / 10**decimals
                print(f"  block {r.block:>9}  {amount:>20,.4f} {r.symbol or '?':<6} "
                      f"{r.from_} -> {r.to}  ({r.confirmations} conf)")
    finally:
        await container.http_client().close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit(__doc__)
    asyncio.run(main(sys.argv[1]))
