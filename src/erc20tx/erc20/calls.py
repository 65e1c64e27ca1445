"""ERC-20 contract calls.

Example, against a node on Ropsten::

    erc20 = Erc20(provider)
    await erc20.balance_of(
        "0x29b5f6efad2ad701952dfde9f29c960b5d6199c5",
        "0xa7cfd581060ec66414790691681732db249502bd",
    )
    # 29166666
"""

from __future__ import annotations

from typing import Any

from erc20tx.codec import (
    hex_to_bignumber,
    hex_to_boolean,
    int_to_hex,
    method_selector,
    normalized_address,
    pad_word,
)
from erc20tx.domain.models import CallParams
from erc20tx.infra.rpc.base import Provider


def call_params(contract: str, signature: str, *args: str) -> CallParams:
    """Build ``{to, data}`` for ``signature`` with already hex-encoded arguments.

    Each argument becomes one left-zero-padded 32-byte word after the 4-byte selector.
    """
    data = method_selector(signature) + "".join(pad_word(arg) for arg in args)
    return CallParams(to=normalized_address(contract), data=data)


class Erc20:
    """The ERC-20 methods, issued through a Provider."""

    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    async def name(self, contract: str) -> str:
        return await self._provider.call(call_params(contract, "name()"))

    async def symbol(self, contract: str) -> str:
        return await self._provider.call(call_params(contract, "symbol()"))

    async def decimals(self, contract: str) -> str:
        return await self._provider.call(call_params(contract, "decimals()"))

    async def total_supply(self, contract: str) -> int:
        result = await self._provider.call(call_params(contract, "totalSupply()"))
        return hex_to_bignumber(result)

    async def balance_of(self, contract: str, address: str) -> int:
        result = await self._provider.call(
            call_params(contract, "balanceOf(address)", normalized_address(address))
        )
        return hex_to_bignumber(result)

    async def transfer(
        self,
        contract: str,
        from_address: str,
        address: str,
        value: int,
        params: dict[str, Any] | None = None,
    ) -> bool:
        """Send ``value`` to ``address`` as a transaction from ``from_address``.

        ``params`` (gas, gasPrice, nonce, ...) are merged last and override
        the generated fields.
        """
        tx = call_params(
            contract,
            "transfer(address,uint256)",
            normalized_address(address),
            int_to_hex(value),
        ).with_params(**{"from": from_address, **(params or {})})
        result = await self._provider.send_transaction(tx)
        return hex_to_boolean(result)

    # transferFrom and approve go through eth_call, not eth_sendTransaction.
    # They return the simulated outcome and do not change chain state.
    async def transfer_from(self, contract: str, from_address: str, to_address: str, value: int) -> bool:
        result = await self._provider.call(
            call_params(
                contract,
                "transferFrom(address,address,uint256)",
                normalized_address(from_address),
                normalized_address(to_address),
                int_to_hex(value),
            )
        )
        return hex_to_boolean(result)

    async def approve(self, contract: str, address: str, value: int) -> bool:
        result = await self._provider.call(
            call_params(contract, "approve(address,uint256)", normalized_address(address), int_to_hex(value))
        )
        return hex_to_boolean(result)

    async def allowance(self, contract: str, owner_address: str, spender_address: str) -> int:
        result = await self._provider.call(
            call_params(
                contract,
                "allowance(address,address)",
                normalized_address(owner_address),
                normalized_address(spender_address),
            )
        )
        return hex_to_bignumber(result)
