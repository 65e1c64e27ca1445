"""Tests for TokenRegistry lookups."""

import pytest
from pydantic import ValidationError

from erc20tx.domain.enums import Chain
from erc20tx.tokens import Token, default_registry

SNT = "0x744d70fdbe2ba4cf95131626614a1763df805b9e"


class TestAddressToToken:
    def test_found(self, registry):
        token = registry.address_to_token(Chain.MAINNET, SNT)
        assert token is not None
        assert token.symbol == "SNT"

    def test_case_insensitive(self, registry):
        assert registry.address_to_token(Chain.MAINNET, SNT.upper().replace("0X", "0x")) is not None

    def test_other_chain(self, registry):
        assert registry.address_to_token(Chain.RINKEBY, SNT) is None

    def test_none_address(self, registry):
        assert registry.address_to_token(Chain.MAINNET, None) is None


class TestRegistryContents:
    def test_contracts_for(self, registry):
        assert registry.contracts_for(Chain.MAINNET) == [SNT]
        assert registry.contracts_for(Chain.TESTNET) == []

    def test_add_replaces(self, registry):
        registry.add(Token(address=SNT, symbol="SNT2", name="Other", chain=Chain.MAINNET))
        assert registry.address_to_token(Chain.MAINNET, SNT).symbol == "SNT2"
        assert len(registry.tokens_for(Chain.MAINNET)) == 1

    def test_default_registry(self):
        reg = default_registry()
        assert reg.address_to_token(Chain.MAINNET, SNT).symbol == "SNT"
        stt = reg.tokens_for(Chain.TESTNET)
        assert [t.symbol for t in stt] == ["STT"]
        assert all(t.address == t.address.lower() for t in reg.tokens_for(Chain.MAINNET))

    def test_token_is_frozen(self):
        token = default_registry().tokens_for(Chain.MAINNET)[0]
        with pytest.raises(ValidationError):
            token.symbol = "X"
