from unittest.mock import AsyncMock

import pytest

from erc20tx.domain.enums import Chain
from erc20tx.tokens import Token, TokenRegistry

SNT = "0x744d70fdbe2ba4cf95131626614a1763df805b9e"
FIXED_NOW_MS = 1_700_000_000_000


@pytest.fixture()
def registry() -> TokenRegistry:
    return TokenRegistry([
        Token(address=SNT, symbol="SNT", name="Status Network Token", decimals=18, chain=Chain.MAINNET),
    ])


@pytest.fixture()
def mock_provider():
    return AsyncMock()


@pytest.fixture()
def mock_transport():
    return AsyncMock()


@pytest.fixture()
def clock():
    return lambda: FIXED_NOW_MS
