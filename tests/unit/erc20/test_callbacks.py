"""Tests for deliver(): the (error, result) callback bridge."""

import pytest

from erc20tx.erc20.callbacks import deliver
from erc20tx.exceptions import ProviderError, RpcError


async def _ok(value):
    return value


async def _fail(exc):
    raise exc


class TestDeliver:
    async def test_success(self):
        calls = []
        await deliver(_ok(42), lambda e, r: calls.append((e, r)))
        assert calls == [(None, 42)]

    async def test_error_payload(self):
        calls = []
        await deliver(_fail(RpcError({"code": -32000})), lambda e, r: calls.append((e, r)))
        assert calls == [({"code": -32000}, None)]

    async def test_provider_error(self):
        calls = []
        await deliver(_fail(ProviderError("timeout")), lambda e, r: calls.append((e, r)))
        assert calls == [("timeout", None)]

    async def test_unexpected_exception_propagates(self):
        calls = []
        with pytest.raises(KeyError):
            await deliver(_fail(KeyError("bug")), lambda e, r: calls.append((e, r)))
        assert calls == []
