"""Tests for TransferRecord merging and serialization."""

from erc20tx.domain.enums import Direction
from erc20tx.domain.models import CallParams, TransferRecord


def _record(**overrides):
    fields = {
        "hash": "0x01",
        "block": "90",
        "from": "0x0000000000000000000000000000000000000000",
        "to": "0xa7cfd581060ec66414790691681732db249502bd",
        "value": 100,
        "type": Direction.INBOUND,
        "confirmations": "10",
        "timestamp": "1700000000000",
    }
    fields.update(overrides)
    return TransferRecord.model_validate(fields)


class TestTransferRecord:
    def test_defaults(self):
        r = _record()
        assert r.transfer is True
        assert r.from_ == "0x0000000000000000000000000000000000000000"
        assert r.gas_used is None

    def test_merge_with_nothing(self):
        r = _record()
        assert r.merge_into(None) is r

    def test_merge_keeps_enrichment_and_refreshes_confirmations(self):
        stored = _record(confirmations="3", timestamp="1600000000000", gas_price=20, gas_used=51000, nonce=7)
        fresh = _record(confirmations="12")

        merged = fresh.merge_into(stored)
        assert merged.confirmations == "12"
        assert merged.timestamp == "1600000000000"
        assert merged.gas_price == 20
        assert merged.gas_used == 51000
        assert merged.nonce == 7
        assert merged.gas_limit is None

    def test_to_dict(self):
        d = _record().to_dict()
        assert d["from"] == "0x0000000000000000000000000000000000000000"
        assert d["type"] == "inbound"
        assert d["token"] is None


class TestCallParams:
    def test_with_params(self):
        params = CallParams(to="0xabc", data="0x01")
        assert params.with_params(gas="0x1") == {"to": "0xabc", "data": "0x01", "gas": "0x1"}
