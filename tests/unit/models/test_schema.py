"""Tests for the versioned JSON trade document."""

import json

import pytest
from pydantic import ValidationError

from swaproute.models import PoolKind, Provenance
from swaproute.models.schema import SCHEMA_VERSION, TradeModel, dump_trade, load_trade
from tests.helpers import POOL_A, POOL_B, POOL_C, make_native, make_pool, make_route, make_trade


class TestDumpTrade:
    """Tests for serializing trades."""

    def test_document_shape(self, split_trade):
        """The document is versioned and uses camelCase keys."""
        document = json.loads(dump_trade(split_trade))

        assert document["version"] == SCHEMA_VERSION
        assert document["tradeType"] == "exactInput"
        assert document["inputAmount"] == "1000000000"
        assert document["inputCurrency"]["chainId"] == 1
        assert len(document["routes"]) == 2

        pool = document["routes"][0]["hops"][0]["pool"]
        assert pool["kind"] == "V3"
        assert pool["fee"] == 3000
        assert pool["address"] == POOL_A
        assert pool["provenance"] == "authoritative"

    def test_native_currency_has_null_address(self, usdc):
        eth = make_native()
        pool = make_pool(PoolKind.CONSTANT_PRODUCT, eth, usdc, address=POOL_B)
        trade = make_trade([make_route([eth, usdc], [pool])], input_amount=10**18)

        document = json.loads(dump_trade(trade))
        assert document["inputCurrency"]["address"] is None


class TestLoadTrade:
    """Tests for parsing trades back."""

    def test_round_trip_preserves_trade(self, split_trade):
        assert load_trade(dump_trade(split_trade)) == split_trade

    def test_multi_hop_survives(self, usdc, weth, dai):
        """Unlike the text descriptor, the document keeps multi-hop routes."""
        first = make_pool(PoolKind.STABLE, usdc, dai, address=POOL_C, amplifier=500)
        second = make_pool(PoolKind.CONCENTRATED, dai, weth, address=POOL_A, fee=500)
        trade = make_trade(
            [make_route([usdc, dai, weth], [first, second], input_amount=10**9, output_amount=7)],
            output_amount=7,
        )

        restored = load_trade(dump_trade(trade))

        assert restored == trade
        route = restored.routes[0]
        assert route.path == (usdc, dai, weth)
        assert route.pools[0].amplifier == 500
        assert route.pools[1].fee == 500
        assert route.path[1].decimals == 18
        assert route.input_amount.quotient == 10**9

    def test_provenance_survives(self, usdc, weth):
        pool = make_pool(PoolKind.CONSTANT_PRODUCT, usdc, weth, provenance=Provenance.RECONSTRUCTED)
        trade = make_trade([make_route([usdc, weth], [pool])])

        assert not load_trade(dump_trade(trade)).is_authoritative

    def test_unknown_version_rejected(self, split_trade):
        document = json.loads(dump_trade(split_trade))
        document["version"] = 2

        with pytest.raises(ValidationError):
            load_trade(json.dumps(document))

    def test_unknown_pool_kind_rejected(self, split_trade):
        document = json.loads(dump_trade(split_trade))
        document["routes"][0]["hops"][0]["pool"]["kind"] = "V4"

        with pytest.raises(ValidationError):
            load_trade(json.dumps(document))

    def test_concentrated_pool_requires_fee(self, split_trade):
        document = json.loads(dump_trade(split_trade))
        del document["routes"][0]["hops"][0]["pool"]["fee"]

        with pytest.raises(ValidationError):
            load_trade(json.dumps(document))

    def test_negative_amount_rejected(self, split_trade):
        document = json.loads(dump_trade(split_trade))
        document["inputAmount"] = "-5"

        with pytest.raises(ValidationError):
            load_trade(json.dumps(document))

    def test_invariant_violation(self, split_trade):
        """Schema-valid documents that break trade invariants raise ValueError."""
        document = json.loads(dump_trade(split_trade))
        document["routes"][0]["percent"] = 50

        with pytest.raises(ValueError, match="sum to 90"):
            load_trade(json.dumps(document))

    def test_snake_case_names_accepted(self, split_trade):
        """Documents may use field names instead of aliases."""
        document = TradeModel.from_trade(split_trade).model_dump(mode="json")
        assert "trade_type" in document

        assert TradeModel.model_validate(document).to_trade() == split_trade
