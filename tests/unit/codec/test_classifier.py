"""Tests for pool classification."""

import pytest

from swaproute.codec import DecodeError, classify, parse_fee_percent
from swaproute.config import CodecConfig
from swaproute.models import PoolKind, Provenance
from tests.helpers import POOL_A


class TestStructuredHint:
    """Tests for classifying pools that already carry full data."""

    def test_pool_returned_unchanged(self, v3_pool):
        """A structured pool is passed through as-is."""
        result = classify(v3_pool)

        assert result.is_valid
        assert result.pool is v3_pool
        assert result.pool.provenance == Provenance.AUTHORITATIVE

    def test_currencies_not_required(self, stable_pool):
        """No pair currencies are needed for a structured hint."""
        assert classify(stable_pool).pool is stable_pool


class TestConcentratedClassification:
    """Tests for V3 markers and fee fragments."""

    def test_v3_with_fee(self, usdc, weth):
        """V3 marker with fee yields a concentrated pool in fee units."""
        result = classify("V3 0.3%", usdc, weth)

        assert result.is_valid
        assert result.pool.kind == PoolKind.CONCENTRATED
        assert result.pool.fee == 3000
        assert result.pool.provenance == Provenance.RECONSTRUCTED

    def test_fee_fragment_alone_means_concentrated(self, usdc, weth):
        """A fee fragment implies V3 even without the marker."""
        result = classify("0.05%", usdc, weth)

        assert result.pool.kind == PoolKind.CONCENTRATED
        assert result.pool.fee == 500

    @pytest.mark.parametrize(
        "fragment,expected_fee",
        [("0.01%", 100), ("0.05%", 500), ("0.3%", 3000), ("1%", 10000)],
    )
    def test_canonical_tiers(self, usdc, weth, fragment, expected_fee):
        """Canonical fee tiers convert exactly."""
        result = classify(f"V3 {fragment}", usdc, weth)

        assert result.pool.fee == expected_fee
        assert result.pool.is_canonical_fee

    def test_non_canonical_tier_is_stored(self, usdc, weth):
        """Tiers outside the canonical set are kept, not rejected."""
        result = classify("V3 0.25%", usdc, weth)

        assert result.is_valid
        assert result.pool.fee == 2500
        assert not result.pool.is_canonical_fee

    def test_v3_without_fee_uses_default(self, usdc, weth):
        """V3 without a fee fragment falls back to the configured default."""
        assert classify("V3", usdc, weth).pool.fee == 3000

        config = CodecConfig(default_v3_fee=500)
        assert classify("V3", usdc, weth, config=config).pool.fee == 500

    def test_marker_is_case_insensitive(self, usdc, weth):
        """Lowercase markers classify the same way."""
        assert classify("v3 0.3%", usdc, weth).pool.kind == PoolKind.CONCENTRATED


class TestOtherKinds:
    """Tests for stable and constant-product classification."""

    def test_stable_marker(self, usdc, dai):
        """STABLE yields a stable pool with the default amplifier."""
        result = classify("STABLE", usdc, dai)

        assert result.pool.kind == PoolKind.STABLE
        assert result.pool.amplifier == 100
        assert result.pool.fee is None
        assert result.pool.is_reconstructed

    def test_stable_mixed_case(self, usdc, dai):
        """'Stable' as written in pool summaries is recognized."""
        assert classify("Stable", usdc, dai).pool.kind == PoolKind.STABLE

    def test_stable_amplifier_from_config(self, usdc, dai):
        """The assumed amplifier comes from the configuration."""
        config = CodecConfig(default_amplifier=250)
        assert classify("STABLE", usdc, dai, config=config).pool.amplifier == 250

    def test_explicit_v2(self, usdc, weth):
        """V2 marker yields a constant-product pool."""
        result = classify("V2", usdc, weth)

        assert result.pool.kind == PoolKind.CONSTANT_PRODUCT
        assert result.pool.fee is None
        assert result.pool.amplifier is None

    def test_no_marker_defaults_to_v2(self, usdc, weth):
        """Absence of any marker means constant-product."""
        assert classify("", usdc, weth).pool.kind == PoolKind.CONSTANT_PRODUCT

    def test_address_attached(self, usdc, weth):
        """An address fragment becomes the pool address."""
        result = classify(f"V2 {POOL_A}", usdc, weth)
        assert result.pool.address == POOL_A

    def test_missing_address_is_none(self, usdc, weth):
        """Unknown addresses stay None rather than a zero placeholder."""
        assert classify("V2", usdc, weth).pool.address is None


class TestClassifierErrors:
    """Tests for classification failures."""

    @pytest.mark.parametrize("fragment", ["abc%", "0%", "0.00001%", "-1%", "1.2.3%"])
    def test_unparseable_fee(self, usdc, weth, fragment):
        """Fee fragments that are not usable percentages are syntax errors."""
        result = classify(f"V3 {fragment}", usdc, weth)

        assert result.is_error
        assert result.error == DecodeError.SYNTAX_ERROR
        assert result.pool is None

    def test_multiple_fee_fragments(self, usdc, weth):
        """Two fee fragments are ambiguous."""
        result = classify("V3 0.3% 0.05%", usdc, weth)
        assert result.error == DecodeError.SYNTAX_ERROR

    @pytest.mark.parametrize("hint", ["V3 0.3% 0x123", "V2 0x...aaa", "STABLE 0xZZ"])
    def test_invalid_address(self, usdc, weth, hint):
        """A malformed 0x token is rejected rather than dropped."""
        result = classify(hint, usdc, weth)

        assert result.error == DecodeError.SYNTAX_ERROR
        assert result.pool is None

    def test_multiple_addresses(self, usdc, weth):
        result = classify(f"V2 {POOL_A} {POOL_A}", usdc, weth)
        assert result.error == DecodeError.SYNTAX_ERROR

    def test_text_hint_requires_currencies(self, usdc):
        """A text hint without both currencies cannot build a pool."""
        result = classify("V2", usdc)
        assert result.error == DecodeError.SYNTAX_ERROR

    def test_same_currency_on_both_sides(self, usdc):
        """A pool cannot trade a currency against itself."""
        result = classify("V2", usdc, usdc)
        assert result.error == DecodeError.INCONSISTENT_POOL_DATA


class TestParseFeePercent:
    """Tests for the fee fragment parser."""

    def test_leading_dot(self):
        assert parse_fee_percent(".5%") == 5000

    def test_missing_percent_sign(self):
        assert parse_fee_percent("0.3") is None

    def test_whole_number(self):
        assert parse_fee_percent("2%") == 20000
