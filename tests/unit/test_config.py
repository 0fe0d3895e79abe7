"""Tests for codec configuration."""

import pytest

from swaproute.config import DEFAULT_CODEC_CONFIG, CodecConfig, config_from_env


class TestCodecConfig:
    """Tests for CodecConfig defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_CODEC_CONFIG.default_amplifier == 100
        assert DEFAULT_CODEC_CONFIG.default_v3_fee == 3000
        assert DEFAULT_CODEC_CONFIG.fee_significant_digits == 4
        assert DEFAULT_CODEC_CONFIG.strict_symbols is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_amplifier": 0},
            {"default_v3_fee": -1},
            {"fee_significant_digits": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            CodecConfig(**kwargs)


class TestConfigFromEnv:
    """Tests for reading configuration from environment variables."""

    def test_empty_environment(self):
        assert config_from_env({}) == DEFAULT_CODEC_CONFIG

    def test_all_variables(self):
        config = config_from_env(
            {
                "SWAPROUTE_DEFAULT_AMPLIFIER": "250",
                "SWAPROUTE_DEFAULT_V3_FEE": "500",
                "SWAPROUTE_FEE_DIGITS": "6",
                "SWAPROUTE_STRICT_SYMBOLS": "yes",
            }
        )

        assert config == CodecConfig(
            default_amplifier=250,
            default_v3_fee=500,
            fee_significant_digits=6,
            strict_symbols=True,
        )

    def test_blank_value_uses_default(self):
        assert config_from_env({"SWAPROUTE_FEE_DIGITS": " "}).fee_significant_digits == 4

    def test_strict_symbols_false_values(self):
        assert not config_from_env({"SWAPROUTE_STRICT_SYMBOLS": "off"}).strict_symbols

    def test_unparseable_number(self):
        with pytest.raises(ValueError, match="SWAPROUTE_DEFAULT_AMPLIFIER"):
            config_from_env({"SWAPROUTE_DEFAULT_AMPLIFIER": "lots"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SWAPROUTE_STRICT_SYMBOLS", "true")
        assert config_from_env().strict_symbols
