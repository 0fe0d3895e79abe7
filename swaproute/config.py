"""Codec configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from swaproute.constants import DEFAULT_STABLE_AMPLIFIER, V3_FEE_MEDIUM

TRUTHY_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class CodecConfig:
    """Centralized configuration for descriptor encoding and decoding.

    Attributes:
        default_amplifier: Amplification coefficient assumed for stable pools
            reconstructed from a descriptor (default: 100)
        default_v3_fee: Fee (in fee units) assumed when a V3 fragment carries
            no fee percentage (default: 3000, i.e. 0.3%)
        fee_significant_digits: Maximum significant digits when rendering a
            fee tier as a percentage (default: 4)
        strict_symbols: If True, a descriptor whose symbols disagree with the
            trade context is rejected. If False, the mismatch is only logged.
    """

    default_amplifier: int = DEFAULT_STABLE_AMPLIFIER
    default_v3_fee: int = V3_FEE_MEDIUM
    fee_significant_digits: int = 4
    strict_symbols: bool = False

    def __post_init__(self) -> None:
        if self.default_amplifier <= 0:
            raise ValueError(f"default_amplifier must be positive: {self.default_amplifier}")
        if self.default_v3_fee <= 0:
            raise ValueError(f"default_v3_fee must be positive: {self.default_v3_fee}")
        if self.fee_significant_digits < 1:
            raise ValueError(
                f"fee_significant_digits must be at least 1: {self.fee_significant_digits}"
            )


# Default configuration instance
DEFAULT_CODEC_CONFIG = CodecConfig()


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from err


def config_from_env(environ: Mapping[str, str] | None = None) -> CodecConfig:
    """Build a CodecConfig from environment variables.

    Configuration via environment variables:
    - SWAPROUTE_DEFAULT_AMPLIFIER: Stable pool amplifier fallback (default: 100)
    - SWAPROUTE_DEFAULT_V3_FEE: V3 fee fallback in fee units (default: 3000)
    - SWAPROUTE_FEE_DIGITS: Significant digits for fee percentages (default: 4)
    - SWAPROUTE_STRICT_SYMBOLS: Reject symbol mismatches (default: false)

    Raises:
        ValueError: If a numeric variable cannot be parsed or is out of range
    """
    if environ is None:
        environ = os.environ

    return CodecConfig(
        default_amplifier=_int_setting(
            environ, "SWAPROUTE_DEFAULT_AMPLIFIER", DEFAULT_CODEC_CONFIG.default_amplifier
        ),
        default_v3_fee=_int_setting(
            environ, "SWAPROUTE_DEFAULT_V3_FEE", DEFAULT_CODEC_CONFIG.default_v3_fee
        ),
        fee_significant_digits=_int_setting(
            environ, "SWAPROUTE_FEE_DIGITS", DEFAULT_CODEC_CONFIG.fee_significant_digits
        ),
        strict_symbols=environ.get("SWAPROUTE_STRICT_SYMBOLS", "false").lower() in TRUTHY_VALUES,
    )
