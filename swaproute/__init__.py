"""Swap-route descriptor codec."""

from swaproute.codec import DecodeError, DecodeResult, decode, decode_trade, encode, validate
from swaproute.config import DEFAULT_CODEC_CONFIG, CodecConfig, config_from_env

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "decode_trade",
    "validate",
    "DecodeError",
    "DecodeResult",
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    "config_from_env",
    "__version__",
]
