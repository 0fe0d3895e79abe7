"""Route descriptor codec.

This package converts between structured trades and their text descriptors:
- Pool classification (classify)
- Encoding (encode, encode_route, encode_hop)
- Decoding (decode, decode_trade)
- Round-trip validation (validate, round_trip)
"""

from .amounts import split_amount
from .classifier import classify, parse_fee_percent
from .decoder import decode, decode_trade, parse_descriptor
from .encoder import encode, encode_hop, encode_route, format_fee_percent
from .errors import ClassifyResult, DecodeError, DecodeResult
from .validator import round_trip, validate

__all__ = [
    # Results
    "DecodeError",
    "ClassifyResult",
    "DecodeResult",
    # Classifier
    "classify",
    "parse_fee_percent",
    # Encoder
    "encode",
    "encode_route",
    "encode_hop",
    "format_fee_percent",
    # Decoder
    "decode",
    "decode_trade",
    "parse_descriptor",
    # Validator
    "validate",
    "round_trip",
    # Amounts
    "split_amount",
]
