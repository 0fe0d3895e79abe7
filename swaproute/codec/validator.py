"""Consistency checks between an original trade and its reconstruction."""

from __future__ import annotations

import structlog

from swaproute.codec.decoder import decode_trade
from swaproute.codec.encoder import encode
from swaproute.config import DEFAULT_CODEC_CONFIG, CodecConfig
from swaproute.constants import PERCENT_TOTAL
from swaproute.models.trade import Trade, TradeContext

logger = structlog.get_logger()


def validate(original: Trade, reconstructed: Trade) -> bool:
    """Check that a reconstructed trade agrees with the original.

    All of the following must hold:
    - input and output quotients are equal
    - input and output currencies are equal
    - both trades have the same number of routes
    - the reconstructed route percentages sum to 100

    This is a regression guard for the encode/decode pair, not a proof of
    equivalence: pools and per-route amounts are not compared.

    Returns:
        True if every check passes. Never raises.
    """
    try:
        checks = (
            (
                "input_amount_mismatch",
                reconstructed.input_amount.quotient == original.input_amount.quotient,
            ),
            (
                "output_amount_mismatch",
                reconstructed.output_amount.quotient == original.output_amount.quotient,
            ),
            (
                "input_currency_mismatch",
                reconstructed.input_amount.currency == original.input_amount.currency,
            ),
            (
                "output_currency_mismatch",
                reconstructed.output_amount.currency == original.output_amount.currency,
            ),
            (
                "route_count_mismatch",
                len(reconstructed.routes) == len(original.routes),
            ),
            (
                "percent_total_mismatch",
                sum(route.percent for route in reconstructed.routes) == PERCENT_TOTAL,
            ),
        )
    except (AttributeError, TypeError) as err:
        logger.debug("trade_validation_malformed", error=str(err))
        return False

    failed = [name for name, passed in checks if not passed]
    if failed:
        logger.debug("trade_validation_failed", checks=failed)
        return False
    return True


def round_trip(trade: Trade, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    """Encode a trade, decode it against its own context, and validate.

    Returns False when decoding fails, which is always the case for
    multi-hop trades.
    """
    descriptor = encode(trade, config=config)
    result = decode_trade(descriptor, TradeContext.from_trade(trade), config=config)
    if result.is_error or result.trade is None:
        logger.debug(
            "round_trip_decode_failed",
            descriptor=descriptor,
            error=result.error.value if result.error else None,
        )
        return False
    return validate(trade, result.trade)


__all__ = ["validate", "round_trip"]
