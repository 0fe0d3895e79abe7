"""Rendering of trades as route descriptors.

A trade with two single-hop routes renders as:

    (60% [USDC-WETH V3 0.3% 0x...]), (40% [USDC-WETH V2 0x...])
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal

from swaproute.config import DEFAULT_CODEC_CONFIG, CodecConfig
from swaproute.constants import FEE_UNITS_PER_PERCENT
from swaproute.models.trade import Hop, PoolKind, Route, Trade

ROUTE_SEPARATOR = ", "
HOP_SEPARATOR = ", "


def format_fee_percent(fee: int, significant_digits: int = 4) -> str:
    """Render a fee in fee units as a percentage string without the % sign.

    3000 -> "0.3", 500 -> "0.05", 10000 -> "1". At most `significant_digits`
    significant digits are kept and trailing zeros are dropped.
    """
    percent = Decimal(fee) / FEE_UNITS_PER_PERCENT
    rounded = Context(prec=significant_digits, rounding=ROUND_HALF_EVEN).plus(percent)
    return format(rounded.normalize(), "f")


def encode_hop(hop: Hop, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> str:
    """Render one hop: "<in>-<out> <tag>[ <fee>%][ <address>]"."""
    pool = hop.pool
    parts = [f"{hop.token_in.symbol}-{hop.token_out.symbol}", pool.kind.value]

    if pool.kind == PoolKind.CONCENTRATED and pool.fee is not None:
        parts.append(f"{format_fee_percent(pool.fee, config.fee_significant_digits)}%")

    if pool.address is not None:
        parts.append(pool.address)

    return " ".join(parts)


def encode_route(route: Route, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> str:
    """Render one route: "(<percent>% [<hop>, <hop>, ...])"."""
    hops = HOP_SEPARATOR.join(encode_hop(hop, config=config) for hop in route.hops)
    return f"({route.percent}% [{hops}])"


def encode(trade: Trade, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> str:
    """Render a trade's routes as a single descriptor string."""
    return ROUTE_SEPARATOR.join(encode_route(route, config=config) for route in trade.routes)


__all__ = ["encode", "encode_route", "encode_hop", "format_fee_percent"]
