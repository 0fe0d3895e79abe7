"""Value models for swap routes."""

from swaproute.models.currency import Amount, CurrencyRef
from swaproute.models.trade import (
    Hop,
    PoolKind,
    PoolRef,
    Provenance,
    Route,
    RouteType,
    Trade,
    TradeContext,
    TradeType,
    determine_route_type,
)
from swaproute.models.types import Address, Uint256, is_valid_address, normalize_address

__all__ = [
    # Types
    "Address",
    "Uint256",
    "is_valid_address",
    "normalize_address",
    # Currencies
    "CurrencyRef",
    "Amount",
    # Routes
    "PoolKind",
    "Provenance",
    "PoolRef",
    "Hop",
    "RouteType",
    "Route",
    "TradeType",
    "Trade",
    "TradeContext",
    "determine_route_type",
]
