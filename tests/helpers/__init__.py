"""Test helpers module for shared test utilities.

- constants: Token and pool addresses
- factories: Currency, pool, route and trade factory functions
"""

from tests.helpers.constants import (
    CHAIN_ID,
    DAI,
    POOL_A,
    POOL_B,
    POOL_C,
    POOL_D,
    TOKEN_DECIMALS,
    USDC,
    USDT,
    WBTC,
    WETH,
)
from tests.helpers.factories import (
    make_context,
    make_currency,
    make_native,
    make_pool,
    make_route,
    make_trade,
)

__all__ = [
    # Constants
    "CHAIN_ID",
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WBTC",
    "POOL_A",
    "POOL_B",
    "POOL_C",
    "POOL_D",
    "TOKEN_DECIMALS",
    # Factories
    "make_currency",
    "make_native",
    "make_pool",
    "make_route",
    "make_trade",
    "make_context",
]
