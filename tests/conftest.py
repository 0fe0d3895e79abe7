"""Pytest configuration and fixtures."""

import pytest

from swaproute.config import CodecConfig
from swaproute.models import CurrencyRef, PoolKind, PoolRef, Trade, TradeContext
from tests.helpers import (
    POOL_A,
    POOL_B,
    POOL_C,
    make_context,
    make_currency,
    make_pool,
    make_route,
    make_trade,
)


@pytest.fixture
def usdc() -> CurrencyRef:
    return make_currency("USDC")


@pytest.fixture
def weth() -> CurrencyRef:
    return make_currency("WETH")


@pytest.fixture
def dai() -> CurrencyRef:
    return make_currency("DAI")


@pytest.fixture
def v3_pool(usdc: CurrencyRef, weth: CurrencyRef) -> PoolRef:
    """A USDC/WETH concentrated pool at the 0.3% tier."""
    return make_pool(PoolKind.CONCENTRATED, usdc, weth, address=POOL_A, fee=3000)


@pytest.fixture
def v2_pool(usdc: CurrencyRef, weth: CurrencyRef) -> PoolRef:
    """A USDC/WETH constant-product pool."""
    return make_pool(PoolKind.CONSTANT_PRODUCT, usdc, weth, address=POOL_B)


@pytest.fixture
def stable_pool(usdc: CurrencyRef, dai: CurrencyRef) -> PoolRef:
    """A USDC/DAI stable pool."""
    return make_pool(PoolKind.STABLE, usdc, dai, address=POOL_C, amplifier=200)


@pytest.fixture
def split_trade(usdc: CurrencyRef, weth: CurrencyRef, v3_pool: PoolRef, v2_pool: PoolRef) -> Trade:
    """1000 USDC -> 0.4 WETH, 60% through V3 and 40% through V2."""
    return make_trade(
        [
            make_route([usdc, weth], [v3_pool], percent=60),
            make_route([usdc, weth], [v2_pool], percent=40),
        ]
    )


@pytest.fixture
def context() -> TradeContext:
    """Decode context matching split_trade."""
    return make_context()


@pytest.fixture
def strict_config() -> CodecConfig:
    return CodecConfig(strict_symbols=True)
