"""Value types for pools, hops, routes and trades.

A Trade is one or more weighted Routes from the trade's input currency to
its output currency. Each Route is an ordered list of Hops, each Hop a swap
through a single PoolRef.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from swaproute.constants import CONCENTRATED_FEE_TIERS, PERCENT_TOTAL
from swaproute.models.currency import Amount, CurrencyRef
from swaproute.models.types import UINT256_MAX, is_valid_address


class PoolKind(str, Enum):
    """Pool protocol variant. The value is the descriptor tag."""

    CONSTANT_PRODUCT = "V2"
    CONCENTRATED = "V3"
    STABLE = "STABLE"


class Provenance(str, Enum):
    """Where a pool's data came from."""

    AUTHORITATIVE = "authoritative"
    RECONSTRUCTED = "reconstructed"


class RouteType(str, Enum):
    """Route classification by the kinds of pool it passes through."""

    V2 = "V2"
    V3 = "V3"
    STABLE = "STABLE"
    MIXED = "MIXED"


class TradeType(str, Enum):
    """Whether the input or the output amount is fixed."""

    EXACT_INPUT = "exactInput"
    EXACT_OUTPUT = "exactOutput"


@dataclass(frozen=True)
class PoolRef:
    """A liquidity pool trading two currencies.

    Attributes:
        kind: Protocol variant
        currency0: One side of the pair
        currency1: Other side of the pair
        address: Pool contract address, or None when unknown
        fee: Fee in fee units (3000 = 0.3%); Concentrated pools only
        amplifier: Amplification coefficient; Stable pools only
        provenance: AUTHORITATIVE for router data, RECONSTRUCTED for pools
            rebuilt from a descriptor
    """

    kind: PoolKind
    currency0: CurrencyRef
    currency1: CurrencyRef
    address: str | None = None
    fee: int | None = None
    amplifier: int | None = None
    provenance: Provenance = Provenance.AUTHORITATIVE

    def __post_init__(self) -> None:
        if self.currency0 == self.currency1:
            raise ValueError(f"Pool cannot trade {self.currency0.symbol} against itself")
        if self.address is not None and not is_valid_address(self.address):
            raise ValueError(f"Invalid pool address: {self.address}")

        if self.kind == PoolKind.CONCENTRATED:
            if self.fee is None or self.fee <= 0:
                raise ValueError(f"Concentrated pool requires a positive fee, got {self.fee}")
        elif self.fee is not None:
            raise ValueError(f"{self.kind.value} pool cannot carry a fee tier")

        if self.amplifier is not None:
            if self.kind != PoolKind.STABLE:
                raise ValueError(f"{self.kind.value} pool cannot carry an amplifier")
            if self.amplifier <= 0:
                raise ValueError(f"Amplifier must be positive, got {self.amplifier}")

    @property
    def is_canonical_fee(self) -> bool:
        """True if this is a Concentrated pool on one of the standard fee tiers."""
        return self.kind == PoolKind.CONCENTRATED and self.fee in CONCENTRATED_FEE_TIERS

    @property
    def is_reconstructed(self) -> bool:
        return self.provenance == Provenance.RECONSTRUCTED

    def contains(self, currency: CurrencyRef) -> bool:
        return currency == self.currency0 or currency == self.currency1

    def other(self, currency: CurrencyRef) -> CurrencyRef:
        """Get the opposite side of the pair for a given currency."""
        if currency == self.currency0:
            return self.currency1
        if currency == self.currency1:
            return self.currency0
        raise ValueError(f"Currency {currency.symbol} not in pool")


@dataclass(frozen=True)
class Hop:
    """A single swap leg through one pool."""

    pool: PoolRef
    token_in: CurrencyRef
    token_out: CurrencyRef

    def __post_init__(self) -> None:
        if not self.pool.contains(self.token_in):
            raise ValueError(f"Hop input {self.token_in.symbol} not in pool")
        if not self.pool.contains(self.token_out):
            raise ValueError(f"Hop output {self.token_out.symbol} not in pool")
        if self.token_in == self.token_out:
            raise ValueError(f"Hop input and output are both {self.token_in.symbol}")


def determine_route_type(pools: tuple[PoolRef, ...] | list[PoolRef]) -> RouteType:
    """Classify a route by its pools: a single kind, or MIXED."""
    kinds = {pool.kind for pool in pools}
    if kinds == {PoolKind.CONSTANT_PRODUCT}:
        return RouteType.V2
    if kinds == {PoolKind.CONCENTRATED}:
        return RouteType.V3
    if kinds == {PoolKind.STABLE}:
        return RouteType.STABLE
    return RouteType.MIXED


@dataclass(frozen=True)
class Route:
    """One weighted path from the trade's input currency to its output currency.

    Attributes:
        hops: Ordered, non-empty hops; each hop's output feeds the next hop
        percent: Share of the total trade, 0-100
        input_amount: This route's share of the trade input, if known
        output_amount: This route's share of the trade output, if known
    """

    hops: tuple[Hop, ...]
    percent: int
    input_amount: Amount | None = None
    output_amount: Amount | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hops", tuple(self.hops))

        if not self.hops:
            raise ValueError("Route must have at least one hop")
        if isinstance(self.percent, bool) or not isinstance(self.percent, int):
            raise ValueError(f"Route percent must be int, got {type(self.percent).__name__}")
        if not 0 <= self.percent <= PERCENT_TOTAL:
            raise ValueError(f"Route percent out of range: {self.percent}")

        for current, following in zip(self.hops, self.hops[1:]):
            if current.token_out != following.token_in:
                raise ValueError(
                    f"Broken route: {current.token_out.symbol} does not feed "
                    f"{following.token_in.symbol}"
                )

        if self.input_amount is not None and self.input_amount.currency != self.input:
            raise ValueError("Route input amount currency does not match route input")
        if self.output_amount is not None and self.output_amount.currency != self.output:
            raise ValueError("Route output amount currency does not match route output")

    @property
    def input(self) -> CurrencyRef:
        return self.hops[0].token_in

    @property
    def output(self) -> CurrencyRef:
        return self.hops[-1].token_out

    @property
    def path(self) -> tuple[CurrencyRef, ...]:
        """Currencies visited by the route, input first."""
        return (self.input,) + tuple(hop.token_out for hop in self.hops)

    @property
    def pools(self) -> tuple[PoolRef, ...]:
        return tuple(hop.pool for hop in self.hops)

    @property
    def is_multihop(self) -> bool:
        return len(self.hops) > 1

    @property
    def route_type(self) -> RouteType:
        return determine_route_type(self.pools)


@dataclass(frozen=True)
class Trade:
    """A complete swap split across one or more routes."""

    trade_type: TradeType
    input_amount: Amount
    output_amount: Amount
    routes: tuple[Route, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "routes", tuple(self.routes))

        if not self.routes:
            raise ValueError("Trade must have at least one route")

        total_percent = sum(route.percent for route in self.routes)
        if total_percent != PERCENT_TOTAL:
            raise ValueError(f"Route percentages sum to {total_percent}, expected 100")

        for index, route in enumerate(self.routes):
            if route.input != self.input_currency:
                raise ValueError(f"Route {index} does not start at {self.input_currency.symbol}")
            if route.output != self.output_currency:
                raise ValueError(f"Route {index} does not end at {self.output_currency.symbol}")

    @property
    def input_currency(self) -> CurrencyRef:
        return self.input_amount.currency

    @property
    def output_currency(self) -> CurrencyRef:
        return self.output_amount.currency

    @property
    def is_authoritative(self) -> bool:
        """True if no pool in the trade was rebuilt from a descriptor."""
        return all(not pool.is_reconstructed for route in self.routes for pool in route.pools)

    @property
    def execution_price(self) -> Fraction | None:
        """Output quotient per input quotient, or None for a zero input."""
        if self.input_amount.quotient == 0:
            return None
        return Fraction(self.output_amount.quotient, self.input_amount.quotient)

    def minimum_amount_out(self, slippage: Fraction | int | str) -> Amount:
        """Output still received if the price moves against the trade by `slippage`.

        Args:
            slippage: Tolerated share of the output, 0 to 1 (Fraction(1, 200)
                or "0.005" is 0.5%). Floats are rejected.

        Returns:
            output_amount * (1 - slippage), rounded down

        Raises:
            ValueError: If slippage is a float or outside 0..1
        """
        if isinstance(slippage, float):
            raise ValueError(f"Slippage must be exact, got float {slippage}")
        slippage = Fraction(slippage)
        if not 0 <= slippage <= 1:
            raise ValueError(f"Slippage out of range: {slippage}")

        kept = self.output_amount.quotient * (1 - slippage)
        return Amount(self.output_currency, kept.numerator // kept.denominator)


@dataclass(frozen=True)
class TradeContext:
    """What a decoder needs besides the descriptor: the trade's endpoints."""

    input_currency: CurrencyRef
    output_currency: CurrencyRef
    input_amount: int
    output_amount: int
    trade_type: TradeType = TradeType.EXACT_INPUT

    def __post_init__(self) -> None:
        for amount in (self.input_amount, self.output_amount):
            if not 0 <= amount <= UINT256_MAX:
                raise ValueError(f"Trade context amount out of uint256 range: {amount}")

    @classmethod
    def from_trade(cls, trade: Trade) -> TradeContext:
        return cls(
            input_currency=trade.input_currency,
            output_currency=trade.output_currency,
            input_amount=trade.input_amount.quotient,
            output_amount=trade.output_amount.quotient,
            trade_type=trade.trade_type,
        )
