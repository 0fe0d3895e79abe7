"""Versioned JSON representation of a Trade.

This is the structured interchange format for passing a computed trade
between processes. Unlike the text descriptor it keeps every currency's
address and decimals, so multi-hop routes survive the round trip.

Usage:
    payload = dump_trade(trade)
    restored = load_trade(payload)
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Discriminator, Field, Tag

from swaproute.models.currency import MAX_DECIMALS, Amount, CurrencyRef
from swaproute.models.trade import (
    Hop,
    PoolKind,
    PoolRef,
    Provenance,
    Route,
    Trade,
    TradeType,
)
from swaproute.models.types import Address, Uint256

SCHEMA_VERSION = 1


class CurrencyModel(BaseModel):
    """A currency. A null address means the chain's native asset."""

    chain_id: int = Field(alias="chainId", ge=0)
    address: Address | None = None
    decimals: int = Field(ge=0, le=MAX_DECIMALS)
    symbol: str
    name: str | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def from_currency(cls, currency: CurrencyRef) -> "CurrencyModel":
        return cls(
            chain_id=currency.chain_id,
            address=currency.address,
            decimals=currency.decimals,
            symbol=currency.symbol,
            name=currency.name,
        )

    def to_currency(self) -> CurrencyRef:
        return CurrencyRef(
            chain_id=self.chain_id,
            address=self.address,
            decimals=self.decimals,
            symbol=self.symbol,
            name=self.name,
        )


class _PoolModelBase(BaseModel):
    currency0: CurrencyModel
    currency1: CurrencyModel
    address: Address | None = None
    provenance: Provenance = Provenance.AUTHORITATIVE

    model_config = {"populate_by_name": True}


class ConstantProductPoolModel(_PoolModelBase):
    """A V2 (x*y=k) pool."""

    kind: Literal["V2"] = "V2"


class ConcentratedPoolModel(_PoolModelBase):
    """A V3 pool with its fee tier in fee units (3000 = 0.3%)."""

    kind: Literal["V3"] = "V3"
    fee: int = Field(gt=0)


class StablePoolModel(_PoolModelBase):
    """A stable-swap pool."""

    kind: Literal["STABLE"] = "STABLE"
    amplifier: int | None = Field(default=None, gt=0)


def _get_pool_kind(v: dict[str, Any] | _PoolModelBase) -> str:
    """Discriminator function for the PoolModel union type."""
    if isinstance(v, dict):
        return str(v.get("kind", "V2"))
    return str(getattr(v, "kind", "V2"))


# Discriminated union: Pydantic will use the 'kind' field to determine the type
PoolModel = Annotated[
    Annotated[ConstantProductPoolModel, Tag("V2")]
    | Annotated[ConcentratedPoolModel, Tag("V3")]
    | Annotated[StablePoolModel, Tag("STABLE")],
    Discriminator(_get_pool_kind),
]


def _pool_to_model(pool: PoolRef) -> PoolModel:
    common = {
        "currency0": CurrencyModel.from_currency(pool.currency0),
        "currency1": CurrencyModel.from_currency(pool.currency1),
        "address": pool.address,
        "provenance": pool.provenance,
    }
    if pool.kind == PoolKind.CONCENTRATED:
        return ConcentratedPoolModel(fee=pool.fee, **common)
    if pool.kind == PoolKind.STABLE:
        return StablePoolModel(amplifier=pool.amplifier, **common)
    return ConstantProductPoolModel(**common)


def _model_to_pool(model: PoolModel) -> PoolRef:
    return PoolRef(
        kind=PoolKind(model.kind),
        currency0=model.currency0.to_currency(),
        currency1=model.currency1.to_currency(),
        address=model.address,
        fee=getattr(model, "fee", None),
        amplifier=getattr(model, "amplifier", None),
        provenance=model.provenance,
    )


class HopModel(BaseModel):
    """One swap leg."""

    pool: PoolModel
    token_in: CurrencyModel = Field(alias="tokenIn")
    token_out: CurrencyModel = Field(alias="tokenOut")

    model_config = {"populate_by_name": True}


class RouteModel(BaseModel):
    """One weighted route; amounts are in the trade's input/output currencies."""

    percent: int = Field(ge=0, le=100)
    hops: list[HopModel] = Field(min_length=1)
    input_amount: Uint256 | None = Field(default=None, alias="inputAmount")
    output_amount: Uint256 | None = Field(default=None, alias="outputAmount")

    model_config = {"populate_by_name": True}


class TradeModel(BaseModel):
    """Top-level versioned trade document."""

    version: Literal[1] = SCHEMA_VERSION
    trade_type: TradeType = Field(alias="tradeType")
    input_currency: CurrencyModel = Field(alias="inputCurrency")
    output_currency: CurrencyModel = Field(alias="outputCurrency")
    input_amount: Uint256 = Field(alias="inputAmount")
    output_amount: Uint256 = Field(alias="outputAmount")
    routes: list[RouteModel] = Field(min_length=1)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_trade(cls, trade: Trade) -> "TradeModel":
        routes = []
        for route in trade.routes:
            routes.append(
                RouteModel(
                    percent=route.percent,
                    hops=[
                        HopModel(
                            pool=_pool_to_model(hop.pool),
                            token_in=CurrencyModel.from_currency(hop.token_in),
                            token_out=CurrencyModel.from_currency(hop.token_out),
                        )
                        for hop in route.hops
                    ],
                    input_amount=_quotient_or_none(route.input_amount),
                    output_amount=_quotient_or_none(route.output_amount),
                )
            )

        return cls(
            trade_type=trade.trade_type,
            input_currency=CurrencyModel.from_currency(trade.input_currency),
            output_currency=CurrencyModel.from_currency(trade.output_currency),
            input_amount=trade.input_amount.quotient,
            output_amount=trade.output_amount.quotient,
            routes=routes,
        )

    def to_trade(self) -> Trade:
        """Rebuild the Trade value.

        Raises:
            ValueError: If the document is well-formed JSON but violates a
                trade invariant (e.g. percentages not summing to 100)
        """
        input_currency = self.input_currency.to_currency()
        output_currency = self.output_currency.to_currency()

        routes = []
        for route in self.routes:
            hops = tuple(
                Hop(
                    pool=_model_to_pool(hop.pool),
                    token_in=hop.token_in.to_currency(),
                    token_out=hop.token_out.to_currency(),
                )
                for hop in route.hops
            )
            routes.append(
                Route(
                    hops=hops,
                    percent=route.percent,
                    input_amount=_amount_or_none(input_currency, route.input_amount),
                    output_amount=_amount_or_none(output_currency, route.output_amount),
                )
            )

        return Trade(
            trade_type=self.trade_type,
            input_amount=Amount(input_currency, int(self.input_amount)),
            output_amount=Amount(output_currency, int(self.output_amount)),
            routes=tuple(routes),
        )


def _quotient_or_none(amount: Amount | None) -> str | None:
    return None if amount is None else str(amount.quotient)


def _amount_or_none(currency: CurrencyRef, quotient: str | None) -> Amount | None:
    return None if quotient is None else Amount(currency, int(quotient))


def dump_trade(trade: Trade) -> str:
    """Serialize a Trade to its versioned JSON document."""
    return TradeModel.from_trade(trade).model_dump_json(by_alias=True)


def load_trade(payload: str | bytes) -> Trade:
    """Parse a versioned JSON document back into a Trade.

    Raises:
        pydantic.ValidationError: If the document does not match the schema
        ValueError: If the document violates a trade invariant
    """
    return TradeModel.model_validate_json(payload).to_trade()


__all__ = [
    "SCHEMA_VERSION",
    "CurrencyModel",
    "ConstantProductPoolModel",
    "ConcentratedPoolModel",
    "StablePoolModel",
    "PoolModel",
    "HopModel",
    "RouteModel",
    "TradeModel",
    "dump_trade",
    "load_trade",
]
