"""Codec result types.

Decoding never raises for bad input: failures come back as a result value
carrying a DecodeError kind and a human-readable detail.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swaproute.models.trade import PoolRef, Route, Trade


class DecodeError(Enum):
    """Types of descriptor decoding errors."""

    SYNTAX_ERROR = "syntax_error"
    UNKNOWN_POOL_KIND = "unknown_pool_kind"
    INCONSISTENT_POOL_DATA = "inconsistent_pool_data"
    PERCENTAGE_MISMATCH = "percentage_mismatch"
    MULTI_HOP_UNSUPPORTED = "multi_hop_unsupported"


@dataclass(frozen=True)
class ClassifyResult:
    """Result of classifying a pool hint.

    Examples:
        result = classify("V3 0.3%", usdc, weth)
        assert result.is_valid
        assert result.pool.fee == 3000

        result = classify("V3 abc%", usdc, weth)
        assert result.error == DecodeError.SYNTAX_ERROR
    """

    pool: PoolRef | None
    error: DecodeError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, pool: PoolRef) -> ClassifyResult:
        return cls(pool=pool)

    @classmethod
    def with_error(cls, error: DecodeError, detail: str | None = None) -> ClassifyResult:
        return cls(pool=None, error=error, error_detail=detail)


@dataclass(frozen=True)
class DecodeResult:
    """Result of decoding a descriptor.

    Attributes:
        routes: Reconstructed routes, empty on failure
        error: If decoding failed, the kind of failure
        error_detail: Optional human-readable detail about the failure
        trade: Full trade, set only by decode_trade() on success
    """

    routes: tuple[Route, ...] = ()
    error: DecodeError | None = None
    error_detail: str | None = None
    trade: Trade | None = None

    @property
    def is_valid(self) -> bool:
        """True if decoding succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if decoding failed."""
        return self.error is not None

    @classmethod
    def ok(cls, routes: tuple[Route, ...], trade: Trade | None = None) -> DecodeResult:
        return cls(routes=routes, trade=trade)

    @classmethod
    def with_error(cls, error: DecodeError, detail: str | None = None) -> DecodeResult:
        return cls(error=error, error_detail=detail)


__all__ = ["DecodeError", "ClassifyResult", "DecodeResult"]
