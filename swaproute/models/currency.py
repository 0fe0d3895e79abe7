"""Currency identities and integer amounts."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext

from swaproute.models.types import UINT256_MAX, normalize_address

# Marker used in place of a contract address for a chain's native asset
NATIVE_MARKER = "native"

# uint256 can hold at most 77 decimal digits
MAX_DECIMALS = 77

# Enough digits to scale any uint256 quotient without rounding
_AMOUNT_PRECISION = 160


@dataclass(frozen=True, eq=False)
class CurrencyRef:
    """A token or native-asset identity.

    Two references are equal when they share a chain id and the same
    contract address (compared case-insensitively), or are both the native
    asset of the same chain. Decimals and symbol do not take part in equality.

    Attributes:
        chain_id: Chain the currency lives on
        decimals: Decimal precision of the on-chain quotient
        symbol: Display symbol (e.g. "USDC")
        address: Contract address, or None for the native asset
        name: Optional display name
    """

    chain_id: int
    decimals: int
    symbol: str
    address: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.decimals <= MAX_DECIMALS:
            raise ValueError(f"Decimals out of range for {self.symbol}: {self.decimals}")

    @property
    def is_native(self) -> bool:
        return self.address is None

    @property
    def identity(self) -> tuple[int, str]:
        """The (chain id, address-or-native) pair used for equality."""
        if self.address is None:
            return (self.chain_id, NATIVE_MARKER)
        return (self.chain_id, normalize_address(self.address))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyRef):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __repr__(self) -> str:
        location = "native" if self.address is None else self.address
        return f"CurrencyRef({self.symbol}, chain={self.chain_id}, {location})"


@dataclass(frozen=True)
class Amount:
    """An integer quantity of a currency, scaled by 10**decimals."""

    currency: CurrencyRef
    quotient: int

    def __post_init__(self) -> None:
        if isinstance(self.quotient, bool) or not isinstance(self.quotient, int):
            raise ValueError(f"Amount quotient must be int, got {type(self.quotient).__name__}")
        if self.quotient < 0:
            raise ValueError(f"Amount cannot be negative: {self.quotient}")
        if self.quotient > UINT256_MAX:
            raise ValueError(f"Amount overflow: {self.quotient} > 2^256-1")

    @property
    def decimal_scale(self) -> int:
        return 10**self.currency.decimals

    def to_decimal(self) -> Decimal:
        """Human-readable value (e.g. 1.5 for 1_500_000 USDC units)."""
        with localcontext() as ctx:
            ctx.prec = _AMOUNT_PRECISION
            return Decimal(self.quotient).scaleb(-self.currency.decimals)

    @classmethod
    def from_decimal_string(cls, currency: CurrencyRef, value: str) -> Amount:
        """Parse a human-readable amount into an exact quotient.

        Raises:
            ValueError: If the value is not a decimal number, is negative, or
                has more fractional digits than the currency supports
        """
        try:
            parsed = Decimal(value)
        except InvalidOperation as err:
            raise ValueError(f"Invalid amount: '{value}'") from err

        if not parsed.is_finite():
            raise ValueError(f"Invalid amount: '{value}'")

        if parsed < 0:
            raise ValueError(f"Amount cannot be negative: '{value}'")

        with localcontext() as ctx:
            ctx.prec = _AMOUNT_PRECISION
            scaled = parsed.scaleb(currency.decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(
                f"Amount '{value}' has more than {currency.decimals} decimal places"
            )
        return cls(currency=currency, quotient=int(scaled))

    def __str__(self) -> str:
        with localcontext() as ctx:
            ctx.prec = _AMOUNT_PRECISION
            value = self.to_decimal().normalize()
        return f"{value:f} {self.currency.symbol}"
