"""Pool classification from structured pools or descriptor fragments.

A hint is either a PoolRef (full router data, returned untouched) or the
text that follows a symbol pair in a descriptor hop, e.g. "V3 0.3% 0x...".
Text hints are classified by their markers:

- a "V3" marker or a "<number>%" fee fragment: Concentrated
- a "STABLE" marker: Stable
- anything else, including an explicit "V2": ConstantProduct
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

import structlog

from swaproute.codec.errors import ClassifyResult, DecodeError
from swaproute.config import DEFAULT_CODEC_CONFIG, CodecConfig
from swaproute.constants import CONCENTRATED_FEE_TIERS, FEE_UNITS_PER_PERCENT
from swaproute.models.currency import CurrencyRef
from swaproute.models.trade import PoolKind, PoolRef, Provenance
from swaproute.models.types import is_valid_address

logger = structlog.get_logger()

FEE_FRAGMENT_RE = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)%$")


def parse_fee_percent(fragment: str) -> int | None:
    """Convert a fee fragment like "0.3%" to fee units (3000).

    Returns:
        Fee in fee units, or None if the fragment is not a positive decimal
        percentage that maps to a whole number of fee units
    """
    match = FEE_FRAGMENT_RE.match(fragment)
    if match is None:
        return None

    try:
        units = Decimal(match.group(1)) * FEE_UNITS_PER_PERCENT
    except InvalidOperation:
        return None

    if units <= 0 or units != units.to_integral_value():
        return None
    return int(units)


def classify(
    hint: PoolRef | str,
    currency_a: CurrencyRef | None = None,
    currency_b: CurrencyRef | None = None,
    *,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> ClassifyResult:
    """Determine a pool's kind and fee tier.

    Args:
        hint: A structured pool, or a descriptor fragment after the symbol pair
        currency_a: First currency of the pair (required for text hints)
        currency_b: Second currency of the pair (required for text hints)
        config: Codec configuration for fallback values

    Returns:
        ClassifyResult with the pool, or SYNTAX_ERROR when a fee fragment or
        address cannot be parsed or the pair currencies are missing
    """
    if isinstance(hint, PoolRef):
        return ClassifyResult.ok(hint)

    if currency_a is None or currency_b is None:
        return ClassifyResult.with_error(
            DecodeError.SYNTAX_ERROR, "Text pool hint requires both pair currencies"
        )

    tokens = hint.split()
    markers = {token.upper() for token in tokens}

    fee: int | None = None
    fee_fragments = [token for token in tokens if token.endswith("%")]
    if len(fee_fragments) > 1:
        return ClassifyResult.with_error(
            DecodeError.SYNTAX_ERROR, f"Multiple fee fragments in '{hint}'"
        )
    if fee_fragments:
        fee = parse_fee_percent(fee_fragments[0])
        if fee is None:
            logger.debug("pool_fee_unparseable", fragment=fee_fragments[0])
            return ClassifyResult.with_error(
                DecodeError.SYNTAX_ERROR,
                f"Fee fragment '{fee_fragments[0]}' is not a decimal percentage",
            )

    address_tokens = [token for token in tokens if token.lower().startswith("0x")]
    if len(address_tokens) > 1:
        return ClassifyResult.with_error(
            DecodeError.SYNTAX_ERROR, f"Multiple pool addresses in '{hint}'"
        )
    address = address_tokens[0] if address_tokens else None
    if address is not None and not is_valid_address(address):
        logger.debug("pool_address_invalid", address=address)
        return ClassifyResult.with_error(
            DecodeError.SYNTAX_ERROR, f"Invalid pool address '{address}'"
        )

    if PoolKind.CONCENTRATED.value in markers or fee is not None:
        if fee is None:
            logger.warning("pool_fee_missing_using_default", default_fee=config.default_v3_fee)
            fee = config.default_v3_fee
        elif fee not in CONCENTRATED_FEE_TIERS:
            logger.warning("pool_fee_tier_non_canonical", fee=fee, address=address)
        kind = PoolKind.CONCENTRATED
    elif PoolKind.STABLE.value in markers:
        kind = PoolKind.STABLE
    else:
        kind = PoolKind.CONSTANT_PRODUCT

    try:
        pool = PoolRef(
            kind=kind,
            currency0=currency_a,
            currency1=currency_b,
            address=address,
            fee=fee,
            amplifier=config.default_amplifier if kind == PoolKind.STABLE else None,
            provenance=Provenance.RECONSTRUCTED,
        )
    except ValueError as err:
        return ClassifyResult.with_error(DecodeError.INCONSISTENT_POOL_DATA, str(err))

    return ClassifyResult.ok(pool)


__all__ = ["classify", "parse_fee_percent"]
