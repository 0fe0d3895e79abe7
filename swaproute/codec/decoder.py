"""Parsing of route descriptors back into structured routes.

Grammar:
    descriptor   := routeEntry ("," routeEntry)*
    routeEntry   := "(" percent "%" whitespace "[" hopList "]" ")"
    hopList      := hop ("," hop)*
    hop          := symbolPair whitespace poolTag [whitespace feeFragment] [whitespace address]
    symbolPair   := SYMBOL "-" SYMBOL
    poolTag      := "V2" | "V3" | "STABLE"
    feeFragment  := NUMBER "%"
    address      := "0x" HEXDIGIT{40}

A descriptor names intermediate tokens by symbol only, which is not enough
to rebuild them. Routes with more than one hop are therefore rejected with
MULTI_HOP_UNSUPPORTED; callers needing multi-hop fidelity must keep the
original Trade (or its JSON document from swaproute.models.schema).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import structlog

from swaproute.codec.amounts import split_amount
from swaproute.codec.classifier import classify
from swaproute.codec.errors import DecodeError, DecodeResult
from swaproute.config import DEFAULT_CODEC_CONFIG, CodecConfig
from swaproute.constants import PERCENT_TOTAL
from swaproute.models.currency import Amount
from swaproute.models.trade import Hop, PoolKind, Route, Trade, TradeContext

logger = structlog.get_logger()

ROUTE_ENTRY_RE = re.compile(r"^\(\s*(\S+?)%\s+\[(.*)\]\s*\)$", re.DOTALL)
PERCENT_RE = re.compile(r"^\d+$")
SYMBOL_PAIR_RE = re.compile(r"^([^\s\-]+)-([^\s\-]+)$")

POOL_TAGS = {kind.value: kind for kind in PoolKind}


class DescriptorSyntaxError(ValueError):
    """Malformed descriptor text. Raised and caught inside this module only."""

    def __init__(self, error: DecodeError, detail: str) -> None:
        super().__init__(detail)
        self.error = error
        self.detail = detail


@dataclass(frozen=True)
class ParsedHop:
    """Tokens of one hop, before any currency is attached."""

    symbol_in: str
    symbol_out: str
    kind: PoolKind
    fee_fragment: str | None = None
    address: str | None = None

    @property
    def pool_hint(self) -> str:
        """The hop text after the symbol pair, as the classifier expects it."""
        parts = [self.kind.value, self.fee_fragment, self.address]
        return " ".join(part for part in parts if part is not None)


@dataclass(frozen=True)
class ParsedRoute:
    """Percent and hops of one route entry."""

    percent: int
    hops: tuple[ParsedHop, ...]


def split_route_entries(text: str) -> list[str]:
    """Split a descriptor into its top-level "( ... )" route entries.

    Raises:
        DescriptorSyntaxError: On unbalanced or misplaced brackets, stray
            text between entries, or missing/extra separating commas
    """
    entries: list[str] = []
    paren_depth = 0
    bracket_depth = 0
    start = 0
    expect_entry = True

    for index, char in enumerate(text):
        if paren_depth == 0:
            if char == "(":
                if not expect_entry:
                    raise _syntax(f"Missing ',' before route entry at position {index}")
                paren_depth = 1
                start = index
            elif char == ",":
                if expect_entry:
                    raise _syntax(f"Unexpected ',' at position {index}")
                expect_entry = True
            elif not char.isspace():
                raise _syntax(f"Unexpected '{char}' outside route entry at position {index}")
            continue

        if char == "[":
            if bracket_depth:
                raise _syntax(f"Nested '[' at position {index}")
            bracket_depth = 1
        elif char == "]":
            if not bracket_depth:
                raise _syntax(f"Unmatched ']' at position {index}")
            bracket_depth = 0
        elif char == "(":
            raise _syntax(f"Nested '(' at position {index}")
        elif char == ")":
            if bracket_depth:
                raise _syntax(f"Unclosed '[' before ')' at position {index}")
            paren_depth = 0
            entries.append(text[start : index + 1])
            expect_entry = False

    if paren_depth:
        raise _syntax("Unclosed '(' at end of descriptor")
    if not entries:
        raise _syntax("Descriptor contains no route entries")
    if expect_entry:
        raise _syntax("Trailing ',' at end of descriptor")

    return entries


def parse_hop(fragment: str) -> ParsedHop:
    """Tokenize one hop such as "USDC-WETH V3 0.3% 0x...".

    The address token is kept as written; its shape is checked when the
    pool is classified, which only happens for single-hop routes.

    Raises:
        DescriptorSyntaxError: With SYNTAX_ERROR, UNKNOWN_POOL_KIND or
            INCONSISTENT_POOL_DATA as the error kind
    """
    tokens = fragment.split()
    if len(tokens) < 2:
        raise _syntax(f"Hop '{fragment}' needs a symbol pair and a pool tag")

    pair = SYMBOL_PAIR_RE.match(tokens[0])
    if pair is None:
        raise _syntax(f"Invalid symbol pair '{tokens[0]}'")

    kind = POOL_TAGS.get(tokens[1].upper())
    if kind is None:
        raise DescriptorSyntaxError(
            DecodeError.UNKNOWN_POOL_KIND, f"Unknown pool tag '{tokens[1]}' in '{fragment}'"
        )

    rest = tokens[2:]
    fee_fragment = None
    address = None

    if rest and rest[0].endswith("%"):
        fee_fragment = rest.pop(0)
    if rest and rest[0].lower().startswith("0x"):
        address = rest.pop(0)
    if rest:
        raise _syntax(f"Unexpected tokens {rest} in hop '{fragment}'")

    if fee_fragment is not None and kind != PoolKind.CONCENTRATED:
        raise DescriptorSyntaxError(
            DecodeError.INCONSISTENT_POOL_DATA,
            f"Fee fragment '{fee_fragment}' on {kind.value} pool in '{fragment}'",
        )

    return ParsedHop(
        symbol_in=pair.group(1),
        symbol_out=pair.group(2),
        kind=kind,
        fee_fragment=fee_fragment,
        address=address,
    )


def parse_route_entry(entry: str) -> ParsedRoute:
    """Parse one "(<percent>% [<hops>])" entry."""
    match = ROUTE_ENTRY_RE.match(entry)
    if match is None:
        raise _syntax(f"Malformed route entry '{entry}'")

    percent_text, hop_list = match.groups()
    if PERCENT_RE.match(percent_text) is None:
        raise _syntax(f"Route percent '{percent_text}' is not a whole number")

    fragments = [fragment.strip() for fragment in hop_list.split(",")]
    if any(not fragment for fragment in fragments):
        raise _syntax(f"Empty hop in route entry '{entry}'")

    return ParsedRoute(
        percent=int(percent_text),
        hops=tuple(parse_hop(fragment) for fragment in fragments),
    )


def parse_descriptor(text: str) -> list[ParsedRoute]:
    """Parse a whole descriptor without attaching currencies or amounts."""
    return [parse_route_entry(entry) for entry in split_route_entries(text)]


def decode(
    text: str,
    context: TradeContext,
    *,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> DecodeResult:
    """Decode a descriptor into single-hop routes.

    Args:
        text: Descriptor string, e.g. "(60% [USDC-WETH V3 0.3% 0x...]), (40% [...])"
        context: Input/output currencies and total amounts of the trade
        config: Codec configuration

    Returns:
        DecodeResult with the reconstructed routes, or the first error found
    """
    if not text or not text.strip():
        return _fail(DecodeError.SYNTAX_ERROR, "Empty descriptor")

    try:
        parsed_routes = parse_descriptor(text)
    except DescriptorSyntaxError as err:
        return _fail(err.error, err.detail)

    percents = [route.percent for route in parsed_routes]
    if sum(percents) != PERCENT_TOTAL:
        return _fail(
            DecodeError.PERCENTAGE_MISMATCH,
            f"Route percentages sum to {sum(percents)}, expected {PERCENT_TOTAL}",
        )

    for index, parsed in enumerate(parsed_routes):
        if len(parsed.hops) > 1:
            logger.info(
                "decode_multi_hop_rejected",
                route_index=index,
                hops=len(parsed.hops),
            )
            return _fail(
                DecodeError.MULTI_HOP_UNSUPPORTED,
                f"Route {index} has {len(parsed.hops)} hops; intermediate tokens "
                "cannot be rebuilt from symbols",
            )

    input_amounts = split_amount(context.input_amount, percents)
    output_amounts = split_amount(context.output_amount, percents)

    routes = []
    for index, parsed in enumerate(parsed_routes):
        parsed_hop = parsed.hops[0]

        mismatch = _symbol_mismatch(parsed_hop, context)
        if mismatch is not None:
            if config.strict_symbols:
                return _fail(DecodeError.INCONSISTENT_POOL_DATA, mismatch)
            logger.warning("decode_symbol_mismatch", route_index=index, detail=mismatch)

        classified = classify(
            parsed_hop.pool_hint,
            context.input_currency,
            context.output_currency,
            config=config,
        )
        if classified.is_error:
            return _fail(classified.error, classified.error_detail)

        hop = Hop(
            pool=classified.pool,
            token_in=context.input_currency,
            token_out=context.output_currency,
        )
        routes.append(
            Route(
                hops=(hop,),
                percent=parsed.percent,
                input_amount=Amount(context.input_currency, input_amounts[index]),
                output_amount=Amount(context.output_currency, output_amounts[index]),
            )
        )

    logger.debug("descriptor_decoded", routes=len(routes))
    return DecodeResult.ok(tuple(routes))


def decode_trade(
    text: str,
    context: TradeContext,
    *,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> DecodeResult:
    """Decode a descriptor and assemble the full Trade from the context."""
    result = decode(text, context, config=config)
    if result.is_error:
        return result

    trade = Trade(
        trade_type=context.trade_type,
        input_amount=Amount(context.input_currency, context.input_amount),
        output_amount=Amount(context.output_currency, context.output_amount),
        routes=result.routes,
    )
    return DecodeResult.ok(result.routes, trade=trade)


def _symbol_mismatch(parsed_hop: ParsedHop, context: TradeContext) -> str | None:
    expected = (context.input_currency.symbol, context.output_currency.symbol)
    found = (parsed_hop.symbol_in, parsed_hop.symbol_out)
    if tuple(s.upper() for s in expected) == tuple(s.upper() for s in found):
        return None
    return f"Descriptor pair {found[0]}-{found[1]} does not match {expected[0]}-{expected[1]}"


def _syntax(detail: str) -> DescriptorSyntaxError:
    return DescriptorSyntaxError(DecodeError.SYNTAX_ERROR, detail)


def _fail(error: DecodeError, detail: str | None) -> DecodeResult:
    logger.debug("descriptor_decode_failed", error=error.value, detail=detail)
    return DecodeResult.with_error(error, detail)


__all__ = [
    "DescriptorSyntaxError",
    "ParsedHop",
    "ParsedRoute",
    "decode",
    "decode_trade",
    "parse_descriptor",
    "parse_hop",
    "parse_route_entry",
    "split_route_entries",
]
