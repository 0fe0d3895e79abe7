#!/usr/bin/env python3
"""Decode a route descriptor against a trade context and print the result.

The reconstructed trade is printed as its versioned JSON document, followed
by the descriptor re-encoded from it.

Usage:
    python scripts/decode_descriptor.py \
        "(60% [USDC-WETH V3 0.3% 0x...]), (40% [USDC-WETH V2 0x...])" \
        --input USDC:0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48:6 \
        --output WETH:0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2:18 \
        --input-amount 1000000000 --output-amount 400000000000000000

    Use "native" in place of an address for the chain's native asset.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from swaproute.codec import decode_trade, encode  # noqa: E402
from swaproute.config import config_from_env  # noqa: E402
from swaproute.models import CurrencyRef, TradeContext, TradeType  # noqa: E402
from swaproute.models.schema import TradeModel  # noqa: E402

logger = structlog.get_logger()


def parse_currency(value: str, chain_id: int) -> CurrencyRef:
    """Parse SYMBOL:ADDRESS:DECIMALS into a CurrencyRef."""
    try:
        symbol, address, decimals = value.split(":")
        return CurrencyRef(
            chain_id=chain_id,
            decimals=int(decimals),
            symbol=symbol,
            address=None if address.lower() == "native" else address,
        )
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            f"Expected SYMBOL:ADDRESS:DECIMALS, got '{value}' ({err})"
        ) from err


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Decode a swap route descriptor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("descriptor", help="Route descriptor text")
    parser.add_argument("--input", required=True, help="Input currency SYMBOL:ADDRESS:DECIMALS")
    parser.add_argument("--output", required=True, help="Output currency SYMBOL:ADDRESS:DECIMALS")
    parser.add_argument("--input-amount", type=int, required=True, help="Total input quotient")
    parser.add_argument("--output-amount", type=int, required=True, help="Total output quotient")
    parser.add_argument("--chain-id", type=int, default=1, help="Chain id (default: 1)")
    parser.add_argument(
        "--exact-output",
        action="store_true",
        help="Treat the trade as exact-output instead of exact-input",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    try:
        context = TradeContext(
            input_currency=parse_currency(args.input, args.chain_id),
            output_currency=parse_currency(args.output, args.chain_id),
            input_amount=args.input_amount,
            output_amount=args.output_amount,
            trade_type=TradeType.EXACT_OUTPUT if args.exact_output else TradeType.EXACT_INPUT,
        )
        config = config_from_env()
    except (argparse.ArgumentTypeError, ValueError) as err:
        logger.error("invalid_arguments", error=str(err))
        return 2

    result = decode_trade(args.descriptor, context, config=config)
    if result.is_error or result.trade is None:
        logger.error(
            "decode_failed",
            error=result.error.value if result.error else None,
            detail=result.error_detail,
        )
        return 1

    document = TradeModel.from_trade(result.trade).model_dump(mode="json", by_alias=True)
    print(json.dumps(document, indent=2))
    print()
    print(encode(result.trade, config=config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
