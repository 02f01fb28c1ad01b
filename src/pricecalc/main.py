"""Command-line entry point for the price calculator.

Usage:
    calculate-price <lastUpdated> <currentTimestamp> <interestRate> <basePrice>

interestRate and basePrice are 1e18-scaled fixed-point integers, as stored
on chain. On success exactly one line is written to stdout: the ABI
uint256 encoding of floor(basePrice * (1 + interestRate * elapsed) * 1e18).
On failure nothing is written to stdout, a diagnostic is logged to stderr
and the process exits non-zero (2 for parse errors, 3 for encoding errors).
"""

import argparse
import sys
from typing import NoReturn

from pricecalc.abi import encode_uint256
from pricecalc.accrual import compute_accrued_price
from pricecalc.config import AppSettings
from pricecalc.exceptions import ParseError, PriceCalcError
from pricecalc.logging import get_logger, setup_logging
from pricecalc.models import AccrualInputs


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ParseError instead of exiting on bad usage."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="calculate-price",
        description="Print the ABI-encoded uint256 of a linearly accrued price.",
    )
    parser.add_argument("last_updated", metavar="lastUpdated")
    parser.add_argument("current_timestamp", metavar="currentTimestamp")
    parser.add_argument(
        "interest_rate",
        metavar="interestRate",
        help="interest rate per time unit, scaled by 1e18",
    )
    parser.add_argument(
        "base_price",
        metavar="basePrice",
        help="price at lastUpdated, scaled by 1e18",
    )
    return parser


def run(argv: list[str], settings: AppSettings) -> str:
    """Parse argv, compute the accrued price and return its encoded word.

    Raises:
        ParseError: On missing, extra or malformed arguments.
        EncodingError: If the result is negative or overflows uint256.
    """
    args = _build_parser().parse_args(argv)
    inputs = AccrualInputs.from_raw(
        args.last_updated,
        args.current_timestamp,
        args.interest_rate,
        args.base_price,
        settings.decimal,
    )
    result = compute_accrued_price(inputs)
    return encode_uint256(result.raw)


def main(argv: list[str] | None = None) -> int:
    """Synchronous entry point. Returns the process exit code."""
    settings = AppSettings()
    setup_logging(settings.log_level)
    logger = get_logger("pricecalc.main")

    if argv is None:
        argv = sys.argv[1:]

    try:
        encoded = run(argv, settings)
    except PriceCalcError as exc:
        logger.error(
            "calculation_failed",
            error=type(exc).__name__,
            detail=str(exc),
            argv=argv,
        )
        return exc.exit_code

    print(encoded)
    return 0


if __name__ == "__main__":
    sys.exit(main())
