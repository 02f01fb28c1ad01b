"""Fixed-point helpers for 1e18-scaled on-chain values.

All arithmetic runs inside a local Decimal context with ROUND_DOWN, which
matches Solidity's truncating integer division. The process-wide decimal
context is never modified.
"""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import (
    ROUND_DOWN,
    Context,
    Decimal,
    InvalidOperation,
    Overflow,
    localcontext,
)

from pricecalc.config import DecimalSettings
from pricecalc.exceptions import EncodingError, ParseError

# Plain base-10 numerals only: no NaN/Infinity, hex prefixes, underscores or whitespace.
_NUMERAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def make_context(settings: DecimalSettings) -> Context:
    """Build the Decimal context used for every accrual computation.

    Args:
        settings: Decimal engine settings (precision in significant digits).

    Returns:
        A fresh Context with the configured precision and ROUND_DOWN rounding.
    """
    return Context(prec=settings.precision, rounding=ROUND_DOWN)


@contextmanager
def fixed_point_context(settings: DecimalSettings) -> Iterator[Context]:
    """Run a block of Decimal arithmetic inside the accrual context.

    Results beyond the context's exponent range can never fit a uint256,
    so decimal.Overflow surfaces as EncodingError.

    Raises:
        EncodingError: If any operation in the block overflows.
    """
    try:
        with localcontext(make_context(settings)) as ctx:
            yield ctx
    except Overflow as exc:
        raise EncodingError("value exceeds the decimal exponent range") from exc


def parse_decimal(text: str | None, name: str) -> Decimal:
    """Parse a base-10 numeral string into an exact Decimal.

    Surrounding whitespace is rejected, like any other stray character.

    Args:
        text: Raw argument string. None means the argument was not supplied.
        name: Argument name, used in the error message.

    Returns:
        The exact Decimal value of the numeral (no context rounding applied).

    Raises:
        ParseError: If the argument is missing or not a valid decimal numeral.
    """
    if text is None:
        raise ParseError(f"missing argument: {name}")

    if not _NUMERAL_RE.fullmatch(text):
        raise ParseError(f"invalid decimal numeral for {name}: {text!r}")

    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise ParseError(f"invalid decimal numeral for {name}: {text!r}") from exc

    if not value.is_finite():
        raise ParseError(f"decimal numeral out of range for {name}: {text!r}")
    return value


def scale_factor(settings: DecimalSettings) -> Decimal:
    """Return the fixed-point scale (10 ** scale_decimals) as a Decimal."""
    return Decimal(10) ** settings.scale_decimals


def descale(value: Decimal, settings: DecimalSettings) -> Decimal:
    """Convert a 1e18-scaled fixed-point value to its real-valued Decimal."""
    with fixed_point_context(settings):
        return value / scale_factor(settings)


def rescale(value: Decimal, settings: DecimalSettings) -> Decimal:
    """Convert a real-valued Decimal back to 1e18-scaled fixed point."""
    with fixed_point_context(settings):
        return value * scale_factor(settings)


def truncate(value: Decimal) -> int:
    """Truncate toward zero and return a Python int.

    The fractional remainder is discarded, never rounded: 41.9999 -> 41,
    -41.9999 -> -41.
    """
    return int(value.to_integral_value(rounding=ROUND_DOWN))
