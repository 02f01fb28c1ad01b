"""Custom exceptions for the price calculator.

Every failure is fatal to a single invocation. The CLI maps each error
kind to its own non-zero exit code.
"""


class PriceCalcError(Exception):
    """Base exception for all price calculator errors."""

    exit_code = 1


class ParseError(PriceCalcError):
    """Raised when an input argument is missing or not a valid decimal numeral."""

    exit_code = 2


class EncodingError(PriceCalcError):
    """Raised when a value cannot be represented as an ABI uint256."""

    exit_code = 3
