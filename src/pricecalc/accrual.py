"""Linear (simple-interest) price accrual.

Formula:
    value = base_price * (1 + interest_rate * (current_timestamp - last_updated))

The result is rescaled to 1e18 fixed point and truncated toward zero, which
reproduces what the on-chain contract computes with integer arithmetic.
Accrual is simple, not compound: the value is linear in elapsed time.
"""

from decimal import Decimal

from pricecalc.config import DecimalSettings
from pricecalc.fixed_point import fixed_point_context, rescale, truncate
from pricecalc.logging import get_logger
from pricecalc.models import AccrualInputs, AccrualResult

logger = get_logger(__name__)


def compute_accrued_price(inputs: AccrualInputs) -> AccrualResult:
    """Accrue the base price linearly over the elapsed time.

    Steps:
    1. time_elapsed = current_timestamp - last_updated (not clamped)
    2. value = base_price * (1 + interest_rate * time_elapsed)
    3. scaled_value = value * 1e18
    4. raw = scaled_value truncated toward zero

    A sufficiently negative time_elapsed (or rate) makes the bracketed factor
    negative. That is not rejected here; the negative raw value fails later
    when it is ABI-encoded.

    Args:
        inputs: Parsed and descaled accrual inputs.

    Returns:
        AccrualResult carrying every intermediate value and the raw integer.

    Raises:
        EncodingError: If an intermediate value overflows the decimal exponent range.
    """
    settings = inputs.settings
    time_elapsed = inputs.time_elapsed

    with fixed_point_context(settings):
        value = inputs.base_price * (
            Decimal(1) + inputs.interest_rate * time_elapsed
        )

    scaled_value = rescale(value, settings)
    raw = truncate(scaled_value)

    logger.debug(
        "price_computed",
        time_elapsed=str(time_elapsed),
        interest_rate=str(inputs.interest_rate),
        base_price=str(inputs.base_price),
        value=str(value),
        raw_bits=raw.bit_length(),
    )

    return AccrualResult(
        inputs=inputs,
        time_elapsed=time_elapsed,
        value=value,
        scaled_value=scaled_value,
        raw=raw,
    )


def calculate_price(
    last_updated: str,
    current_timestamp: str,
    interest_rate: str,
    base_price: str,
    settings: DecimalSettings | None = None,
) -> int:
    """Compute the truncated 1e18-scaled accrued price from raw numeral strings.

    interest_rate and base_price are expected pre-scaled by 1e18, exactly as
    the contract stores them.

    Raises:
        ParseError: If any argument is missing or malformed.
    """
    settings = settings or DecimalSettings()
    inputs = AccrualInputs.from_raw(
        last_updated, current_timestamp, interest_rate, base_price, settings
    )
    return compute_accrued_price(inputs).raw
