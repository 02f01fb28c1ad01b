"""Data models for a single price accrual computation.

CRITICAL: All timestamps, rates and prices use Decimal. Never use float.
"""

from dataclasses import dataclass
from decimal import Decimal

from pricecalc.config import DecimalSettings
from pricecalc.fixed_point import descale, fixed_point_context, parse_decimal


@dataclass
class AccrualInputs:
    """Inputs to the simple-interest accrual, already descaled.

    interest_rate and base_price arrive on the command line scaled by 1e18
    and are stored here as real values (e.g. 0.5 and 2000).
    """

    last_updated: Decimal  # Timestamp of the last price update
    current_timestamp: Decimal  # Timestamp to accrue up to
    interest_rate: Decimal  # Rate per time unit, descaled
    base_price: Decimal  # Price at last_updated, descaled
    settings: DecimalSettings

    @classmethod
    def from_raw(
        cls,
        last_updated: str | None,
        current_timestamp: str | None,
        interest_rate: str | None,
        base_price: str | None,
        settings: DecimalSettings,
    ) -> "AccrualInputs":
        """Parse four raw numeral strings and descale the rate and price.

        Raises:
            ParseError: If any argument is missing or malformed.
            EncodingError: If a descaled value overflows the decimal exponent range.
        """
        return cls(
            last_updated=parse_decimal(last_updated, "lastUpdated"),
            current_timestamp=parse_decimal(current_timestamp, "currentTimestamp"),
            interest_rate=descale(
                parse_decimal(interest_rate, "interestRate"), settings
            ),
            base_price=descale(parse_decimal(base_price, "basePrice"), settings),
            settings=settings,
        )

    @property
    def time_elapsed(self) -> Decimal:
        """Elapsed time since last update. Negative values are allowed."""
        with fixed_point_context(self.settings):
            return self.current_timestamp - self.last_updated


@dataclass
class AccrualResult:
    """Outcome of one accrual computation, from real value down to the raw word."""

    inputs: AccrualInputs
    time_elapsed: Decimal
    value: Decimal  # Accrued price, real-valued
    scaled_value: Decimal  # value * 1e18, before truncation
    raw: int  # scaled_value truncated toward zero
