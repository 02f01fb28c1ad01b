"""Linear price accrual calculator emitting ABI-encoded uint256 words.

Reference implementation of the on-chain simple-interest price formula,
computed with 64-digit truncating Decimal arithmetic so a test harness can
compare contract output bit for bit.
"""

from pricecalc.abi import decode_uint256, encode_uint256
from pricecalc.accrual import calculate_price, compute_accrued_price
from pricecalc.exceptions import EncodingError, ParseError, PriceCalcError
from pricecalc.models import AccrualInputs, AccrualResult

__all__ = [
    "AccrualInputs",
    "AccrualResult",
    "EncodingError",
    "ParseError",
    "PriceCalcError",
    "calculate_price",
    "compute_accrued_price",
    "decode_uint256",
    "encode_uint256",
]
