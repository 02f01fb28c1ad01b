"""Ethereum ABI encoding of a single uint256 value.

A lone static uint256 parameter encodes to one 32-byte big-endian word,
left-padded with zeros. No offset table is involved.
"""

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_abi.exceptions import EncodingError as AbiEncodingError

from pricecalc.exceptions import EncodingError
from pricecalc.logging import get_logger

logger = get_logger(__name__)

UINT256_MAX = 2**256 - 1
WORD_HEX_LENGTH = 64


def encode_uint256(value: int) -> str:
    """ABI-encode value as a uint256 and return it as a 0x-prefixed hex string.

    Args:
        value: Non-negative integer no larger than 2**256 - 1.

    Returns:
        "0x" followed by exactly 64 lowercase hex digits.

    Raises:
        EncodingError: If value is negative or overflows uint256. The value
            is never wrapped.
    """
    # Messages report sign and bit length only: str() of a huge int is limited.
    if value < 0:
        raise EncodingError("negative value is not representable as uint256")
    if value > UINT256_MAX:
        raise EncodingError(
            f"{value.bit_length()}-bit value is not representable as uint256"
        )

    try:
        word = encode(["uint256"], [value])
    except AbiEncodingError as exc:
        raise EncodingError("value is not representable as uint256") from exc

    encoded = "0x" + word.hex()
    logger.debug("uint256_encoded", value=str(value), encoded=encoded)
    return encoded


def decode_uint256(word: str) -> int:
    """Decode a single ABI uint256 word (with or without 0x) back to an int.

    Raises:
        EncodingError: If the word is not 32 bytes of valid hex.
    """
    hex_digits = word[2:] if word.startswith(("0x", "0X")) else word
    if len(hex_digits) != WORD_HEX_LENGTH:
        raise EncodingError(f"expected {WORD_HEX_LENGTH} hex digits, got {len(hex_digits)}")

    try:
        (value,) = decode(["uint256"], bytes.fromhex(hex_digits))
    except (ValueError, DecodingError) as exc:
        raise EncodingError(f"malformed uint256 word: {word!r}") from exc

    return value
