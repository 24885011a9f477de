"""
Methods for Base58 and Base58Check encoding
"""
import re

from helium.core import AddressError
from helium.core.logging import get_logger
from helium.crypto.hash_functions import hash256

logger = get_logger(__name__)

__all__ = ["BASE58_ALPHABET", "encode_base58", "decode_base58", "encode_base58check", "decode_base58check"]

# --- BASE58 ENCODING --- #
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
CHECKSUM_BYTES = 4


def encode_base58(data: bytes) -> str:
    """
    Given bytes we return a base58 encoded string. Each leading zero byte becomes a leading '1'.
    """
    base = len(BASE58_ALPHABET)
    n = int.from_bytes(data, "big")
    encoded_string = ""

    while n > 0:
        n, temp_index = divmod(n, base)
        encoded_string = BASE58_ALPHABET[temp_index] + encoded_string

    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return ("1" * leading_zeros) + encoded_string


def decode_base58(encoded: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes.
    """
    total = 0
    for char in encoded:
        char_i = BASE58_ALPHABET.find(char)
        if char_i == -1:
            raise AddressError(f"Invalid base58 character: {char!r}")
        total = total * 58 + char_i

    body = total.to_bytes((total.bit_length() + 7) // 8, "big") if total else b''

    # Each leading '1' represents a leading zero byte
    leading_zeros = len(re.match(r"^1*", encoded).group(0))
    return b'\x00' * leading_zeros + body


def encode_base58check(data: bytes) -> str:
    """
    Return base58(data || first 4 bytes of HASH256(data))
    """
    checksum = hash256(data)[:CHECKSUM_BYTES]
    return encode_base58(data + checksum)


def decode_base58check(encoded: str) -> bytes:
    """
    Given a Base58Check string, verify the checksum and return the data without it.
    Raise AddressError if the checksum fails
    """
    decoded = decode_base58(encoded)
    if len(decoded) < CHECKSUM_BYTES:
        raise AddressError("Base58Check data shorter than its checksum")

    data, checksum = decoded[:-CHECKSUM_BYTES], decoded[-CHECKSUM_BYTES:]
    if hash256(data)[:CHECKSUM_BYTES] != checksum:
        logger.debug(f"Checksum failure for Base58Check string: {encoded}")
        raise AddressError("Decoded checksum does not equal given checksum")
    return data
