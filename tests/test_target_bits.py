"""
Tests for converting between compact target bits and the full 256-bit target
"""
import pytest

from helium.core import TargetBitsError
from helium.data import bits_to_target, bits_to_target_int, target_int_to_bits, target_to_bits

UINT256_MAX = (1 << 256) - 1


def test_known_bits():
    """
    The classic difficulty-1 bits and the two network limits
    """
    assert bits_to_target(bytes.fromhex("1d00ffff")).hex() == "00000000ffff" + "00" * 26
    assert bits_to_target_int(bytes.fromhex("1e00ffff")) == 0xffff << (8 * 27)
    assert bits_to_target_int(bytes.fromhex("2000ffff")) == 0xffff << (8 * 29)


def test_pow_limits_to_bits():
    """
    ~0 >> 24 and ~0 >> 8 have their top mantissa bit set, so the exponent grows by one
    """
    assert target_int_to_bits(UINT256_MAX >> 24) == bytes.fromhex("1e00ffff")
    assert target_int_to_bits(UINT256_MAX >> 8) == bytes.fromhex("2000ffff")


def test_small_exponent():
    assert bits_to_target_int(bytes.fromhex("03123456")) == 0x123456
    assert bits_to_target_int(bytes.fromhex("02123456")) == 0x1234
    assert target_int_to_bits(0x12) == bytes.fromhex("01120000")
    assert target_int_to_bits(0) == bytes(4)


def test_target_to_bits_is_lossy_to_three_bytes():
    target = bytes.fromhex("00000000" + "123456789a" + "00" * 23)
    bits = target_to_bits(target)
    assert bits == bytes.fromhex("1c123456")
    assert bits_to_target(bits).hex().startswith("00000000123456000000")


def test_bits_errors():
    with pytest.raises(TargetBitsError):
        bits_to_target(bytes.fromhex("1d00ff"))
    with pytest.raises(TargetBitsError):
        bits_to_target(bytes.fromhex("1d800000"))  # sign bit
    with pytest.raises(TargetBitsError):
        bits_to_target(bytes.fromhex("ff00ffff"))  # overflow
    with pytest.raises(TargetBitsError):
        target_to_bits(bytes(31))
    with pytest.raises(TargetBitsError):
        target_int_to_bits(1 << 256)
