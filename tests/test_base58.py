"""
Tests for Base58Check and the hash functions behind addresses
"""
import pytest

from helium.core import AddressError
from helium.crypto import decode_base58, decode_base58check, encode_base58, encode_base58check, hash160


def test_known_vectors():
    assert hash160(b'').hex() == "b472a266d0bd89c13706a4132ccfb16f7c3b9fcb"
    assert encode_base58check(b'\x00' * 21) == "1111111111111111111114oLvT2"
    assert decode_base58check("1111111111111111111114oLvT2") == b'\x00' * 21


def test_leading_zeros():
    data = b'\x00\x00\x01\x02'
    assert encode_base58(data).startswith("11")
    assert decode_base58(encode_base58(data)) == data
    assert decode_base58("") == b''


def test_base58_errors():
    with pytest.raises(AddressError):
        decode_base58("0OIl")
    with pytest.raises(AddressError):
        decode_base58check("1")
