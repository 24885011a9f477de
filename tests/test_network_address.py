"""
Tests for the PeerAddress structure
"""
import pytest

from helium.data import PeerAddress, normalize_ip


def test_peer_address_bytes():
    """
    time (LE) | services (LE) | ipv6 | port (BE)
    """
    peer = PeerAddress("45.77.197.236", 16452, timestamp=1509944396)
    raw = peer.to_bytes()

    assert len(raw) == 30
    assert raw.hex() == "4cecff59" + "0100000000000000" + "00000000000000000000ffff2d4dc5ec" + "4044"
    assert PeerAddress.from_bytes(raw) == peer
    assert peer.display_ip == "45.77.197.236"
    assert peer.to_dict()["time"] == "2017-11-06 04:59:56"


def test_normalize_ip():
    mapped = normalize_ip("10.0.0.1")
    assert mapped.ipv4_mapped is not None
    assert normalize_ip(mapped.packed) == mapped
    assert normalize_ip(bytes([10, 0, 0, 1])) == mapped

    with pytest.raises(ValueError):
        normalize_ip(b'\x00' * 5)
    with pytest.raises(ValueError):
        PeerAddress("10.0.0.1", -1)
