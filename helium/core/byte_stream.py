"""
Methods for deserializing byte streams and reading/writing CompactSize integers
"""
import struct
from io import BytesIO
from typing import Union, Optional, Literal

from .exceptions import ReadError
from .formats import DATA

__all__ = ["SERIALIZED", "get_stream", "read_stream", "read_little_int", "read_big_int", "read_compact_size",
           "write_compact_size"]

SERIALIZED = Union[bytes, BytesIO]
BYTEORDER = Literal['big', 'little']


def get_stream(byte_stream: SERIALIZED):
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, (bytes, bytearray)):
        return BytesIO(bytes(byte_stream))
    elif isinstance(byte_stream, BytesIO):
        return byte_stream
    else:
        raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream with error checking"""
    data = stream.read(length)

    # Verify data integrity
    if len(data) != length:
        if data_type:
            raise ReadError(f"Error reading stream. Insufficient data. Data type: {data_type}")
        else:
            raise ReadError("Error reading stream. Insufficient data.")

    return data


def _read_int(stream: BytesIO, length: int, byteorder: BYTEORDER, data_type: Optional[str] = None) -> int:
    """Internal method to read integer from stream"""
    data = read_stream(stream, length, data_type)
    return int.from_bytes(data, byteorder)


def read_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read little-endian integer from stream"""
    return _read_int(stream, length, "little", data_type)


def read_big_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read big-endian integer from stream"""
    return _read_int(stream, length, "big", data_type)


def write_compact_size(value: int) -> bytes:
    """
    Encodes an integer into a CompactSize (varint) byte sequence.
    """
    if value < 0:
        raise ValueError("Negative values are not allowed in CompactSize encoding.")
    if value > DATA.MAX_COMPACTSIZE:
        raise ValueError("Value exceeds the 8-byte CompactSize range.")

    if value < 0xfd:
        return struct.pack("B", value)
    elif value <= 0xffff:
        return b'\xfd' + struct.pack("<H", value)
    elif value <= 0xffffffff:
        return b'\xfe' + struct.pack("<I", value)
    else:
        return b'\xff' + struct.pack("<Q", value)


def read_compact_size(byte_stream: SERIALIZED, data_type: Optional[str] = None) -> int:
    """
    Returns the integer value associated with the compact-size encoding at the head of the data stream
    """
    stream = get_stream(byte_stream)

    prefix_val = read_stream(stream, 1, f"compact-size prefix: {data_type}")[0]

    if prefix_val < 0xfd:
        return prefix_val
    elif prefix_val == 0xfd:
        raw = read_stream(stream, 2, f"0xfd prefix value: {data_type}")
    elif prefix_val == 0xfe:
        raw = read_stream(stream, 4, f"0xfe prefix value: {data_type}")
    else:
        raw = read_stream(stream, 8, f"0xff prefix value: {data_type}")
    return int.from_bytes(raw, "little")
