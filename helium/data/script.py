"""
Helpers for building push-only scripts, as used in the genesis coinbase scriptsig
"""
from helium.core import SCRIPT

__all__ = ["encode_script_num", "push_data", "push_int", "build_push_script"]


def encode_script_num(n: int) -> bytes:
    """
    Encode an int to Script's minimal signed-magnitude (little-endian) format.
    Zero is the empty byte string.
    """
    if n == 0:
        return b""

    neg = n < 0
    a = -n if neg else n
    mag = a.to_bytes((a.bit_length() + 7) // 8, "little")

    # The most significant bit of the most significant byte holds the sign
    if mag[-1] & 0x80:
        return mag + (b"\x80" if neg else b"\x00")
    if neg:
        return mag[:-1] + bytes([mag[-1] | 0x80])
    return mag


def push_data(item: bytes) -> bytes:
    """
    For a given item, return the corresponding OP_CODES + Data for a datapush
    """
    length = len(item)
    if length <= SCRIPT.MAX_DIRECT_PUSH:
        return length.to_bytes(1, "little") + item
    elif length <= 0xff:
        return bytes([SCRIPT.OP_PUSHDATA1]) + length.to_bytes(1, "little") + item
    elif length <= 0xffff:
        return bytes([SCRIPT.OP_PUSHDATA2]) + length.to_bytes(2, "little") + item
    else:
        return bytes([SCRIPT.OP_PUSHDATA4]) + length.to_bytes(4, "little") + item


def push_int(n: int) -> bytes:
    """
    Small integers use their dedicated opcodes (OP_0, OP_1NEGATE, OP_1..OP_16), everything else a number push
    """
    if n == 0:
        return bytes([SCRIPT.OP_0])
    if n == -1:
        return bytes([SCRIPT.OP_1NEGATE])
    if 1 <= n <= 16:
        return bytes([SCRIPT.OP_1 + n - 1])
    return push_data(encode_script_num(n))


def build_push_script(*items: int | bytes) -> bytes:
    return b''.join(push_int(item) if isinstance(item, int) else push_data(item) for item in items)
