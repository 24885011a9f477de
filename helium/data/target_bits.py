"""
Methods for converting between bits and target.
Bits is 4-byte representation of 32-byte target
"""
from helium.core import DATA, TargetBitsError

__all__ = ["bits_to_target", "target_to_bits", "bits_to_target_int", "target_int_to_bits"]

MAX_TARGET = (1 << 256) - 1


def bits_to_target(target_bits: bytes) -> bytes:
    # --- Validation --- #
    if len(target_bits) != DATA.BITS:
        raise TargetBitsError("Given target bits not of correct length")

    # --- Execution --- #
    exp = target_bits[0]
    coeff = int.from_bytes(target_bits[1:4], 'big')

    if coeff & 0x800000:
        raise TargetBitsError(f"Negative target encoded in bits: {target_bits.hex()}")

    if exp <= 3:
        target_int = coeff >> (8 * (3 - exp))
    else:
        target_int = coeff << (8 * (exp - 3))

    if target_int > MAX_TARGET:
        raise TargetBitsError(f"Target encoded in bits overflows 256 bits: {target_bits.hex()}")

    # Convert to 32 bytes, big-endian
    return target_int.to_bytes(DATA.TARGET, 'big')


def target_to_bits(target: bytes) -> bytes:
    # --- Validation --- #
    if len(target) != DATA.TARGET:
        raise TargetBitsError("Given target not of correct length")

    # --- Execution --- #
    # Find the first significant byte
    first_nonzero = next((i for i, b in enumerate(target) if b != 0), len(target))
    if first_nonzero == len(target):
        return bytes(DATA.BITS)

    # Exponent is the number of significant bytes
    exp = DATA.TARGET - first_nonzero

    # Extract first 3 significant bytes, padded with zeros
    coeff = target[first_nonzero:first_nonzero + 3].ljust(3, b'\x00')

    # If the first byte of the coefficient is >= 0x80, prepend `00` and increase exponent
    if coeff[0] >= 0x80:
        coeff = b'\x00' + coeff[:2]
        exp += 1

    return exp.to_bytes(1, "big") + coeff


def bits_to_target_int(target_bits: bytes) -> int:
    return int.from_bytes(bits_to_target(target_bits), "big")


def target_int_to_bits(target: int) -> bytes:
    if not 0 <= target <= MAX_TARGET:
        raise TargetBitsError("Target integer out of 256-bit range")
    return target_to_bits(target.to_bytes(DATA.TARGET, "big"))
