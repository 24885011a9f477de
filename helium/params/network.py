"""
Network identity tags and the per-network Base58 prefix table
"""
from dataclasses import dataclass
from enum import Enum

from helium.core import AddressError

__all__ = ["NetworkKind", "Base58Type", "AddressPrefixes"]


class NetworkKind(Enum):
    MAIN = "main"
    TESTNET = "test"

    def __str__(self):
        return self.value


class Base58Type(Enum):
    """
    The encoding purposes that carry a network prefix
    """
    PUBKEY_ADDRESS = 0
    SCRIPT_ADDRESS = 1
    SECRET_KEY = 2
    EXT_PUBLIC_KEY = 3
    EXT_SECRET_KEY = 4

    @property
    def prefix_length(self) -> int:
        return 4 if self in (Base58Type.EXT_PUBLIC_KEY, Base58Type.EXT_SECRET_KEY) else 1

    @property
    def payload_lengths(self) -> tuple[int, ...]:
        return _PAYLOAD_LENGTHS[self]


_PAYLOAD_LENGTHS = {
    Base58Type.PUBKEY_ADDRESS: (20,),
    Base58Type.SCRIPT_ADDRESS: (20,),
    Base58Type.SECRET_KEY: (32, 33),  # 33 with the compressed-pubkey flag
    Base58Type.EXT_PUBLIC_KEY: (74,),
    Base58Type.EXT_SECRET_KEY: (74,),
}


@dataclass(frozen=True)
class AddressPrefixes:
    """
    Prefix bytes for each Base58Type. Single byte for addresses and secret keys, four bytes for extended keys.
    """
    pubkey_address: bytes
    script_address: bytes
    secret_key: bytes
    ext_public_key: bytes
    ext_secret_key: bytes

    def __post_init__(self):
        for kind, prefix in self.items():
            if len(prefix) != kind.prefix_length:
                raise ValueError(f"{kind.name} prefix must be {kind.prefix_length} byte(s), got {prefix.hex()}")

    def get(self, kind: Base58Type) -> bytes:
        return getattr(self, kind.name.lower())

    def items(self) -> list[tuple[Base58Type, bytes]]:
        return [(kind, self.get(kind)) for kind in Base58Type]

    def split(self, data: bytes) -> tuple[Base58Type, bytes]:
        """
        Given decoded Base58Check data (prefix || payload), return the matching type and the payload.
        Both the prefix and the payload length must match.
        """
        for kind, prefix in self.items():
            payload = data[len(prefix):]
            if data.startswith(prefix) and len(payload) in kind.payload_lengths:
                return kind, payload
        raise AddressError(f"No prefix of this network matches data: {data[:4].hex()}")

    def to_dict(self) -> dict:
        return {kind.name: prefix.hex() for kind, prefix in self.items()}
