"""
Bootstrap peers: DNS seed hosts and the fixed binary seed tables.

Fixed seeds are handed out with a random 'last seen' time between one and two weeks ago, so a node connects to one or
two of them and then prefers the fresher addresses it learns from its peers.
"""
import ipaddress as IP
import time
from dataclasses import dataclass
from secrets import randbelow

from helium.core import SEEDS, SERIALIZED, SeedError, get_stream, read_big_int, read_stream
from helium.core.logging import get_logger
from helium.data import PeerAddress, normalize_ip

logger = get_logger(__name__)

__all__ = ["DNSSeed", "SeedSpec6", "MAIN_DNS_SEEDS", "TESTNET_DNS_SEEDS", "MAIN_SEED_TABLE", "TESTNET_SEED_TABLE",
           "convert_seed6", "parse_seed_table", "pack_seed_table"]


@dataclass(frozen=True)
class DNSSeed:
    name: str
    host: str


@dataclass(frozen=True)
class SeedSpec6:
    """
    -----------------------------------------------------------------
    |   Name            | Data type | Formatted             | Size  |
    -----------------------------------------------------------------
    |   address         | bytes     | network byte order    | 16    |
    |   port            | int       | big-endian            | 2     |
    -----------------------------------------------------------------
    """
    addr: bytes
    port: int

    def __post_init__(self):
        if len(self.addr) != SEEDS.ADDR:
            raise SeedError(f"Seed address must be {SEEDS.ADDR} bytes, got {len(self.addr)}")
        if not 0 <= self.port <= 0xffff:
            raise SeedError(f"Seed port out of range: {self.port}")

    @classmethod
    def from_host(cls, host: str, port: int):
        return cls(normalize_ip(host).packed, port)

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)
        addr = read_stream(stream, SEEDS.ADDR, "seed address")
        port = read_big_int(stream, SEEDS.PORT, "seed port")
        return cls(addr, port)

    def to_bytes(self) -> bytes:
        return self.addr + self.port.to_bytes(SEEDS.PORT, "big")

    def __str__(self):
        ip = IP.IPv6Address(self.addr)
        return f"{ip.ipv4_mapped or f'[{ip}]'}:{self.port}"


# --- DNS SEEDS --- #
MAIN_DNS_SEEDS = (
    DNSSeed("HeliumCoin1", "45.77.203.20"),
    DNSSeed("HeliumCoin2", "45.77.197.236"),
)
TESTNET_DNS_SEEDS = MAIN_DNS_SEEDS

# --- FIXED SEEDS --- #
MAIN_SEED_TABLE = (
    SeedSpec6(bytes.fromhex("00000000000000000000ffff2d4dcb14"), 16452),
    SeedSpec6(bytes.fromhex("00000000000000000000ffff2d4dc5ec"), 16452),
)
TESTNET_SEED_TABLE = (
    SeedSpec6(bytes.fromhex("00000000000000000000ffff2d4dcb14"), 26452),
    SeedSpec6(bytes.fromhex("00000000000000000000ffff2d4dc5ec"), 26452),
)


def convert_seed6(table: tuple[SeedSpec6, ...] | list[SeedSpec6], now: int = None) -> tuple[PeerAddress, ...]:
    """
    Convert the fixed seed table into peer address records whose last-seen time lies strictly between two weeks
    and one week before `now`.
    """
    now = int(time.time()) if now is None else now
    one_week = SEEDS.ONE_WEEK

    peers = tuple(
        PeerAddress(seed.addr, seed.port, timestamp=now - one_week - 1 - randbelow(one_week - 1))
        for seed in table
    )
    logger.debug(f"Converted {len(peers)} fixed seeds")
    return peers


def parse_seed_table(blob: bytes) -> tuple[SeedSpec6, ...]:
    """
    Split a packed table of 18-byte records into SeedSpec6 entries
    """
    if len(blob) % SEEDS.RECORD != 0:
        raise SeedError(f"Seed table length {len(blob)} is not a multiple of {SEEDS.RECORD}")
    stream = get_stream(blob)
    return tuple(SeedSpec6.from_bytes(stream) for _ in range(len(blob) // SEEDS.RECORD))


def pack_seed_table(table: tuple[SeedSpec6, ...] | list[SeedSpec6]) -> bytes:
    return b''.join(seed.to_bytes() for seed in table)
