"""
The PeerAddress class for the timestamped network address data structure
"""
import ipaddress as IP
from datetime import datetime, timezone

from helium.core import SEEDS, SERIALIZED, Serializable, get_stream, read_big_int, read_little_int, read_stream

__all__ = ["PeerAddress", "normalize_ip"]

IPV4_MAPPED_PREFIX = bytes.fromhex("00000000000000000000ffff")


def normalize_ip(ip: str | bytes | IP.IPv4Address | IP.IPv6Address) -> IP.IPv6Address:
    """
    Return an IPv6Address. IPv4 is mapped to ::ffff:W.X.Y.Z.
    """
    if isinstance(ip, IP.IPv6Address):
        return ip
    if isinstance(ip, IP.IPv4Address):
        return IP.IPv6Address(IPV4_MAPPED_PREFIX + ip.packed)
    if isinstance(ip, (bytes, bytearray)):
        if len(ip) == 16:
            return IP.IPv6Address(bytes(ip))
        if len(ip) == 4:
            return normalize_ip(IP.IPv4Address(bytes(ip)))
        raise ValueError("IP bytes must be length 4 or 16")
    if isinstance(ip, str):
        return normalize_ip(IP.ip_address(ip.strip()))
    raise TypeError(f"Unsupported IP input type: {type(ip)}")


class PeerAddress(Serializable):
    """
    -----------------------------------------------------------------
    |   Name            | Data type | Formatted             | Size  |
    -----------------------------------------------------------------
    |   time            | int       | little-endian         | 4     |
    |   services        | int       | little-endian         | 8     |
    |   ip address      | ipv6      | network byte order    | 16    |
    |   port            | int       | network byte order    | 2     |
    -----------------------------------------------------------------
    """
    __slots__ = ("timestamp", "services", "ip_address", "port")

    TIME_BYTES = 4
    SERVICES_BYTES = 8
    IP_BYTES = 16
    PORT_BYTES = 2
    TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self, ip_addr, port: int, timestamp: int = 0, services: int = SEEDS.NODE_NETWORK):
        if not 0 <= port <= 0xffff:
            raise ValueError(f"Port out of range: {port}")
        self.ip_address = normalize_ip(ip_addr)
        self.port = port
        self.timestamp = timestamp
        self.services = services

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        timestamp = read_little_int(stream, cls.TIME_BYTES, "time")
        services = read_little_int(stream, cls.SERVICES_BYTES, "services")
        ip_bytes = read_stream(stream, cls.IP_BYTES, "ip")
        port = read_big_int(stream, cls.PORT_BYTES, "port")

        return cls(ip_bytes, port, timestamp, services)

    @property
    def display_ip(self) -> str:
        return str(self.ip_address.ipv4_mapped) if self.ip_address.ipv4_mapped else str(self.ip_address)

    @property
    def display_time(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc).strftime(self.TIME_FORMAT)

    @property
    def is_ipv4(self) -> bool:
        return self.ip_address.ipv4_mapped is not None

    def to_bytes(self) -> bytes:
        parts = [
            self.timestamp.to_bytes(self.TIME_BYTES, "little"),
            self.services.to_bytes(self.SERVICES_BYTES, "little"),
            self.ip_address.packed,
            self.port.to_bytes(self.PORT_BYTES, "big")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "time": self.display_time,
            "services": self.services,
            "ip_address": self.display_ip,
            "port": self.port
        }

    def __str__(self):
        host = self.display_ip if self.is_ipv4 else f"[{self.display_ip}]"
        return f"{host}:{self.port}"
