"""
Shortcuts for the hash functions used by the chain. Each function returns the bytes digest
"""
import hashlib

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["blake2s", "hash160", "hash256", "header_hash", "ripemd160", "sha256"]


# --- SHA --- #
def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


# --- RIPEMD --- #
def ripemd160(data: bytes) -> bytes:
    return _ripemd160(data)


# --- BLAKE --- #
def blake2s(data: bytes) -> bytes:
    return hashlib.blake2s(data, digest_size=32).digest()


# --- CHAIN HASH FUNCTIONS --- #
def hash256(data: bytes) -> bytes:
    """SHA256(SHA256(data)) - transaction ids and merkle nodes"""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data)) - public key hashes for addresses"""
    return ripemd160(sha256(data))


def header_hash(data: bytes) -> bytes:
    """BLAKE2s-256 of the serialized 80-byte block header"""
    return blake2s(data)
