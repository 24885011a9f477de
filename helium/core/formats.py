"""
The HeliumCoin standard formats
"""
from typing import Final

__all__ = ["DATA", "TX", "BLOCK", "SEEDS", "GENESIS", "SCRIPT"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff
    BITS: Final[int] = 4
    TARGET: Final[int] = 32
    HASH: Final[int] = 32


class TX:
    """
    Transaction byte sizes
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    TIME: Final[int] = 4
    LOCKTIME: Final[int] = 4
    NULL_VOUT: Final[int] = 0xffffffff
    FINAL_SEQUENCE: Final[int] = 0xffffffff


class BLOCK:
    """
    Block header byte sizes
    """
    VERSION: Final[int] = 4
    PREV_BLOCK: Final[int] = 32
    MERKLE_ROOT: Final[int] = 32
    TIME: Final[int] = 4
    BITS: Final[int] = 4
    NONCE: Final[int] = 4
    HEADER: Final[int] = 80
    DEFAULT_VERSION: Final[int] = 1
    TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class SEEDS:
    """
    Fixed seed table record format and the synthesized last-seen window
    """
    ADDR: Final[int] = 16
    PORT: Final[int] = 2
    RECORD: Final[int] = 18
    ONE_WEEK: Final[int] = 7 * 24 * 60 * 60
    NODE_NETWORK: Final[int] = 1


class GENESIS:
    """
    Constants of the genesis coinbase
    """
    SCRIPTSIG_NUMBER: Final[int] = 42
    NONCE_SPACE: Final[int] = 2 ** 32


class SCRIPT:
    """
    Opcodes used when building push-only scripts
    """
    OP_0: Final[int] = 0x00
    OP_PUSHDATA1: Final[int] = 0x4c
    OP_PUSHDATA2: Final[int] = 0x4d
    OP_PUSHDATA4: Final[int] = 0x4e
    OP_1NEGATE: Final[int] = 0x4f
    OP_1: Final[int] = 0x51
    MAX_DIRECT_PUSH: Final[int] = 75
