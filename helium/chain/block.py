"""
The Block classes
"""
import time
from datetime import datetime, timezone

from helium.chain.tx import Transaction
from helium.core import BLOCK, SERIALIZED, Serializable, get_stream, read_compact_size, read_little_int, \
    read_stream, write_compact_size
from helium.crypto import header_hash
from helium.data import MerkleTree, bits_to_target

__all__ = ["BlockHeader", "Block"]


class BlockHeader(Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |   Version     |   int         |   little-endian       |   4       |
    |   prev_block  |   bytes       |   natural byte order  |   32      |
    |   merkle_root |   bytes       |   natural byte order  |   32      |
    |   time        |   int         |   little-endian       |   4       |
    |   bits        |   bytes       |   little-endian       |   4       |
    |   nonce       |   int         |   little-endian       |   4       |
    ---------------------------------------------------------------------
    """
    __slots__ = ('version', 'prev_block', 'merkle_root', 'timestamp', 'bits', 'nonce')

    def __init__(self,
                 version: int = None,
                 prev_block: bytes = None,
                 merkle_root: bytes = None,
                 timestamp: int = None,
                 bits: bytes = None,
                 nonce: int = None
                 ):
        self.version = BLOCK.DEFAULT_VERSION if version is None else version
        self.prev_block = prev_block or b'\x00' * BLOCK.PREV_BLOCK
        self.merkle_root = merkle_root or b'\x00' * BLOCK.MERKLE_ROOT
        self.timestamp = int(time.time()) if timestamp is None else timestamp
        self.bits = bits or b'\x00' * BLOCK.BITS
        self.nonce = nonce or 0

    @property
    def block_id(self) -> bytes:
        """BLAKE2s header hash in natural byte order"""
        return header_hash(self.to_bytes())

    @property
    def block_id_num(self) -> int:
        """The header hash read as a little-endian 256-bit integer, comparable against the target"""
        return int.from_bytes(self.block_id, "little")

    @property
    def block_hash(self) -> str:
        """Display hex (reversed byte order)"""
        return self.block_id[::-1].hex()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, BLOCK.VERSION, "version")
        prev_block = read_stream(stream, BLOCK.PREV_BLOCK, "prev_block")
        merkle_root = read_stream(stream, BLOCK.MERKLE_ROOT, "merkle_root")
        timestamp = read_little_int(stream, BLOCK.TIME, "time")
        bits = read_stream(stream, BLOCK.BITS, "bits")[::-1]  # Bits is little-endian bytes
        nonce = read_little_int(stream, BLOCK.NONCE, "nonce")

        return cls(version, prev_block, merkle_root, timestamp, bits, nonce)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(BLOCK.VERSION, "little"),
            self.prev_block,
            self.merkle_root,
            self.timestamp.to_bytes(BLOCK.TIME, "little"),
            self.bits[::-1],  # Little endian serialized
            self.nonce.to_bytes(BLOCK.NONCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "hash": self.block_hash,
            "version": self.version,
            "previous_block": self.prev_block[::-1].hex(),  # Reverse order for display
            "merkle_root": self.merkle_root[::-1].hex(),
            "timestamp": datetime.fromtimestamp(self.timestamp, tz=timezone.utc).strftime(BLOCK.TIMESTAMP_FORMAT),
            "time": self.timestamp,
            "bits": self.bits.hex(),
            "target": bits_to_target(self.bits).hex(),
            "nonce": self.nonce
        }


class Block(Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |                       BlockHeader                                 |
    ---------------------------------------------------------------------
    |   tx_num      |   int         |   CompactSize         |   var     |
    |   txs         |   list        |   Transaction         |   var     |
    ---------------------------------------------------------------------
    The merkle root in the header is always computed from the transactions.
    """
    __slots__ = ('header', 'txs')

    def __init__(self,
                 txs: list[Transaction],
                 version: int = None,
                 prev_block: bytes = None,
                 timestamp: int = None,
                 bits: bytes = None,
                 nonce: int = None
                 ):
        self.txs = txs
        self.header = BlockHeader(version, prev_block, self.compute_merkle_root(), timestamp, bits, nonce)

    # --- Header fields --- #
    @property
    def version(self) -> int:
        return self.header.version

    @property
    def prev_block(self) -> bytes:
        return self.header.prev_block

    @property
    def merkle_root(self) -> bytes:
        return self.header.merkle_root

    @property
    def timestamp(self) -> int:
        return self.header.timestamp

    @timestamp.setter
    def timestamp(self, value: int):
        self.header.timestamp = value

    @property
    def bits(self) -> bytes:
        return self.header.bits

    @property
    def nonce(self) -> int:
        return self.header.nonce

    @nonce.setter
    def nonce(self, value: int):
        self.header.nonce = value

    @property
    def block_id(self) -> bytes:
        return self.header.block_id

    @property
    def block_hash(self) -> str:
        return self.header.block_hash

    def compute_merkle_root(self) -> bytes:
        return MerkleTree([tx.txid for tx in self.txs]).merkle_root

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        header = BlockHeader.from_bytes(stream)
        txs = [Transaction.from_bytes(stream) for _ in range(read_compact_size(stream, "tx_num"))]

        block = cls(txs, header.version, header.prev_block, header.timestamp, header.bits, header.nonce)
        if block.merkle_root != header.merkle_root:
            raise ValueError("Serialized merkle root does not commit to the serialized transactions")
        return block

    def to_bytes(self) -> bytes:
        parts = [self.header.to_bytes(), write_compact_size(len(self.txs))]
        parts.extend(tx.to_bytes() for tx in self.txs)
        return b''.join(parts)

    def to_dict(self) -> dict:
        block_dict = self.header.to_dict()
        block_dict.update({
            "tx_num": len(self.txs),
            "txs": [tx.to_dict() for tx in self.txs]
        })
        return block_dict
