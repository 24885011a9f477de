"""
Tests for the BlockHeader and Block classes
"""
from helium.chain import Block, BlockHeader
from helium.core import BLOCK
from helium.params import MAIN_GENESIS, create_genesis_block

MAIN_GENESIS_HEADER_HEX = (
    "0100000000000000000000000000000000000000000000000000000000000000000000000306f54d7cba71b1280cd9c5de7b7ea9ffb9a2"
    "6c90230c0803b4427daa376ff94cecff59ffff001eab09c400"
)


def test_genesis_header_serialization():
    block = create_genesis_block(MAIN_GENESIS, bytes.fromhex("1e00ffff"))
    header_bytes = block.header.to_bytes()

    assert len(header_bytes) == BLOCK.HEADER
    assert header_bytes.hex() == MAIN_GENESIS_HEADER_HEX
    assert block.prev_block == b'\x00' * 32


def test_header_from_bytes():
    header = BlockHeader.from_bytes(bytes.fromhex(MAIN_GENESIS_HEADER_HEX))

    assert header.version == 1
    assert header.timestamp == 1509944396
    assert header.bits == bytes.fromhex("1e00ffff"), "Bits are kept in display order"
    assert header.nonce == 12847531
    assert header.block_hash == MAIN_GENESIS.expected_hash


def test_header_defaults_keep_zero_values():
    header = BlockHeader(version=0, timestamp=0, nonce=0)
    assert header.version == 0
    assert header.timestamp == 0


def test_block_bytes():
    block = create_genesis_block(MAIN_GENESIS, bytes.fromhex("1e00ffff"))
    recovered = Block.from_bytes(block.to_bytes())

    assert recovered == block
    assert recovered.block_hash == block.block_hash
    assert len(recovered.txs) == 1
