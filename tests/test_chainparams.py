"""
Tests for the MAIN and TESTNET parameter sets
"""
import json
from dataclasses import FrozenInstanceError, replace

import pytest

from helium.core import AddressError, GenesisMismatchError
from helium.params import Base58Type, NetworkKind, build_main_params, build_testnet_params, default_registry

UINT256_MAX = (1 << 256) - 1
MAIN_GENESIS_HASH = "0000004e58e615b6712c221d77bfb2e7fe7398cfbf43852d61773dbb2cf490bc"
GENERATOR_PUBKEY = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")


def test_main_constants(mainnet):
    assert mainnet.network is NetworkKind.MAIN
    assert mainnet.magic == bytes.fromhex("ea117acc")
    assert (mainnet.default_port, mainnet.rpc_port) == (16452, 16453)
    assert mainnet.pow_limit == UINT256_MAX >> 24
    assert mainnet.pow_limit_bits == bytes.fromhex("1e00ffff")
    assert mainnet.data_dir == ""
    assert mainnet.last_pow_block == 720000
    assert mainnet.genesis_hash == "0000004e58e615b6712c221d77bfb2e7fe7398cfbf43852d61773dbb2cf490bc"


def test_testnet_overrides(mainnet, testnet):
    """
    Testnet shares the genesis coinbase with main and overrides everything network specific
    """
    assert testnet.network is NetworkKind.TESTNET
    assert testnet.magic == bytes.fromhex("a741ae7c")
    assert (testnet.default_port, testnet.rpc_port) == (26452, 26453)
    assert testnet.pow_limit == UINT256_MAX >> 8
    assert testnet.pow_limit_bits == bytes.fromhex("2000ffff")
    assert testnet.data_dir == "testnet"
    assert testnet.last_pow_block == 0x7fffffff
    assert testnet.genesis_hash == "0098820a3291be49ce2be002e74f4a0a39db4786d505bbfaf465ec72e4019987"

    assert testnet.genesis.commitment == mainnet.genesis.commitment
    assert testnet.genesis_block.merkle_root == mainnet.genesis_block.merkle_root
    assert testnet.genesis_hash != mainnet.genesis_hash


def test_networks_never_share_wire_identity(mainnet, testnet):
    assert mainnet.magic != testnet.magic
    assert mainnet.default_port != testnet.default_port
    assert mainnet.rpc_port != testnet.rpc_port


@pytest.mark.parametrize("kind", list(Base58Type))
def test_prefixes_differ_per_network(mainnet, testnet, kind):
    assert mainnet.prefixes.get(kind) != testnet.prefixes.get(kind), f"{kind.name} prefix shared between networks"
    assert len(mainnet.prefixes.get(kind)) == kind.prefix_length


def test_genesis_bits_follow_pow_limit(mainnet, testnet):
    assert mainnet.genesis_block.bits == mainnet.pow_limit_bits
    assert testnet.genesis_block.bits == testnet.pow_limit_bits
    assert mainnet.genesis_block.header.block_id_num <= mainnet.pow_limit
    assert mainnet.genesis_id[::-1].hex() == mainnet.genesis_hash


def test_params_are_immutable(mainnet):
    with pytest.raises(FrozenInstanceError):
        mainnet.magic = b'\x00' * 4
    with pytest.raises(FrozenInstanceError):
        mainnet.genesis.nonce = 0
    with pytest.raises(FrozenInstanceError):
        mainnet.genesis_hash = "00" * 32


def test_fixed_seeds(mainnet, testnet):
    assert len(mainnet.fixed_seeds) == len(mainnet.seed_table)
    assert [p.port for p in mainnet.fixed_seeds] == [16452] * len(mainnet.seed_table)
    assert [p.port for p in testnet.fixed_seeds] == [26452] * len(testnet.seed_table)
    assert [s.host for s in mainnet.dns_seeds] == ["45.77.203.20", "45.77.197.236"]


def test_tampered_override_refuses_to_build(mainnet):
    """
    Lowering the pow limit changes the genesis bits, so the recorded hash no longer matches
    """
    with pytest.raises(GenesisMismatchError):
        replace(mainnet, pow_limit=mainnet.pow_limit >> 1)


def test_rebuilding_gives_equal_params(mainnet):
    assert build_main_params() == mainnet
    assert build_testnet_params(mainnet).network is NetworkKind.TESTNET


def test_addresses(mainnet, testnet):
    """
    The generator point pubkey hashes to 751e76e8... on both networks; only the prefix differs
    """
    assert mainnet.p2pkh_address(GENERATOR_PUBKEY) == "HHCPwVp8mHPoremTCZS5DsJTJHkHUy7aHK"
    assert testnet.p2pkh_address(GENERATOR_PUBKEY) == "hRUb21hRN7CNvf8efjRCKPdf4ZCt7wXJuL"

    kind, payload = mainnet.decode_address("HHCPwVp8mHPoremTCZS5DsJTJHkHUy7aHK")
    assert kind is Base58Type.PUBKEY_ADDRESS
    assert payload.hex() == "751e76e8199196d454941c45d1b3a323f1433bd6"

    assert mainnet.p2sh_address(b'\x51').startswith("J")
    assert mainnet.decode_address(mainnet.p2sh_address(b'\x51'))[0] is Base58Type.SCRIPT_ADDRESS


def test_extended_key_prefix(mainnet):
    payload = b'\x00' * 74
    encoded = mainnet.encode_address(payload, Base58Type.EXT_PUBLIC_KEY)
    assert mainnet.decode_address(encoded) == (Base58Type.EXT_PUBLIC_KEY, payload)


def test_address_errors(mainnet, testnet):
    with pytest.raises(AddressError):
        mainnet.decode_address("hRUb21hRN7CNvf8efjRCKPdf4ZCt7wXJuL")
    with pytest.raises(AddressError):
        mainnet.decode_address("HHCPwVp8mHPoremTCZS5DsJTJHkHUy7aHL")  # bad checksum
    with pytest.raises(AddressError):
        mainnet.encode_address(b'\x00' * 19)


def test_to_json(testnet):
    data = json.loads(testnet.to_json())
    assert data["network"] == "test"
    assert data["magic"] == "a741ae7c"
    assert data["genesis"]["hash"] == testnet.genesis_hash
    assert data["genesis"]["nonce"] == 892
    assert data["prefixes"]["EXT_SECRET_KEY"] == "04358394"
    assert len(data["fixed_seeds"]) == len(testnet.seed_table)


def test_genesis_block_is_a_copy(mainnet):
    """
    Mutating the handed-out genesis block leaves the shared parameter set untouched
    """
    block = mainnet.genesis_block
    assert block is not mainnet.genesis_block
    assert block.merkle_root == mainnet.genesis_merkle_root

    block.nonce = 0
    block.timestamp += 1
    assert block.block_hash != MAIN_GENESIS_HASH

    assert mainnet.genesis_hash == MAIN_GENESIS_HASH
    assert mainnet.genesis_block.nonce == 12847531
    assert mainnet.genesis_block.block_hash == MAIN_GENESIS_HASH
    assert default_registry().select(NetworkKind.MAIN).genesis_hash == MAIN_GENESIS_HASH
