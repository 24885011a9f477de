"""
The ChainParams record: every constant a node must share with its network.

MAIN is built from the base configuration below. TESTNET is the MAIN value with its network-specific fields
overridden through dataclasses.replace, which re-runs the genesis verification for the new inputs.
"""
import json
from dataclasses import dataclass, field, replace
from functools import lru_cache

from helium.chain import Block
from helium.core import AddressError
from helium.core.logging import get_logger
from helium.crypto import decode_base58check, encode_base58check, hash160
from helium.data import PeerAddress, target_int_to_bits
from helium.params.genesis import GenesisSpec, create_genesis_block, verify_genesis
from helium.params.network import AddressPrefixes, Base58Type, NetworkKind
from helium.params.seeds import DNSSeed, MAIN_DNS_SEEDS, MAIN_SEED_TABLE, SeedSpec6, TESTNET_DNS_SEEDS, \
    TESTNET_SEED_TABLE, convert_seed6

logger = get_logger(__name__)

__all__ = ["ChainParams", "MAIN_GENESIS", "TESTNET_GENESIS", "MAIN_POW_LIMIT", "TESTNET_POW_LIMIT",
           "GENESIS_INPUTS", "build_main_params", "build_testnet_params", "main_params", "testnet_params"]

UINT256_MAX = (1 << 256) - 1


@dataclass(frozen=True)
class ChainParams:
    network: NetworkKind
    magic: bytes
    default_port: int
    rpc_port: int
    pow_limit: int
    data_dir: str
    genesis: GenesisSpec
    prefixes: AddressPrefixes
    seed_table: tuple[SeedSpec6, ...]
    dns_seeds: tuple[DNSSeed, ...]
    last_pow_block: int

    # Derived once in __post_init__
    genesis_hash: str = field(init=False, repr=False, compare=False)
    genesis_merkle_root: bytes = field(init=False, repr=False, compare=False)
    fixed_seeds: tuple[PeerAddress, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.magic) != 4:
            raise ValueError(f"Network magic must be 4 bytes, got {self.magic.hex()}")

        block = self.genesis_block
        genesis_hash = verify_genesis(block, self.genesis, self.network)

        object.__setattr__(self, "genesis_hash", genesis_hash)
        object.__setattr__(self, "genesis_merkle_root", block.merkle_root)
        object.__setattr__(self, "fixed_seeds", convert_seed6(self.seed_table))
        logger.debug(f"Built {self.network} parameters, genesis {self.genesis_hash}")

    # --- Consensus --- #
    @property
    def pow_limit_bits(self) -> bytes:
        """The proof-of-work limit in compact form"""
        return target_int_to_bits(self.pow_limit)

    @property
    def genesis_block(self) -> Block:
        """A freshly built genesis block. Callers may mutate it without touching these parameters."""
        return create_genesis_block(self.genesis, self.pow_limit_bits)

    @property
    def genesis_id(self) -> bytes:
        return bytes.fromhex(self.genesis_hash)[::-1]

    # --- Addresses --- #
    def encode_address(self, payload: bytes, kind: Base58Type = Base58Type.PUBKEY_ADDRESS) -> str:
        if len(payload) not in kind.payload_lengths:
            raise AddressError(f"{kind.name} payload must be {kind.payload_lengths} bytes, got {len(payload)}")
        return encode_base58check(self.prefixes.get(kind) + payload)

    def decode_address(self, encoded: str) -> tuple[Base58Type, bytes]:
        return self.prefixes.split(decode_base58check(encoded))

    def p2pkh_address(self, pubkey: bytes) -> str:
        return self.encode_address(hash160(pubkey), Base58Type.PUBKEY_ADDRESS)

    def p2sh_address(self, redeem_script: bytes) -> str:
        return self.encode_address(hash160(redeem_script), Base58Type.SCRIPT_ADDRESS)

    # --- Display --- #
    def to_dict(self) -> dict:
        return {
            "network": self.network.value,
            "magic": self.magic.hex(),
            "default_port": self.default_port,
            "rpc_port": self.rpc_port,
            "pow_limit": f"{self.pow_limit:064x}",
            "pow_limit_bits": self.pow_limit_bits.hex(),
            "data_dir": self.data_dir,
            "genesis": self.genesis_block.header.to_dict(),
            "prefixes": self.prefixes.to_dict(),
            "dns_seeds": [{"name": seed.name, "host": seed.host} for seed in self.dns_seeds],
            "fixed_seeds": [peer.to_dict() for peer in self.fixed_seeds],
            "last_pow_block": self.last_pow_block
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


# --- MAIN NETWORK --- #
MAIN_POW_LIMIT = UINT256_MAX >> 24

MAIN_GENESIS = GenesisSpec(
    commitment=b"HeliumCoin 2017 blake2s",
    tx_time=1509181222,
    timestamp=1509944396,
    nonce=12847531,
    expected_hash="0000004e58e615b6712c221d77bfb2e7fe7398cfbf43852d61773dbb2cf490bc",
    expected_merkle_root="f96f37aa7d42b403080c23906ca2b9ffa97e7bdec5d90c28b171ba7c4df50603"
)

MAIN_PREFIXES = AddressPrefixes(
    pubkey_address=bytes([40]),  # H
    script_address=bytes([43]),  # J
    secret_key=bytes([125]),  # s
    ext_public_key=bytes.fromhex("0481daae"),
    ext_secret_key=bytes.fromhex("0482a1a4")
)

# --- TEST NETWORK --- #
TESTNET_POW_LIMIT = UINT256_MAX >> 8

TESTNET_GENESIS = replace(
    MAIN_GENESIS,
    timestamp=1509944396,
    nonce=892,
    expected_hash="0098820a3291be49ce2be002e74f4a0a39db4786d505bbfaf465ec72e4019987"
)

TESTNET_PREFIXES = AddressPrefixes(
    pubkey_address=bytes([100]),  # h
    script_address=bytes([105]),  # j
    secret_key=bytes([63]),  # S
    ext_public_key=bytes.fromhex("043587cf"),
    ext_secret_key=bytes.fromhex("04358394")
)

# Genesis inputs per network, for the offline search tool
GENESIS_INPUTS = {
    NetworkKind.MAIN: (MAIN_GENESIS, MAIN_POW_LIMIT),
    NetworkKind.TESTNET: (TESTNET_GENESIS, TESTNET_POW_LIMIT),
}


def build_main_params() -> ChainParams:
    return ChainParams(
        network=NetworkKind.MAIN,
        magic=bytes.fromhex("ea117acc"),
        default_port=16452,
        rpc_port=16453,
        pow_limit=MAIN_POW_LIMIT,
        data_dir="",
        genesis=MAIN_GENESIS,
        prefixes=MAIN_PREFIXES,
        seed_table=MAIN_SEED_TABLE,
        dns_seeds=MAIN_DNS_SEEDS,
        last_pow_block=720000
    )


def build_testnet_params(base: ChainParams) -> ChainParams:
    """
    Override the network-specific fields of the main parameters
    """
    return replace(
        base,
        network=NetworkKind.TESTNET,
        magic=bytes.fromhex("a741ae7c"),
        default_port=26452,
        rpc_port=26453,
        pow_limit=TESTNET_POW_LIMIT,
        data_dir="testnet",
        genesis=TESTNET_GENESIS,
        prefixes=TESTNET_PREFIXES,
        seed_table=TESTNET_SEED_TABLE,
        dns_seeds=TESTNET_DNS_SEEDS,
        last_pow_block=0x7fffffff
    )


@lru_cache(maxsize=None)
def main_params() -> ChainParams:
    return build_main_params()


@lru_cache(maxsize=None)
def testnet_params() -> ChainParams:
    return build_testnet_params(main_params())
