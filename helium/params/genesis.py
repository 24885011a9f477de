"""
Genesis block derivation.

The genesis block is built deterministically from a network's fixed inputs and verified against the hard-coded hash
and merkle root at startup. The proof-of-work search that produced the hard-coded timestamp and nonce is an offline
tool (see `mine_genesis` and the `mine-genesis` command) and is never run by a starting node.
"""
import time
from dataclasses import dataclass

from helium.chain import Block, Transaction, TxInput, TxOutput
from helium.core import GENESIS, GenesisMismatchError, GenesisSearchError
from helium.core.logging import get_logger
from helium.data import bits_to_target_int, build_push_script

logger = get_logger(__name__)

__all__ = ["GenesisSpec", "create_coinbase", "create_genesis_block", "verify_genesis", "mine_genesis"]


@dataclass(frozen=True)
class GenesisSpec:
    """
    The fixed inputs of a genesis block and the values it must hash to.
    Expected values are in display (reversed) hex.
    """
    commitment: bytes
    tx_time: int
    timestamp: int
    nonce: int
    expected_hash: str
    expected_merkle_root: str
    tx_version: int = 1
    block_version: int = 1


def create_coinbase(commitment: bytes, tx_time: int, tx_version: int = 1) -> Transaction:
    """
    Single input carrying push(0) push(42) push(commitment) and a single empty output
    """
    scriptsig = build_push_script(0, GENESIS.SCRIPTSIG_NUMBER, commitment)
    return Transaction(
        inputs=[TxInput.coinbase(scriptsig)],
        outputs=[TxOutput.empty()],
        timestamp=tx_time,
        version=tx_version,
        locktime=0
    )


def create_genesis_block(spec: GenesisSpec, bits: bytes, nonce: int = None) -> Block:
    """
    Build the genesis block for the given inputs. The nonce defaults to the recorded genesis nonce; pass 0 to get the
    starting point of a search.
    """
    coinbase = create_coinbase(spec.commitment, spec.tx_time, spec.tx_version)
    return Block(
        txs=[coinbase],
        version=spec.block_version,
        prev_block=b'\x00' * 32,
        timestamp=spec.timestamp,
        bits=bits,
        nonce=spec.nonce if nonce is None else nonce
    )


def verify_genesis(block: Block, spec: GenesisSpec, network) -> str:
    """
    Recompute the merkle root and header hash and compare them with the hard-coded values.
    Returns the display hash. Raises GenesisMismatchError on any difference.
    """
    merkle_root = block.compute_merkle_root()[::-1].hex()
    if merkle_root != spec.expected_merkle_root:
        logger.critical(f"{network} genesis merkle root mismatch: {merkle_root}")
        raise GenesisMismatchError(network, "merkle root", spec.expected_merkle_root, merkle_root)

    block_hash = block.block_hash
    if block_hash != spec.expected_hash:
        logger.critical(f"{network} genesis hash mismatch: {block_hash}")
        raise GenesisMismatchError(network, "hash", spec.expected_hash, block_hash)

    return block_hash


def mine_genesis(block: Block, nonce_space: int = GENESIS.NONCE_SPACE, max_tries: int = None) -> Block:
    """
    Search for a nonce whose header hash is at or below the target encoded in the block bits.

    The nonce is incremented modulo `nonce_space`. Each time it wraps back to zero the timestamp is advanced by one
    second and the search continues. The block is modified in place and returned.

    Args:
        block: Block to mine, with the starting timestamp and nonce
        nonce_space: Number of distinct nonces before wrapping (2**32 for the real header)
        max_tries: Optional bound on the number of hashes computed

    Raises:
        GenesisSearchError: if max_tries hashes were computed without success
    """
    if not 0 <= block.nonce < nonce_space:
        raise ValueError(f"Starting nonce {block.nonce} outside nonce space {nonce_space}")

    target = bits_to_target_int(block.bits)
    header = block.header
    start_time = time.time()
    tries = 0

    logger.info(f"Genesis search started at time {header.timestamp}, nonce {header.nonce}, target {target:064x}")

    while header.block_id_num > target:
        tries += 1
        if max_tries is not None and tries >= max_tries:
            raise GenesisSearchError(f"No valid nonce found in {max_tries} tries")

        header.nonce = (header.nonce + 1) % nonce_space
        if header.nonce == 0:
            logger.warning(f"Nonce wrapped, incrementing time to {header.timestamp + 1}")
            header.timestamp += 1

        if tries % 1_000_000 == 0:
            elapsed = time.time() - start_time
            logger.debug(f"Mining... {tries:,} hashes ({tries / elapsed if elapsed else 0:.0f} H/s)")

    logger.info(f"Genesis found: hash {header.block_hash}, time {header.timestamp}, nonce {header.nonce}, "
                f"merkle root {header.merkle_root[::-1].hex()}")
    return block
