"""
Command line entry point: select the network from the flags, print its parameters or run the offline genesis search
"""
import argparse
import json

from helium.core import GENESIS, GenesisMismatchError, GenesisSearchError, UnknownNetworkError
from helium.core.logging import get_logger, set_log_level
from helium.data import target_int_to_bits
from helium.params import GENESIS_INPUTS, ChainParams, create_genesis_block, default_registry, mine_genesis, \
    network_from_flag

logger = get_logger(__name__)

__all__ = ["build_parser", "main"]


def _cmd_show(args: argparse.Namespace, params: ChainParams) -> int:
    print(params.to_json())
    return 0


def _cmd_mine_genesis(args: argparse.Namespace) -> int:
    network = network_from_flag(args.testnet)
    spec, pow_limit = GENESIS_INPUTS[network]

    block = create_genesis_block(spec, target_int_to_bits(pow_limit), nonce=args.start_nonce)
    mine_genesis(block, nonce_space=args.nonce_space, max_tries=args.max_tries)

    print(json.dumps({
        "network": network.value,
        "hash": block.block_hash,
        "merkle_root": block.merkle_root[::-1].hex(),
        "time": block.timestamp,
        "nonce": block.nonce,
        "bits": block.bits.hex()
    }, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helium-params",
        description="HeliumCoin chain parameters and genesis block derivation.",
    )
    parser.add_argument("--testnet", action="store_true", help="Use the test network (default: main network)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("show", help="Print the active network parameters as JSON")

    mine = subparsers.add_parser("mine-genesis", help="Offline proof-of-work search for the genesis nonce")
    mine.add_argument("--start-nonce", type=int, default=0, help="Nonce to start the search from")
    mine.add_argument("--nonce-space", type=int, default=GENESIS.NONCE_SPACE, help="Nonces before wrapping")
    mine.add_argument("--max-tries", type=int, default=None, help="Give up after this many hashes")
    return parser


def main(argv: list[str] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    if args.command == "mine-genesis":
        try:
            return _cmd_mine_genesis(args)
        except (GenesisSearchError, ValueError) as exc:
            logger.error(f"Genesis search failed: {exc}")
            return 1

    try:
        params = default_registry().select_from_flag(args.testnet)
    except GenesisMismatchError as exc:
        logger.critical(f"Refusing to start: {exc}")
        return 1
    except UnknownNetworkError as exc:
        logger.critical(f"Invalid network selection: {exc}")
        return 1

    return _cmd_show(args, params)


if __name__ == "__main__":
    raise SystemExit(main())
