"""
The ParameterRegistry: holds the one active ChainParams for the process.

The active set is chosen once at startup. The first read of `active` freezes the choice, since every consumer assumes
the magic bytes and genesis hash never change for the life of the process. Selection takes a lock so test harnesses
may reset and re-select; reads after selection are lock-free.
"""
import threading
from typing import Iterable

from helium.core import AddressError, RegistryError, RegistryLockedError, UnknownNetworkError
from helium.core.logging import get_logger
from helium.params.chainparams import ChainParams, main_params, testnet_params
from helium.params.network import Base58Type, NetworkKind

logger = get_logger(__name__)

__all__ = ["ParameterRegistry", "default_registry", "network_from_flag"]


def network_from_flag(testnet: bool) -> NetworkKind:
    """The command line reaches exactly two networks"""
    return NetworkKind.TESTNET if testnet else NetworkKind.MAIN


class ParameterRegistry:

    def __init__(self, params: Iterable[ChainParams]):
        self._params = {}
        for p in params:
            if p.network in self._params:
                raise RegistryError(f"Duplicate parameters for network {p.network}")
            self._params[p.network] = p

        self._active = None
        self._frozen = False
        self._lock = threading.Lock()

    @property
    def networks(self) -> tuple[NetworkKind, ...]:
        return tuple(self._params)

    def get(self, network: NetworkKind | str) -> ChainParams:
        """
        Return the parameter set of a network without changing the active one.
        An unknown tag is a contract violation and raises UnknownNetworkError.
        """
        try:
            kind = NetworkKind(network)
        except ValueError:
            raise UnknownNetworkError(f"Unimplemented network: {network!r}") from None

        if kind not in self._params:
            raise UnknownNetworkError(f"Unimplemented network: {kind}")
        return self._params[kind]

    def select(self, network: NetworkKind | str) -> ChainParams:
        params = self.get(network)
        with self._lock:
            if self._frozen and self._active is not params:
                raise RegistryLockedError(
                    f"Active network already in use as {self._active.network}; cannot switch to {params.network}")
            self._active = params
        logger.info(f"Selected {params.network} network parameters")
        return params

    def select_from_flag(self, testnet: bool = False) -> ChainParams:
        return self.select(network_from_flag(testnet))

    @property
    def is_selected(self) -> bool:
        return self._active is not None

    @property
    def active(self) -> ChainParams:
        if self._frozen:
            return self._active

        # First read freezes under the lock; a concurrent select() lands either before it or after the freeze
        with self._lock:
            if self._active is None:
                raise RegistryError("No network selected")
            self._frozen = True
            return self._active

    def reset(self):
        """Clear the selection. For test setup only."""
        with self._lock:
            self._active = None
            self._frozen = False

    def network_from_prefix(self, prefix: bytes, kind: Base58Type = Base58Type.PUBKEY_ADDRESS) -> NetworkKind:
        """Return the network whose prefix for `kind` equals `prefix`"""
        for network, params in self._params.items():
            if params.prefixes.get(kind) == prefix:
                return network
        raise AddressError(f"No network uses {kind.name} prefix {prefix.hex()}")


def default_registry() -> ParameterRegistry:
    """A registry holding the MAIN and TESTNET parameter sets"""
    return ParameterRegistry([main_params(), testnet_params()])
