"""
The custom exceptions used throughout helium
"""
__all__ = ["ReadError", "StreamError", "TargetBitsError", "MerkleError", "AddressError", "SeedError",
           "GenesisMismatchError", "GenesisSearchError", "RegistryError", "RegistryLockedError",
           "UnknownNetworkError"]


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class TargetBitsError(Exception):
    """
    For use in target bit encoding and decoding
    """
    pass


class MerkleError(Exception):
    """
    For use in the MerkleTree class
    """
    pass


class AddressError(Exception):
    """
    Raised when a Base58Check address cannot be encoded or decoded for a network
    """
    pass


class SeedError(Exception):
    """
    For malformed fixed seed tables
    """
    pass


class GenesisMismatchError(Exception):
    """
    The genesis block computed from the hard-coded fields does not match the hard-coded hash or merkle root.
    Fatal: the node must not start on a corrupted genesis definition.
    """

    def __init__(self, network, field: str, expected: str, computed: str):
        self.network = network
        self.field = field
        self.expected = expected
        self.computed = computed
        super().__init__(f"{network} genesis {field} mismatch: expected {expected}, computed {computed}")


class GenesisSearchError(Exception):
    """
    Raised by the offline genesis search when a bounded search runs out of tries
    """
    pass


class RegistryError(Exception):
    """
    Parent class for ParameterRegistry misuse
    """
    pass


class RegistryLockedError(RegistryError):
    """
    The active network was read already and can no longer be switched
    """
    pass


class UnknownNetworkError(AssertionError):
    """
    A network tag with no parameter set. The set of networks is closed, so this is a programming error.
    """
    pass
