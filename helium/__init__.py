"""
HeliumCoin chain parameters

Per-network consensus constants, genesis block derivation and the registry holding the active network.
"""
__version__ = "0.1.0"
