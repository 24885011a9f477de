"""
Chain parameters: network identities, address prefixes, seeds, genesis derivation and the parameter registry
"""

# params/__init__.py
from helium.params.chainparams import *
from helium.params.genesis import *
from helium.params.network import *
from helium.params.registry import *
from helium.params.seeds import *
