"""
All methods for manipulating and representing data in helium
"""

# data/__init__.py
from helium.data.merkle import *
from helium.data.network_address import *
from helium.data.script import *
from helium.data.target_bits import *
