"""
crypto folder used to house the hash functions and the Base58Check codec
"""

# crypto/__init__.py
from helium.crypto.base58 import *
from helium.crypto.hash_functions import *
