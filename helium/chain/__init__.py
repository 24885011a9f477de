"""
The chain folder holds the transaction and block wire structures
"""

# chain/__init__.py
from helium.chain.block import *
from helium.chain.tx import *
