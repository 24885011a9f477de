"""
Contains the core elements that are used within helium

Core:
    -Provides the byte stream helpers used when deserializing
    -Provides the reference formats and constants
    -Provides custom exceptions for the chain parameter elements
    -Provides the Serializable base class and logging setup
"""
# core/__init__.py
from helium.core.byte_stream import *
from helium.core.exceptions import *
from helium.core.formats import *
from helium.core.logging import *
from helium.core.serializable import *
