"""
Cryptographic primitives for the Stellar Python SDK.

Ed25519 keypairs and StrKey account identifiers.
"""

from .keypair import KeyPair
from .strkey import StrKey, VersionByte, crc16_xmodem

__all__ = [
    "KeyPair",
    "StrKey",
    "VersionByte",
    "crc16_xmodem",
]
