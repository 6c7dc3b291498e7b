"""
Stellar XDR Binary Codec Module

Key components:
- writer.py: XDR writer with big-endian primitives, padding and optionals
- reader.py: XDR reader with bounds-checked decoding
- hashes.py: SHA-256 hashing helpers and network identifier derivation
"""

from .hashes import network_id, sha256_bytes
from .reader import XdrReader
from .writer import XdrWriter

__all__ = [
    "XdrReader",
    "XdrWriter",
    "network_id",
    "sha256_bytes",
]
