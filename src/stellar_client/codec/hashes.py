"""
Hash Functions

SHA-256 helpers used for the network identifier, the transaction signing
pre-image and the transaction hash.
"""

import hashlib
from typing import Union


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def network_id(passphrase: Union[str, bytes]) -> bytes:
    """
    Derive the network identifier from a network passphrase.

    Args:
        passphrase: Network passphrase, e.g. "Test SDF Network ; September 2015"

    Returns:
        SHA-256 of the UTF-8 passphrase (32 bytes)
    """
    if isinstance(passphrase, str):
        passphrase = passphrase.encode("utf-8")
    return sha256_bytes(passphrase)
