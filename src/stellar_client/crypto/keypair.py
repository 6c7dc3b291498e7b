"""
Ed25519 keypairs for Stellar accounts.

Provides key generation, StrKey import/export, signing and verification.
A KeyPair may hold only a public key; such a keypair can verify and derive
its account id but cannot sign.
"""

from __future__ import annotations
import logging
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from ..runtime.errors import InvalidKeyError, MissingPrivateKeyError
from ..xdr.common import XdrDecoratedSignature
from .strkey import StrKey

logger = logging.getLogger(__name__)


class KeyPair:
    """
    Ed25519 keypair.

    Build instances with the `random`, `from_secret_seed`, `from_raw_seed`,
    `from_account_id` or `from_public_key` factories.
    """

    def __init__(self, public_key: Ed25519PublicKey, private_key: Optional[Ed25519PrivateKey] = None):
        self._public_key = public_key
        self._private_key = private_key
        self._public_bytes = public_key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )

    @classmethod
    def random(cls) -> KeyPair:
        """Generate a new random keypair."""
        private_key = Ed25519PrivateKey.generate()
        return cls(private_key.public_key(), private_key)

    @classmethod
    def from_raw_seed(cls, seed: bytes) -> KeyPair:
        """
        Create keypair from a 32-byte ed25519 seed.

        Args:
            seed: 32-byte private key seed

        Raises:
            InvalidKeyError: If the seed is not 32 bytes
        """
        if len(seed) != 32:
            raise InvalidKeyError(f"Ed25519 seed must be 32 bytes, got {len(seed)}")
        private_key = Ed25519PrivateKey.from_private_bytes(bytes(seed))
        return cls(private_key.public_key(), private_key)

    @classmethod
    def from_secret_seed(cls, secret_seed: str) -> KeyPair:
        """Create keypair from an S... secret seed."""
        return cls.from_raw_seed(StrKey.decode_secret_seed(secret_seed))

    @classmethod
    def from_public_key(cls, public_key: bytes) -> KeyPair:
        """Create a public-only keypair from 32 raw key bytes."""
        if len(public_key) != 32:
            raise InvalidKeyError(f"Ed25519 public key must be 32 bytes, got {len(public_key)}")
        try:
            return cls(Ed25519PublicKey.from_public_bytes(bytes(public_key)))
        except ValueError as e:
            raise InvalidKeyError(f"Invalid Ed25519 public key: {e}", cause=e)

    @classmethod
    def from_account_id(cls, account_id: str) -> KeyPair:
        """Create a public-only keypair from a G... account id."""
        return cls.from_public_key(StrKey.decode_account_id(account_id))

    @property
    def public_key(self) -> bytes:
        """The raw 32-byte public key."""
        return self._public_bytes

    @property
    def account_id(self) -> str:
        return StrKey.encode_account_id(self._public_bytes)

    @property
    def raw_secret_seed(self) -> bytes:
        if self._private_key is None:
            raise MissingPrivateKeyError()
        return self._private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )

    @property
    def secret_seed(self) -> str:
        return StrKey.encode_secret_seed(self.raw_secret_seed)

    def can_sign(self) -> bool:
        return self._private_key is not None

    def signature_hint(self) -> bytes:
        """Last four bytes of the public key, used to match signatures to signers."""
        return self._public_bytes[-4:]

    def sign(self, data: bytes) -> bytes:
        """
        Sign data with the private key.

        Args:
            data: Data to sign

        Returns:
            64-byte ed25519 signature

        Raises:
            MissingPrivateKeyError: If this keypair holds only a public key
        """
        if self._private_key is None:
            raise MissingPrivateKeyError()
        return self._private_key.sign(bytes(data))

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Return True if `signature` is a valid signature of `data`."""
        try:
            self._public_key.verify(bytes(signature), bytes(data))
        except InvalidSignature:
            return False
        return True

    def sign_decorated(self, data: bytes) -> XdrDecoratedSignature:
        """Sign `data` and pair the signature with this key's hint."""
        signature = self.sign(data)
        logger.debug(f"Signed {len(data)} bytes with {self.account_id}")
        return XdrDecoratedSignature(self.signature_hint(), signature)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return self._public_bytes == other._public_bytes

    def __hash__(self) -> int:
        return hash(self._public_bytes)

    def __repr__(self) -> str:
        return f"KeyPair(account_id='{self.account_id}')"
