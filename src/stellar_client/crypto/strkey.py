"""
StrKey encoding for account identifiers, muxed accounts and secret seeds.

A StrKey is base32(version_byte || payload || crc16), with the CRC16-XModem
checksum stored little-endian and base32 padding stripped.

    G...  ed25519 public key         (version 6 << 3)
    M...  muxed account, key || id   (version 12 << 3)
    S...  ed25519 secret seed        (version 18 << 3)
"""

from __future__ import annotations
import base64
import binascii
import struct
from enum import IntEnum
from typing import Tuple

from ..runtime.errors import InvalidStrKeyError


class VersionByte(IntEnum):
    ACCOUNT_ID = 6 << 3
    MUXED_ACCOUNT = 12 << 3
    SEED = 18 << 3


_PAYLOAD_SIZES = {
    VersionByte.ACCOUNT_ID: 32,
    VersionByte.MUXED_ACCOUNT: 40,
    VersionByte.SEED: 32,
}


def crc16_xmodem(data: bytes) -> int:
    """CRC16-XModem (poly 0x1021, init 0) over `data`."""
    return binascii.crc_hqx(data, 0)


class StrKey:
    """Encoder/decoder for the versioned, checksummed base32 key format."""

    @staticmethod
    def encode_check(version: VersionByte, payload: bytes) -> str:
        """
        Encode `payload` under `version`.

        Args:
            version: Version byte selecting the key kind
            payload: Raw key material

        Returns:
            Unpadded base32 StrKey

        Raises:
            InvalidStrKeyError: If the payload has the wrong size
        """
        expected = _PAYLOAD_SIZES[version]
        if len(payload) != expected:
            raise InvalidStrKeyError(f"{version.name} payload must be {expected} bytes, got {len(payload)}")
        data = bytes([version]) + bytes(payload)
        data += struct.pack("<H", crc16_xmodem(data))
        return base64.b32encode(data).decode("ascii").rstrip("=")

    @staticmethod
    def decode_check(version: VersionByte, encoded: str) -> bytes:
        """
        Decode and verify a StrKey of the given kind.

        Args:
            version: Expected version byte
            encoded: StrKey string

        Returns:
            Raw payload

        Raises:
            InvalidStrKeyError: On bad characters, length, version or checksum
        """
        if not isinstance(encoded, str):
            raise InvalidStrKeyError(f"StrKey must be a string, got {type(encoded).__name__}")
        padded = encoded + "=" * (-len(encoded) % 8)
        try:
            data = base64.b32decode(padded, casefold=False)
        except (binascii.Error, ValueError) as e:
            raise InvalidStrKeyError(f"Invalid base32 in StrKey: {encoded!r}", cause=e)
        # Re-encoding must reproduce the input, rejecting non-canonical trailing bits.
        if base64.b32encode(data).decode("ascii").rstrip("=") != encoded:
            raise InvalidStrKeyError(f"Non-canonical StrKey: {encoded!r}")
        if len(data) != 1 + _PAYLOAD_SIZES[version] + 2:
            raise InvalidStrKeyError(f"Invalid {version.name} length: {encoded!r}")
        if data[0] != version:
            raise InvalidStrKeyError(f"Invalid version byte for {version.name}: {encoded!r}")
        body, checksum = data[:-2], data[-2:]
        if struct.pack("<H", crc16_xmodem(body)) != checksum:
            raise InvalidStrKeyError(f"Invalid StrKey checksum: {encoded!r}")
        return body[1:]

    @classmethod
    def encode_account_id(cls, public_key: bytes) -> str:
        return cls.encode_check(VersionByte.ACCOUNT_ID, public_key)

    @classmethod
    def decode_account_id(cls, account_id: str) -> bytes:
        return cls.decode_check(VersionByte.ACCOUNT_ID, account_id)

    @classmethod
    def encode_secret_seed(cls, seed: bytes) -> str:
        return cls.encode_check(VersionByte.SEED, seed)

    @classmethod
    def decode_secret_seed(cls, seed: str) -> bytes:
        return cls.decode_check(VersionByte.SEED, seed)

    @classmethod
    def encode_muxed_account(cls, public_key: bytes, mux_id: int) -> str:
        """Encode key and id as an M... address (id is big-endian uint64)."""
        return cls.encode_check(VersionByte.MUXED_ACCOUNT, bytes(public_key) + struct.pack(">Q", mux_id))

    @classmethod
    def decode_muxed_account(cls, muxed: str) -> Tuple[bytes, int]:
        """Return (public key, id) from an M... address."""
        payload = cls.decode_check(VersionByte.MUXED_ACCOUNT, muxed)
        return payload[:32], struct.unpack(">Q", payload[32:])[0]

    @classmethod
    def is_valid_account_id(cls, account_id: str) -> bool:
        try:
            cls.decode_account_id(account_id)
        except InvalidStrKeyError:
            return False
        return True
