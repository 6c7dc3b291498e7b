"""
Base class and discriminant registries for XDR records.

Every record implements `encode(writer)` and `decode(reader)`; the byte,
base64 and strict whole-buffer helpers are shared here.
"""

from __future__ import annotations
import base64
import binascii
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Type, TypeVar

from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import XdrDecodingError

R = TypeVar("R", bound="XdrRecord")
E = TypeVar("E", bound=IntEnum)


class XdrEnvelopeType(IntEnum):
    """Envelope type registry. Values are fixed by the network."""

    ENVELOPE_TYPE_TX_V0 = 0
    ENVELOPE_TYPE_SCP = 1
    ENVELOPE_TYPE_TX = 2
    ENVELOPE_TYPE_AUTH = 3
    ENVELOPE_TYPE_SCPVALUE = 4
    ENVELOPE_TYPE_TX_FEE_BUMP = 5
    ENVELOPE_TYPE_OP_ID = 6


class XdrCryptoKeyType(IntEnum):
    KEY_TYPE_ED25519 = 0
    KEY_TYPE_PRE_AUTH_TX = 1
    KEY_TYPE_HASH_X = 2
    KEY_TYPE_MUXED_ED25519 = 0x100


class XdrPublicKeyType(IntEnum):
    PUBLIC_KEY_TYPE_ED25519 = 0


class XdrMemoType(IntEnum):
    MEMO_NONE = 0
    MEMO_TEXT = 1
    MEMO_ID = 2
    MEMO_HASH = 3
    MEMO_RETURN = 4


class XdrAssetType(IntEnum):
    ASSET_TYPE_NATIVE = 0
    ASSET_TYPE_CREDIT_ALPHANUM4 = 1
    ASSET_TYPE_CREDIT_ALPHANUM12 = 2


class XdrOperationType(IntEnum):
    CREATE_ACCOUNT = 0
    PAYMENT = 1
    PATH_PAYMENT_STRICT_RECEIVE = 2
    MANAGE_SELL_OFFER = 3
    CREATE_PASSIVE_SELL_OFFER = 4
    SET_OPTIONS = 5
    CHANGE_TRUST = 6
    ALLOW_TRUST = 7
    ACCOUNT_MERGE = 8
    INFLATION = 9
    MANAGE_DATA = 10
    BUMP_SEQUENCE = 11


def read_enum(reader: XdrReader, enum_cls: Type[E]) -> E:
    """
    Read a 4-byte discriminant and map it onto `enum_cls`.

    Raises:
        XdrDecodingError: If the value is not a member of the registry
    """
    value = reader.int32()
    try:
        return enum_cls(value)
    except ValueError as e:
        raise XdrDecodingError(f"Unknown {enum_cls.__name__} discriminant: {value}", cause=e)


class XdrRecord(ABC):
    """Common serialization helpers for XDR records."""

    @abstractmethod
    def encode(self, writer: XdrWriter) -> None:
        """Write this record to `writer`."""

    @classmethod
    @abstractmethod
    def decode(cls: Type[R], reader: XdrReader) -> R:
        """Read one record from `reader`."""

    def to_bytes(self) -> bytes:
        writer = XdrWriter()
        self.encode(writer)
        return writer.to_bytes()

    @classmethod
    def from_bytes(cls: Type[R], data: bytes) -> R:
        """
        Decode a record that must span the whole buffer.

        Args:
            data: Encoded record

        Returns:
            Decoded record

        Raises:
            XdrDecodingError: On malformed input or trailing bytes
        """
        reader = XdrReader(data)
        value = cls.decode(reader)
        reader.ensure_consumed()
        return value

    def to_base64(self) -> str:
        return base64.b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def from_base64(cls: Type[R], data: str) -> R:
        try:
            raw = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise XdrDecodingError("Invalid base64 XDR", cause=e)
        return cls.from_bytes(raw)
