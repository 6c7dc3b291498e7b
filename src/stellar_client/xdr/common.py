"""
Shared XDR records: account identifiers, memo, time bounds, assets and
decorated signatures.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import XdrDecodingError, XdrEncodingError
from .base import (
    XdrAssetType,
    XdrCryptoKeyType,
    XdrMemoType,
    XdrPublicKeyType,
    XdrRecord,
    read_enum,
)

MEMO_TEXT_MAX = 28
SIGNATURE_MAX = 64


@dataclass(frozen=True)
class XdrAccountID(XdrRecord):
    """PublicKey union; only the ed25519 arm exists on the network."""

    ed25519: bytes

    def encode(self, writer: XdrWriter) -> None:
        writer.int32(XdrPublicKeyType.PUBLIC_KEY_TYPE_ED25519)
        writer.opaque_fixed(self.ed25519, 32)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrAccountID:
        read_enum(reader, XdrPublicKeyType)
        return cls(reader.opaque_fixed(32))


@dataclass(frozen=True)
class XdrMuxedAccount(XdrRecord):
    """
    MuxedAccount union.

    KEY_TYPE_ED25519 carries only the 32-byte key; KEY_TYPE_MUXED_ED25519
    carries a uint64 id followed by the key.
    """

    ed25519: bytes
    id: Optional[int] = None

    @property
    def discriminant(self) -> XdrCryptoKeyType:
        if self.id is None:
            return XdrCryptoKeyType.KEY_TYPE_ED25519
        return XdrCryptoKeyType.KEY_TYPE_MUXED_ED25519

    def encode(self, writer: XdrWriter) -> None:
        writer.int32(self.discriminant)
        if self.id is not None:
            writer.uint64(self.id)
        writer.opaque_fixed(self.ed25519, 32)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrMuxedAccount:
        key_type = read_enum(reader, XdrCryptoKeyType)
        if key_type == XdrCryptoKeyType.KEY_TYPE_ED25519:
            return cls(reader.opaque_fixed(32))
        if key_type == XdrCryptoKeyType.KEY_TYPE_MUXED_ED25519:
            mux_id = reader.uint64()
            return cls(reader.opaque_fixed(32), mux_id)
        raise XdrDecodingError(f"Unsupported muxed account key type: {key_type.name}")


@dataclass(frozen=True)
class XdrTimeBounds(XdrRecord):
    min_time: int
    max_time: int

    def encode(self, writer: XdrWriter) -> None:
        writer.uint64(self.min_time)
        writer.uint64(self.max_time)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrTimeBounds:
        return cls(reader.uint64(), reader.uint64())


@dataclass(frozen=True)
class XdrMemo(XdrRecord):
    """
    Memo union. Exactly one payload field is set, matching `type`.

    Text is string<28> on the wire, which carries arbitrary bytes, so it is
    kept undecoded here.
    """

    type: XdrMemoType
    text: Optional[bytes] = None
    id: Optional[int] = None
    hash: Optional[bytes] = None

    def encode(self, writer: XdrWriter) -> None:
        writer.int32(self.type)
        if self.type == XdrMemoType.MEMO_NONE:
            return
        if self.type == XdrMemoType.MEMO_TEXT:
            if self.text is None:
                raise XdrEncodingError("MEMO_TEXT requires text")
            writer.opaque_var(self.text, MEMO_TEXT_MAX)
        elif self.type == XdrMemoType.MEMO_ID:
            if self.id is None:
                raise XdrEncodingError("MEMO_ID requires id")
            writer.uint64(self.id)
        else:
            if self.hash is None:
                raise XdrEncodingError(f"{self.type.name} requires hash")
            writer.opaque_fixed(self.hash, 32)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrMemo:
        memo_type = read_enum(reader, XdrMemoType)
        if memo_type == XdrMemoType.MEMO_NONE:
            return cls(memo_type)
        if memo_type == XdrMemoType.MEMO_TEXT:
            return cls(memo_type, text=reader.opaque_var(MEMO_TEXT_MAX))
        if memo_type == XdrMemoType.MEMO_ID:
            return cls(memo_type, id=reader.uint64())
        return cls(memo_type, hash=reader.opaque_fixed(32))


@dataclass(frozen=True)
class XdrAsset(XdrRecord):
    type: XdrAssetType
    asset_code: Optional[bytes] = None
    issuer: Optional[XdrAccountID] = None

    def encode(self, writer: XdrWriter) -> None:
        writer.int32(self.type)
        if self.type == XdrAssetType.ASSET_TYPE_NATIVE:
            return
        if self.asset_code is None or self.issuer is None:
            raise XdrEncodingError(f"{self.type.name} requires asset code and issuer")
        size = 4 if self.type == XdrAssetType.ASSET_TYPE_CREDIT_ALPHANUM4 else 12
        writer.opaque_fixed(self.asset_code, size)
        self.issuer.encode(writer)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrAsset:
        asset_type = read_enum(reader, XdrAssetType)
        if asset_type == XdrAssetType.ASSET_TYPE_NATIVE:
            return cls(asset_type)
        size = 4 if asset_type == XdrAssetType.ASSET_TYPE_CREDIT_ALPHANUM4 else 12
        code = reader.opaque_fixed(size)
        return cls(asset_type, code, XdrAccountID.decode(reader))


@dataclass(frozen=True)
class XdrDecoratedSignature(XdrRecord):
    """4-byte signature hint followed by the signature (opaque<64>)."""

    hint: bytes
    signature: bytes

    def encode(self, writer: XdrWriter) -> None:
        writer.opaque_fixed(self.hint, 4)
        writer.opaque_var(self.signature, SIGNATURE_MAX)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrDecoratedSignature:
        hint = reader.opaque_fixed(4)
        return cls(hint, reader.opaque_var(SIGNATURE_MAX))
