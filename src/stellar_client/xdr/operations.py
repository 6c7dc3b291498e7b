"""
Operation XDR records.

An operation is an optional muxed source account followed by a body union
keyed on XdrOperationType. Only the operation bodies this SDK builds are
registered; decoding any other type raises XdrDecodingError.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Type

from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import XdrDecodingError
from .base import XdrOperationType, XdrRecord, read_enum
from .common import XdrAccountID, XdrAsset, XdrMuxedAccount

DATA_NAME_MAX = 64
DATA_VALUE_MAX = 64


@dataclass(frozen=True)
class XdrCreateAccountOp(XdrRecord):
    destination: XdrAccountID
    starting_balance: int

    def encode(self, writer: XdrWriter) -> None:
        self.destination.encode(writer)
        writer.int64(self.starting_balance)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrCreateAccountOp:
        destination = XdrAccountID.decode(reader)
        return cls(destination, reader.int64())


@dataclass(frozen=True)
class XdrPaymentOp(XdrRecord):
    destination: XdrMuxedAccount
    asset: XdrAsset
    amount: int

    def encode(self, writer: XdrWriter) -> None:
        self.destination.encode(writer)
        self.asset.encode(writer)
        writer.int64(self.amount)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrPaymentOp:
        destination = XdrMuxedAccount.decode(reader)
        asset = XdrAsset.decode(reader)
        return cls(destination, asset, reader.int64())


@dataclass(frozen=True)
class XdrManageDataOp(XdrRecord):
    data_name: str
    data_value: Optional[bytes] = None

    def encode(self, writer: XdrWriter) -> None:
        writer.string(self.data_name, DATA_NAME_MAX)
        writer.optional(self.data_value, lambda w, v: w.opaque_var(v, DATA_VALUE_MAX))

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrManageDataOp:
        name = reader.string(DATA_NAME_MAX)
        return cls(name, reader.optional(lambda r: r.opaque_var(DATA_VALUE_MAX)))


@dataclass(frozen=True)
class XdrBumpSequenceOp(XdrRecord):
    bump_to: int

    def encode(self, writer: XdrWriter) -> None:
        writer.int64(self.bump_to)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrBumpSequenceOp:
        return cls(reader.int64())


OPERATION_BODIES: Dict[XdrOperationType, Type[XdrRecord]] = {
    XdrOperationType.CREATE_ACCOUNT: XdrCreateAccountOp,
    XdrOperationType.PAYMENT: XdrPaymentOp,
    XdrOperationType.MANAGE_DATA: XdrManageDataOp,
    XdrOperationType.BUMP_SEQUENCE: XdrBumpSequenceOp,
}


@dataclass(frozen=True)
class XdrOperation(XdrRecord):
    type: XdrOperationType
    body: XdrRecord
    source_account: Optional[XdrMuxedAccount] = None

    def encode(self, writer: XdrWriter) -> None:
        writer.optional(self.source_account, lambda w, v: v.encode(w))
        writer.int32(self.type)
        self.body.encode(writer)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrOperation:
        source = reader.optional(XdrMuxedAccount.decode)
        op_type = read_enum(reader, XdrOperationType)
        body_cls = OPERATION_BODIES.get(op_type)
        if body_cls is None:
            raise XdrDecodingError(f"Unsupported operation type: {op_type.name}")
        return cls(op_type, body_cls.decode(reader), source)
