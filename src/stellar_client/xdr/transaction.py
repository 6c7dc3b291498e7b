"""
Transaction and envelope XDR records.

Two historical transaction shapes exist on the wire:

    TransactionV0: raw ed25519 source key, used by ENVELOPE_TYPE_TX_V0
    Transaction:   muxed source account, used by ENVELOPE_TYPE_TX

Both serialize their fields in the same struct order:

    source, fee (uint32), seqNum (int64), timeBounds*, memo,
    operations<100>, ext (int 0)

The constructors take (source, sequence number, operations, fee, memo,
time bounds); that order is a calling convention only and never affects the
bytes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import XdrDecodingError, XdrEncodingError
from .base import XdrEnvelopeType, XdrRecord, read_enum
from .common import XdrDecoratedSignature, XdrMemo, XdrMuxedAccount, XdrTimeBounds
from .operations import XdrOperation

MAX_OPS_PER_TX = 100
MAX_SIGNATURES = 20


def _encode_body(writer: XdrWriter, tx) -> None:
    writer.uint32(tx.fee)
    writer.int64(tx.seq_num)
    writer.optional(tx.time_bounds, lambda w, v: v.encode(w))
    tx.memo.encode(writer)
    writer.array(tx.operations, lambda w, v: v.encode(w), MAX_OPS_PER_TX)
    writer.int32(0)


def _decode_body(reader: XdrReader):
    fee = reader.uint32()
    seq_num = reader.int64()
    time_bounds = reader.optional(XdrTimeBounds.decode)
    memo = XdrMemo.decode(reader)
    operations = reader.array(XdrOperation.decode, MAX_OPS_PER_TX)
    ext = reader.int32()
    if ext != 0:
        raise XdrDecodingError(f"Unsupported transaction ext version: {ext}")
    return fee, seq_num, time_bounds, memo, operations


@dataclass
class XdrTransaction(XdrRecord):
    source_account: XdrMuxedAccount
    seq_num: int
    operations: List[XdrOperation]
    fee: int
    memo: XdrMemo
    time_bounds: Optional[XdrTimeBounds] = None

    def encode(self, writer: XdrWriter) -> None:
        self.source_account.encode(writer)
        _encode_body(writer, self)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrTransaction:
        source = XdrMuxedAccount.decode(reader)
        fee, seq_num, time_bounds, memo, operations = _decode_body(reader)
        return cls(source, seq_num, operations, fee, memo, time_bounds)


@dataclass
class XdrTransactionV0(XdrRecord):
    source_account_ed25519: bytes
    seq_num: int
    operations: List[XdrOperation]
    fee: int
    memo: XdrMemo
    time_bounds: Optional[XdrTimeBounds] = None

    def encode(self, writer: XdrWriter) -> None:
        writer.opaque_fixed(self.source_account_ed25519, 32)
        _encode_body(writer, self)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrTransactionV0:
        source = reader.opaque_fixed(32)
        fee, seq_num, time_bounds, memo, operations = _decode_body(reader)
        return cls(source, seq_num, operations, fee, memo, time_bounds)


@dataclass
class XdrTransactionV1Envelope(XdrRecord):
    tx: XdrTransaction
    signatures: List[XdrDecoratedSignature] = field(default_factory=list)

    def encode(self, writer: XdrWriter) -> None:
        self.tx.encode(writer)
        writer.array(self.signatures, lambda w, v: v.encode(w), MAX_SIGNATURES)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrTransactionV1Envelope:
        tx = XdrTransaction.decode(reader)
        return cls(tx, reader.array(XdrDecoratedSignature.decode, MAX_SIGNATURES))


@dataclass
class XdrTransactionV0Envelope(XdrRecord):
    tx: XdrTransactionV0
    signatures: List[XdrDecoratedSignature] = field(default_factory=list)

    def encode(self, writer: XdrWriter) -> None:
        self.tx.encode(writer)
        writer.array(self.signatures, lambda w, v: v.encode(w), MAX_SIGNATURES)

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrTransactionV0Envelope:
        tx = XdrTransactionV0.decode(reader)
        return cls(tx, reader.array(XdrDecoratedSignature.decode, MAX_SIGNATURES))


@dataclass
class XdrTransactionEnvelope(XdrRecord):
    """
    TransactionEnvelope union.

    The envelope type tag is written first and selects the decode path.
    Only the V0 and V1 arms are supported.
    """

    type: XdrEnvelopeType
    v0: Optional[XdrTransactionV0Envelope] = None
    v1: Optional[XdrTransactionV1Envelope] = None

    def encode(self, writer: XdrWriter) -> None:
        writer.int32(self.type)
        if self.type == XdrEnvelopeType.ENVELOPE_TYPE_TX and self.v1 is not None:
            self.v1.encode(writer)
        elif self.type == XdrEnvelopeType.ENVELOPE_TYPE_TX_V0 and self.v0 is not None:
            self.v0.encode(writer)
        else:
            raise XdrEncodingError(f"No payload for envelope type {self.type.name}")

    @classmethod
    def decode(cls, reader: XdrReader) -> XdrTransactionEnvelope:
        envelope_type = read_enum(reader, XdrEnvelopeType)
        if envelope_type == XdrEnvelopeType.ENVELOPE_TYPE_TX:
            return cls(envelope_type, v1=XdrTransactionV1Envelope.decode(reader))
        if envelope_type == XdrEnvelopeType.ENVELOPE_TYPE_TX_V0:
            return cls(envelope_type, v0=XdrTransactionV0Envelope.decode(reader))
        raise XdrDecodingError(f"Unsupported envelope type: {envelope_type.name}")
