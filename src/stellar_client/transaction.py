"""
Transactions and their envelopes.

A Transaction is built from a source account, a sequence number and at least
one operation. It defines the exact bytes that must be signed
(`signature_base`), encodes itself as a V1 envelope once signed, and can be
rebuilt from either historical envelope shape:

    ENVELOPE_TYPE_TX     (V1): muxed source account, encode and decode
    ENVELOPE_TYPE_TX_V0  (V0): raw ed25519 source key, decode only

The structural fields are fixed at construction; only the signature list
grows. The signature list is not locked, so concurrent signers must
serialize their calls to `sign` / `add_signature`.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from .codec.hashes import sha256_bytes
from .codec.writer import XdrWriter
from .crypto.keypair import KeyPair
from .memo import Memo
from .muxed_account import MuxedAccount
from .network import Network
from .operations import AbstractOperation
from .options import MIN_BASE_FEE, TransactionOptions
from .runtime.errors import (
    InvalidOperationList,
    InvalidOperationType,
    UnsignedTransaction,
    ValidationError,
    XdrDecodingError,
)
from .time_bounds import TimeBounds
from .xdr.base import XdrEnvelopeType
from .xdr.common import XdrDecoratedSignature
from .xdr.transaction import (
    XdrTransaction,
    XdrTransactionEnvelope,
    XdrTransactionV0Envelope,
    XdrTransactionV1Envelope,
)

if TYPE_CHECKING:
    from .transaction_builder import Account, TransactionBuilder

logger = logging.getLogger(__name__)


class AbstractTransaction(ABC):
    """
    Signature bookkeeping shared by transaction kinds.

    Subclasses define the signing pre-image and the envelope they produce.
    """

    MIN_BASE_FEE = MIN_BASE_FEE

    def __init__(self):
        self._signatures: List[XdrDecoratedSignature] = []

    @property
    def signatures(self) -> List[XdrDecoratedSignature]:
        """Signatures collected so far, in the order they were added."""
        return self._signatures

    @abstractmethod
    def signature_base(self, network: Network) -> bytes:
        """Return the exact bytes whose hash is signed."""

    @abstractmethod
    def to_envelope_xdr(self) -> XdrTransactionEnvelope:
        """Wrap this transaction and its signatures in an envelope."""

    def hash(self, network: Network) -> bytes:
        """SHA-256 of the signature base; this is what signers sign."""
        return sha256_bytes(self.signature_base(network))

    def hash_hex(self, network: Network) -> str:
        return self.hash(network).hex()

    def sign(self, signer: KeyPair, network: Network) -> None:
        """
        Sign this transaction and append the decorated signature.

        Args:
            signer: Keypair holding a private key
            network: Network whose passphrase is mixed into the pre-image

        Raises:
            MissingPrivateKeyError: If `signer` cannot sign
        """
        signature = signer.sign_decorated(self.hash(network))
        self._signatures.append(signature)
        logger.debug(f"Added signature from {signer.account_id} ({len(self._signatures)} total)")

    def add_signature(self, signature: XdrDecoratedSignature) -> None:
        """Append a signature produced outside this SDK."""
        self._signatures.append(signature)

    def to_envelope_xdr_base64(self) -> str:
        return self.to_envelope_xdr().to_base64()

    @staticmethod
    def from_envelope_xdr(envelope: XdrTransactionEnvelope) -> Transaction:
        """
        Rebuild a transaction from either envelope shape.

        Args:
            envelope: Decoded TransactionEnvelope

        Returns:
            Transaction with the envelope's signatures

        Raises:
            XdrDecodingError: If the envelope type is not V0 or V1
        """
        logger.debug(f"Decoding {envelope.type.name} envelope")
        if envelope.type == XdrEnvelopeType.ENVELOPE_TYPE_TX and envelope.v1 is not None:
            return Transaction.from_v1_envelope_xdr(envelope.v1)
        if envelope.type == XdrEnvelopeType.ENVELOPE_TYPE_TX_V0 and envelope.v0 is not None:
            return Transaction.from_v0_envelope_xdr(envelope.v0)
        raise XdrDecodingError(f"Unsupported envelope type: {envelope.type.name}")

    @staticmethod
    def from_envelope_base64_xdr(envelope: str) -> Transaction:
        return AbstractTransaction.from_envelope_xdr(XdrTransactionEnvelope.from_base64(envelope))


class Transaction(AbstractTransaction):
    """
    A batch of operations from one source account awaiting signatures.

    Args:
        source_account: MuxedAccount, or a G.../M... address
        sequence_number: Sequence number for this transaction
        operations: Non-empty list of operations, applied in order
        memo: Optional memo, defaults to Memo.none()
        time_bounds: Optional validity window, None means unrestricted
        fee: Total fee in stroops; defaults to MIN_BASE_FEE per operation.
            An explicit fee is kept as given, even below the default.

    Raises:
        InvalidOperationList: If `operations` is empty
        InvalidOperationType: If an element is not an AbstractOperation
    """

    def __init__(self, source_account: Union[str, MuxedAccount], sequence_number: int,
                 operations: Sequence[AbstractOperation], memo: Optional[Memo] = None,
                 time_bounds: Optional[TimeBounds] = None, fee: Optional[int] = None):
        if not operations:
            raise InvalidOperationList()
        for operation in operations:
            if not isinstance(operation, AbstractOperation):
                raise InvalidOperationType(
                    details={"type": type(operation).__name__}
                )
        if isinstance(sequence_number, bool) or not isinstance(sequence_number, int):
            raise ValidationError(f"Sequence number must be an integer, got {type(sequence_number).__name__}")

        if fee is None:
            fee = self.MIN_BASE_FEE * len(operations)

        if not isinstance(source_account, MuxedAccount):
            source_account = MuxedAccount.from_account_id(source_account)

        self._source_account = source_account
        self._sequence_number = sequence_number
        self._operations = list(operations)
        self._memo = memo if memo is not None else Memo.none()
        self._time_bounds = time_bounds
        self._fee = fee
        super().__init__()

    @classmethod
    def builder(cls, source_account: Account,
                options: Optional[TransactionOptions] = None) -> TransactionBuilder:
        """Start a TransactionBuilder for `source_account`."""
        from .transaction_builder import TransactionBuilder
        return TransactionBuilder(source_account, options)

    @property
    def fee(self) -> int:
        return self._fee

    @property
    def sequence_number(self) -> int:
        return self._sequence_number

    @property
    def source_account(self) -> MuxedAccount:
        return self._source_account

    @property
    def operations(self) -> List[AbstractOperation]:
        return list(self._operations)

    @property
    def memo(self) -> Memo:
        return self._memo

    @property
    def time_bounds(self) -> Optional[TimeBounds]:
        return self._time_bounds

    def signature_base(self, network: Network) -> bytes:
        """
        Build the signing pre-image.

        network id (32 bytes) || ENVELOPE_TYPE_TX (uint32) || Transaction XDR

        Args:
            network: Target network

        Returns:
            Pre-image bytes; `hash()` is their SHA-256
        """
        writer = XdrWriter()
        writer.opaque_fixed(network.network_id(), 32)
        writer.uint32(XdrEnvelopeType.ENVELOPE_TYPE_TX)
        self.to_xdr().encode(writer)
        return writer.to_bytes()

    def to_xdr(self) -> XdrTransaction:
        """Encode the transaction body (V1 shape)."""
        xdr_operations = [operation.to_xdr() for operation in self._operations]
        xdr_time_bounds = self._time_bounds.to_xdr() if self._time_bounds is not None else None
        return XdrTransaction(
            self._source_account.to_xdr(),
            self._sequence_number,
            xdr_operations,
            self._fee,
            self._memo.to_xdr(),
            xdr_time_bounds,
        )

    def to_xdr_base64(self) -> str:
        return self.to_xdr().to_base64()

    def to_envelope_xdr(self) -> XdrTransactionEnvelope:
        """
        Wrap the transaction in a V1 envelope.

        The legacy V0 shape is never produced.

        Raises:
            UnsignedTransaction: If no signature has been added
        """
        if not self._signatures:
            raise UnsignedTransaction()
        v1_envelope = XdrTransactionV1Envelope(self.to_xdr(), list(self._signatures))
        logger.debug(f"Built V1 envelope with {len(self._signatures)} signature(s)")
        return XdrTransactionEnvelope(XdrEnvelopeType.ENVELOPE_TYPE_TX, v1=v1_envelope)

    @classmethod
    def from_v1_envelope_xdr(cls, envelope: XdrTransactionV1Envelope) -> Transaction:
        """Rebuild a transaction from a V1 envelope; the source may carry a muxed id."""
        tx = envelope.tx
        time_bounds = TimeBounds.from_xdr(tx.time_bounds) if tx.time_bounds is not None else None
        transaction = cls(
            MuxedAccount.from_xdr(tx.source_account),
            tx.seq_num,
            [AbstractOperation.from_xdr(operation) for operation in tx.operations],
            Memo.from_xdr(tx.memo),
            time_bounds,
            tx.fee,
        )
        transaction._signatures.extend(envelope.signatures)
        return transaction

    @classmethod
    def from_v0_envelope_xdr(cls, envelope: XdrTransactionV0Envelope) -> Transaction:
        """Rebuild a transaction from a legacy V0 envelope; the source has no muxed id."""
        tx = envelope.tx
        time_bounds = TimeBounds.from_xdr(tx.time_bounds) if tx.time_bounds is not None else None
        transaction = cls(
            MuxedAccount.from_ed25519(tx.source_account_ed25519),
            tx.seq_num,
            [AbstractOperation.from_xdr(operation) for operation in tx.operations],
            Memo.from_xdr(tx.memo),
            time_bounds,
            tx.fee,
        )
        transaction._signatures.extend(envelope.signatures)
        return transaction

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return (
            self._source_account == other._source_account
            and self._sequence_number == other._sequence_number
            and self._fee == other._fee
            and self._memo == other._memo
            and self._time_bounds == other._time_bounds
            and self._operations == other._operations
        )

    def __repr__(self) -> str:
        return (
            f"Transaction(source='{self._source_account}', seq={self._sequence_number}, "
            f"fee={self._fee}, ops={len(self._operations)})"
        )
