"""
Stellar XDR wire records.

Records used by the transaction core: account identifiers, memo, time
bounds, assets, operations, both transaction shapes and the envelope union.
"""

from .base import (
    XdrAssetType,
    XdrCryptoKeyType,
    XdrEnvelopeType,
    XdrMemoType,
    XdrOperationType,
    XdrPublicKeyType,
    XdrRecord,
)
from .common import (
    XdrAccountID,
    XdrAsset,
    XdrDecoratedSignature,
    XdrMemo,
    XdrMuxedAccount,
    XdrTimeBounds,
)
from .operations import (
    XdrBumpSequenceOp,
    XdrCreateAccountOp,
    XdrManageDataOp,
    XdrOperation,
    XdrPaymentOp,
)
from .transaction import (
    MAX_OPS_PER_TX,
    MAX_SIGNATURES,
    XdrTransaction,
    XdrTransactionEnvelope,
    XdrTransactionV0,
    XdrTransactionV0Envelope,
    XdrTransactionV1Envelope,
)

__all__ = [
    "XdrAssetType",
    "XdrCryptoKeyType",
    "XdrEnvelopeType",
    "XdrMemoType",
    "XdrOperationType",
    "XdrPublicKeyType",
    "XdrRecord",
    "XdrAccountID",
    "XdrAsset",
    "XdrDecoratedSignature",
    "XdrMemo",
    "XdrMuxedAccount",
    "XdrTimeBounds",
    "XdrBumpSequenceOp",
    "XdrCreateAccountOp",
    "XdrManageDataOp",
    "XdrOperation",
    "XdrPaymentOp",
    "MAX_OPS_PER_TX",
    "MAX_SIGNATURES",
    "XdrTransaction",
    "XdrTransactionEnvelope",
    "XdrTransactionV0",
    "XdrTransactionV0Envelope",
    "XdrTransactionV1Envelope",
]
