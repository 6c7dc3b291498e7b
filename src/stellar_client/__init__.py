"""
Stellar Python SDK - Transaction Core

Builds transactions, computes the exact bytes to sign and converts between
transactions and their V1/V0 XDR envelopes.
"""

from .asset import Asset
from .crypto import KeyPair, StrKey
from .memo import Memo
from .muxed_account import MuxedAccount
from .network import Network
from .operations import (
    AbstractOperation,
    BumpSequenceOperation,
    CreateAccountOperation,
    ManageDataOperation,
    PaymentOperation,
)
from .options import MIN_BASE_FEE, TransactionOptions
from .runtime.errors import *
from .time_bounds import TimeBounds
from .transaction import AbstractTransaction, Transaction
from .transaction_builder import Account, TransactionBuilder

__version__ = "0.1.0"
__all__ = [
    # Core
    "AbstractTransaction",
    "Transaction",
    "TransactionBuilder",
    "Account",
    "TransactionOptions",
    "MIN_BASE_FEE",

    # Values
    "Asset",
    "Memo",
    "MuxedAccount",
    "Network",
    "TimeBounds",

    # Keys
    "KeyPair",
    "StrKey",

    # Operations
    "AbstractOperation",
    "BumpSequenceOperation",
    "CreateAccountOperation",
    "ManageDataOperation",
    "PaymentOperation",

    # Errors
    "ErrorCode",
    "StellarError",
    "ValidationError",
    "InvalidOperationList",
    "InvalidOperationType",
    "TooManyOperations",
    "InvalidMemoError",
    "InvalidAmountError",
    "InvalidAssetError",
    "UnsignedTransaction",
    "EncodingError",
    "XdrEncodingError",
    "XdrDecodingError",
    "InvalidKeyError",
    "InvalidStrKeyError",
    "MissingPrivateKeyError",
]
