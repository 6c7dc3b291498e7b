"""Runtime helpers for the Stellar Python SDK"""

from .errors import (
    ErrorCode,
    StellarError,
    ValidationError,
    InvalidOperationList,
    InvalidOperationType,
    TooManyOperations,
    InvalidMemoError,
    InvalidAmountError,
    InvalidAssetError,
    UnsignedTransaction,
    EncodingError,
    XdrEncodingError,
    XdrDecodingError,
    InvalidKeyError,
    InvalidStrKeyError,
    MissingPrivateKeyError,
)

__all__ = [
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
