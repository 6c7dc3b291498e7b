"""
Stellar SDK Error Model

This module provides the error handling framework for the transaction core:
construction errors, envelope errors, codec errors and key/identifier errors.
Every error carries a numeric code so callers can branch without parsing
messages.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for the Stellar transaction core."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    XDR_ENCODE_ERROR = 101
    XDR_DECODE_ERROR = 102

    # Transaction errors (400-499)
    INVALID_TRANSACTION = 400
    INVALID_OPERATION_LIST = 401
    INVALID_OPERATION_TYPE = 402
    TOO_MANY_OPERATIONS = 403
    INVALID_MEMO = 404
    INVALID_AMOUNT = 406
    INVALID_ASSET = 407

    # Signature errors (500-599)
    UNSIGNED_TRANSACTION = 500

    # Key/Account errors (700-799)
    INVALID_KEY = 700
    INVALID_STRKEY = 701
    MISSING_PRIVATE_KEY = 702


class StellarError(Exception):
    """
    Base class for all SDK errors.

    Provides structured error information: a message, a code, optional
    details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an SDK error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(StellarError, ValueError):
    """Transaction and value validation errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_TRANSACTION,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidOperationList(ValidationError):
    """A transaction was constructed without operations."""

    def __init__(self, message: str = "At least one operation required",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_OPERATION_LIST, details, cause)


class InvalidOperationType(ValidationError, TypeError):
    """An element of the operation list is not an operation."""

    def __init__(self, message: str = "Operation list contains unknown operation type",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_OPERATION_TYPE, details, cause)


class TooManyOperations(ValidationError):
    """The operation list exceeds the per-transaction limit."""

    def __init__(self, message: str = "Too many operations",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TOO_MANY_OPERATIONS, details, cause)


class InvalidMemoError(ValidationError):
    """Memo value does not fit its variant."""

    def __init__(self, message: str = "Invalid memo",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_MEMO, details, cause)


class InvalidAmountError(ValidationError):
    """Amount cannot be represented in stroops."""

    def __init__(self, message: str = "Invalid amount",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_AMOUNT, details, cause)


class InvalidAssetError(ValidationError):
    """Asset code or issuer is malformed."""

    def __init__(self, message: str = "Invalid asset",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ASSET, details, cause)


class UnsignedTransaction(StellarError):
    """Envelope assembly attempted before any signature was added."""

    def __init__(self, message: str = "Transaction must be signed by at least one signer. Use transaction.sign().",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNSIGNED_TRANSACTION, details, cause)


class EncodingError(StellarError, ValueError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class XdrEncodingError(EncodingError):
    """A value does not fit the XDR type it is written as."""

    def __init__(self, message: str = "XDR encode error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.XDR_ENCODE_ERROR, details, cause)


class XdrDecodingError(EncodingError):
    """Malformed XDR input or unknown discriminant."""

    def __init__(self, message: str = "XDR decode error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.XDR_DECODE_ERROR, details, cause)


class InvalidKeyError(StellarError, ValueError):
    """Key material errors."""

    def __init__(self, message: str = "Invalid key", code: ErrorCode = ErrorCode.INVALID_KEY,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidStrKeyError(InvalidKeyError):
    """StrKey string with a bad version byte, length or checksum."""

    def __init__(self, message: str = "Invalid StrKey",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_STRKEY, details, cause)


class MissingPrivateKeyError(InvalidKeyError):
    """Signing attempted with a public-only keypair."""

    def __init__(self, message: str = "KeyPair has no private key and cannot sign",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MISSING_PRIVATE_KEY, details, cause)


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
