"""
Operations supported by the transaction builder.

Importing this package registers every operation type with
AbstractOperation.from_xdr.
"""

from .base import AbstractOperation, register_operation
from .accounts import BumpSequenceOperation, CreateAccountOperation
from .data import ManageDataOperation
from .payments import PaymentOperation

__all__ = [
    "AbstractOperation",
    "register_operation",
    "BumpSequenceOperation",
    "CreateAccountOperation",
    "ManageDataOperation",
    "PaymentOperation",
]
