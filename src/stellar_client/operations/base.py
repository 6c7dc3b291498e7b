"""
Operation base class and XDR dispatch.

Concrete operations register themselves by XdrOperationType; the
transaction core only calls `to_xdr()` / `AbstractOperation.from_xdr()` and
never inspects the concrete kind.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type, Union

from ..muxed_account import MuxedAccount
from ..runtime.errors import XdrDecodingError
from ..xdr.base import XdrOperationType, XdrRecord
from ..xdr.operations import XdrOperation

_REGISTRY: Dict[XdrOperationType, Type["AbstractOperation"]] = {}


def register_operation(op_type: XdrOperationType):
    """Class decorator mapping an operation type to its implementation."""
    def decorator(cls: Type[AbstractOperation]) -> Type[AbstractOperation]:
        cls.OPERATION_TYPE = op_type
        _REGISTRY[op_type] = cls
        return cls
    return decorator


def _muxed(account: Union[None, str, MuxedAccount]) -> Optional[MuxedAccount]:
    if account is None or isinstance(account, MuxedAccount):
        return account
    return MuxedAccount.from_account_id(account)


class AbstractOperation(ABC):
    """
    Base class for all operations.

    Subclasses implement `_body_to_xdr` and `_from_xdr_body`; the optional
    operation-level source account is handled here.
    """

    OPERATION_TYPE: XdrOperationType

    def __init__(self, source_account: Union[None, str, MuxedAccount] = None):
        self._source_account = _muxed(source_account)

    @property
    def source_account(self) -> Optional[MuxedAccount]:
        return self._source_account

    @abstractmethod
    def _body_to_xdr(self) -> XdrRecord:
        """Encode the operation-specific body."""

    @classmethod
    @abstractmethod
    def _from_xdr_body(cls, body: XdrRecord) -> AbstractOperation:
        """Build an operation from its decoded body."""

    def to_xdr(self) -> XdrOperation:
        source = self._source_account.to_xdr() if self._source_account is not None else None
        return XdrOperation(self.OPERATION_TYPE, self._body_to_xdr(), source)

    @staticmethod
    def from_xdr(xdr: XdrOperation) -> AbstractOperation:
        """
        Decode any registered operation.

        Args:
            xdr: Decoded operation record

        Returns:
            Concrete operation instance with its source account, if any

        Raises:
            XdrDecodingError: If no operation is registered for the type
        """
        op_cls = _REGISTRY.get(xdr.type)
        if op_cls is None:
            raise XdrDecodingError(f"Unsupported operation type: {xdr.type.name}")
        operation = op_cls._from_xdr_body(xdr.body)
        if xdr.source_account is not None:
            operation._source_account = MuxedAccount.from_xdr(xdr.source_account)
        return operation

    def _fields(self) -> tuple:
        return ()

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._source_account == other._source_account and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._source_account, self._fields()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._fields()!r}"
