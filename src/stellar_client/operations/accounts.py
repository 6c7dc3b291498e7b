"""
Account operations: CreateAccount and BumpSequence.
"""

from __future__ import annotations
from typing import Union

from ..asset import from_stroops, to_stroops
from ..codec.writer import INT64_MAX
from ..crypto.strkey import StrKey
from ..muxed_account import MuxedAccount
from ..runtime.errors import ValidationError
from ..xdr.base import XdrOperationType
from ..xdr.common import XdrAccountID
from ..xdr.operations import XdrBumpSequenceOp, XdrCreateAccountOp
from .base import AbstractOperation, register_operation


@register_operation(XdrOperationType.CREATE_ACCOUNT)
class CreateAccountOperation(AbstractOperation):
    """
    Create and fund a new account.

    Args:
        destination: G... id of the account to create
        starting_balance: Initial balance as a decimal string
        source_account: Optional operation source
    """

    def __init__(self, destination: str, starting_balance: str,
                 source_account: Union[None, str, MuxedAccount] = None):
        super().__init__(source_account)
        self._destination_key = StrKey.decode_account_id(destination)
        self.destination = destination
        self.starting_balance = from_stroops(to_stroops(starting_balance))

    def _body_to_xdr(self) -> XdrCreateAccountOp:
        return XdrCreateAccountOp(XdrAccountID(self._destination_key), to_stroops(self.starting_balance))

    @classmethod
    def _from_xdr_body(cls, body: XdrCreateAccountOp) -> CreateAccountOperation:
        return cls(StrKey.encode_account_id(body.destination.ed25519), from_stroops(body.starting_balance))

    def _fields(self) -> tuple:
        return (self.destination, self.starting_balance)


@register_operation(XdrOperationType.BUMP_SEQUENCE)
class BumpSequenceOperation(AbstractOperation):
    """Bump the source account's sequence number to `bump_to`."""

    def __init__(self, bump_to: int, source_account: Union[None, str, MuxedAccount] = None):
        super().__init__(source_account)
        if isinstance(bump_to, bool) or not isinstance(bump_to, int) or not 0 <= bump_to <= INT64_MAX:
            raise ValidationError(f"bump_to must be a non-negative int64, got {bump_to!r}")
        self.bump_to = bump_to

    def _body_to_xdr(self) -> XdrBumpSequenceOp:
        return XdrBumpSequenceOp(self.bump_to)

    @classmethod
    def _from_xdr_body(cls, body: XdrBumpSequenceOp) -> BumpSequenceOperation:
        return cls(body.bump_to)

    def _fields(self) -> tuple:
        return (self.bump_to,)
