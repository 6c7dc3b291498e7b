"""
Payment operation.
"""

from __future__ import annotations
from typing import Union

from ..asset import Asset, from_stroops, to_stroops
from ..muxed_account import MuxedAccount
from ..xdr.base import XdrOperationType
from ..xdr.operations import XdrPaymentOp
from .base import AbstractOperation, _muxed, register_operation


@register_operation(XdrOperationType.PAYMENT)
class PaymentOperation(AbstractOperation):
    """
    Send `amount` of `asset` to `destination`.

    Args:
        destination: G.../M... address or MuxedAccount
        asset: Asset to send
        amount: Decimal string, e.g. "10.5"
        source_account: Optional operation source
    """

    def __init__(self, destination: Union[str, MuxedAccount], asset: Asset, amount: str,
                 source_account: Union[None, str, MuxedAccount] = None):
        super().__init__(source_account)
        self.destination = _muxed(destination)
        self.asset = asset
        self.amount = from_stroops(to_stroops(amount))

    def _body_to_xdr(self) -> XdrPaymentOp:
        return XdrPaymentOp(self.destination.to_xdr(), self.asset.to_xdr(), to_stroops(self.amount))

    @classmethod
    def _from_xdr_body(cls, body: XdrPaymentOp) -> PaymentOperation:
        return cls(MuxedAccount.from_xdr(body.destination), Asset.from_xdr(body.asset), from_stroops(body.amount))

    def _fields(self) -> tuple:
        return (self.destination, self.asset, self.amount)
