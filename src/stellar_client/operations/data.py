"""
ManageData operation: set or delete a named data entry on the source account.
"""

from __future__ import annotations
from typing import Optional, Union

from ..muxed_account import MuxedAccount
from ..runtime.errors import ValidationError
from ..xdr.base import XdrOperationType
from ..xdr.operations import DATA_NAME_MAX, DATA_VALUE_MAX, XdrManageDataOp
from .base import AbstractOperation, register_operation


@register_operation(XdrOperationType.MANAGE_DATA)
class ManageDataOperation(AbstractOperation):
    """A `value` of None deletes the entry named `key`."""

    def __init__(self, key: str, value: Union[None, str, bytes] = None,
                 source_account: Union[None, str, MuxedAccount] = None):
        super().__init__(source_account)
        if not key or len(key.encode("utf-8")) > DATA_NAME_MAX:
            raise ValidationError(f"Data name must be 1-{DATA_NAME_MAX} bytes")
        if isinstance(value, str):
            value = value.encode("utf-8")
        if value is not None and len(value) > DATA_VALUE_MAX:
            raise ValidationError(f"Data value must be <= {DATA_VALUE_MAX} bytes")
        self.key = key
        self.value: Optional[bytes] = value

    def _body_to_xdr(self) -> XdrManageDataOp:
        return XdrManageDataOp(self.key, self.value)

    @classmethod
    def _from_xdr_body(cls, body: XdrManageDataOp) -> ManageDataOperation:
        return cls(body.data_name, body.data_value)

    def _fields(self) -> tuple:
        return (self.key, self.value)
