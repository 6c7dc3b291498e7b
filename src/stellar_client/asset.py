"""
Assets and amounts.

Amounts are decimal strings with at most seven fractional digits; on the
wire they are int64 stroops (1 unit = 10,000,000 stroops).
"""

from __future__ import annotations
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .codec.writer import INT64_MAX
from .crypto.strkey import StrKey
from .runtime.errors import InvalidAmountError, InvalidAssetError
from .xdr.base import XdrAssetType
from .xdr.common import XdrAccountID, XdrAsset

STROOPS_PER_UNIT = 10_000_000

_ASSET_CODE = re.compile(r"^[A-Za-z0-9]{1,12}$")


def to_stroops(amount: Union[str, Decimal, int]) -> int:
    """
    Convert a decimal amount to stroops.

    Args:
        amount: Amount such as "10" or "0.0000001"

    Returns:
        Integer number of stroops

    Raises:
        InvalidAmountError: If the amount is negative, has more than seven
            fractional digits or overflows int64
    """
    if isinstance(amount, float):
        raise InvalidAmountError("Amounts must be str, int or Decimal, not float")
    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Invalid amount: {amount!r}", cause=e)
    if not value.is_finite() or value < 0:
        raise InvalidAmountError(f"Amount must be a non-negative number: {amount!r}")
    stroops = value * STROOPS_PER_UNIT
    if stroops != stroops.to_integral_value():
        raise InvalidAmountError(f"Amount has more than 7 decimal places: {amount!r}")
    stroops = int(stroops)
    if stroops > INT64_MAX:
        raise InvalidAmountError(f"Amount too large: {amount!r}")
    return stroops


def from_stroops(stroops: int) -> str:
    """Render stroops as a decimal string without trailing zeros."""
    value = Decimal(stroops) / STROOPS_PER_UNIT
    text = format(value.quantize(Decimal("0.0000001")), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


class Asset:
    """Native lumens or a credit asset identified by code and issuer."""

    __slots__ = ("_code", "_issuer")

    def __init__(self, code: Optional[str] = None, issuer: Optional[str] = None):
        if code is None and issuer is None:
            self._code = None
            self._issuer = None
            return
        if code is None or not _ASSET_CODE.match(code):
            raise InvalidAssetError(f"Asset code must be 1-12 alphanumeric characters: {code!r}")
        if issuer is None or not StrKey.is_valid_account_id(issuer):
            raise InvalidAssetError(f"Asset issuer must be a valid account id: {issuer!r}")
        self._code = code
        self._issuer = issuer

    @classmethod
    def native(cls) -> Asset:
        return cls()

    @classmethod
    def credit(cls, code: str, issuer: str) -> Asset:
        return cls(code, issuer)

    @property
    def code(self) -> str:
        return "XLM" if self._code is None else self._code

    @property
    def issuer(self) -> Optional[str]:
        return self._issuer

    def is_native(self) -> bool:
        return self._code is None

    @property
    def type(self) -> XdrAssetType:
        if self._code is None:
            return XdrAssetType.ASSET_TYPE_NATIVE
        if len(self._code) <= 4:
            return XdrAssetType.ASSET_TYPE_CREDIT_ALPHANUM4
        return XdrAssetType.ASSET_TYPE_CREDIT_ALPHANUM12

    def to_xdr(self) -> XdrAsset:
        asset_type = self.type
        if asset_type == XdrAssetType.ASSET_TYPE_NATIVE:
            return XdrAsset(asset_type)
        size = 4 if asset_type == XdrAssetType.ASSET_TYPE_CREDIT_ALPHANUM4 else 12
        code = self._code.encode("ascii").ljust(size, b"\x00")
        return XdrAsset(asset_type, code, XdrAccountID(StrKey.decode_account_id(self._issuer)))

    @classmethod
    def from_xdr(cls, xdr: XdrAsset) -> Asset:
        if xdr.type == XdrAssetType.ASSET_TYPE_NATIVE:
            return cls.native()
        code = xdr.asset_code.rstrip(b"\x00").decode("ascii")
        return cls(code, StrKey.encode_account_id(xdr.issuer.ed25519))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self._code == other._code and self._issuer == other._issuer

    def __hash__(self) -> int:
        return hash((self._code, self._issuer))

    def __repr__(self) -> str:
        if self._code is None:
            return "Asset.native()"
        return f"Asset('{self._code}', '{self._issuer}')"
