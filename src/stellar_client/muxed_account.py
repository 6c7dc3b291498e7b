"""
Multiplexed account references.

A MuxedAccount is a G... account id optionally paired with a uint64
sub-account id. With an id it is rendered as an M... address and encoded
as KEY_TYPE_MUXED_ED25519; without one it is a plain ed25519 account.
"""

from __future__ import annotations
from typing import Optional

from .codec.writer import UINT64_MAX
from .crypto.strkey import StrKey
from .runtime.errors import InvalidKeyError
from .xdr.common import XdrMuxedAccount


class MuxedAccount:
    """Immutable (account id, optional id) pair."""

    __slots__ = ("_account_id", "_id", "_ed25519")

    def __init__(self, account_id: str, id: Optional[int] = None):
        """
        Args:
            account_id: G... account id
            id: Optional uint64 sub-account id

        Raises:
            InvalidStrKeyError: If `account_id` is not a valid G... key
            InvalidKeyError: If `id` is outside the uint64 range
        """
        if id is not None and (isinstance(id, bool) or not isinstance(id, int) or not 0 <= id <= UINT64_MAX):
            raise InvalidKeyError(f"Muxed account id must be a uint64, got {id!r}")
        self._ed25519 = StrKey.decode_account_id(account_id)
        self._account_id = account_id
        self._id = id

    @classmethod
    def from_account_id(cls, account_id: str) -> MuxedAccount:
        """Parse either a G... or an M... address."""
        if account_id.startswith("M"):
            ed25519, mux_id = StrKey.decode_muxed_account(account_id)
            return cls(StrKey.encode_account_id(ed25519), mux_id)
        return cls(account_id)

    @classmethod
    def from_ed25519(cls, public_key: bytes, id: Optional[int] = None) -> MuxedAccount:
        return cls(StrKey.encode_account_id(public_key), id)

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def ed25519(self) -> bytes:
        return self._ed25519

    @property
    def muxed_account_id(self) -> str:
        """M... address when an id is set, otherwise the G... account id."""
        if self._id is None:
            return self._account_id
        return StrKey.encode_muxed_account(self._ed25519, self._id)

    def to_xdr(self) -> XdrMuxedAccount:
        return XdrMuxedAccount(self._ed25519, self._id)

    @classmethod
    def from_xdr(cls, xdr: XdrMuxedAccount) -> MuxedAccount:
        return cls.from_ed25519(xdr.ed25519, xdr.id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MuxedAccount):
            return NotImplemented
        return self._ed25519 == other._ed25519 and self._id == other._id

    def __hash__(self) -> int:
        return hash((self._ed25519, self._id))

    def __str__(self) -> str:
        return self.muxed_account_id

    def __repr__(self) -> str:
        return f"MuxedAccount('{self._account_id}', id={self._id})"
