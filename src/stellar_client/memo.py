"""
Transaction memos.

Exactly one of: none, text (at most 28 bytes, usually UTF-8), id (uint64),
hash (32 bytes) or return hash (32 bytes).
"""

from __future__ import annotations
from typing import Union

from .codec.writer import UINT64_MAX
from .runtime.errors import InvalidMemoError
from .xdr.base import XdrMemoType
from .xdr.common import MEMO_TEXT_MAX, XdrMemo

HashInput = Union[bytes, str]


def _to_hash(value: HashInput) -> bytes:
    """Accept 32 raw bytes or a hex string; short hex is right-padded with zeros."""
    if isinstance(value, str):
        try:
            value = bytes.fromhex(value)
        except ValueError as e:
            raise InvalidMemoError(f"Memo hash is not valid hex: {e}", cause=e)
        if len(value) < 32:
            value = value + b"\x00" * (32 - len(value))
    if len(value) != 32:
        raise InvalidMemoError(f"Memo hash must be 32 bytes, got {len(value)}")
    return bytes(value)


class Memo:
    """Immutable memo value. Use the factory classmethods to build one."""

    __slots__ = ("_type", "_value")

    def __init__(self, memo_type: XdrMemoType, value: Union[None, str, int, bytes] = None):
        self._type = XdrMemoType(memo_type)
        self._value = value

    @classmethod
    def none(cls) -> Memo:
        return cls(XdrMemoType.MEMO_NONE)

    @classmethod
    def text(cls, text: Union[str, bytes]) -> Memo:
        """
        Text memo.

        Args:
            text: A string, or raw bytes for text that is not valid UTF-8

        Raises:
            InvalidMemoError: If the encoded text exceeds 28 bytes
        """
        if isinstance(text, str):
            size = len(text.encode("utf-8"))
        elif isinstance(text, bytes):
            size = len(text)
        else:
            raise InvalidMemoError(f"Memo text must be str or bytes, got {type(text).__name__}")
        if size > MEMO_TEXT_MAX:
            raise InvalidMemoError(f"Memo text must be <= {MEMO_TEXT_MAX} bytes")
        return cls(XdrMemoType.MEMO_TEXT, text)

    @classmethod
    def id(cls, memo_id: int) -> Memo:
        if isinstance(memo_id, bool) or not isinstance(memo_id, int) or not 0 <= memo_id <= UINT64_MAX:
            raise InvalidMemoError(f"Memo id must be a uint64, got {memo_id!r}")
        return cls(XdrMemoType.MEMO_ID, memo_id)

    @classmethod
    def hash(cls, value: HashInput) -> Memo:
        return cls(XdrMemoType.MEMO_HASH, _to_hash(value))

    @classmethod
    def return_hash(cls, value: HashInput) -> Memo:
        return cls(XdrMemoType.MEMO_RETURN, _to_hash(value))

    @property
    def type(self) -> XdrMemoType:
        return self._type

    @property
    def value(self) -> Union[None, str, int, bytes]:
        return self._value

    def is_none(self) -> bool:
        return self._type == XdrMemoType.MEMO_NONE

    def to_xdr(self) -> XdrMemo:
        if self._type == XdrMemoType.MEMO_TEXT:
            text = self._value.encode("utf-8") if isinstance(self._value, str) else self._value
            return XdrMemo(self._type, text=text)
        if self._type == XdrMemoType.MEMO_ID:
            return XdrMemo(self._type, id=self._value)
        if self._type in (XdrMemoType.MEMO_HASH, XdrMemoType.MEMO_RETURN):
            return XdrMemo(self._type, hash=self._value)
        return XdrMemo(self._type)

    @classmethod
    def from_xdr(cls, xdr: XdrMemo) -> Memo:
        if xdr.type == XdrMemoType.MEMO_TEXT:
            try:
                return cls(xdr.type, xdr.text.decode("utf-8"))
            except UnicodeDecodeError:
                # Not UTF-8; keep the bytes so re-encoding is exact.
                return cls(xdr.type, xdr.text)
        if xdr.type == XdrMemoType.MEMO_ID:
            return cls(xdr.type, xdr.id)
        if xdr.type in (XdrMemoType.MEMO_HASH, XdrMemoType.MEMO_RETURN):
            return cls(xdr.type, xdr.hash)
        return cls.none()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Memo):
            return NotImplemented
        return self._type == other._type and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._type, self._value))

    def __repr__(self) -> str:
        return f"Memo({self._type.name}, {self._value!r})"

