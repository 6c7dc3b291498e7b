"""
XDR Reader

Mirror of XdrWriter. Every read is bounds-checked; short input, non-zero
padding, bad booleans and over-long payloads raise XdrDecodingError.
"""

import builtins
import struct
from typing import Callable, List, Optional, TypeVar

from ..runtime.errors import XdrDecodingError

T = TypeVar("T")


def _padding(length: int) -> int:
    return (4 - length % 4) % 4


class XdrReader:
    """
    Sequential XDR reader over an immutable byte buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._off

    def _take(self, n: int) -> builtins.bytes:
        if n < 0 or self._off + n > len(self._buf):
            raise XdrDecodingError(
                f"Buffer overflow: attempting to read {n} bytes at offset {self._off} "
                f"of {len(self._buf)}"
            )
        out = self._buf[self._off:self._off + n]
        self._off += n
        return out

    def _skip_padding(self, length: int) -> None:
        pad = self._take(_padding(length))
        if pad.strip(b"\x00"):
            raise XdrDecodingError("Non-zero XDR padding")

    def uint32(self) -> int:
        """Read unsigned 32-bit big-endian integer."""
        return struct.unpack(">I", self._take(4))[0]

    def int32(self) -> int:
        """Read signed 32-bit big-endian integer."""
        return struct.unpack(">i", self._take(4))[0]

    def uint64(self) -> int:
        """Read unsigned 64-bit big-endian integer."""
        return struct.unpack(">Q", self._take(8))[0]

    def int64(self) -> int:
        """Read signed 64-bit big-endian integer."""
        return struct.unpack(">q", self._take(8))[0]

    def boolean(self) -> bool:
        """
        Read a 4-byte boolean.

        Raises:
            XdrDecodingError: If the value is neither 0 nor 1
        """
        v = self.uint32()
        if v not in (0, 1):
            raise XdrDecodingError(f"Invalid XDR boolean: {v}")
        return v == 1

    def opaque_fixed(self, size: int) -> builtins.bytes:
        """Read fixed-length opaque data and its padding."""
        data = self._take(size)
        self._skip_padding(size)
        return data

    def opaque_var(self, max_len: Optional[int] = None) -> builtins.bytes:
        """
        Read length-prefixed opaque data.

        Args:
            max_len: Declared maximum length, if any

        Returns:
            The payload without padding
        """
        n = self.uint32()
        if max_len is not None and n > max_len:
            raise XdrDecodingError(f"opaque<{max_len}> length {n} exceeds maximum")
        return self.opaque_fixed(n)

    def string(self, max_len: Optional[int] = None) -> str:
        """Read a UTF-8 string."""
        data = self.opaque_var(max_len)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise XdrDecodingError("Invalid UTF-8 in XDR string", cause=e)

    def optional(self, decode_fn: Callable[["XdrReader"], T]) -> Optional[T]:
        """Read presence flag, then the value if present."""
        if self.boolean():
            return decode_fn(self)
        return None

    def array(self, decode_fn: Callable[["XdrReader"], T], max_len: Optional[int] = None) -> List[T]:
        """Read a variable-length array."""
        n = self.uint32()
        if max_len is not None and n > max_len:
            raise XdrDecodingError(f"array<{max_len}> length {n} exceeds maximum")
        return [decode_fn(self) for _ in range(n)]

    def ensure_consumed(self) -> None:
        """
        Check that no trailing bytes remain.

        Raises:
            XdrDecodingError: If bytes are left over
        """
        if not self.eof:
            raise XdrDecodingError(f"{self.remaining} trailing bytes after XDR value")
