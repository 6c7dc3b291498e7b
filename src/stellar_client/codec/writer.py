"""
XDR Writer

Implements RFC 4506 encoding as used by the Stellar network: big-endian
4/8-byte integers, opaque data and strings padded to 4-byte boundaries,
optional values behind a 4-byte presence flag and length-prefixed arrays.
"""

import struct
from typing import Callable, List, Optional, Sequence, TypeVar

from ..runtime.errors import XdrEncodingError

T = TypeVar("T")

UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF
INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


def _padding(length: int) -> int:
    return (4 - length % 4) % 4


class XdrWriter:
    """
    Append-only XDR writer.

    Every method checks that the value fits the wire width before writing,
    so an out-of-range value fails loudly instead of being truncated.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[bytes] = []

    def _check_int(self, v: int, lo: int, hi: int, kind: str) -> None:
        if isinstance(v, bool) or not isinstance(v, int):
            raise XdrEncodingError(f"{kind} value must be an integer, got {type(v).__name__}")
        if v < lo or v > hi:
            raise XdrEncodingError(f"{kind} value out of range: {v}")

    def uint32(self, v: int) -> None:
        """
        Write unsigned 32-bit integer, big-endian.

        Args:
            v: Integer value in [0, 2^32 - 1]

        Raises:
            XdrEncodingError: If the value does not fit
        """
        self._check_int(v, 0, UINT32_MAX, "uint32")
        self._bb.append(struct.pack(">I", v))

    def int32(self, v: int) -> None:
        """Write signed 32-bit integer, big-endian."""
        self._check_int(v, INT32_MIN, INT32_MAX, "int32")
        self._bb.append(struct.pack(">i", v))

    def uint64(self, v: int) -> None:
        """Write unsigned 64-bit integer, big-endian."""
        self._check_int(v, 0, UINT64_MAX, "uint64")
        self._bb.append(struct.pack(">Q", v))

    def int64(self, v: int) -> None:
        """Write signed 64-bit integer, big-endian."""
        self._check_int(v, INT64_MIN, INT64_MAX, "int64")
        self._bb.append(struct.pack(">q", v))

    def boolean(self, v: bool) -> None:
        """Write boolean as a 4-byte 0/1 value."""
        self._bb.append(struct.pack(">I", 1 if v else 0))

    def opaque_fixed(self, data: bytes, size: int) -> None:
        """
        Write fixed-length opaque data (no length prefix).

        Args:
            data: Bytes to write, must be exactly `size` long
            size: Declared length of the opaque field

        Raises:
            XdrEncodingError: If the length does not match
        """
        if len(data) != size:
            raise XdrEncodingError(f"opaque[{size}] expects {size} bytes, got {len(data)}")
        self._bb.append(bytes(data))
        self._bb.append(b"\x00" * _padding(size))

    def opaque_var(self, data: bytes, max_len: Optional[int] = None) -> None:
        """
        Write variable-length opaque data with a 4-byte length prefix.

        Args:
            data: Bytes to write
            max_len: Declared maximum length, if any
        """
        if max_len is not None and len(data) > max_len:
            raise XdrEncodingError(f"opaque<{max_len}> cannot hold {len(data)} bytes")
        self.uint32(len(data))
        self._bb.append(bytes(data))
        self._bb.append(b"\x00" * _padding(len(data)))

    def string(self, s: str, max_len: Optional[int] = None) -> None:
        """Write UTF-8 string; `max_len` bounds the encoded byte length."""
        data = s.encode("utf-8")
        if max_len is not None and len(data) > max_len:
            raise XdrEncodingError(f"string<{max_len}> cannot hold {len(data)} bytes")
        self.opaque_var(data)

    def optional(self, value: Optional[T], encode_fn: Callable[["XdrWriter", T], None]) -> None:
        """
        Write an optional value: presence flag, then the value if present.

        Args:
            value: Value or None
            encode_fn: Callable writing the value to this writer
        """
        if value is None:
            self.boolean(False)
        else:
            self.boolean(True)
            encode_fn(self, value)

    def array(self, items: Sequence[T], encode_fn: Callable[["XdrWriter", T], None],
              max_len: Optional[int] = None) -> None:
        """Write a variable-length array: 4-byte count, then each item."""
        if max_len is not None and len(items) > max_len:
            raise XdrEncodingError(f"array<{max_len}> cannot hold {len(items)} items")
        self.uint32(len(items))
        for item in items:
            encode_fn(self, item)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return b"".join(self._bb)
