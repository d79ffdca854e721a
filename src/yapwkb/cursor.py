"""Bounds-checked sequential reader over a WKB byte buffer."""

from __future__ import annotations

import struct
from typing import List, Union

import numpy as np

from yapwkb.errors import error_truncated

_UINT32_LE = struct.Struct('<I')
_UINT32_BE = struct.Struct('>I')
_DOUBLE_LE = np.dtype('<f8')
_DOUBLE_BE = np.dtype('>f8')

BytesLike = Union[bytes, bytearray, memoryview]


class ByteCursor:
    """
    Sequential reader over an immutable byte buffer.

    Every read checks the remaining length before consuming anything, so a
    failed read leaves the offset where it was.  A cursor belongs to a
    single decode call and is not safe to share.
    """

    def __init__(self, data: BytesLike):
        self._data = bytes(data)
        self._len = len(self._data)
        self._pos = 0

    @property
    def offset(self) -> int:
        return self._pos

    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return self._len - self._pos

    def _take(self, size: int, what: str) -> int:
        if self._data is None:
            raise RuntimeError("read from a released ByteCursor")
        if self._pos + size > self._len:
            raise error_truncated(what, size, self._len - self._pos, self._pos)
        start = self._pos
        self._pos += size
        return start

    def read_byte(self) -> int:
        start = self._take(1, "1 byte")
        return self._data[start]

    def read_uint32(self, little_endian: bool) -> int:
        """Read a 4-byte unsigned integer in the given byte order."""
        start = self._take(4, "1 integer")
        codec = _UINT32_LE if little_endian else _UINT32_BE
        return codec.unpack_from(self._data, start)[0]

    def read_doubles(self, little_endian: bool, count: int) -> List[float]:
        """Read ``count`` IEEE-754 doubles in the given byte order."""
        if count < 0:
            raise ValueError(f"negative double count: {count}")
        start = self._take(8 * count, f"{count} doubles")
        if count == 0:
            return []
        dtype = _DOUBLE_LE if little_endian else _DOUBLE_BE
        return np.frombuffer(self._data, dtype=dtype, count=count, offset=start).tolist()

    def release(self) -> None:
        """Drop the buffer; later reads raise ``RuntimeError``."""
        self._data = None
