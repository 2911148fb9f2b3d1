"""
Binary Reader
=============

Bounds-checked little-endian reads over an in-memory sequence file.

Design Rules:
    - This is the ONLY place in the codebase that unpacks raw bytes
    - Offsets are explicit; the reader keeps no cursor
    - Fails fast on reads past the end of the buffer
"""

import struct
from typing import Union


BufferLike = Union[bytes, bytearray, memoryview]

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")


class FseqError(Exception):
    """Base class for internal sequence decoding failures."""
    pass


class OutOfBoundsError(FseqError, IndexError):
    """Raised when a read extends past the end of the buffer."""
    pass


class BinaryReader:
    """
    Read-only view over a sequence buffer.

    Example:
        reader = BinaryReader(data)
        channel_count = reader.read_u32(10)
        frame = reader.read_bytes(24, 48)
    """

    def __init__(self, data: BufferLike) -> None:
        self._data = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, offset: int, width: int) -> None:
        if offset < 0 or offset + width > len(self._data):
            raise OutOfBoundsError(
                f"Read of {width} byte(s) at offset {offset} exceeds "
                f"buffer of {len(self._data)} bytes"
            )

    def read_u8(self, offset: int) -> int:
        """Read an unsigned 8-bit integer."""
        self._check(offset, _U8.size)
        return _U8.unpack_from(self._data, offset)[0]

    def read_u32(self, offset: int) -> int:
        """Read a little-endian unsigned 32-bit integer."""
        self._check(offset, _U32.size)
        return _U32.unpack_from(self._data, offset)[0]

    def read_bytes(self, offset: int, length: int) -> bytes:
        """Read a raw byte window."""
        self._check(offset, length)
        return self._data[offset:offset + length].tobytes()
