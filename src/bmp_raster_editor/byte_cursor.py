"""Sequential little-endian reader over a seekable binary stream."""

import io
import struct
from typing import BinaryIO, Optional

from .errors import BmpIoError, TruncatedDataError


class ByteCursor:
    """
    Fixed-width little-endian reads and relative/absolute seeks.

    Every failure (short read, OS error) surfaces as BmpIoError, so the
    decoder never sees a bare struct.error or OSError.
    """

    def __init__(self, stream: BinaryIO, name: Optional[str] = None):
        self.stream = stream
        self.name = name

    @classmethod
    def from_bytes(cls, data: bytes, name: Optional[str] = None) -> "ByteCursor":
        return cls(io.BytesIO(data), name=name)

    def tell(self) -> int:
        try:
            return self.stream.tell()
        except OSError as exc:
            raise BmpIoError(f"tell failed: {exc}", self.name) from exc

    def size(self) -> int:
        """Total stream length in bytes; the position is left unchanged."""
        try:
            pos = self.stream.tell()
            end = self.stream.seek(0, io.SEEK_END)
            self.stream.seek(pos)
        except OSError as exc:
            raise BmpIoError(f"could not determine stream size: {exc}", self.name) from exc
        return end

    def seek(self, pos: int) -> None:
        if pos < 0:
            raise BmpIoError(f"seek to negative offset {pos}", self.name)
        try:
            self.stream.seek(pos)
        except OSError as exc:
            raise BmpIoError(f"seek to {pos} failed: {exc}", self.name) from exc

    def skip(self, count: int) -> None:
        self.seek(self.tell() + count)

    def read_exact(self, count: int) -> bytes:
        try:
            data = self.stream.read(count)
        except OSError as exc:
            raise BmpIoError(f"read failed: {exc}", self.name) from exc
        if len(data) != count:
            raise TruncatedDataError(
                f"unexpected end of data: needed {count} bytes, got {len(data)}",
                self.name,
            )
        return data

    def _unpack(self, fmt: str) -> int:
        return struct.unpack(fmt, self.read_exact(struct.calcsize(fmt)))[0]

    def u16(self) -> int:
        return self._unpack("<H")

    def u32(self) -> int:
        return self._unpack("<I")

    def i32(self) -> int:
        return self._unpack("<i")
