import io
import struct
from typing import IO, Optional, Union

from .buffer import validate_buffer_size

Stream = Union[IO[bytes], 'StreamView']

UINT8 = struct.Struct('<B')
UINT16_LE = struct.Struct('<H')
UINT32_LE = struct.Struct('<I')


class StreamView:
    def __init__(self, stream: Stream, size: int):
        self._stream = stream
        self._start = stream.tell()
        self._size = size
        self._pos = 0

    def __len__(self):
        return self._size

    def tell(self) -> int:
        return self._pos

    def read(self, size: Optional[int] = None) -> bytes:
        self._stream.seek(self._start + self._pos, io.SEEK_SET)
        if size is not None and size >= 0:
            size = min(self._size - self._pos, size)
        else:
            size = self._size - self._pos
        res = self._stream.read(size)
        self._pos += len(res)
        return res


class ByteReader:
    """Sequential reads of fixed size fields from a forward-only stream.

    Every read either returns the complete field or raises
    `UnexpectedBufferSize`, so a short read is never mistaken for data.
    """

    def __init__(self, stream: Stream):
        self._stream = stream
        self._consumed = 0

    def tell(self) -> int:
        """Number of bytes consumed through this reader."""
        return self._consumed

    def read(self, size: int) -> bytes:
        data = validate_buffer_size(self._stream.read(size), size)
        self._consumed += size
        return bytes(data)

    def read_byte(self) -> int:
        return UINT8.unpack(self.read(UINT8.size))[0]

    def read_word(self) -> int:
        return UINT16_LE.unpack(self.read(UINT16_LE.size))[0]

    def read_long(self) -> int:
        return UINT32_LE.unpack(self.read(UINT32_LE.size))[0]
