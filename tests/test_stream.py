"""
Unit tests for the byte stream reader and bounded stream view.
"""

import io

import pytest

from questpal.kernel.buffer import UnexpectedBufferSize, splice, validate_buffer_size
from questpal.kernel.stream import ByteReader, StreamView


class TestByteReader:
    def test_reads_little_endian_fields(self):
        reader = ByteReader(io.BytesIO(b'\x01\x34\x12\x78\x56\x34\x12'))
        assert reader.read_byte() == 0x01
        assert reader.read_word() == 0x1234
        assert reader.read_long() == 0x12345678

    def test_tell_counts_consumed_bytes(self):
        reader = ByteReader(io.BytesIO(bytes(10)))
        reader.read(3)
        reader.read_word()
        assert reader.tell() == 5

    def test_short_read_raises(self):
        reader = ByteReader(io.BytesIO(b'\x01'))
        with pytest.raises(UnexpectedBufferSize) as exc_info:
            reader.read_word()
        assert exc_info.value.expected == 2
        assert exc_info.value.given == 1

    def test_short_read_is_eof_error(self):
        reader = ByteReader(io.BytesIO(b''))
        with pytest.raises(EOFError):
            reader.read_byte()

    def test_failed_read_does_not_advance_tell(self):
        reader = ByteReader(io.BytesIO(b'\x00\x00\x00'))
        with pytest.raises(UnexpectedBufferSize):
            reader.read_long()
        assert reader.tell() == 0


class TestStreamView:
    def test_view_starts_at_current_position(self):
        stream = io.BytesIO(b'skipDATAtail')
        stream.seek(4)
        view = StreamView(stream, 4)
        assert view.read() == b'DATA'
        assert len(view) == 4

    def test_reader_stops_at_view_end(self):
        stream = io.BytesIO(b'\x01\x02\x03\x04')
        reader = ByteReader(StreamView(stream, 3))
        assert reader.read_word() == 0x0201
        with pytest.raises(UnexpectedBufferSize):
            reader.read_word()


class TestBuffer:
    def test_validate_accepts_matching_size(self):
        assert validate_buffer_size(b'abc', 3) == b'abc'

    def test_validate_without_size(self):
        assert validate_buffer_size(b'abc') == b'abc'

    def test_validate_rejects_empty_buffer_for_nonzero_size(self):
        with pytest.raises(UnexpectedBufferSize):
            validate_buffer_size(b'', 2)

    def test_splice(self):
        assert bytes(splice(b'abcdef', 2, 3)) == b'cde'

    def test_splice_past_end(self):
        with pytest.raises(UnexpectedBufferSize):
            splice(b'abcdef', 4, 3)
