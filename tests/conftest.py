"""Shared pytest fixtures and a test-only palette section writer."""

import io
import struct
from typing import Dict, Sequence, Tuple

import pytest

from questpal.palette.constants import (
    PALNAMESIZE,
    RECORD_SIZE,
    newerpdTOTAL,
    newpdTOTAL,
    oldpdTOTAL,
)
from questpal.palette.types import ColorCycle, MiscData, PaletteStore

CycleRow = Sequence[Tuple[int, int, int]]


def make_record(index: int) -> bytes:
    """Distinct, never blank 48 byte record tagged with its on-disk index."""
    return struct.pack('<H', index) + bytes([1 + index % 63]) * (RECORD_SIZE - 2)


def encode_name(name: str) -> bytes:
    return name.encode('latin-1').ljust(PALNAMESIZE, b'\0')


def write_section(
    version: int,
    build: int,
    sub_version: int = 0,
    names: Dict[int, str] = None,
    cycles: Sequence[CycleRow] = (),
    declared_size: int = None,
) -> bytes:
    names = names or {}
    body = bytearray()

    nrecords = oldpdTOTAL
    if version > 0x192 or (version == 0x192 and build >= 73):
        nrecords = newerpdTOTAL if sub_version >= 4 else newpdTOTAL
    for index in range(nrecords):
        body += make_record(index)

    if version > 0x192 or (version == 0x192 and build >= 76):
        for level in range(256 if sub_version < 3 else 512):
            body += encode_name(names.get(level, ''))

    if version > 0x192:
        body += struct.pack('<H', len(cycles))
        for row in cycles:
            body += bytes(first for first, _, _ in row)
            body += bytes(count for _, count, _ in row)
            body += bytes(speed for _, _, speed in row)
        size = len(body) if declared_size is None else declared_size
        return struct.pack('<HHI', sub_version, 1, size) + bytes(body)
    return bytes(body)


@pytest.fixture
def section_stream():
    """Factory creating a readable stream holding a palette section."""

    def factory(*args, **kwargs) -> io.BytesIO:
        return io.BytesIO(write_section(*args, **kwargs))

    return factory


@pytest.fixture
def store():
    return PaletteStore()


@pytest.fixture
def dirty_store():
    """Store filled with garbage so untouched tables are detectable."""
    dirty = PaletteStore()
    dirty.colordata[:] = b'\xAA' * len(dirty.colordata)
    dirty.palnames[:] = [b'\xBB' * PALNAMESIZE] * len(dirty.palnames)
    return dirty


@pytest.fixture
def dirty_misc():
    misc = MiscData(extra={'flags': 7})
    misc.cycles[:] = [[ColorCycle(9, 9, 9)] * 3 for _ in range(len(misc.cycles))]
    return misc
