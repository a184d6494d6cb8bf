#!/usr/bin/env python3

import struct
from contextlib import contextmanager
from typing import Iterator, List, NamedTuple, Optional, Union

from questpal.kernel.buffer import UnexpectedBufferSize
from questpal.kernel.settings import _DecodeSetting, preset
from questpal.kernel.stream import ByteReader, Stream
from questpal.kernel.structured import StructuredTuple

from .constants import (
    CYCLE_INDICES,
    MAXLEVELS,
    PALNAMESIZE,
    RECORD_SIZE,
    newerpdTOTAL,
    newpdTOTAL,
    oldpdTOTAL,
)
from .layout import has_section_header, resolve_layout
from .relocate import relocate_extended_sprites, relocate_legacy_sprites
from .types import (
    ColorCycle,
    ColorLayout,
    CycleTable,
    InvalidFormat,
    MiscData,
    PaletteStore,
    SectionLayout,
    StatusCode,
    empty_colordata,
    empty_cycles,
    init_palette_names,
)


class SectionHeader(NamedTuple):
    sub_version: int
    reserved: int
    size: int


class CycleSet(NamedTuple):
    first: bytes
    count: bytes
    speed: bytes


SECTION_HEADER = StructuredTuple(
    ('sub_version', 'reserved', 'size'),
    struct.Struct('<HHI'),
    SectionHeader,
)

# field-major: all three firsts, then counts, then speeds
CYCLE_SET = StructuredTuple(
    ('first', 'count', 'speed'),
    struct.Struct('<3s3s3s'),
    CycleSet,
)


@contextmanager
def reading(reader: ByteReader, field: str) -> Iterator[None]:
    offset = reader.tell()
    try:
        yield
    except UnexpectedBufferSize as exc:
        raise InvalidFormat(field, offset) from exc


def read_records(reader: ByteReader, table: bytearray, start: int, count: int) -> None:
    for index in range(start, start + count):
        with reading(reader, f'color record {index}'):
            record = reader.read(RECORD_SIZE)
        table[index * RECORD_SIZE : (index + 1) * RECORD_SIZE] = record


def read_colors(reader: ByteReader, layout: SectionLayout) -> bytearray:
    colordata = empty_colordata()
    read_records(reader, colordata, 0, oldpdTOTAL)
    if layout.colors == ColorLayout.LEGACY:
        relocate_legacy_sprites(colordata)
        return colordata

    read_records(reader, colordata, oldpdTOTAL, newpdTOTAL - oldpdTOTAL)
    if layout.colors == ColorLayout.EXTENDED:
        relocate_extended_sprites(colordata)
    else:
        read_records(reader, colordata, newpdTOTAL, newerpdTOTAL - newpdTOTAL)
    return colordata


def read_palette_names(reader: ByteReader, count: Optional[int]) -> List[bytes]:
    if count is None:
        return init_palette_names()

    names = []
    for level in range(count):
        with reading(reader, f'palette name {level}'):
            names.append(reader.read(PALNAMESIZE))
    names.extend(bytes(PALNAMESIZE) for _ in range(count, MAXLEVELS))
    return names


def read_cycles(reader: ByteReader) -> CycleTable:
    cycles = empty_cycles()
    offset = reader.tell()
    with reading(reader, 'cycle count'):
        palcycles = reader.read_word()
    if palcycles > CYCLE_INDICES:
        raise InvalidFormat(f'cycle count ({palcycles} > {CYCLE_INDICES})', offset)

    for index in range(palcycles):
        with reading(reader, f'color cycle {index}'):
            cset = CYCLE_SET.unpack(reader)
        cycles[index] = [
            ColorCycle(first, count, speed)
            for first, count, speed in zip(cset.first, cset.count, cset.speed)
        ]
    return cycles


def decode_color_data(
    stream: Union[Stream, ByteReader],
    misc: MiscData,
    store: PaletteStore,
    version: int,
    build: int,
    keep_data: bool = True,
    cfg: _DecodeSetting = preset,
) -> SectionLayout:
    """Decode palette section into staging tables,
    then commit to `store` and `misc` only if `keep_data` is set.

    Raises `InvalidFormat` on the first failed read, leaving destinations untouched.
    """
    reader = stream if isinstance(stream, ByteReader) else ByteReader(stream)

    header = None
    if has_section_header(version, build):
        with reading(reader, 'section header'):
            header = SECTION_HEADER.unpack(reader)
    start = reader.tell()

    layout = resolve_layout(version, build, header.sub_version if header else 0)
    cfg.logger.debug(
        f'palette section version={version:#x} build={build} layout={layout}'
    )

    colordata = read_colors(reader, layout)
    palnames = read_palette_names(reader, layout.names)
    cycles = read_cycles(reader) if layout.cycles else None

    if header and cfg.check_size and reader.tell() - start != header.size:
        cfg.logger.warning(
            f'palette section declares {header.size} bytes but {reader.tell() - start} were read'
        )

    if keep_data:
        store.colordata[:] = colordata
        store.palnames[:] = palnames
        if cycles is not None:
            misc.cycles[:] = cycles
    return layout


def read_color_data(
    stream: Union[Stream, ByteReader],
    misc: MiscData,
    store: PaletteStore,
    version: int,
    build: int,
    keep_data: bool = True,
    cfg: _DecodeSetting = preset,
) -> StatusCode:
    try:
        decode_color_data(stream, misc, store, version, build, keep_data, cfg=cfg)
    except InvalidFormat as exc:
        cfg.logger.warning(exc)
        return StatusCode.INVALID
    return StatusCode.OK
