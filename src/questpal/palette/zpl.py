import io
from typing import IO, NamedTuple

from questpal.kernel.settings import _DecodeSetting, preset
from questpal.kernel.stream import ByteReader
from questpal.utils.fileio import PathLike, read_file

from .decode import decode_color_data, reading
from .types import InvalidFormat, MiscData, PaletteStore, SectionLayout

ZPL_MAGIC = b'CSET'

# zpl files are written by 2.50 build 24
ZPL_VERSION = 0x250
ZPL_BUILD = 24


class ZplPalette(NamedTuple):
    store: PaletteStore
    misc: MiscData
    layout: SectionLayout


def read_zpl(stream: IO[bytes], cfg: _DecodeSetting = preset) -> ZplPalette:
    reader = ByteReader(stream)
    with reading(reader, 'zpl magic'):
        magic = reader.read(len(ZPL_MAGIC))
    if magic != ZPL_MAGIC:
        raise InvalidFormat(f'zpl magic (got {magic!r})', 0)

    store, misc = PaletteStore(), MiscData()
    layout = decode_color_data(reader, misc, store, ZPL_VERSION, ZPL_BUILD, cfg=cfg)
    return ZplPalette(store, misc, layout)


def from_bytes(data: bytes, cfg: _DecodeSetting = preset) -> ZplPalette:
    return read_zpl(io.BytesIO(data), cfg=cfg)


def from_path(path: PathLike, cfg: _DecodeSetting = preset) -> ZplPalette:
    return from_bytes(read_file(path), cfg=cfg)
