import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional

from .constants import (
    CYCLE_INDICES,
    CYCLE_SLOTS,
    MAXLEVELS,
    PALNAMESIZE,
    RECORD_SIZE,
    newerpdTOTAL,
)


class StatusCode(enum.IntEnum):
    OK = 0
    INVALID = 2


class InvalidFormat(ValueError):
    def __init__(self, field: str, offset: int) -> None:
        super().__init__(f'invalid palette section: failed reading {field} at offset {offset}')
        self.field = field
        self.offset = offset


class ColorCycle(NamedTuple):
    """Color cycling descriptor

    first: starting color index

    count: number of colors in the cycle

    speed: animation speed
    """

    first: int = 0
    count: int = 0
    speed: int = 0


CycleTable = List[List[ColorCycle]]


def empty_cycles() -> CycleTable:
    return [[ColorCycle()] * CYCLE_SLOTS for _ in range(CYCLE_INDICES)]


def empty_colordata() -> bytearray:
    return bytearray(newerpdTOTAL * RECORD_SIZE)


def init_palette_names() -> List[bytes]:
    return [bytes(PALNAMESIZE) for _ in range(MAXLEVELS)]


def palette_name(raw: bytes) -> str:
    return raw.split(b'\0', 1)[0].decode('latin-1')


@dataclass
class MiscData:
    """Quest-wide data holding the color cycle table

    cycles: 256 x 3 table of `ColorCycle`

    extra: fields owned by other sections, never touched here
    """

    cycles: CycleTable = field(default_factory=empty_cycles)
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PaletteStore:
    """Destination storage for decoded color records and palette names"""

    colordata: bytearray = field(default_factory=empty_colordata)
    palnames: List[bytes] = field(default_factory=init_palette_names)

    def record(self, index: int) -> bytes:
        return bytes(self.colordata[index * RECORD_SIZE : (index + 1) * RECORD_SIZE])

    def name(self, level: int) -> str:
        return palette_name(self.palnames[level])


class ColorLayout(enum.Enum):
    LEGACY = 'legacy'
    EXTENDED = 'extended'
    NEWEST = 'newest'


@dataclass(frozen=True)
class SectionLayout:
    header: bool
    sub_version: int
    colors: ColorLayout
    names: Optional[int]
    cycles: bool
