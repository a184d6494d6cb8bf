from typing import Optional, Protocol, Sequence

import numpy as np
from PIL import Image

from questpal.palette.constants import COLORS_PER_RECORD, RECORD_SIZE
from questpal.utils import funcutils

SWATCH_SIZE = 8

# palette channels are 6 bit
CHANNEL_MASK = 0x3F
COLOR_DEPTH_SHIFT = 2


class TImage(Protocol):
    @property
    def size(self) -> Sequence[int]:
        ...

    def save(self, fp: str, format: Optional[str] = None) -> None:
        ...


def record_colors(record: bytes) -> Sequence[Sequence[int]]:
    """Split 48 byte record into 16 (r, g, b) triplets of 8 bit channels."""
    return [
        tuple((channel & CHANNEL_MASK) << COLOR_DEPTH_SHIFT for channel in color)
        for color in funcutils.grouper(record, 3)
    ]


def records_to_image(data: bytes, swatch: int = SWATCH_SIZE) -> TImage:
    """Render records as rows of color swatches, one row per record."""
    if len(data) % RECORD_SIZE:
        raise ValueError(f'expected multiple of {RECORD_SIZE} bytes but got {len(data)}')
    npp = np.frombuffer(data, dtype=np.uint8).reshape(-1, COLORS_PER_RECORD, 3)
    npp = (npp & CHANNEL_MASK) << COLOR_DEPTH_SHIFT
    npp = np.repeat(np.repeat(npp, swatch, axis=0), swatch, axis=1)
    return Image.fromarray(np.ascontiguousarray(npp, dtype=np.uint8))
