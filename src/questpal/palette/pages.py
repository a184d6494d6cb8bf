from typing import Iterator, NamedTuple

import deal

from .constants import (
    MAXLEVELS,
    RECORD_SIZE,
    pdLEVEL,
    pdSPRITE,
    newerpoSPRITE,
    poFULL,
    poLEVEL,
)
from .types import PaletteStore


class Page(NamedTuple):
    """Group of color records edited together

    label: file-friendly name

    start: index of first record

    count: number of records
    """

    label: str
    start: int
    count: int


def main_page() -> Page:
    return Page('main', poFULL, poLEVEL - poFULL)


@deal.pre(lambda level: 0 <= level < MAXLEVELS)
def level_page(level: int) -> Page:
    return Page(f'level_{level:03d}', poLEVEL + level * pdLEVEL, pdLEVEL)


def sprite_page() -> Page:
    return Page('sprites', newerpoSPRITE, pdSPRITE)


def page_data(store: PaletteStore, page: Page) -> bytes:
    return bytes(
        store.colordata[page.start * RECORD_SIZE : (page.start + page.count) * RECORD_SIZE]
    )


def is_blank(store: PaletteStore, page: Page) -> bool:
    return not any(page_data(store, page))


def used_pages(store: PaletteStore) -> Iterator[Page]:
    """Main and sprite pages, and every level page with a name or colors."""
    yield main_page()
    for level in range(MAXLEVELS):
        page = level_page(level)
        if store.name(level) or not is_blank(store, page):
            yield page
    yield sprite_page()
