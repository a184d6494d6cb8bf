import deal

from .constants import (
    RECORD_SIZE,
    SPRITE_BLOCK,
    newerpoSPRITE,
    newpoSPRITE,
    oldpoSPRITE,
)


def _in_table(table: bytearray, index: int, count: int) -> bool:
    return index >= 0 and count >= 0 and (index + count) * RECORD_SIZE <= len(table)


@deal.chain(
    deal.pre(lambda _: _in_table(_.table, _.src, _.count)),
    deal.pre(lambda _: _in_table(_.table, _.dst, _.count)),
    deal.has(),
)
def move_records(table: bytearray, src: int, dst: int, count: int) -> None:
    """Copy `count` records from index `src` to index `dst`.
    Source bytes are read in full before writing, overlapping ranges are safe.
    """
    table[dst * RECORD_SIZE : (dst + count) * RECORD_SIZE] = bytes(
        table[src * RECORD_SIZE : (src + count) * RECORD_SIZE]
    )


@deal.chain(
    deal.pre(lambda _: _in_table(_.table, _.start, _.count)),
    deal.has(),
)
def clear_records(table: bytearray, start: int, count: int) -> None:
    table[start * RECORD_SIZE : (start + count) * RECORD_SIZE] = bytes(
        count * RECORD_SIZE
    )


def relocate_legacy_sprites(table: bytearray) -> None:
    """Migrate a table read with the oldest layout.

    Sprite palettes move from the old offset straight to the newest one,
    everything between is cleared, and sprite csets 8-10 shift up a slot
    leaving cset 8 empty.
    """
    move_records(table, oldpoSPRITE, newerpoSPRITE, SPRITE_BLOCK)
    clear_records(table, oldpoSPRITE, newerpoSPRITE - oldpoSPRITE)
    # descending, each slot overwritten by its predecessor
    for slot in (11, 10, 9):
        move_records(table, newerpoSPRITE + slot - 1, newerpoSPRITE + slot, 1)
    clear_records(table, newerpoSPRITE + 8, 1)


def relocate_extended_sprites(table: bytearray) -> None:
    """Migrate a table read with 256 level palettes to the 512 level layout."""
    move_records(table, newpoSPRITE, newerpoSPRITE, SPRITE_BLOCK)
    clear_records(table, newpoSPRITE, newerpoSPRITE - newpoSPRITE)
