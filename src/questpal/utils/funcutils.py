from itertools import zip_longest
from typing import Iterable, Iterator, Optional, Sequence, TypeVar

T = TypeVar('T')


def grouper(
    iterable: Iterable[T], n: int, fillvalue: Optional[T] = None
) -> Iterator[Sequence[T]]:
    """Collect data into fixed-length chunks or blocks."""
    # grouper('ABCDEFG', 3, 'x') --> ABC DEF Gxx"
    args = [iter(iterable)] * n
    return zip_longest(*args, fillvalue=fillvalue)
