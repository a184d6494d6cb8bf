import os
from typing import Union

PathLike = Union[str, os.PathLike]


def read_file(path: PathLike) -> bytes:
    with open(path, 'rb') as res:
        return res.read()
