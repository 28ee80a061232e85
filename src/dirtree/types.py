from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class PatternMode(str, Enum):
    """How the name pattern is applied when filtering entries.

    Attributes:
        INCLUDE: Keep only entries whose name contains the pattern (``-P``)
        EXCLUDE: Drop entries whose name contains the pattern (``-I``)
    """

    INCLUDE = "include"
    EXCLUDE = "exclude"


class SizeMode(str, Enum):
    """How the size column of the attribute block is printed.

    Attributes:
        OFF: No size column
        BYTES: Exact byte count (``-s``)
        BINARY: Human readable, powers of 1024 (``-h``)
        SI: Human readable, powers of 1000 (``--si``)
    """

    OFF = "off"
    BYTES = "bytes"
    BINARY = "binary"
    SI = "si"
