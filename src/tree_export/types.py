from enum import Enum
from os import PathLike
from typing import Callable, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Predicate deciding whether a bare entry name matches a single glob pattern
Matcher = Callable[[str, str], bool]


class EntryKind(Enum):
    """Enumeration of entry kinds encountered while listing a directory.

    Symbolic links are classified by their target, so a link to a directory is a
    DIRECTORY and a link to a regular file is a FILE.

    Attributes:
        FILE: Anything that is not a directory
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
