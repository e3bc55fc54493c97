"""Entry representation for items found while listing a directory."""

from dataclasses import dataclass
from pathlib import Path

from tree_export.types import EntryKind


@dataclass(frozen=True)
class FileSystemEntry:
    """A single child item of a directory being rendered.

    Entries are derived from the filesystem on every render call and are never
    cached or persisted.

    Attributes:
        name (str): The bare name of the entry (just the basename).
        path (Path): The full path of the entry.
        kind (EntryKind): DIRECTORY or FILE, as seen through symbolic links.
        is_symlink (bool): True if the entry itself is a symbolic link.

    Example:
        >>> entry = FileSystemEntry("src", Path("project/src"), EntryKind.DIRECTORY)
        >>> entry.is_dir
        True
        >>> entry.is_expandable
        True
    """

    name: str
    path: Path
    kind: EntryKind
    is_symlink: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_expandable(self) -> bool:
        """Whether the renderer may descend into this entry.

        Symbolic links to directories are listed as directories but never
        followed, which keeps link loops from recursing forever.
        """
        return self.is_dir and not self.is_symlink
