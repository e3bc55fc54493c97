"""Resolved rendering options."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Options:
    """Immutable set of options controlling a single render.

    ``max_depth`` is deliberately an ``Optional[int]``: ``None`` means unlimited
    depth while ``0`` is a valid finite value that lists only the root's direct
    children. Callers must test against ``None`` and never rely on truthiness.

    Attributes:
        exclude_dirs (Tuple[str, ...]): Glob patterns for directory names to drop.
        exclude_files (Tuple[str, ...]): Glob patterns for file names to drop.
        include_files (bool): Whether files are listed at all.
        max_depth (Optional[int]): Number of levels to expand below the root.

    Example:
        >>> options = Options(exclude_dirs=["node_modules", ".git"], max_depth=0)
        >>> options.exclude_dirs
        ('node_modules', '.git')
        >>> options.max_depth is None
        False
        >>> options.replace(include_files=True).include_files
        True
    """

    exclude_dirs: Tuple[str, ...] = ()
    exclude_files: Tuple[str, ...] = ()
    include_files: bool = False
    max_depth: Optional[int] = None

    def __post_init__(self) -> None:
        # Accept any iterable of patterns but store tuples so the value stays hashable
        object.__setattr__(self, "exclude_dirs", tuple(self.exclude_dirs))
        object.__setattr__(self, "exclude_files", tuple(self.exclude_files))

    def replace(self, **changes: Any) -> "Options":
        """Return a copy of these options with the given fields replaced."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = Options()
