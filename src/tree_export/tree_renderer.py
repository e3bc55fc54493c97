"""Recursive rendering of directory structures as ASCII-connector text trees.

This module provides the TreeRenderer class, which walks a directory, filters its
entries according to an Options value, and produces the indented text tree, as
well as the ``render`` convenience function wrapping it.
"""

import logging
import os
import stat
from pathlib import Path
from typing import List

from tree_export.exceptions import TraversalError
from tree_export.exclusion_rules.glob_rules import GlobExclusionRules, glob_match
from tree_export.file_system_entry import FileSystemEntry
from tree_export.options import Options
from tree_export.types import EntryKind, Matcher, PathType

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "


class TreeRenderer:
    """Renders a directory tree as text using a fixed set of options.

    Entries are listed in the order the operating system returns them; no sorting
    is applied. Each directory level is listed, classified and filtered in full
    before any of its lines are produced, so a filesystem error never leaves a
    half-written line behind.

    Symbolic Link Behavior:
        Symbolic links are classified by their target. A link to a directory is
        shown as a directory (and is subject to the directory exclusion patterns)
        but is never expanded. A broken link cannot be classified and raises
        TraversalError.

    Attributes:
        options (Options): The options applied to every level of the tree.
        directory_rules (GlobExclusionRules): Rules built from ``options.exclude_dirs``.
        file_rules (GlobExclusionRules): Rules built from ``options.exclude_files``.

    Example:
        >>> renderer = TreeRenderer(Options(include_files=True, max_depth=1))  # doctest: +SKIP
        >>> print(renderer.render("project"), end="")  # doctest: +SKIP
        ├── src
        │   └── main.py
        └── README.md
    """

    def __init__(self, options: Options, matcher: Matcher = glob_match) -> None:
        """Initialize a TreeRenderer.

        Args:
            options: The resolved options for this render.
            matcher: Predicate ``matcher(name, pattern) -> bool`` used for both
                exclusion lists. Defaults to glob_match.
        """
        self.options = options
        self.directory_rules = GlobExclusionRules(options.exclude_dirs, matcher=matcher)
        self.file_rules = GlobExclusionRules(options.exclude_files, matcher=matcher)

    def list_entries(self, path: PathType) -> List[FileSystemEntry]:
        """List and classify the immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            One entry per child, in native enumeration order.

        Raises:
            TraversalError: If the directory cannot be listed or a child cannot be
                inspected (permission denied, broken symlink, entry removed).
        """
        directory = Path(path)
        try:
            names = os.listdir(directory)
        except OSError as e:
            raise TraversalError(directory, e) from e

        entries = []
        for name in names:
            child = directory / name
            try:
                mode = child.lstat().st_mode
                is_symlink = stat.S_ISLNK(mode)
                if is_symlink:
                    mode = child.stat().st_mode
            except OSError as e:
                raise TraversalError(child, e) from e
            kind = EntryKind.DIRECTORY if stat.S_ISDIR(mode) else EntryKind.FILE
            entries.append(FileSystemEntry(name, child, kind, is_symlink=is_symlink))
        return entries

    def is_visible(self, entry: FileSystemEntry) -> bool:
        """Decide whether an entry survives the exclusion policy."""
        if entry.is_dir:
            return not self.directory_rules.exclude(entry.name)
        if not self.options.include_files:
            return False
        return not self.file_rules.exclude(entry.name)

    def should_expand(self, entry: FileSystemEntry, depth: int) -> bool:
        """Decide whether to descend into an entry listed at the given depth.

        ``max_depth`` is compared against ``None`` explicitly so that 0 keeps its
        meaning of "list the root's children only".
        """
        if not entry.is_expandable:
            return False
        return self.options.max_depth is None or depth < self.options.max_depth

    def render(self, path: PathType, indent: str = "", depth: int = 0) -> str:
        """Render the subtree below a directory.

        Args:
            path: Directory whose children are rendered. The directory itself is
                not part of the output.
            indent: Prefix accumulated from ancestor levels.
            depth: Number of levels already descended below the root.

        Returns:
            One newline-terminated line per visible entry, with the expansion of
            each expandable directory directly after its own line. An empty
            directory yields an empty string.

        Raises:
            TraversalError: If any directory or entry in the subtree cannot be read.
        """
        logger.debug("Rendering %s at depth %d", path, depth)
        visible = [entry for entry in self.list_entries(path) if self.is_visible(entry)]

        parts = []
        for index, entry in enumerate(visible):
            is_last = index == len(visible) - 1
            connector = LAST_BRANCH if is_last else BRANCH
            parts.append(f"{indent}{connector}{entry.name}\n")

            if self.should_expand(entry, depth):
                child_indent = indent + (SPACE_INDENT if is_last else PIPE_INDENT)
                parts.append(self.render(entry.path, child_indent, depth + 1))

        return "".join(parts)


def render(
    path: PathType, options: Options, indent: str = "", depth: int = 0, *, matcher: Matcher = glob_match
) -> str:
    """Render the directory tree below ``path`` using ``options``.

    This is a convenience wrapper around :class:`TreeRenderer`.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     render(tmpdir, Options())
        ''
    """
    return TreeRenderer(options, matcher=matcher).render(path, indent, depth)
