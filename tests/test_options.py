"""Tests for the Options value and FileSystemEntry."""

import dataclasses
from pathlib import Path

import pytest

from tree_export.file_system_entry import FileSystemEntry
from tree_export.options import DEFAULT_OPTIONS, Options
from tree_export.types import EntryKind


def test_default_options():
    assert DEFAULT_OPTIONS.exclude_dirs == ()
    assert DEFAULT_OPTIONS.exclude_files == ()
    assert DEFAULT_OPTIONS.include_files is False
    assert DEFAULT_OPTIONS.max_depth is None


def test_patterns_are_stored_as_tuples():
    options = Options(exclude_dirs=["a", "b"], exclude_files={"*.log"})
    assert options.exclude_dirs == ("a", "b")
    assert options.exclude_files == ("*.log",)
    hash(options)


def test_options_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_OPTIONS.max_depth = 3


def test_replace_returns_copy():
    changed = DEFAULT_OPTIONS.replace(max_depth=0, exclude_dirs=[".git"])
    assert changed.max_depth == 0
    assert changed.exclude_dirs == (".git",)
    assert DEFAULT_OPTIONS.max_depth is None


def test_entry_kinds():
    directory = FileSystemEntry("src", Path("src"), EntryKind.DIRECTORY)
    file = FileSystemEntry("main.py", Path("src/main.py"), EntryKind.FILE)
    assert directory.is_dir and directory.is_expandable
    assert not file.is_dir and not file.is_expandable


def test_symlinked_directory_is_not_expandable():
    link = FileSystemEntry("build", Path("build"), EntryKind.DIRECTORY, is_symlink=True)
    assert link.is_dir
    assert not link.is_expandable
