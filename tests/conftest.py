"""Test configuration and fixtures for tree-export."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def make_tree(tmp_path):
    """Return a helper that creates a directory structure below tmp_path.

    Keys are relative paths. A value of "dir" creates a directory; any other
    string creates a file with that content.
    """

    def _make_tree(structure):
        for name, content in structure.items():
            path = tmp_path / name
            if content == "dir":
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content)
        return tmp_path

    return _make_tree
