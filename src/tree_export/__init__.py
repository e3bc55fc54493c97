"""Directory tree export utilities.

This package renders directory structures as ASCII-connector text trees, with
optional file listing, depth limiting, and glob-based exclusion filters.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("tree-export")
except PackageNotFoundError:
    __version__ = "unknown"
