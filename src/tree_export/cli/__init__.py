"""Command-line interface for tree-export."""
