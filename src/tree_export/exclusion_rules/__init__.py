"""Exclusion rules for filtering directory entries by name."""

from .base_rules import BaseExclusionRules
from .glob_rules import GlobExclusionRules, expand_braces, glob_match

__all__ = [
    "BaseExclusionRules",
    "GlobExclusionRules",
    "expand_braces",
    "glob_match",
]
