"""Implementation of exclusion rules using shell-style glob patterns."""

from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from pathspec import PathSpec

from tree_export.types import Matcher

from .base_rules import BaseExclusionRules


def _split_alternatives(body: str) -> List[str]:
    """Split the inside of a brace group on commas that are not nested or escaped."""
    alternatives = []
    depth = 0
    current = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            current.append(body[i : i + 2])
            i += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            alternatives.append("".join(current))
            current = []
            i += 1
            continue
        current.append(ch)
        i += 1
    alternatives.append("".join(current))
    return alternatives


def expand_braces(pattern: str) -> List[str]:
    """Expand shell-style brace alternatives in a glob pattern.

    Each ``{a,b,...}`` group is replaced by one pattern per alternative, nested
    groups included. Groups without a top-level comma, unbalanced braces and
    backslash-escaped braces are left as literal text.

    Args:
        pattern: A glob pattern that may contain brace groups.

    Returns:
        The list of brace-free patterns, in expansion order.

    Example:
        >>> expand_braces("*.{js,ts}")
        ['*.js', '*.ts']
        >>> expand_braces("{src,lib{,64}}")
        ['src', 'lib', 'lib64']
        >>> expand_braces("{single}")
        ['{single}']
    """
    depth = 0
    start = 0
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                alternatives = _split_alternatives(pattern[start + 1 : i])
                if len(alternatives) > 1:
                    prefix, suffix = pattern[:start], pattern[i + 1 :]
                    expanded: List[str] = []
                    for alternative in alternatives:
                        expanded.extend(expand_braces(prefix + alternative + suffix))
                    return expanded
        i += 1
    return [pattern]


def _literal_trailing_whitespace(alternative: str) -> str:
    """Wrap trailing whitespace in character classes so pathspec keeps it.

    Example:
        >>> _literal_trailing_whitespace("a  ")
        'a[ ][ ]'
    """
    stripped = alternative.rstrip()
    return stripped + "".join(f"[{ch}]" for ch in alternative[len(stripped) :])


@lru_cache(maxsize=256)
def _compile(pattern: str) -> Tuple[Tuple[bool, PathSpec], ...]:
    # Each alternative records whether it may match names with a leading dot.
    # A bare name never contains "/", so alternatives with one are dropped
    # instead of getting gitignore's anchoring and directory-only meanings.
    return tuple(
        (alternative.startswith("."), PathSpec.from_lines("gitwildmatch", [_literal_trailing_whitespace(alternative)]))
        for alternative in expand_braces(pattern)
        if "/" not in alternative
    )


def glob_match(name: str, pattern: str) -> bool:
    """Check whether a bare entry name matches a shell-style glob pattern.

    Supports ``*``, ``?``, ``[...]`` classes, ``**`` and ``{a,b}`` alternatives.
    As in a shell, wildcards never match a leading dot: ``.git`` is matched by
    ``.git`` or ``.*`` but not by ``*``. A leading ``!`` negates the pattern and a
    leading ``#`` makes it a comment that matches nothing. Matching is
    case-sensitive and applies to the name only: whitespace is significant
    everywhere in the pattern, and a pattern containing ``/`` matches nothing.

    Args:
        name: The bare name of a file or directory.
        pattern: The glob pattern to test.

    Returns:
        True if the name matches the pattern.

    Example:
        >>> glob_match("app.test.js", "*.test.js")
        True
        >>> glob_match("App.js", "app.js")
        False
        >>> glob_match(".git", "*")
        False
        >>> glob_match("dist", "!src")
        True
        >>> glob_match("b", "/b")
        False
    """
    negated = False
    while pattern.startswith("!"):
        negated = not negated
        pattern = pattern[1:]

    if not pattern or pattern.startswith("#"):
        matched = False
    else:
        hidden = name.startswith(".")
        matched = any(
            spec.match_file(name) for allows_dot, spec in _compile(pattern) if allows_dot or not hidden
        )
    return matched != negated


class GlobExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using shell-style glob patterns.

    An entry is excluded when its bare name matches ANY of the configured
    patterns. The matching predicate is injected so callers (and tests) can
    substitute their own pattern semantics; it defaults to :func:`glob_match`,
    which compiles patterns with the pathspec library.

    Example:
        >>> rules = GlobExclusionRules(["node_modules", ".git"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("src")
        False
        >>> exact = GlobExclusionRules(["*.js"], matcher=lambda name, pattern: name == pattern)
        >>> exact.exclude("app.js")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None, matcher: Matcher = glob_match):
        """Initialize GlobExclusionRules.

        Args:
            patterns: Glob patterns to exclude. Defaults to no patterns.
            matcher: Predicate ``matcher(name, pattern) -> bool``. Defaults to glob_match.
        """
        self._patterns: List[str] = list(patterns) if patterns is not None else []
        self.matcher = matcher

    def exclude(self, name: str) -> bool:
        """Check if a name matches any configured pattern.

        Uses short-circuit evaluation: stops at the first matching pattern.
        """
        return any(self.matcher(name, pattern) for pattern in self._patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern to the existing rules."""
        self._patterns.append(rule)
