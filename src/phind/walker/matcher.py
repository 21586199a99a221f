"""
Glob matching for walk entries, using gitignore-style patterns from `pathspec`.

A pattern with no interior `/` (like `node_modules` or `*.txt`) matches a single
path segment, so it is checked against an entry's base name and matches at any
depth. A pattern with an interior or leading `/` (like `dir1/sub` or `/build`),
or one using `**`, is anchored to the walk root and only matches the entry's
relative path. A trailing `/` restricts a pattern to directories.

A pattern must match the whole candidate: `src` matches the directory `src`,
not the files below it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

import pathspec

_PATTERN_STYLE = "gitignore"

# pathspec compiles `*`/`**` and `*/`/`**/` to shortcuts meant for `re.search`.
_SEARCH_SHORTCUTS = {".": ".+", "/": ".+/"}


@dataclass(frozen=True)
class CompiledPattern:
    regex: re.Pattern[str]
    anchored: bool

    def matches(self, candidate: str) -> bool:
        """Match one `/`-separated candidate; directories may end with `/`."""
        if not self.anchored and "/" in candidate.rstrip("/"):
            return False
        return self.regex.fullmatch(candidate) is not None


def compile_pattern(pattern: str, ignore_case: bool = False) -> CompiledPattern | None:
    """
    Compile one glob pattern. Returns `None` for patterns that can never match
    on their own: blank lines, `#` comments and `!` negations.

    Raises `ValueError` (from `pathspec`) on invalid syntax.
    """
    pattern_cls = pathspec.util.lookup_pattern(_PATTERN_STYLE)
    compiled = pattern_cls(pattern)
    if not compiled.include or compiled.regex is None:
        return None
    source = compiled.regex.pattern
    source = _SEARCH_SHORTCUTS.get(source, source)
    return CompiledPattern(
        regex=re.compile(source, re.IGNORECASE if ignore_case else 0),
        anchored="/" in pattern.rstrip("/") or "**" in pattern,
    )


class GlobMatcher:
    """
    A compiled list of glob patterns. An entry matches if any pattern matches
    its relative path or (for unanchored patterns) its base name.
    """

    def __init__(self, patterns: Iterable[str], ignore_case: bool = False) -> None:
        self.ignore_case: bool = ignore_case
        self._patterns: list[CompiledPattern] = []
        for pattern in patterns:
            compiled = compile_pattern(pattern, ignore_case)
            if compiled is not None:
                self._patterns.append(compiled)

    def __len__(self) -> int:
        return len(self._patterns)

    def matches(self, relative: str, name: str, is_dir: bool = False) -> bool:
        """Check an entry, given its `/`-separated relative path and base name."""
        if not self._patterns:
            return False
        path_candidates = [relative]
        name_candidates = [name]
        if is_dir:
            # Directory-only patterns (`build/`) need the trailing slash.
            path_candidates.append(relative + "/")
            name_candidates.append(name + "/")
        for compiled in self._patterns:
            candidates = path_candidates if compiled.anchored else path_candidates + name_candidates
            if any(compiled.matches(candidate) for candidate in candidates):
                return True
        return False


def match(candidate: str, pattern: str, ignore_case: bool = False) -> bool:
    """Match a single `/`-separated path against a single glob pattern."""
    compiled = compile_pattern(pattern, ignore_case)
    if compiled is None:
        return False
    return compiled.matches(candidate)
