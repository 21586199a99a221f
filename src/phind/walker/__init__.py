"""
Self-contained directory walking with glob include/exclude rules, a type
filter and a depth bound.

No imports from `phind` outside this package.

Usage::

    from phind.walker import DirectoryWalker, MatchType, WalkOptions

    options = WalkOptions(
        include_patterns=["*.py"],
        exclude_patterns=["node_modules", ".git"],
        match_type=MatchType.FILE,
        max_depth=3,
    )
    walker = DirectoryWalker(options)
    count = walker.walk(".", lambda entry: print(entry.relative))
"""

from phind.walker.defaults import DEFAULT_EXCLUDES, DEFAULT_INCLUDES
from phind.walker.diagnostics import Diagnostics, DiagnosticsCollector, LoggingDiagnostics
from phind.walker.matcher import GlobMatcher, match
from phind.walker.traverser import DirectoryWalker
from phind.walker.types import Entry, EntryType, MatchType, WalkOptions

__all__ = [
    "DEFAULT_EXCLUDES",
    "DEFAULT_INCLUDES",
    "Diagnostics",
    "DiagnosticsCollector",
    "DirectoryWalker",
    "Entry",
    "EntryType",
    "GlobMatcher",
    "LoggingDiagnostics",
    "MatchType",
    "WalkOptions",
    "match",
]
