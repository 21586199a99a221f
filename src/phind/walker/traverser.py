"""
DirectoryWalker: the main entry point for directory traversal.

Walks a directory tree depth-first and reports entries that survive the
exclude, depth, type and include checks, in that order.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from phind.walker.diagnostics import Diagnostics, LoggingDiagnostics
from phind.walker.matcher import GlobMatcher
from phind.walker.types import Entry, EntryType, MatchType, WalkOptions

logger = logging.getLogger(__name__)

MatchSink = Callable[[Entry], None]


class DirectoryWalker:
    """
    Finds entries under a walk root matching the configured options.

    Exclusion beats inclusion: an excluded directory is pruned (neither
    reported nor read), an excluded file is skipped. The walk root itself is
    never excluded. Unreadable directories are reported to `diagnostics` and
    treated as empty.

    Patterns are compiled on construction, so invalid patterns raise here,
    before any filesystem access.
    """

    def __init__(self, options: WalkOptions, diagnostics: Diagnostics | None = None) -> None:
        self._options: WalkOptions = options
        self._diagnostics: Diagnostics = (
            diagnostics if diagnostics is not None else LoggingDiagnostics()
        )
        self._include: GlobMatcher = GlobMatcher(options.include_patterns, options.ignore_case)
        self._exclude: GlobMatcher = GlobMatcher(options.exclude_patterns, options.ignore_case)

    @property
    def options(self) -> WalkOptions:
        return self._options

    def walk(self, root: str | Path, sink: MatchSink) -> int:
        """Call `sink` for each match, in visit order. Returns the match count."""
        count = 0
        for entry in self.iter_matches(root):
            sink(entry)
            count += 1
        return count

    def iter_matches(self, root: str | Path) -> Iterator[Entry]:
        """
        Lazily yield matching entries in visit order: each directory is
        followed by its descendants before its next sibling. Siblings come in
        `os.scandir()` order, which is not sorted.
        """
        root_path = Path(root).absolute()
        root_entry = Entry(
            path=root_path,
            relative=".",
            depth=0,
            entry_type=_stat_entry_type(root_path),
        )

        if self._should_report(root_entry):
            yield root_entry

        if not self._can_descend(root_entry):
            return

        # One list of pending children per open directory level.
        stack: list[Iterator[Entry]] = [iter(self._read_children(root_entry))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            if self._exclude.matches(entry.relative, entry.name, entry.is_dir):
                if entry.is_dir:
                    logger.debug("Pruning excluded directory: %s", entry.relative)
                continue

            if self._should_report(entry):
                yield entry

            if self._can_descend(entry):
                stack.append(iter(self._read_children(entry)))

    def _should_report(self, entry: Entry) -> bool:
        """Depth, type and include checks, for an entry that is not excluded."""
        max_depth = self._options.max_depth
        if max_depth is not None and entry.depth > max_depth:
            return False

        match_type = self._options.match_type
        if match_type is MatchType.FILE and entry.entry_type is not EntryType.FILE:
            return False
        if match_type is MatchType.DIRECTORY and entry.entry_type is not EntryType.DIRECTORY:
            return False

        if entry.depth == 0:
            # "." is a label for the root, not a path; match the root by its name.
            name = entry.name or entry.relative
            return self._include.matches(name, name, entry.is_dir)
        return self._include.matches(entry.relative, entry.name, entry.is_dir)

    def _can_descend(self, entry: Entry) -> bool:
        if not entry.is_dir:
            return False
        max_depth = self._options.max_depth
        return max_depth is None or entry.depth < max_depth

    def _read_children(self, parent: Entry) -> list[Entry]:
        """
        List a directory's children. Read failures are reported to diagnostics
        and give an empty list.
        """
        try:
            with os.scandir(parent.path) as it:
                dir_entries = list(it)
        except PermissionError as e:
            self._diagnostics.error(
                parent.path, f"Permission error reading directory {_display(parent.path)}: {e}"
            )
            return []
        except OSError as e:
            self._diagnostics.error(
                parent.path, f"Error reading directory {_display(parent.path)}: {e}"
            )
            return []

        prefix = "" if parent.relative == "." else parent.relative + "/"
        depth = parent.depth + 1
        return [
            Entry(
                path=parent.path / dir_entry.name,
                relative=prefix + dir_entry.name,
                depth=depth,
                entry_type=_dir_entry_type(dir_entry),
            )
            for dir_entry in dir_entries
        ]


def _display(path: Path) -> str:
    return path.as_posix()


def _dir_entry_type(dir_entry: os.DirEntry[str]) -> EntryType:
    """Classify a directory entry without following symlinks."""
    try:
        if dir_entry.is_dir(follow_symlinks=False):
            return EntryType.DIRECTORY
        if dir_entry.is_file(follow_symlinks=False):
            return EntryType.FILE
    except OSError:
        return EntryType.OTHER
    return EntryType.OTHER


def _stat_entry_type(path: Path) -> EntryType:
    """
    Classify the walk root. Follows symlinks, so a link to a directory can be
    walked. Raises `FileNotFoundError` if the root does not exist.
    """
    if path.is_dir():
        return EntryType.DIRECTORY
    if path.is_file():
        return EntryType.FILE
    if not path.exists():
        raise FileNotFoundError(f"Path not found: {path}")
    return EntryType.OTHER
