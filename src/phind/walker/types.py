"""Option and entry types for directory walks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from phind.walker.defaults import DEFAULT_INCLUDES


class MatchType(str, Enum):
    """Which kinds of entries a walk reports."""

    FILE = "f"
    DIRECTORY = "d"
    ANY = "any"


class EntryType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


def _as_tuple(patterns: Iterable[str]) -> tuple[str, ...]:
    return tuple(patterns)


@dataclass(frozen=True)
class WalkOptions:
    """
    Read-only configuration for one walk.

    `max_depth=None` means unbounded; `max_depth=0` reports at most the root.
    Pattern sequences are stored as tuples, so later changes to the lists a
    caller passed in do not affect a walk.
    """

    include_patterns: tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_INCLUDES))
    exclude_patterns: tuple[str, ...] = ()
    match_type: MatchType = MatchType.ANY
    max_depth: int | None = None
    ignore_case: bool = False

    def __post_init__(self) -> None:
        # Frozen, so normalize through object.__setattr__.
        object.__setattr__(self, "include_patterns", _as_tuple(self.include_patterns))
        object.__setattr__(self, "exclude_patterns", _as_tuple(self.exclude_patterns))
        object.__setattr__(self, "match_type", MatchType(self.match_type))
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")


@dataclass(frozen=True)
class Entry:
    """A filesystem node visited during a walk."""

    path: Path
    relative: str
    depth: int
    entry_type: EntryType

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY
