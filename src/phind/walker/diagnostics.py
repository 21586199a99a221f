"""
Sinks for non-fatal problems found while loading ignore files or walking.

Library code never prints; it reports through one of these and lets the caller
decide where messages go.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Diagnostics(Protocol):
    def warn(self, message: str) -> None: ...

    def error(self, path: Path, message: str) -> None: ...


class LoggingDiagnostics:
    """Forwards diagnostics to a `logging.Logger` (stderr under the CLI)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log: logging.Logger = log if log is not None else logger

    def warn(self, message: str) -> None:
        self._log.warning(message)

    def error(self, path: Path, message: str) -> None:
        self._log.error(message, extra={"path": str(path)})


@dataclass
class CollectedError:
    path: Path
    message: str


@dataclass
class DiagnosticsCollector:
    """Keeps every diagnostic in memory, for callers that report them later."""

    warnings: list[str] = field(default_factory=list)
    errors: list[CollectedError] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, path: Path, message: str) -> None:
        self.errors.append(CollectedError(path=path, message=message))
