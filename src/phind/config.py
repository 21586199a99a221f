"""
Exclude pattern configuration for phind.

Exclude patterns come from three sources, always combined in this order:
built-in defaults, the per-user global ignore file, and command-line excludes.
The combined list is cached until one of the sources changes.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from phind.walker.defaults import DEFAULT_EXCLUDES
from phind.walker.diagnostics import Diagnostics, LoggingDiagnostics
from phind.walker.ignore_file import read_ignore_file, resolve_global_ignore_path


class PhindConfig:
    """
    Holds the three exclude pattern sources and the cached combined list.

    Duplicates across sources are kept: a pattern listed both as a default and
    on the command line appears twice in `effective_exclude`.

    `environ`, `platform` and `home_dir` only feed the global ignore path
    lookup, which happens once here; `ignore_path` skips the lookup entirely.
    """

    def __init__(
        self,
        default_excludes: Iterable[str] | None = None,
        *,
        ignore_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
        home_dir: Callable[[], Path] = Path.home,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self._default_excludes: list[str] = list(
            default_excludes if default_excludes is not None else DEFAULT_EXCLUDES
        )
        self._global_excludes: list[str] = []
        self._cli_excludes: list[str] = []
        self._effective_excludes: list[str] | None = None
        self._diagnostics: Diagnostics = (
            diagnostics if diagnostics is not None else LoggingDiagnostics()
        )
        if ignore_path is None:
            ignore_path = resolve_global_ignore_path(
                environ if environ is not None else os.environ,
                platform if platform is not None else sys.platform,
                home_dir,
            )
        self._global_ignore_path: Path = ignore_path

    @property
    def global_ignore_path(self) -> Path:
        return self._global_ignore_path

    @property
    def default_excludes(self) -> list[str]:
        return list(self._default_excludes)

    @property
    def global_excludes(self) -> list[str]:
        return list(self._global_excludes)

    @property
    def cli_excludes(self) -> list[str]:
        return list(self._cli_excludes)

    def load_global_ignores(self, force_reload: bool = False) -> None:
        """
        Read patterns from the global ignore file.

        Does nothing if patterns are already loaded, unless `force_reload`.
        A missing file gives no patterns. Any other read failure is reported as
        a warning and also gives no patterns; this method never raises.
        """
        if not force_reload and self._global_excludes:
            return

        try:
            patterns = read_ignore_file(self._global_ignore_path)
        except FileNotFoundError:
            patterns = []
        except (OSError, UnicodeDecodeError) as e:
            self._diagnostics.warn(
                f"Could not read global ignore file at {self._global_ignore_path}: {e}"
            )
            patterns = []
        self._global_excludes = patterns
        self._effective_excludes = None

    def set_global_excludes(self, patterns: Iterable[str]) -> None:
        self._global_excludes = list(patterns)
        self._effective_excludes = None

    def set_cli_excludes(self, patterns: Iterable[str]) -> None:
        self._cli_excludes = list(patterns)
        self._effective_excludes = None

    @property
    def effective_exclude(self) -> list[str]:
        """
        Combined exclude patterns: defaults + global + cli. The same list object
        is returned until a source changes; callers must not mutate it.
        """
        if self._effective_excludes is None:
            self._effective_excludes = (
                self._default_excludes + self._global_excludes + self._cli_excludes
            )
        return self._effective_excludes

    def describe_default_excludes(self) -> str:
        """Render the defaults for help text, e.g. `"node_modules", ".git"`."""
        return ", ".join(f'"{pattern}"' for pattern in self._default_excludes)
