"""Global ignore file location and parsing."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from pathlib import Path

from phind.walker.defaults import IGNORE_DIR_NAME, IGNORE_FILE_NAME

_LINE_BREAK = re.compile(r"\r?\n")


def resolve_global_ignore_path(
    environ: Mapping[str, str],
    platform: str,
    home_dir: Callable[[], Path],
) -> Path:
    """
    Decide where the per-user ignore file lives.

    `XDG_CONFIG_HOME` wins when set, then `APPDATA` on Windows, then
    `~/.config`. `home_dir` is only called for the last case.
    """
    xdg_config_home = environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        config_dir = Path(xdg_config_home)
    elif platform == "win32" and environ.get("APPDATA"):
        config_dir = Path(environ["APPDATA"])
    else:
        config_dir = home_dir() / ".config"
    return config_dir / IGNORE_DIR_NAME / IGNORE_FILE_NAME


def parse_ignore_lines(content: str) -> list[str]:
    """
    Split ignore file content into patterns. Blank lines and `#` comments are
    dropped; every other line is kept as-is after trimming whitespace.
    """
    lines = (line.strip() for line in _LINE_BREAK.split(content))
    return [line for line in lines if line and not line.startswith("#")]


def read_ignore_file(path: Path) -> list[str]:
    """
    Read and parse an ignore file. Errors (`FileNotFoundError`, other
    `OSError`s, `UnicodeDecodeError`) propagate to the caller.
    """
    return parse_ignore_lines(path.read_text(encoding="utf-8"))
