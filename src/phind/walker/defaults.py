"""
Default include and exclude patterns for directory walks.

These patterns use gitignore syntax. A bare name such as `node_modules` matches
an entry with that name at any depth.
"""

from __future__ import annotations

DEFAULT_INCLUDES: list[str] = ["*"]

# Directories that are almost never worth listing.
# Applied during traversal (prune, don't enter).
DEFAULT_EXCLUDES: list[str] = [
    "node_modules",
    ".git",
]

# Location of the global ignore file, relative to the user config directory.
IGNORE_DIR_NAME = "phind"
IGNORE_FILE_NAME = "ignore"
