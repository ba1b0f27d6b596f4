"""Resolving command lines to executables through the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.textutils import split_words


class CommandNotFound(LookupError):
    """Raised when a command cannot be resolved to an executable."""

    def __init__(self, command: str | None) -> None:
        self.command = command
        super().__init__("invalid command")


def search_paths(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in ``env["PATH"]``."""
    value = env.get("PATH")
    if value is None:
        return []
    return split_words(value, ":")


def find_path(cmd: str, env: Mapping[str, str]) -> str:
    """Return the first ``<dir>/<cmd>`` from PATH that is executable.

    Raises ``CommandNotFound`` when no directory holds one.
    """
    for directory in search_paths(env):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFound(cmd)


def parse_command(cmd_arg: str) -> list[str]:
    """Split a command line on spaces into its argument vector."""
    argv = split_words(cmd_arg, " ")
    if not argv:
        raise CommandNotFound(None)
    return argv