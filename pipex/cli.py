"""Run ``infile < cmd1 | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Any

from pipex.resolve import CommandNotFound, find_path, parse_command


class UsageError(ValueError):
    """Raised when the command line does not hold exactly four arguments."""


def _report(label: str, exc: OSError) -> None:
    reason = exc.strerror or str(exc)
    sys.stderr.write(f"{label}: {reason}\n")


def _start(
    cmd_arg: str, env: Mapping[str, str], stdin: Any, stdout: Any
) -> subprocess.Popen | None:
    try:
        argv = parse_command(cmd_arg)
        path = find_path(argv[0], env)
    except CommandNotFound as exc:
        sys.stderr.write(f"{exc}\n")
        return None
    try:
        return subprocess.Popen(
            argv, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report("execve", exc)
        return None


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> tuple[int | None, int | None]:
    """Feed ``infile`` to ``cmd1``, pipe its output into ``cmd2`` and write
    the result to ``outfile``.

    Returns the exit status of each command, ``None`` for one that could not
    be started. Failing to open either file raises ``OSError``.
    """
    env = os.environ if env is None else env
    with open(infile, "rb") as source:
        first = _start(cmd1, env, source, subprocess.PIPE)
    try:
        sink_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    except OSError:
        if first is not None:
            first.stdout.close()
            first.wait()
        raise
    with os.fdopen(sink_fd, "wb") as sink:
        upstream = first.stdout if first is not None else subprocess.DEVNULL
        second = _start(cmd2, env, upstream, sink)
    if first is not None:
        first.stdout.close()
    first_status = first.wait() if first is not None else None
    second_status = second.wait() if second is not None else None
    return first_status, second_status


def _parse_args(args: Sequence[str]) -> tuple[str, str, str, str]:
    if len(args) != 4:
        raise UsageError("Bad arguments")
    infile, cmd1, cmd2, outfile = args
    return infile, cmd1, cmd2, outfile


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        infile, cmd1, cmd2, outfile = _parse_args(args)
    except UsageError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    try:
        run_pipeline(infile, cmd1, cmd2, outfile)
    except OSError as exc:
        _report("open", exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())