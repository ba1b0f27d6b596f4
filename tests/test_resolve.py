import os

import pytest

from pipex.resolve import CommandNotFound, find_path, parse_command, search_paths


def _make_tool(directory, name, executable=True):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755 if executable else 0o644)
    return path


def test_search_paths_skips_empty_entries():
    assert search_paths({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_search_paths_without_path():
    assert search_paths({"HOME": "/home"}) == []


def test_find_path_returns_joined_path(tmp_path):
    bindir = tmp_path / "bin"
    _make_tool(bindir, "tool")
    env = {"PATH": str(bindir)}
    assert find_path("tool", env) == f"{bindir}/tool"


def test_find_path_first_directory_wins(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    _make_tool(first, "tool")
    _make_tool(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    assert find_path("tool", env) == f"{first}/tool"


def test_find_path_skips_non_executable(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    _make_tool(first, "tool", executable=False)
    _make_tool(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    found = find_path("tool", env)
    assert found == f"{second}/tool"
    assert os.access(found, os.X_OK)


def test_find_path_missing_command(tmp_path):
    with pytest.raises(CommandNotFound) as info:
        find_path("nothing-here", {"PATH": str(tmp_path)})
    assert info.value.command == "nothing-here"
    assert str(info.value) == "invalid command"


def test_find_path_without_path_variable():
    with pytest.raises(CommandNotFound):
        find_path("ls", {})


def test_parse_command_splits_on_spaces():
    assert parse_command("ls  -l   -a") == ["ls", "-l", "-a"]


def test_parse_command_blank_raises():
    with pytest.raises(CommandNotFound):
        parse_command("   ")