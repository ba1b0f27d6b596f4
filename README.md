# pipex

`pipex` runs two commands joined by a pipe. The first command reads its input
from a file. The second command's output goes to another file. It does what
this shell line does:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The same entry point can also be started with `python -m pipex.cli`.

`pipex` takes exactly four arguments. With any other number it writes
`Bad arguments` to standard error and exits with status 1. Otherwise it exits
with status 0, even when a command fails or cannot be found.

- `infile` is opened for reading. If it cannot be opened, `open: <reason>` is
  written to standard error and no command runs.
- `outfile` is opened for writing with mode `0777`. It is created if it does
  not exist and truncated if it does. If it cannot be opened,
  `open: <reason>` is reported. In that case the first command has already
  been started, and `pipex` waits for it to finish.
- Each command string is split on spaces, and empty words are dropped. There
  is no quoting or globbing.
- The first word of each command is looked up in the directories listed in
  `PATH`. Each directory is tried in order as `<dir>/<word>`, and the first
  executable match is used.
- If no match is found, or the command string is empty, `invalid command` is
  written to standard error and that command is skipped. If the first command
  is skipped, the second one reads from an empty input.
- If a command is found but cannot be started, `execve: <reason>` is written
  to standard error.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

## Library use

`pipex.cli.run_pipeline(infile, cmd1, cmd2, outfile, env=None)` runs the same
pipeline from Python.

- `env` defaults to `os.environ`. It is used both for the `PATH` lookup and
  as the commands' environment.
- It returns a tuple with the exit status of each command. An entry is `None`
  when that command could not be started.
- If either file cannot be opened, it raises `OSError`.

```python
from pipex.cli import run_pipeline

first, second = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
```

`pipex.cli.main(argv=None)` is the command's entry point. It returns the exit
status. `pipex.cli.UsageError` is the error raised for a wrong argument count
and handled inside `main`.

### Command lookup: `pipex.resolve`

- `parse_command(cmd_arg)` splits a command string on spaces. It raises
  `CommandNotFound` when the string has no words.
- `search_paths(env)` returns the non-empty directories in `env["PATH"]`. If
  `PATH` is not set, it returns an empty list.
- `find_path(cmd, env)` returns the first executable `<dir>/<cmd>`. If there
  is none, it raises `CommandNotFound`, a `LookupError` that has a `command`
  attribute.

### Text helpers: `pipex.textutils`

- `split_words(text, sep)`: splits on a single character and drops empty
  words.
- `parse_int(text)`: skips leading whitespace and accepts one optional sign.
  It reads digits up to the first non-digit, and returns 0 when there are no
  digits.
- `format_int(number)`: returns the decimal string of `number`.
- `trim(text, charset)`: strips characters in `charset` from both ends. When
  the whole text is made of those characters, half its length is cut from
  each side, so an odd-length text keeps its middle character.
- `find_bounded(haystack, needle, limit)`: returns the index of `needle`
  within the first `limit` characters, or `None`. An empty needle matches
  at 0.
- `substring(text, start, length)`: returns at most `length` characters
  starting at `start`. A start past the end gives an empty string.

### Character and comparison helpers: `pipex.strops`

- `compare_prefix(first, second, limit)` and `compare_bytes(first, second,
  limit)` return the difference at the first position where the inputs
  differ, or 0 if they agree.
- `find_char(text, char)`, `rfind_char(text, char)` and
  `find_byte(data, value, limit)` return an index, or `None`. Searching for
  `"\0"` returns `len(text)`.
- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify an
  ASCII code.
- `to_upper` and `to_lower` convert an ASCII code.

### Formatting: `pipex.printf`

`format_printf(fmt, *args)` renders the conversions
`%s %d %i %c %x %X %p %u %%`.

- `%d` and `%i` wrap the value to a signed 32-bit integer. `%u`, `%x` and
  `%X` wrap it to an unsigned 32-bit integer.
- `%s` of `None` gives `(null)`. `%p` of a false value gives `(nil)`.
- An unknown conversion character is consumed and produces nothing. A
  trailing lone `%` is dropped.
- A missing argument raises `ValueError`.

`printf(fmt, *args, stream=None)` writes the result to `stream`, or to
standard output by default, and returns the number of characters written.

### Line reading: `pipex.lines`

`LineReader(stream, buffer_size=10)` reads a binary or text stream in chunks
of `buffer_size`.

- `read_line()` returns the next line with its newline, or `None` at the end
  of the stream.
- Iterating over the reader yields the lines one by one.

## Limits

- Only two commands can be joined.
- There is no here-document mode and no appending to the output file.
- Commands are not run through a shell.

## Tests

```sh
pip install .[test]
pytest
```