# pipex

`pipex` connects a chain of commands with pipes. It reads from one file and
writes to another, as a shell does for

```sh
< infile cmd1 | cmd2 | ... | cmdn > outfile
```

## Installation

```sh
pip install .
```

## Usage

This reads `infile`, sends it through the commands, and truncates and writes
`outfile`:

```sh
pipex infile "grep foo" "wc -l" outfile
```

You need at least two commands, and you can give more:

```sh
pipex infile "cat" "tr a-z A-Z" "sort" "uniq -c" outfile
```

`pipex` opens the input file first. If it cannot be opened, the output file
is not created.

### Here-documents

Put `here_doc` in place of the input file to type the input instead. `pipex`
shows a `> ` prompt on standard output before each line and reads lines from
standard input. It stops at a line equal to the limiter, or at end of input.
The limiter line is not passed on. The output file is appended to instead of
truncated, like this shell command:

```sh
cmd1 << LIMITER | cmd2 >> outfile
```

Example:

```sh
pipex here_doc EOF "cat" "wc -l" outfile
```

This form also needs at least two commands.

### Command lookup

Each command is split into words on spaces. Empty words are dropped. There is
no quoting, globbing or other shell syntax.

`pipex` looks for the first word in the directories listed in `PATH`, counted
from the first `/` in its value. It runs the first executable match. If no
directory has the command, the name is run relative to the current directory.

Some problems are reported on standard error and do not stop the other
commands in the pipeline:

- If `PATH` is missing, or holds no absolute directory, `pipex` prints
  `Error: Path not found.` for that command.
- If a command cannot be started, `pipex` prints
  `pipex: command not found: <name>`.

### Exit status

`pipex` exits with status 1 in these cases:

- it is given too few arguments (it prints a usage line);
- an input or output file cannot be opened (it prints
  `pipex: <path>: <reason>`).

In every other case it exits with status 0, whatever the exit statuses of the
commands were.

## Library use

You can also import the parts directly:

- `pipex.pipeline.run_pipeline(commands, stdin=None, stdout=None, env=None)`
  runs a list of command strings connected by pipes.
  - `stdin` and `stdout` may be file objects, file descriptors, or `None`.
    `None` means the current process's own stream.
  - `env` defaults to `os.environ`.
  - It returns the exit status of each command in order. A command that could
    not be started counts as 1.
  - An empty list of commands raises `ValueError`.
- `pipex.pipeline.split_command(command)` splits a command string into words
  on spaces.
- `pipex.paths.resolve_command(name, env)` finds a command in `PATH`. It
  raises `pipex.paths.PipexError` when `PATH` is missing or holds no absolute
  directory.
- `pipex.paths.search_dirs(env)` returns the directories listed in `PATH`, or
  `None` when there are none.
- `pipex.paths.open_file(path, mode)` opens a file in binary mode.
  - The mode is a `FileMode`: `READ`, `WRITE` (truncate) or `APPEND`.
  - New files are created with permissions 0644.
  - On failure it raises `PipexError`, whose `status` attribute holds the exit
    status.
- `pipex.cli.read_heredoc(limiter, source, prompt=None)` reads here-document
  text from a binary stream. It returns the text as `bytes`.
- `pipex.cli.main(argv=None)` runs the command line and returns the exit
  status.
- `pipex.lines.LineReader(stream, buffer_size=4)` reads a text or binary
  stream in fixed-size chunks.
  - `read_line()` returns the next line with its newline, or `None` at the end
    of the stream.
  - Iterating over the reader yields each line in turn.
- `pipex.textutils` has small string helpers:
  - `split` splits on a separator and drops empty fields.
  - `strtrim` removes the given characters from both ends.
  - `substr` returns a slice. It raises `ValueError` on a negative start or
    length.
  - `strnstr` returns the index of the match, or `None`.
  - `strncmp` and `strcmp` compare strings. Only the sign of the result
    matters.
  - `atoi` parses a leading integer. The result wraps to 32 bits.
  - `itoa` returns the decimal form of an integer.

## Running the tests

```sh
pip install ".[test]"
pytest
```