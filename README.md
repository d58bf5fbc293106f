# minihell

The pieces of a small command shell, as a Python library: checking a command
line for syntax mistakes, cutting it into commands and operators, splitting a
command into words with quote removal, expanding `$VARIABLES`, deciding how
each command is wired to pipes and files, and running external programs.

## Installing

```
pip install .
```

## Modules

- `minihell.syntax` — `verify_line(line)` runs every check and returns a list
  of warnings, or raises `ShellSyntaxError` (its `status` is 2, its `token` the
  offending token, or `None` for unclosed quotes). The separate checks are
  `check_pipes`, `check_redirections`, `check_quotes`, `check_leading`,
  `check_trailing` and `mixed_warnings`.
- `minihell.segments` — `segment(line)` returns a `Segmentation`: the command
  texts and the `|`, `>`, `>>`, `<`, `<<` operators in order, ending with an
  empty string, plus counts of pipes, output and input operators.
  `count_segments(line)` counts them.
- `minihell.words` — `split_words(text)` returns a `WordSplit` with the words
  of one command, quotes removed; `count_words(text)` counts them.
- `minihell.expander` — `expand_tokens(tokens, env)` replaces a `$NAME` that
  ends a word with its value; `strip_single_quotes(text)`.
- `minihell.environment` — `Environment`, an ordered list of `NAME=value`
  entries with `get`, `index_of`, `add`, `remove` and `path_value`; also
  `has_assignment`, `count_paths`, `command_candidates` and `quote_export`.
- `minihell.parser` — `plan_step(parts, index)` returns the `StepFlags` of the
  command at `index` (write to pipe, read from pipe, redirect, read from file,
  here-document, skip, create only); `is_operator`, `format_array` and
  `format_flags` help with inspection.
- `minihell.executor` — `PipeSet` holds the pipes of one line;
  `find_executable`, `run_external`, `exit_status`, `output_target`,
  `open_input`, `create_only`, `heredoc_delimiter` and `read_heredoc` do the
  work of running one command.
- `minihell.textutils` — small string helpers such as `compare` and
  `is_valid_identifier`.

## Example

```python
from minihell.environment import Environment
from minihell.executor import run_external
from minihell.segments import segment
from minihell.syntax import ShellSyntaxError, verify_line
from minihell.words import split_words

line = "ls -l | grep py"
verify_line(line)                  # raises ShellSyntaxError on bad input
parts = segment(line).parts        # command texts and operators
words = split_words(parts[0]).words

env = Environment(["PATH=/usr/bin:/bin:"])
status = run_external(list(words), env, None, None, "/tmp")

try:
    verify_line("echo hi |")
except ShellSyntaxError as error:
    print(error, error.status)
```

`run_external` returns the program's exit status, 128 plus the signal number
when it was killed by a signal, or 127 when it cannot be found. Note that only
as many `PATH` directories are searched as the value has `:` separators.

## What it does not do

There is no interactive shell here: no prompt, no read-eval loop and no
command to start one. Built-in commands such as `cd`, `echo`, `export`,
`unset` and `exit` are not provided; callers put the pieces above together
themselves.

## Tests

```
pip install .[test]
pytest
```