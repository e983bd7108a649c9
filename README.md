# coquille

A minimal interactive shell. It shows a prompt that holds the current and
parent directory. It reads a command and splits it on spaces. Then it runs the
program with its arguments and waits for it to finish before it shows the
prompt again.

## Installing

```
pip install .
```

## Running the shell

```
coquille
```

The prompt looks like this. It is drawn in green on a colour terminal:

```
~projects/coquille coquille >$
```

Type a program name and its arguments, separated by spaces:

```
~projects/coquille coquille >$ echo hello world
hello world
```

Runs of spaces count as a single separator. An empty line does nothing.

If the program cannot be found, the shell prints a "command not found" message
to standard error. If the program cannot be executed, it prints a "permission
denied" message. The shell then shows the prompt again.

The shell takes no command-line arguments. If you give it any, it prints an
error and exits with status 1. Press Ctrl-D (end of input) to leave. The shell
then exits with status 0.

## What it does not do

The shell is deliberately small. It has no built-in commands: there is no
`cd`, `exit`, `export` or `env`. It does not handle quoting, escapes, pipes,
redirections, variable expansion or wildcards. Every word on the line is passed
to the program as it was typed. Programs are looked up on `PATH` in the usual
way.

## Using it as a library

The command loop is made from small parts that you can call on their own:

```python
from coquille.shell import get_prompt, parse_command, run_command

print(get_prompt("/home/user/projects/coquille"))
words = parse_command("ls  -l   /tmp")   # ["ls", "-l", "/tmp"]
status = run_command(words)               # the program's exit status
```

`get_prompt()` with no argument uses the current working directory.
`run_command` returns 127 when the program cannot be found and 126 when it
cannot be executed. It raises `ValueError` if the list of words is empty.

The package also has some helper modules:

- `coquille.convert` has these functions:
  - `atoi` reads a leading decimal integer, skipping whitespace. It returns 0
    when there are no digits.
  - `itoa` converts an integer to text.
  - The ASCII character tests `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`
    and `is_print`.
  - `to_upper` and `to_lower`.

  Each character function accepts a one-character string or an integer code.
- `coquille.strops` has these functions:
  - `split` splits on one character and drops empty fields.
  - `strtrim`, `substr` and `strnstr`.
  - `strncmp` returns the C-style difference of character codes.
  - `strmapi`, `strchr` and `strrchr`.

  The search functions return an index, or `None` when nothing is found.
- `coquille.output` has `put_char`, `put_str`, `put_endl` and `put_nbr`. Each
  one writes to a text stream. The default stream is standard output.
- `coquille.linereader` has `LineReader`. It reads a text or binary stream in
  fixed-size chunks and returns it one line at a time, each line with its
  newline. `readline()` returns `None` at the end of the stream. You can also
  iterate over a `LineReader`.

```python
import io
from coquille.linereader import LineReader

for line in LineReader(io.StringIO("one\ntwo\n"), 5):
    print(repr(line))
```

## Running the tests

```
pip install .[test]
pytest
```