"""A minimal interactive shell that runs one program per input line."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence

from coquille.strops import split

RED = "\033[31m"
GRN = "\033[32m"
YEL = "\033[33m"
BLU = "\033[34m"
MAG = "\033[35m"
CYN = "\033[36m"
WHT = "\033[37m"
RESET = "\033[0m"

ERROR_ARGC = RED + "Error: This program does not take any arguments." + RESET + "\n"
PROMPT_SUFFIX = GRN + " coquille >$ " + RESET

COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


def _last_two_components(path: str) -> str:
    # Index 0 is never treated as a separator, so short absolute paths stay whole.
    last = path.rfind("/", 1)
    if last <= 0:
        return path
    previous = path.rfind("/", 1, last)
    if previous <= 0:
        return path
    return path[previous + 1:]


def get_prompt(cwd: str | None = None) -> str:
    """Build a prompt showing the last two components of the working directory."""
    if cwd is None:
        cwd = os.getcwd()
    return "~" + _last_two_components(cwd) + PROMPT_SUFFIX


def parse_command(line: str) -> list[str]:
    """Split an input line on spaces into a program and its arguments."""
    return split(line, " ")


def run_command(words: Sequence[str]) -> int:
    """Run the program named by ``words[0]`` and wait for it; return its status."""
    if not words:
        raise ValueError("no command given")
    try:
        completed = subprocess.run(list(words), check=False)
    except FileNotFoundError:
        print(f"coquille: command not found: {words[0]}", file=sys.stderr)
        return COMMAND_NOT_FOUND
    except PermissionError:
        print(f"coquille: permission denied: {words[0]}", file=sys.stderr)
        return COMMAND_NOT_EXECUTABLE
    return completed.returncode


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from the user until end of input, running each one."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        sys.stdout.write(ERROR_ARGC)
        sys.stdout.flush()
        return 1

    while True:
        try:
            line = input(get_prompt())
        except EOFError:
            return 0
        words = parse_command(line)
        if words:
            run_command(words)