import sys

import pytest

from coquille import shell
from coquille.shell import (
    COMMAND_NOT_FOUND,
    ERROR_ARGC,
    GRN,
    PROMPT_SUFFIX,
    RED,
    RESET,
    get_prompt,
    main,
    parse_command,
    run_command,
)

_MISSING = "coquille-no-such-program-xyz"


def test_prompt_shows_last_two_components():
    assert get_prompt("/home/user/minishell") == "~user/minishell" + GRN + " coquille >$ " + RESET


def test_prompt_short_path_kept_whole():
    assert get_prompt("/home") == "~/home" + PROMPT_SUFFIX


def test_prompt_root():
    assert get_prompt("/") == "~/" + PROMPT_SUFFIX


@pytest.mark.parametrize("path", ["/a/b/c/d", "/usr/local/lib/python", "/x/y/z"])
def test_prompt_tail_is_suffix_of_path(path):
    prompt = get_prompt(path)
    assert prompt.startswith("~")
    assert prompt.endswith(PROMPT_SUFFIX)
    shown = prompt[1:-len(PROMPT_SUFFIX)]
    assert path.endswith("/" + shown)
    assert shown.count("/") == 1


def test_prompt_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_prompt() == get_prompt(str(tmp_path).replace("\\", "/")) or get_prompt().endswith(
        PROMPT_SUFFIX
    )
    assert tmp_path.name in get_prompt()


def test_error_message_layout():
    assert ERROR_ARGC.startswith(RED)
    assert ERROR_ARGC.endswith(RESET + "\n")
    assert len(ERROR_ARGC) == 58


def test_parse_command_splits_on_spaces():
    assert parse_command("  ls   -l  /tmp ") == ["ls", "-l", "/tmp"]


def test_parse_command_empty():
    assert parse_command("    ") == []


def test_run_command_returns_exit_status():
    status = run_command([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert status == 3


def test_run_command_success():
    assert run_command([sys.executable, "-c", "pass"]) == 0


def test_run_command_not_found(capsys):
    assert run_command([_MISSING]) == COMMAND_NOT_FOUND
    assert _MISSING in capsys.readouterr().err


def test_run_command_empty():
    with pytest.raises(ValueError):
        run_command([])


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert capsys.readouterr().out == ERROR_ARGC


def test_main_exits_on_eof(monkeypatch):
    def fake_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0


def test_main_runs_each_line(monkeypatch, capsys):
    lines = iter(["", "   ", _MISSING + " arg"])
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    assert len(prompts) == 4
    assert all(p.endswith(PROMPT_SUFFIX) for p in prompts)
    assert capsys.readouterr().err.count(_MISSING) == 1