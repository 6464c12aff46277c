import io

import pytest

from blackship.game import MAX_DIMENSION, MAX_ROUNDS, MIN_DIMENSION, MIN_ROUNDS
from blackship.prompts import (
    Console,
    ask_dimension,
    ask_game_mode,
    ask_network_role,
    ask_rounds,
    ask_target,
)


def _console(text, banner=""):
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out, banner=banner), out


def test_console_write_and_prompt():
    console, out = _console("hello\n")
    console.write("line")
    answer = console.prompt("? ")
    assert answer == "hello"
    assert out.getvalue() == "line\n? "


def test_console_prompt_eof_raises():
    console, _ = _console("")
    with pytest.raises(EOFError):
        console.prompt("? ")


def test_console_clear_shows_banner():
    console, out = _console("", banner="BANNER\n")
    console.clear()
    assert out.getvalue().endswith("BANNER\n")
    assert out.getvalue().startswith("\x1b[")


def test_console_pause_consumes_line():
    console, _ = _console("\nnext\n")
    console.pause()
    assert console.prompt("") == "next"


@pytest.mark.parametrize("choice", [1, 2, 3])
def test_game_mode_valid(choice):
    console, _ = _console(f"{choice}\n")
    assert ask_game_mode(console) == choice


def test_game_mode_retries_on_invalid():
    console, out = _console("0\nabc\n2\n")
    assert ask_game_mode(console) == 2
    assert out.getvalue().count("[Erreur]") == 2


def test_network_role():
    console, _ = _console("1\n")
    assert ask_network_role(console) is True
    console, _ = _console("2\n")
    assert ask_network_role(console) is False


def test_network_role_retries():
    console, out = _console("3\n1\n")
    assert ask_network_role(console) is True
    assert "[Erreur]" in out.getvalue()


def test_dimension_bounds():
    console, out = _console(f"{MIN_DIMENSION - 1}\n{MAX_DIMENSION + 1}\n{MAX_DIMENSION}\n")
    assert ask_dimension(console) == MAX_DIMENSION
    assert out.getvalue().count("[Erreur]") == 2


def test_rounds_bounds():
    console, out = _console(f"{MAX_ROUNDS + 1}\n{MIN_ROUNDS}\n")
    assert ask_rounds(console) == MIN_ROUNDS
    assert out.getvalue().count("[Erreur]") == 1


def test_rounds_eof_raises():
    console, _ = _console("x\n")
    with pytest.raises(EOFError):
        ask_rounds(console)


def test_target_is_zero_based():
    console, _ = _console("3\n5\n")
    assert ask_target(console) == (3 - 1, 5 - 1)


def test_target_skips_non_numbers():
    console, _ = _console("a\n1\n?\n2\n")
    assert ask_target(console) == (0, 1)