"""Interactive questions asked on the terminal."""

from __future__ import annotations

import sys
from typing import TextIO

from .game import MAX_DIMENSION, MAX_ROUNDS, MIN_DIMENSION, MIN_ROUNDS

_RESET = "\x1b[0m"
_GREY = "\x1b[38;2;85;85;85m"
_RED = "\x1b[31m"
_BOLD_RED = "\x1b[1;31m"
_BOLD_GREEN = "\x1b[1;32m"
_YELLOW = "\x1b[33m"
_CLEAR = "\x1b[H\x1b[2J"


class Console:
    """Line-based terminal input and output, with an optional banner after clearing."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        banner: str = "",
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.banner = banner

    def write(self, text: str = "") -> None:
        """Print a line of text."""
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def prompt(self, text: str) -> str:
        """Print ``text`` without a newline and return the next input line."""
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def clear(self) -> None:
        """Clear the screen and show the banner, if any."""
        self.stdout.write(_CLEAR)
        if self.banner:
            self.stdout.write(self.banner)
        self.stdout.flush()

    def pause(self) -> None:
        """Wait until the user presses Enter."""
        self.prompt("")


def _read_int(console: Console, question: str) -> int | None:
    console.write(question)
    console.write()
    answer = console.prompt("➤  " + _YELLOW)
    console.write(_RESET)
    try:
        return int(answer.strip())
    except ValueError:
        return None


def _option(number: int, label: str) -> str:
    return f"{_GREY}[{_BOLD_GREEN}{number}{_RESET}{_GREY}] {label}{_RESET}"


def ask_game_mode(console: Console) -> int:
    """Ask for solo (1), multiplayer (2) or the hidden debug mode (3)."""
    console.clear()
    while True:
        console.write("Sélectionnez votre mode de jeu :")
        console.write(_option(1, "Lancez une partie solo"))
        console.write(_option(2, "Lancez une partie multijoueurs"))
        choice = _read_int(console, "")
        if choice in (1, 2, 3):
            return choice
        console.write(
            _BOLD_RED + "[Erreur] Entrée invalide, veuillez répondre par 1, 2 ou 3" + _RESET
        )


def ask_network_role(console: Console) -> bool:
    """Return True to join a game, False to host one."""
    console.clear()
    while True:
        console.write("Sélectionnez une option :")
        console.write(_option(1, "Rejoindre une partie"))
        console.write(_option(2, "Héberger une partie"))
        choice = _read_int(console, "")
        if choice == 1:
            return True
        if choice == 2:
            return False
        console.write(
            _RED + "[Erreur] Entrée invalide, veuillez répondre par 1 ou 2" + _RESET
        )


def ask_dimension(console: Console) -> int:
    """Ask for the side of the board."""
    console.clear()
    while True:
        size = _read_int(
            console,
            f"Choisissez la taille de votre plateau (min {MIN_DIMENSION}, max {MAX_DIMENSION}) :",
        )
        if size is not None and MIN_DIMENSION <= size <= MAX_DIMENSION:
            return size
        console.write(
            _RED
            + "[Erreur] Entrée invalide, veuillez répondre par un nombre entre "
            + f"{MIN_DIMENSION} et {MAX_DIMENSION}"
            + _RESET
        )
        console.write()


def ask_rounds(console: Console) -> int:
    """Ask for the number of rounds."""
    console.clear()
    while True:
        rounds = _read_int(
            console,
            f"Choisissez un nombre de manches (min {MIN_ROUNDS}, max {MAX_ROUNDS}) :",
        )
        if rounds is not None and MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            return rounds
        console.write(
            _RED
            + "[Erreur] Entrée invalide, veuillez entrer un nombre entre "
            + f"{MIN_ROUNDS} et {MAX_ROUNDS}"
            + _RESET
        )
        console.write()


def ask_target(console: Console) -> tuple[int, int]:
    """Ask for a target and return it as zero-based ``(x, y)``."""
    x = None
    while x is None:
        x = _read_int(console, "Entrez la ligne de tir : ")
    y = None
    while y is None:
        y = _read_int(console, "Entrez la colonne de tir : ")
    return x - 1, y - 1