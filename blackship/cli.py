"""Command-line entry point: pick a mode and start the game."""

from __future__ import annotations

import getopt
import sys

from .client import run_client
from .display import RESET, ROUGE, header
from .prompts import Console, ask_game_mode, ask_network_role
from .server import run_server
from .solo import run_solo

VERSION = "Blackship v1.0"

_FULL_USAGE = [
    "Utilisation :",
    "-o\t -- Active le mode solo",
    "-s\t -- Active le mode serveur",
    "-c\t -- Active le mode client",
    "-v\t -- Affiche la version du programme",
]
_SHORT_USAGE = [
    "Utilisation :",
    "-s\t -- Active le mode serveur",
    "-c\t -- Active le mode client",
]


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def _syntax_error(usage: list[str]) -> int:
    print(ROUGE + "Syntaxe incorrecte" + RESET)
    _print_lines(usage)
    return 1


def debug(console: Console) -> None:
    """Hidden screen that players are not meant to reach."""
    console.write("Vous n'êtes pas censé être ici...")


def _run_options(console: Console, options: list[tuple[str, str]]) -> int:
    for option, _ in options:
        if option == "-o":
            run_solo(console)
        elif option == "-s":
            run_server(console)
        elif option == "-c":
            run_client(console)
        elif option == "-h":
            _print_lines(_FULL_USAGE)
            return 0
        elif option == "-v":
            print(VERSION)
            return 0
    return 0


def _run_interactive(console: Console) -> int:
    console.clear()
    if ask_game_mode(console) == 1:
        run_solo(console)
    elif ask_network_role(console):
        run_client(console)
    else:
        run_server(console)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if sys.platform.startswith("win"):
        print(ROUGE + "Ce programme n'est pas compatible avec les systèmes Windows" + RESET)
        return 1
    if len(args) > 1:
        return _syntax_error(_SHORT_USAGE)
    try:
        options, _ = getopt.getopt(args, "oschv")
    except getopt.GetoptError:
        return _syntax_error(_FULL_USAGE)

    console = Console(banner=header())
    try:
        if options:
            return _run_options(console, options)
        return _run_interactive(console)
    except (EOFError, KeyboardInterrupt):
        return 1
    except OSError as exc:
        print(ROUGE + f"[Erreur] {exc}" + RESET)
        return 1


if __name__ == "__main__":
    sys.exit(main())