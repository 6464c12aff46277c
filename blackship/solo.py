"""Single-player game against a randomly filled board."""

from __future__ import annotations

import random
import time

from .display import RESET, ROUGE, render_board, shot_message
from .game import GameState, Settings, new_board, ship_count
from .prompts import Console, ask_dimension, ask_rounds, ask_target

ROUND_PAUSE = 2.0

_OUT_OF_BOARD = ROUGE + "[Erreur] Coordonnées en dehors du plateau" + RESET


def _show(console: Console, text: str) -> None:
    if text:
        console.write(text.removesuffix("\n"))


def _screen(console: Console, text: str) -> None:
    console.clear()
    _show(console, text)


def play_solo(
    console: Console, settings: Settings, rng: random.Random | None = None
) -> GameState:
    """Play every round alone and return the final state."""
    rng = rng or random.Random()
    state = GameState()

    while True:
        state.reset_round()
        state.board = new_board(settings.dimension, rng)
        state.ships = ship_count(settings.dimension)

        while not state.won:
            _screen(console, render_board(state, settings, True))
            x, y = ask_target(console)
            try:
                state.fire(x, y, False)
            except ValueError:
                console.write(_OUT_OF_BOARD)
                console.pause()
                continue
            _screen(console, render_board(state, settings, True))
            _show(console, shot_message(state, True))
            console.pause()

        state.round += 1
        _screen(console, render_board(state, settings, True))
        time.sleep(ROUND_PAUSE)
        if state.round == settings.rounds:
            break

    state.won = False
    _screen(console, render_board(state, settings, True))
    return state


def run_solo(console: Console, rng: random.Random | None = None) -> GameState:
    """Ask for the settings and play a solo game."""
    settings = Settings(ask_dimension(console), ask_rounds(console))
    return play_solo(console, settings, rng)