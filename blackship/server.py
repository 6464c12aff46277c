"""Hosting side of a two-player game."""

from __future__ import annotations

import random
import socket
import subprocess

from .display import JAUNE, RESET, ROUGE, VERT, render_board, render_end, shot_message, turn_message
from .game import GameState, Settings, ShotResult, new_board, ship_count
from .prompts import Console, ask_dimension, ask_rounds, ask_target
from .protocol import DEFAULT_PORT, Channel

_OUT_OF_BOARD = ROUGE + "[Erreur] Coordonnées en dehors du plateau" + RESET


def _show(console: Console, text: str) -> None:
    if text:
        console.write(text.removesuffix("\n"))


def _screen(console: Console, text: str) -> None:
    console.clear()
    _show(console, text)


def local_ip() -> str | None:
    """First address reported by ``hostname -I``, or None if unavailable."""
    try:
        result = subprocess.run(
            ["hostname", "-I"], capture_output=True, text=True, check=False
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    addresses = result.stdout.split()
    return addresses[0] if addresses else None


def _server_turn(
    console: Console,
    channel: Channel,
    state: GameState,
    settings: Settings,
    mine: tuple[int, int],
) -> tuple[int, int]:
    state.shooter_is_self = True
    state.attempts, state.hits = mine
    state.board = state.board1
    while True:
        _screen(console, render_board(state, settings, False))
        _show(console, turn_message(state))
        x, y = ask_target(console)
        try:
            state.fire(x, y, True)
        except ValueError:
            console.write(_OUT_OF_BOARD)
            console.pause()
            continue
        if state.sent:
            break
        _show(console, shot_message(state, False))
        console.pause()

    mine = (state.attempts, state.hits)
    channel.send_fields(
        state.x,
        state.y,
        state.board1[state.y][state.x],
        state.message,
        state.score1,
        state.score2,
        state.won,
        state.winner_is_player1,
        state.round,
    )
    _screen(console, render_board(state, settings, False))
    _show(console, shot_message(state, False))
    console.pause()
    channel.send_int(0)
    channel.recv_int()
    return mine


def _client_turn(
    console: Console,
    channel: Channel,
    state: GameState,
    settings: Settings,
    mine: tuple[int, int],
    theirs: tuple[int, int],
) -> tuple[int, int]:
    state.shooter_is_self = False
    state.attempts, state.hits = mine
    state.board = state.board2
    _screen(console, render_board(state, settings, False))
    _show(console, turn_message(state))

    state.attempts, state.hits = theirs
    while True:
        x, y = channel.recv_fields(2)
        try:
            state.fire(x, y, True)
        except ValueError:
            channel.send_fields(False, ShotResult.REPEAT)
            continue
        channel.send_fields(state.sent, state.message)
        if state.sent:
            break

    theirs = (state.attempts, state.hits)
    state.attempts, state.hits = mine
    channel.send_fields(
        state.board2[state.y][state.x],
        state.message,
        theirs[1],
        theirs[0],
        state.score1,
        state.score2,
        state.won,
        state.winner_is_player1,
        state.round,
    )
    _screen(console, render_board(state, settings, False))
    if state.message in (ShotResult.HIT, ShotResult.MISS):
        _show(console, shot_message(state, False))
        channel.recv_int()
        channel.send_int(0)
    return theirs


def serve_game(
    console: Console,
    channel: Channel,
    settings: Settings,
    rng: random.Random | None = None,
) -> GameState:
    """Play every round against a connected client and return the final state."""
    rng = rng or random.Random()
    channel.send_fields(settings.dimension, settings.rounds)
    state = GameState()

    while True:
        state.turn = True
        state.reset_round()
        mine = (0, 0)
        theirs = (0, 0)

        state.board1 = new_board(settings.dimension, rng)
        state.board2 = new_board(settings.dimension, rng)
        state.ships = ship_count(settings.dimension)

        channel.send_int(state.ships)
        channel.send_board(state.board1)
        channel.send_board(state.board2)

        while not state.won:
            channel.send_int(state.turn)
            if state.turn:
                mine = _server_turn(console, channel, state, settings, mine)
            else:
                theirs = _client_turn(console, channel, state, settings, mine, theirs)

        _screen(console, render_board(state, settings, False))
        if state.round == settings.rounds:
            break

    state.won = False
    _screen(console, render_board(state, settings, False))
    _show(console, render_end(state, settings))
    return state


def run_server(
    console: Console,
    port: int = DEFAULT_PORT,
    rng: random.Random | None = None,
) -> GameState:
    """Ask for the settings, wait for one client and host the game."""
    console.clear()
    settings = Settings(ask_dimension(console), ask_rounds(console))

    address = local_ip()
    console.clear()
    if address:
        console.write(f"Voici l'adresse IP de votre serveur : {JAUNE}{address}{RESET}")
    else:
        console.write(f"{ROUGE}Impossible d'afficher votre IP{RESET}")
    console.write(RESET)
    console.write("En attente d'une connexion entrante...")
    console.write()

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind(("", port))
        listener.listen(1)
        connection, _ = listener.accept()

    console.write(VERT + "Client connecté, génération des bateaux..." + RESET)
    with Channel(connection) as channel:
        return serve_game(console, channel, settings, rng or random.Random())