"""Joining side of a two-player game."""

from __future__ import annotations

import socket
import time

from .display import JAUNE, RESET, ROUGE, VERT, render_board, render_end, shot_message, turn_message
from .game import Cell, GameState, Settings, ShotResult
from .prompts import Console, ask_target
from .protocol import DEFAULT_PORT, Channel

RETRY_ATTEMPTS = 5
RETRY_DELAY = 5.0
ADDRESS_LENGTH = 16


def _show(console: Console, text: str) -> None:
    if text:
        console.write(text.removesuffix("\n"))


def _screen(console: Console, text: str) -> None:
    console.clear()
    _show(console, text)


def _read_address(console: Console) -> str:
    while True:
        console.write("Entrez l'adresse du serveur :")
        console.write()
        line = console.prompt("➤  " + JAUNE)
        console.write(RESET)
        words = line.split()
        if words:
            return words[0][:ADDRESS_LENGTH]


def ask_server_address(console: Console) -> str:
    """Ask for the server address until the user confirms it."""
    while True:
        console.clear()
        address = _read_address(console)
        while True:
            console.write("Vous avez bien tapé l'adresse ? (Y/n) ")
            console.write()
            answer = console.prompt("➤  " + JAUNE)
            console.write(RESET)
            console.write()
            choice = answer[:1]
            if choice in ("", "Y", "y"):
                return address
            if choice in ("N", "n"):
                break
            console.write(
                ROUGE + "[Erreur] Merci de rentrer une réponse valide (y ou n)" + RESET
            )
            console.write()


def connect_with_retry(
    host: str,
    port: int = DEFAULT_PORT,
    attempts: int = RETRY_ATTEMPTS,
    delay: float = RETRY_DELAY,
) -> socket.socket:
    """Connect to ``host:port``, retrying up to ``attempts`` times after a failure.

    Waits ``delay`` seconds before each retry and raises ConnectionError once
    every try has failed.
    """
    if attempts < 0:
        raise ValueError("attempts must not be negative")
    last_error: OSError | None = None
    for attempt in range(attempts + 1):
        if attempt:
            time.sleep(delay)
        try:
            return socket.create_connection((host, port))
        except OSError as exc:
            last_error = exc
    raise ConnectionError(f"could not connect to {host}:{port}") from last_error


def _apply_scores(
    state: GameState, score1: int, score2: int, won: int, winner: int, round_: int
) -> None:
    state.score1 = score1
    state.score2 = score2
    state.won = bool(won)
    state.winner_is_player1 = bool(winner)
    state.round = round_


def _check_target(x: int, y: int, settings: Settings) -> None:
    if not (0 <= x < settings.dimension and 0 <= y < settings.dimension):
        raise ValueError(f"server sent a target outside the board: ({x}, {y})")


def _opponent_turn(
    console: Console, channel: Channel, state: GameState, settings: Settings
) -> None:
    state.shooter_is_self = False
    _screen(console, render_board(state, settings, False))
    _show(console, turn_message(state))

    x, y, cell, message, score1, score2, won, winner, round_ = channel.recv_fields(9)
    _check_target(x, y, settings)
    state.x, state.y = x, y
    state.board2[y][x] = Cell(cell)
    state.message = ShotResult(message)
    _apply_scores(state, score1, score2, won, winner, round_)

    _screen(console, render_board(state, settings, False))
    _show(console, shot_message(state, False))
    channel.recv_int()
    channel.send_int(0)


def _own_turn(
    console: Console, channel: Channel, state: GameState, settings: Settings
) -> None:
    state.shooter_is_self = True
    while True:
        _screen(console, render_board(state, settings, False))
        _show(console, turn_message(state))
        x, y = ask_target(console)
        channel.send_fields(x, y)
        sent, message = channel.recv_fields(2)
        state.message = ShotResult(message)
        if sent:
            break
        _show(console, shot_message(state, False))
        console.pause()

    _check_target(x, y, settings)
    state.x, state.y = x, y
    cell, message, hits, attempts, score1, score2, won, winner, round_ = (
        channel.recv_fields(9)
    )
    state.board1[y][x] = Cell(cell)
    state.message = ShotResult(message)
    state.hits = hits
    state.attempts = attempts
    _apply_scores(state, score1, score2, won, winner, round_)

    _screen(console, render_board(state, settings, False))
    _show(console, shot_message(state, False))
    console.pause()
    channel.send_int(0)
    channel.recv_int()


def play_client(console: Console, channel: Channel) -> GameState:
    """Play every round against the connected server and return the final state."""
    dimension, rounds = channel.recv_fields(2)
    settings = Settings(dimension, rounds)
    state = GameState()

    while True:
        state.reset_round()
        state.ships = channel.recv_int()
        state.board2 = channel.recv_board()
        state.board1 = channel.recv_board()

        while not state.won:
            state.turn = not channel.recv_int()
            if state.turn:
                _own_turn(console, channel, state, settings)
            else:
                _opponent_turn(console, channel, state, settings)

        _screen(console, render_board(state, settings, False))
        if state.round == settings.rounds:
            break

    state.won = False
    _screen(console, render_board(state, settings, False))
    _show(console, render_end(state, settings))
    return state


def run_client(console: Console, port: int = DEFAULT_PORT) -> GameState:
    """Ask for the server address, connect and play the game."""
    address = ask_server_address(console)
    console.clear()
    console.write("Tentative de connexion au serveur en cours...")
    console.write()
    try:
        sock = connect_with_retry(address, port)
    except ConnectionError:
        console.write(ROUGE + "Impossible de se connecter au serveur distant." + RESET)
        raise
    console.write(
        VERT + "Connexion avec le serveur effectuée, génération des bateaux..." + RESET
    )
    with Channel(sock) as channel:
        return play_client(console, channel)