import io
import random
import socket
import subprocess
import threading
from unittest.mock import patch

from blackship.game import Cell, Settings, ShotResult, new_board, ship_count
from blackship.prompts import Console
from blackship.protocol import Channel
from blackship.server import local_ip, serve_game


def _squares(board, dimension, kind):
    return [
        (row, col)
        for row in range(dimension)
        for col in range(dimension)
        if board[row][col] == kind
    ]


def _run_with_peer(peer_fn, server_fn):
    left, right = socket.socketpair()
    left.settimeout(10)
    right.settimeout(10)
    result = {}

    def target():
        try:
            result["peer"] = peer_fn(Channel(right))
        except BaseException as exc:  # reported by the assertion below
            result["error"] = exc

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    try:
        state = server_fn(Channel(left))
    finally:
        thread.join(10)
        left.close()
        right.close()
    assert "error" not in result, result.get("error")
    return state, result["peer"]


def test_server_wins_by_sinking_every_ship():
    settings = Settings(5, 1)
    board1 = new_board(5, random.Random(11))
    targets = _squares(board1, 5, Cell.SHIP)
    lines = "".join(f"{col + 1}\n{row + 1}\n\n" for row, col in targets)
    console = Console(io.StringIO(lines), io.StringIO())

    def peer(channel):
        opening = channel.recv_fields(2)
        ships = channel.recv_int()
        first = channel.recv_board()
        channel.recv_board()
        updates = []
        while True:
            turn = channel.recv_int()
            fields = channel.recv_fields(9)
            updates.append((turn, fields))
            channel.recv_int()
            channel.send_int(0)
            if fields[6]:
                break
        return opening, ships, first, updates

    state, (opening, ships, first, updates) = _run_with_peer(
        peer, lambda channel: serve_game(console, channel, settings, random.Random(11))
    )

    assert opening == (5, 1)
    assert ships == ship_count(5) == len(targets)
    assert [row[:5] for row in first[:5]] == board1
    assert all(turn == 1 for turn, _ in updates)
    assert [(fields[0], fields[1]) for _, fields in updates] == [
        (col, row) for row, col in targets
    ]
    assert all(
        fields[2] == Cell.HIT and fields[3] == ShotResult.HIT for _, fields in updates
    )
    assert updates[-1][1][4:] == (1, 0, 1, 1, 1)
    assert (state.score1, state.score2, state.round) == (1, 0, 1)
    assert state.won is False
    assert "Joueur1 a remporté le jeu" in console.stdout.getvalue()


def test_client_wins_after_server_miss_and_repeat_is_rejected():
    settings = Settings(5, 1)
    board1 = new_board(5, random.Random(13))
    row, col = _squares(board1, 5, Cell.WATER)[0]
    console = Console(io.StringIO(f"{col + 1}\n{row + 1}\n\n"), io.StringIO())

    def peer(channel):
        channel.recv_fields(2)
        channel.recv_int()
        channel.recv_board()
        second = channel.recv_board()
        targets = _squares(second, 5, Cell.SHIP)
        turns = [channel.recv_int()]
        server_shot = channel.recv_fields(9)
        channel.recv_int()
        channel.send_int(0)
        replies = []
        updates = []
        for index, (target_row, target_col) in enumerate(targets):
            turns.append(channel.recv_int())
            if index == 1:
                first_row, first_col = targets[0]
                channel.send_fields(first_col, first_row)
                replies.append(channel.recv_fields(2))
            channel.send_fields(target_col, target_row)
            replies.append(channel.recv_fields(2))
            updates.append(channel.recv_fields(9))
            channel.send_int(0)
            channel.recv_int()
        return turns, server_shot, replies, updates

    state, (turns, server_shot, replies, updates) = _run_with_peer(
        peer, lambda channel: serve_game(console, channel, settings, random.Random(13))
    )

    ships = ship_count(5)
    assert turns == [1] + [0] * ships
    assert server_shot[:4] == (col, row, Cell.MISS, ShotResult.MISS)
    assert replies[1] == (0, ShotResult.REPEAT)
    assert [reply for index, reply in enumerate(replies) if index != 1] == [
        (1, ShotResult.HIT)
    ] * ships
    assert updates[0][2:4] == (1, 1)
    assert updates[-1] == (Cell.HIT, ShotResult.HIT, ships, ships, 0, 1, 1, 0, 1)
    assert (state.score1, state.score2) == (0, 1)
    assert state.board1[row][col] == Cell.MISS
    assert "Joueur2 a remporté le jeu" in console.stdout.getvalue()


@patch("blackship.server.subprocess.run")
def test_local_ip_takes_first_address(run):
    run.return_value = subprocess.CompletedProcess(
        args=["hostname", "-I"], returncode=0, stdout="192.0.2.10 10.0.0.1\n"
    )
    assert local_ip() == "192.0.2.10"


@patch("blackship.server.subprocess.run")
def test_local_ip_failure_returns_none(run):
    run.return_value = subprocess.CompletedProcess(
        args=["hostname", "-I"], returncode=1, stdout=""
    )
    assert local_ip() is None


@patch("blackship.server.subprocess.run", side_effect=FileNotFoundError)
def test_local_ip_missing_command_returns_none(run):
    assert local_ip() is None
    assert run.call_count == 1


@patch("blackship.server.subprocess.run")
def test_local_ip_empty_output_returns_none(run):
    run.return_value = subprocess.CompletedProcess(
        args=["hostname", "-I"], returncode=0, stdout="\n"
    )
    assert local_ip() is None