"""Board model and shot resolution for the battleship game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

MIN_DIMENSION = 5
MAX_DIMENSION = 9
MIN_ROUNDS = 1
MAX_ROUNDS = 6

SHIP_RATIO = 0.17

Board = list[list["Cell"]]


class Cell(IntEnum):
    """State of one square of a board."""

    WATER = 0
    MISS = 1
    HIT = 2
    SHIP = 3


class ShotResult(IntEnum):
    """Outcome of the last shot, as shown to the players."""

    NONE = 0
    HIT = 1
    MISS = 2
    REPEAT = 3


@dataclass(frozen=True)
class Settings:
    """Board size and number of rounds of a game."""

    dimension: int
    rounds: int

    def __post_init__(self) -> None:
        if not MIN_DIMENSION <= self.dimension <= MAX_DIMENSION:
            raise ValueError(
                f"dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}"
            )
        if not MIN_ROUNDS <= self.rounds <= MAX_ROUNDS:
            raise ValueError(f"rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}")


def ship_count(dimension: int) -> int:
    """Number of ships placed on a square board of the given side."""
    return int(dimension * dimension * SHIP_RATIO)


def new_board(dimension: int, rng: random.Random | None = None) -> Board:
    """Build a board of water with ``ship_count(dimension)`` ships at random squares."""
    if dimension < 1:
        raise ValueError("dimension must be positive")
    rng = rng or random.Random()
    board = [[Cell.WATER] * dimension for _ in range(dimension)]
    for square in rng.sample(range(dimension * dimension), ship_count(dimension)):
        row, col = divmod(square, dimension)
        board[row][col] = Cell.SHIP
    return board


@dataclass
class GameState:
    """Everything one side of a game knows about the current round."""

    board: Board = field(default_factory=list)
    board1: Board = field(default_factory=list)
    board2: Board = field(default_factory=list)
    x: int = 0
    y: int = 0
    won: bool = False
    winner_is_player1: bool = False
    turn: bool = False
    message: ShotResult = ShotResult.NONE
    shooter_is_self: bool = False
    round: int = 0
    attempts: int = 0
    hits: int = 0
    ships: int = 0
    score1: int = 0
    score2: int = 0
    sent: bool = False

    def reset_round(self) -> None:
        """Clear the per-round counters before a new round starts."""
        self.hits = 0
        self.attempts = 0
        self.won = False
        self.message = ShotResult.NONE

    def fire(self, x: int, y: int, multiplayer: bool) -> ShotResult:
        """Shoot at column ``x``, row ``y`` of ``board`` and update the counters.

        In multiplayer a valid shot marks the state as sent, a miss hands the
        turn over, and sinking the last ship scores the round for the player
        whose turn it is. Firing after the round is won only clears the win.
        """
        if not (0 <= y < len(self.board) and 0 <= x < len(self.board[y])):
            raise ValueError(f"target ({x + 1}, {y + 1}) is outside the board")
        self.x, self.y = x, y

        if self.won:
            self.won = False
            return self.message

        cell = self.board[y][x]
        if cell == Cell.WATER:
            self.board[y][x] = Cell.MISS
            self.message = ShotResult.MISS
            self.attempts += 1
            if multiplayer:
                self.sent = True
                self.turn = not self.turn
        elif cell in (Cell.MISS, Cell.HIT):
            self.message = ShotResult.REPEAT
            if multiplayer:
                self.sent = False
        else:
            self.board[y][x] = Cell.HIT
            self.message = ShotResult.HIT
            self.hits += 1
            self.attempts += 1
            if multiplayer:
                self.sent = True

        if self.hits == self.ships:
            self.won = True
            if multiplayer:
                self.round += 1
                self.winner_is_player1 = self.turn
                if self.turn:
                    self.score1 += 1
                else:
                    self.score2 += 1
        return self.message