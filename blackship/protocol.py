"""Wire format used between the hosting and the joining player."""

from __future__ import annotations

import socket
import struct
from types import TracebackType

from .game import Board, Cell

DEFAULT_PORT = 30000
BOARD_SIZE = 9
FIELD_FRAME = 64

_INT = struct.Struct("<i")
_BOARD = struct.Struct(f"<{BOARD_SIZE * BOARD_SIZE}i")


def encode_fields(*args: int) -> bytes:
    """Encode integers as space-separated text in a NUL-padded frame."""
    text = " ".join(str(int(value)) for value in args).encode("ascii")
    if len(text) > FIELD_FRAME:
        raise ValueError(f"fields take {len(text)} bytes, more than {FIELD_FRAME}")
    return text.ljust(FIELD_FRAME, b"\0")


def decode_fields(data: bytes, count: int) -> tuple[int, ...]:
    """Read the first ``count`` integers of a frame made by ``encode_fields``."""
    text = bytes(data).split(b"\0", 1)[0].decode("ascii", errors="replace")
    parts = text.split()
    if len(parts) < count:
        raise ValueError(f"expected {count} fields, got {len(parts)}")
    try:
        return tuple(int(part) for part in parts[:count])
    except ValueError as exc:
        raise ValueError(f"malformed fields: {text!r}") from exc


class Channel:
    """Framed messages over a connected stream socket."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock

    def _recv_exact(self, size: int) -> bytes:
        data = bytearray()
        while len(data) < size:
            chunk = self.sock.recv(size - len(data))
            if not chunk:
                raise ConnectionError("connection closed by peer")
            data += chunk
        return bytes(data)

    def send_int(self, value: int) -> None:
        """Send one signed 32-bit integer."""
        self.sock.sendall(_INT.pack(int(value)))

    def recv_int(self) -> int:
        """Receive one signed 32-bit integer."""
        return _INT.unpack(self._recv_exact(_INT.size))[0]

    def send_fields(self, *args: int) -> None:
        """Send a frame of integers."""
        self.sock.sendall(encode_fields(*args))

    def recv_fields(self, count: int) -> tuple[int, ...]:
        """Receive a frame and return its first ``count`` integers."""
        return decode_fields(self._recv_exact(FIELD_FRAME), count)

    def send_board(self, board: Board) -> None:
        """Send a board, padded with water to the full 9 by 9 grid."""
        if len(board) > BOARD_SIZE or any(len(row) > BOARD_SIZE for row in board):
            raise ValueError(f"board is larger than {BOARD_SIZE}x{BOARD_SIZE}")
        values = [int(Cell.WATER)] * (BOARD_SIZE * BOARD_SIZE)
        for row_index, row in enumerate(board):
            for col_index, cell in enumerate(row):
                values[row_index * BOARD_SIZE + col_index] = int(cell)
        self.sock.sendall(_BOARD.pack(*values))

    def recv_board(self) -> Board:
        """Receive a full 9 by 9 board."""
        values = _BOARD.unpack(self._recv_exact(_BOARD.size))
        try:
            cells = [Cell(value) for value in values]
        except ValueError as exc:
            raise ValueError("board holds an unknown cell value") from exc
        return [
            cells[start : start + BOARD_SIZE]
            for start in range(0, len(cells), BOARD_SIZE)
        ]

    def close(self) -> None:
        """Close the underlying socket."""
        self.sock.close()

    def __enter__(self) -> Channel:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()