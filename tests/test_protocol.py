import socket
import struct

import pytest

from blackship.game import Cell
from blackship.protocol import (
    BOARD_SIZE,
    FIELD_FRAME,
    Channel,
    decode_fields,
    encode_fields,
)


@pytest.fixture
def sockets():
    left, right = socket.socketpair()
    left.settimeout(5)
    right.settimeout(5)
    yield left, right
    left.close()
    right.close()


def test_encode_fields_pads_frame_with_nul():
    data = encode_fields(5, 1)
    assert len(data) == FIELD_FRAME
    assert data[:3] == b"5 1"
    assert data[3:] == bytes(FIELD_FRAME - 3)


def test_booleans_are_encoded_as_integers():
    assert decode_fields(encode_fields(True, False), 2) == (1, 0)


@pytest.mark.parametrize("values", [(0,), (3, -4, 8), (1, 2, 3, 4, 5, 6, 7, 8, 9)])
def test_fields_round_trip(values):
    assert decode_fields(encode_fields(*values), len(values)) == values


def test_decode_takes_only_requested_count():
    assert decode_fields(encode_fields(4, 6, 8), 2) == (4, 6)


def test_decode_too_few_fields_raises():
    with pytest.raises(ValueError):
        decode_fields(encode_fields(1), 2)


def test_decode_non_numeric_raises():
    with pytest.raises(ValueError):
        decode_fields(b"1 x\0\0", 2)


def test_encode_too_long_raises():
    with pytest.raises(ValueError):
        encode_fields(*range(10**6, 10**6 + 20))


def test_send_int_wire_bytes(sockets):
    left, right = sockets
    Channel(left).send_int(1)
    assert right.recv(4) == b"\x01\x00\x00\x00"
    right.sendall(b"\x02\x00\x00\x00")
    assert Channel(left).recv_int() == 2


def test_int_round_trip(sockets):
    left, right = sockets
    Channel(left).send_int(-7)
    assert Channel(right).recv_int() == -7


def test_fields_round_trip_over_channel(sockets):
    left, right = sockets
    Channel(left).send_fields(2, 3, 1)
    assert Channel(right).recv_fields(3) == (2, 3, 1)


def test_board_round_trip_is_padded(sockets):
    left, right = sockets
    board = [[Cell.WATER] * 5 for _ in range(5)]
    board[1][3] = Cell.SHIP
    board[4][0] = Cell.HIT
    board[2][2] = Cell.MISS
    Channel(left).send_board(board)
    received = Channel(right).recv_board()
    assert len(received) == BOARD_SIZE
    assert all(len(row) == BOARD_SIZE for row in received)
    assert [row[:5] for row in received[:5]] == board
    assert all(cell == Cell.WATER for row in received[5:] for cell in row)
    assert all(cell == Cell.WATER for row in received for cell in row[5:])


def test_send_board_too_large_raises(sockets):
    left, _ = sockets
    board = [[Cell.WATER] * 10 for _ in range(10)]
    with pytest.raises(ValueError):
        Channel(left).send_board(board)


def test_recv_board_unknown_value_raises(sockets):
    left, right = sockets
    left.sendall(struct.pack(f"<{BOARD_SIZE * BOARD_SIZE}i", *([7] * 81)))
    with pytest.raises(ValueError):
        Channel(right).recv_board()


def test_recv_after_peer_closed_raises(sockets):
    left, right = sockets
    left.close()
    with pytest.raises(ConnectionError):
        Channel(right).recv_int()


def test_context_manager_closes_socket(sockets):
    left, _ = sockets
    with Channel(left):
        pass
    assert left.fileno() == -1