# Blackship

Blackship is a naval battle game that runs in the terminal. You can play it
alone or against a second player on another machine over TCP. The game's
screens and prompts are in French.

## Installation

```
pip install .
```

Blackship needs only the Python standard library. It refuses to start on
Windows.

## Playing

Start the interactive menu:

```
blackship
```

Pick solo (1) or multiplayer (2). In multiplayer mode you then choose to join
a game (1) or host one (2); the joining player types the host's IP address
and confirms it with `y` (or just Enter) or retypes it with `n`.

You can also go straight to a mode with an option:

| Option | Effect                        |
|--------|-------------------------------|
| `-o`   | start a solo game             |
| `-s`   | host a multiplayer game       |
| `-c`   | join a multiplayer game       |
| `-h`   | show the help                 |
| `-v`   | show the program version      |

Only one argument may be given; more than one, or an unknown option, prints
the usage and exits with status 1. Reaching the end of input or pressing
Ctrl-C also ends the program with status 1.

### Rules

- The board is square, between 5 and 9 cells a side; the host (or the solo
  player) chooses it.
- A match lasts between 1 and 6 rounds.
- Each round, `int(side * side * 0.17)` one-cell ships are placed at random
  squares of a fresh board.
- Each shot asks for two coordinates, both counted from 1. A shot outside
  the board is refused and asked for again.
- Shooting a cell you have already shot shows an error and you shoot again.
- In solo mode you keep shooting until every ship is hit; the shot counter
  and hit counter are shown under the board.
- In multiplayer, a hit lets you shoot again and a miss passes the turn to
  the other player. Whoever sinks every ship on their target board wins the
  round and scores a point. After the last round the player with more points
  wins the match, or the match is a draw.

### Networking

The host listens on TCP port 30000 on every interface and shows the first
address reported by `hostname -I`, if that command is available. A joining
player who cannot connect waits five seconds and tries again, up to five
more times, before giving up.

The host generates both boards and decides every shot; the joining side
sends its targets and displays what the host reports back.

## Using the package from Python

- `blackship.game` holds the board model: `Cell`, `ShotResult`, `Settings`
  (validated side and round count), `ship_count`, `new_board` and
  `GameState`, whose `fire(x, y, multiplayer)` resolves a shot.
- `blackship.display` renders screens as strings: `header`, `render_board`,
  `render_end`, `turn_message` and `shot_message`.
- `blackship.prompts` has `Console`, which reads and writes any text streams,
  and the `ask_*` questions built on it.
- `blackship.protocol` has `Channel`, which sends and receives integers,
  space-separated integer frames (64 bytes, NUL padded) and 9×9 boards over
  a connected socket, plus `encode_fields` and `decode_fields`.
- `blackship.solo.play_solo`, `blackship.server.serve_game` and
  `blackship.client.play_client` run a whole game on a given console (and
  channel) and return the final `GameState`.

## Limitations

- There is no computer opponent: solo mode is shooting at a hidden random
  board.
- Ships are single cells; there are no longer ships.
- Games, scores and settings are not saved anywhere.
- The port is fixed at 30000 from the command line, and a host waits for
  exactly one player.

## Development

```
pip install -e ".[test]"
pytest
```