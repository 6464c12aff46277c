"""Text rendering of the boards, score bars and messages."""

from __future__ import annotations

from .game import Board, Cell, GameState, Settings, ShotResult

RESET = "\x1b[0m"
NOIR = "\x1b[30m"
NNOIR = "\x1b[1;30m"
GRIS = "\x1b[38;2;85;85;85m"
ROUGE = "\x1b[31m"
NROUGE = "\x1b[1;31m"
VERT = "\x1b[32m"
NVERT = "\x1b[1;32m"
JAUNE = "\x1b[33m"
NJAUNE = "\x1b[1;33m"
BLEU = "\x1b[34m"
NBLEU = "\x1b[1;34m"
MAGENTA = "\x1b[35m"
NMAGENTA = "\x1b[1;35m"
CYAN = "\x1b[36m"
NCYAN = "\x1b[1;36m"
BLANC = "\x1b[37m"
NBLANC = "\x1b[1;37m"
CUSTOM1 = "\x1b[38;2;0;0;140m"

SROUGE = "\x1b[41m"
SVERT = "\x1b[42m"
SJAUNE = "\x1b[43m"
SBLEU = "\x1b[44m"
SMAGENTA = "\x1b[45m"
SCYAN = "\x1b[46m"
SBLANC = "\x1b[47m"

BOX_WIDTH = 62

_WATER = "~  "
_OWN_SYMBOLS = {
    Cell.MISS: "   ",
    Cell.HIT: NVERT + "×  " + RESET,
}
_TARGET_SYMBOLS = {
    Cell.MISS: "   ",
    Cell.HIT: NROUGE + "×  " + RESET,
    Cell.SHIP: NCYAN + "•  " + RESET,
}
_CONTINUE = "Appuyez sur une touche pour continuer .. "
_WAITING = "En attente de votre adversaire pour continuer .. "


def _bar(left: str, sep: str, right: str, widths: list[int]) -> str:
    return left + sep.join("═" * width for width in widths) + right


def _blank_row() -> str:
    return "║" + " " * BOX_WIDTH + "║"


def _grey_row(text: str) -> str:
    return "║ " + GRIS + text + RESET + " " * (BOX_WIDTH - 1 - len(text)) + "║"


def _join(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def header() -> str:
    """The banner shown at the top of every menu screen."""
    lines = [
        "",
        _bar("╔", "", "╗", [BOX_WIDTH]),
        "║" + " " * 26 + NVERT + "BlackShip" + RESET + " " * 27 + "║",
        _bar("╠", "", "╣", [BOX_WIDTH]),
        _grey_row("Description :"),
        _blank_row(),
        _grey_row(" - Bienvenue dans Blackship, une bataille navale solo et"),
        _grey_row("   multijoueur jouable en ligne de commande"),
        _blank_row(),
        _grey_row(" - Ce jeu a été créé dans le cadre d'un projet"),
        _grey_row("   d'étude universitaire"),
        _bar("╚", "", "╝", [BOX_WIDTH]),
        "",
    ]
    return _join(lines)


def _grid(board: Board, dimension: int, colour: str, symbols: dict) -> list[str]:
    lines = ["".join(f"{colour}{index}  {RESET}" for index in range(dimension + 1))]
    for row in range(dimension):
        cells = "".join(symbols.get(board[col][row], _WATER) for col in range(dimension))
        lines.append(f"{colour}{row + 1}  {RESET}" + cells)
    return lines


def _stats(state: GameState, settings: Settings) -> list[str]:
    wide = state.ships >= 10
    widths = [15, 17 if wide else 15, 21, 10]
    hits = f"{state.hits:02d}" if wide else str(state.hits)
    attempts = f"{state.attempts:02d}"
    line = (
        f"║ Manches [{VERT}{state.round}{RESET}/{VERT}{settings.rounds}{RESET}] ║"
        f" Bateaux [{VERT}{hits}{RESET}/{VERT}{state.ships}{RESET}] ║"
        + " " * 21
        + f"║ Tir [{VERT}{attempts}{RESET}] ║"
    )
    return [_bar("╔", "╦", "╗", widths), line, _bar("╚", "╩", "╝", widths), ""]


def _banner(colour: str, text: str) -> list[str]:
    return [
        colour + _bar("╔", "", "╗", [BOX_WIDTH]),
        _blank_row(),
        "║" + BLANC + f"{text:^{BOX_WIDTH}}" + colour + "║",
        _blank_row(),
        _bar("╚", "", "╝", [BOX_WIDTH]) + RESET,
        "",
    ]


def _message_box(colour: str, text: str) -> list[str]:
    return [
        colour + _bar("╔", "", "╗", [BOX_WIDTH]),
        "║" + f"{text:^{BOX_WIDTH}}" + "║",
        _bar("╚", "", "╝", [BOX_WIDTH]) + RESET,
        "",
    ]


def _render_solo(state: GameState, settings: Settings) -> list[str]:
    inner = 66 if state.ships >= 10 else 64
    lines = [
        _bar("╔", "", "╗", [inner]),
        "║" + " " * 28 + NVERT + "BlackShip" + RESET + " " * (inner - 37) + "║",
        _bar("╚", "", "╝", [inner]),
        "",
    ]
    lines += _grid(state.board, settings.dimension, NBLEU, _OWN_SYMBOLS)
    lines.append("")
    lines += _stats(state, settings)
    if state.round == settings.rounds:
        lines += _banner(CYAN, "Vous avez remporté la partie !")
    if state.won:
        lines += _banner(MAGENTA, "Vous avez remporté la manche !")
    return lines


def _render_multi(state: GameState, settings: Settings) -> list[str]:
    wide = state.ships >= 10
    widths = [9, 16, 16, 23 if wide else 21]
    first, second = (BLEU, JAUNE) if state.shooter_is_self else (JAUNE, BLEU)
    score = (
        f"║  Score  ║ {first}Joueur 1{RESET} "
        f"[{VERT}{state.score1}{RESET}/{VERT}{settings.rounds}{RESET}] ║ "
        f"{second}Joueur 2{RESET} "
        f"[{VERT}{state.score2}{RESET}/{VERT}{settings.rounds}{RESET}] ║"
        + " " * 18
        + (" " * 5 if wide else " " * 3)
        + "║"
    )
    lines = [_bar("╔", "╦", "╗", widths), score, _bar("╚", "╩", "╝", widths), ""]
    lines += _grid(state.board2, settings.dimension, NJAUNE, _TARGET_SYMBOLS)
    lines.append("")
    lines += _grid(state.board1, settings.dimension, NBLEU, _OWN_SYMBOLS)
    lines.append("")
    lines += _stats(state, settings)
    if state.won:
        if state.winner_is_player1:
            name, points = "Joueur1", state.score1
        else:
            name, points = "Joueur2", state.score2
        lines += [
            _bar("╔", "", "╗", [BOX_WIDTH]),
            _blank_row(),
            f"║          {name} a gagné la manche ! Score = {points}/{settings.rounds}"
            "             ║",
            _blank_row(),
            _bar("╚", "", "╝", [BOX_WIDTH]) + RESET,
            "",
        ]
    return lines


def render_board(state: GameState, settings: Settings, solo: bool) -> str:
    """The full game screen: title or scores, boards, counters and round banners."""
    lines = _render_solo(state, settings) if solo else _render_multi(state, settings)
    return _join(lines)


def render_end(state: GameState, settings: Settings) -> str:
    """The final result and farewell, or nothing while rounds remain."""
    if state.round != settings.rounds:
        return ""
    if state.score1 > state.score2:
        result = f"║ Joueur1 a remporté le jeu ! Score = {state.score1}/{settings.rounds}"
        result += "                      ║"
    elif state.score1 < state.score2:
        result = f"║ Joueur2 a remporté le jeu ! Score = {state.score2}/{settings.rounds}"
        result += "                      ║"
    else:
        result = "║ Les joueurs joueur1 et joueur2 sont ex aequo.                ║"
    lines = [
        _bar("╔", "", "╗", [BOX_WIDTH]),
        _blank_row(),
        result,
        _blank_row(),
        _bar("╚", "", "╝", [BOX_WIDTH]) + RESET,
        "",
    ]
    lines += _banner(CYAN, "Merci d'avoir joué à BlackShip")
    return _join(lines)


def turn_message(state: GameState) -> str:
    """Tell the player whether it is their turn."""
    if state.turn:
        return _join(["C'est votre tour, à vous de jouer.", ""])
    return _join(["C'est le tour de votre adversaire, veuillez patienter.", ""])


def shot_message(state: GameState, solo: bool) -> str:
    """Describe the outcome of the last shot, or nothing if there is none."""
    mine = solo or state.shooter_is_self
    if state.message == ShotResult.HIT:
        if mine:
            lines = _message_box(VERT, "Touché ! Vous avez atteint votre cible.")
            lines += [_CONTINUE, ""]
        else:
            lines = _message_box(
                ROUGE, "Attention ! Votre adversaire a touché un de vos bateaux."
            )
            lines += [_WAITING, ""]
        return _join(lines)
    if state.message == ShotResult.MISS:
        if mine:
            lines = _message_box(ROUGE, "Raté ! Vous n'avez pas atteint votre cible.")
            lines += [_CONTINUE, ""]
        else:
            lines = _message_box(
                VERT, "Échappée Belle ! Votre adversaire n'a pas atteint sa cible."
            )
            lines += [_WAITING, ""]
        return _join(lines)
    if state.message == ShotResult.REPEAT:
        lines = _message_box(
            ROUGE, "Erreur, vous ne pouvez pas tirer aux mêmes coordonnées"
        )
        return _join(lines) + _CONTINUE
    return ""