"""Reglas del 3 en raya como funciones puras sobre el tablero."""

from __future__ import annotations

from typing import Optional

from ..state import Board, Mark

SIZE = 3

# Las 8 líneas ganadoras: 3 filas, 3 columnas y 2 diagonales.
LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((r, c) for c in range(SIZE)) for r in range(SIZE)),
    *(tuple((r, c) for r in range(SIZE)) for c in range(SIZE)),
    tuple((i, i) for i in range(SIZE)),
    tuple((i, SIZE - 1 - i) for i in range(SIZE)),
)


def empty_board() -> Board:
    return [[None for _ in range(SIZE)] for _ in range(SIZE)]


def copy_board(board: Board) -> Board:
    return [list(row) for row in board]


def in_range(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def other(mark: Mark) -> Mark:
    return "O" if mark == "X" else "X"


def find_winner(board: Board) -> Optional[Mark]:
    """Devuelve la marca que completa alguna línea, o None."""
    for line in LINES:
        first = board[line[0][0]][line[0][1]]
        if first is None:
            continue
        if all(board[r][c] == first for r, c in line):
            return first
    return None


def is_full(board: Board) -> bool:
    return all(cell is not None for row in board for cell in row)


def status_text(current_player: Mark, winner: Optional[Mark], is_draw: bool) -> str:
    """Texto de estado para la UI, derivado siempre del estado actual."""
    if winner is not None:
        return f"Player {winner} wins!"
    if is_draw:
        return "Draw"
    return f"Player {current_player}'s turn"
