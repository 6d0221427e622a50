"""Motor headless de partida: una sesión en memoria y sus operaciones. Sin I/O ni FastAPI."""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Optional

from ..logging_config import get_logger
from ..state import Board, GameState, Mark
from .errors import CELL_OCCUPIED, GAME_OVER, OUT_OF_RANGE, InvalidMove, MalformedRequest
from .rules import copy_board, empty_board, find_winner, in_range, is_full, other, status_text


@dataclass
class GameSession:
    """Sesión de la partida en memoria."""
    board: Board = field(default_factory=empty_board)
    current_player: Mark = "X"
    winner: Optional[Mark] = None
    is_draw: bool = False
    moves: int = 0
    game_number: int = 1

    @property
    def finished(self) -> bool:
        return self.winner is not None or self.is_draw


def _is_coordinate(value: Any) -> bool:
    # bool es subclase de int; True/False no son coordenadas válidas
    return isinstance(value, int) and not isinstance(value, bool)


class GameEngine:
    """Motor de partida: una única sesión protegida por un lock.

    Cada operación se ejecuta completa bajo el lock, de modo que dos
    movimientos simultáneos nunca validan contra un tablero obsoleto.
    """

    def __init__(self) -> None:
        self._session = GameSession()
        self._lock = Lock()
        self._logger = get_logger("Engine")

    def get_state(self) -> GameState:
        """Devuelve el snapshot actual. Sin efectos secundarios."""
        with self._lock:
            return self._snapshot()

    def apply_move(self, row: int, col: int) -> GameState:
        """Coloca la marca del jugador en turno en (row, col) y evalúa el final.

        Lanza MalformedRequest si las coordenadas no son enteras e InvalidMove
        (out of range, game over, cell occupied, en ese orden) si el movimiento
        no es legal. En ambos casos la sesión no cambia.
        """
        if not (_is_coordinate(row) and _is_coordinate(col)):
            raise MalformedRequest(f"row and col must be integers, got {row!r}, {col!r}")

        with self._lock:
            session = self._session
            if not in_range(row, col):
                self._reject(row, col, OUT_OF_RANGE)
            if session.finished:
                self._reject(row, col, GAME_OVER)
            if session.board[row][col] is not None:
                self._reject(row, col, CELL_OCCUPIED)

            mark = session.current_player
            session.board[row][col] = mark
            session.moves += 1
            self._logger.debug(
                "game=%d move=%d player=%s cell=(%d, %d)",
                session.game_number,
                session.moves,
                mark,
                row,
                col,
            )

            winner = find_winner(session.board)
            if winner is not None:
                session.winner = winner
                self._logger.info("game=%d won by %s after %d moves", session.game_number, winner, session.moves)
            elif is_full(session.board):
                session.is_draw = True
                self._logger.info("game=%d ended in a draw", session.game_number)
            else:
                session.current_player = other(mark)
            return self._snapshot()

    def reset(self) -> GameState:
        """Reinicia la sesión a su estado inicial. Siempre tiene éxito."""
        with self._lock:
            game_number = self._session.game_number + 1
            self._session = GameSession(game_number=game_number)
            self._logger.info("game=%d started", game_number)
            return self._snapshot()

    def _reject(self, row: int, col: int, reason: str) -> None:
        self._logger.info(
            "game=%d rejected move (%d, %d): %s",
            self._session.game_number,
            row,
            col,
            reason,
        )
        raise InvalidMove(reason)

    def _snapshot(self) -> GameState:
        session = self._session
        return {
            "board": copy_board(session.board),
            "current_player": session.current_player,
            "winner": session.winner,
            "draw": session.is_draw,
            "status": status_text(session.current_player, session.winner, session.is_draw),
        }


def create_engine() -> GameEngine:
    """Crea un motor con una partida nueva."""
    return GameEngine()
