"""Errores del motor de partida."""

from __future__ import annotations

OUT_OF_RANGE = "out of range"
GAME_OVER = "game over"
CELL_OCCUPIED = "cell occupied"


class GameError(Exception):
    """Base de los errores recuperables del motor."""


class InvalidMove(GameError):
    """Movimiento rechazado; la sesión queda sin cambios."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid move: {reason}")
        self.reason = reason


class MalformedRequest(GameError):
    """Coordenadas ausentes o no enteras; se rechaza antes de la lógica de juego."""
