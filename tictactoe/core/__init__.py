"""Core: motor headless de partida (sin I/O ni FastAPI)."""

from .engine import GameEngine, GameSession, create_engine
from .errors import GameError, InvalidMove, MalformedRequest

__all__ = [
    "GameEngine",
    "GameSession",
    "create_engine",
    "GameError",
    "InvalidMove",
    "MalformedRequest",
]
