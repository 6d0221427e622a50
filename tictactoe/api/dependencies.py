"""Dependencias FastAPI: motor de partida singleton."""

from tictactoe.core import GameEngine, create_engine

_engine: GameEngine | None = None


def get_engine() -> GameEngine:
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine
