"""API HTTP FastAPI para el motor de partida."""

from .app import app
from .dependencies import get_engine

__all__ = ["app", "get_engine"]
