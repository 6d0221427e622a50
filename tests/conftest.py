"""Fixtures compartidos para tests."""

import pytest
from fastapi.testclient import TestClient

from tictactoe.api.app import app
from tictactoe.api.dependencies import get_engine
from tictactoe.core import GameEngine


@pytest.fixture
def engine():
    """GameEngine con una partida nueva."""
    return GameEngine()


@pytest.fixture
def client(engine):
    """TestClient cuyo motor es el fixture engine, no el singleton del proceso."""
    app.dependency_overrides[get_engine] = lambda: engine
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_engine, None)


@pytest.fixture
def play():
    """Aplica una secuencia de (row, col) y devuelve el último estado."""
    def _play(engine: GameEngine, moves):
        state = engine.get_state()
        for row, col in moves:
            state = engine.apply_move(row, col)
        return state
    return _play


@pytest.fixture
def draw_moves():
    """X O X / X O O / O X X, sin línea completa en ningún momento."""
    return [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


@pytest.fixture
def top_row_win_moves():
    """X completa la fila superior en el quinto movimiento."""
    return [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]
