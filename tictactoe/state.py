"""Tipos del estado de partida."""

from typing import List, Literal, Optional, TypedDict

Mark = Literal["X", "O"]
Cell = Optional[Mark]
Board = List[List[Cell]]


class GameState(TypedDict):
    """Snapshot público de la partida.

    Es lo que devuelven get_state/apply_move/reset y lo que la API serializa
    tal cual. Siempre es una copia: modificarlo no afecta a la sesión.
    """
    board: Board
    current_player: Mark
    winner: Optional[Mark]
    draw: bool
    status: str
