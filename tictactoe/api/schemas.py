"""Modelos Pydantic para requests/responses de la API."""

from typing import List, Literal, Optional
from pydantic import BaseModel, StrictInt


# --- GET /game, POST /move, POST /reset ---
class GameStateResponse(BaseModel):
    board: List[List[Optional[Literal["X", "O"]]]]
    current_player: Literal["X", "O"]
    winner: Optional[Literal["X", "O"]] = None
    draw: bool = False
    status: str


# --- POST /move ---
class MoveRequest(BaseModel):
    row: StrictInt
    col: StrictInt


# --- Health ---
class HealthResponse(BaseModel):
    status: str = "ok"
