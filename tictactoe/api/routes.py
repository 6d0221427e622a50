"""Endpoints HTTP para el motor de partida."""

from fastapi import APIRouter, Depends, HTTPException

from tictactoe.core import GameEngine, InvalidMove, MalformedRequest
from tictactoe.logging_config import get_logger

from .dependencies import get_engine
from .schemas import GameStateResponse, MoveRequest

router = APIRouter(tags=["game"])
logger = get_logger("API")


@router.get("/game", response_model=GameStateResponse)
def get_game(engine: GameEngine = Depends(get_engine)):
    """Devuelve el estado actual: board, current_player, winner, draw, status."""
    return GameStateResponse(**engine.get_state())


@router.post("/move", response_model=GameStateResponse)
def move(body: MoveRequest, engine: GameEngine = Depends(get_engine)):
    """Aplica el movimiento del jugador en turno. 400 si el movimiento no es válido."""
    try:
        state = engine.apply_move(body.row, body.col)
    except InvalidMove as e:
        logger.warning("move (%d, %d) rejected: %s", body.row, body.col, e.reason)
        raise HTTPException(status_code=400, detail=str(e))
    except MalformedRequest as e:
        logger.warning("malformed move: %s", e)
        raise HTTPException(status_code=400, detail=f"Malformed request: {e}")
    return GameStateResponse(**state)


@router.post("/reset", response_model=GameStateResponse)
def reset(engine: GameEngine = Depends(get_engine)):
    """Reinicia la partida y devuelve el estado inicial."""
    return GameStateResponse(**engine.reset())
