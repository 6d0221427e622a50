"""Aplicación FastAPI: motor de partida vía HTTP."""

import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tictactoe import __version__
from tictactoe.logging_config import get_logger

from .routes import router
from .schemas import HealthResponse

logger = get_logger("API")


def _cors_origins() -> list[str]:
    raw = os.getenv("TICTACTOE_CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


app = FastAPI(
    title="Tic Tac Toe API",
    description="API del motor de partida de 3 en raya",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(RequestValidationError)
async def malformed_request_handler(request: Request, exc: RequestValidationError):
    """Body ausente o coordenadas no enteras: 400 sin llegar al motor."""
    # Sin "input": puede traer bytes crudos del body que no son UTF-8
    errors = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in exc.errors()
    ]
    logger.warning("malformed request on %s: %d error(s)", request.url.path, len(errors))
    return JSONResponse(
        status_code=400,
        content={"detail": "Malformed request", "errors": errors},
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
