"""Servidor HTTP: carga configuración y arranca la API con uvicorn."""

import os

import uvicorn
from dotenv import load_dotenv

from tictactoe.logging_config import setup_logging, get_logger

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def main():
    """Carga .env, configura logging y arranca la API con uvicorn."""
    load_dotenv()
    setup_logging()
    logger = get_logger("Server")

    host = os.getenv("TICTACTOE_HOST", DEFAULT_HOST)
    port_str = os.getenv("TICTACTOE_PORT", str(DEFAULT_PORT))
    try:
        port = int(port_str)
        if not 0 < port < 65536:
            raise ValueError("TICTACTOE_PORT fuera de rango")
    except ValueError:
        logger.warning("Valor inválido para TICTACTOE_PORT: %s. Usando %d.", port_str, DEFAULT_PORT)
        port = DEFAULT_PORT

    logger.info("Serving on http://%s:%d", host, port)
    uvicorn.run("tictactoe.api.app:app", host=host, port=port, log_level="warning")


if __name__ == "__main__":
    main()
