"""Logging centralizado del servicio: terminal (con colores) + archivo opcional."""

from __future__ import annotations

import logging
import os
import sys

import colorama

colorama.just_fix_windows_console()

LOGGER_NAME = "tictactoe"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(component)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Logger base; se le añaden handlers en setup_logging
_logger: logging.Logger | None = None


class PlainFormatter(logging.Formatter):
    """Formato sin códigos de color (para archivo)."""

    def __init__(self) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.component = getattr(record, "component", "-")
        return super().format(record)


class ColoredFormatter(logging.Formatter):
    """Formato con códigos ANSI por nivel (para terminal)."""

    COLORS = {
        logging.DEBUG: colorama.Fore.CYAN,
        logging.INFO: colorama.Fore.GREEN,
        logging.WARNING: colorama.Fore.YELLOW,
        logging.ERROR: colorama.Fore.RED,
        logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT,
    }
    RESET = colorama.Style.RESET_ALL

    def __init__(self) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.component = getattr(record, "component", "-")
        base = super().format(record)
        color = self.COLORS.get(record.levelno, self.RESET)
        return f"{color}{base}{self.RESET}"


def _env_level() -> int:
    log_level_name = os.getenv("TICTACTOE_LOG_LEVEL", "INFO").upper()
    return getattr(logging, log_level_name, logging.INFO)


def setup_logging() -> logging.Logger:
    """Configura el logger del servicio a partir del entorno.

    TICTACTOE_LOG_LEVEL fija el nivel (INFO por defecto) y TICTACTOE_LOG_FILE,
    si está definido, añade un archivo en texto plano además de stderr.
    """
    global _logger
    log_level = _env_level()

    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(log_level)
    _logger.handlers.clear()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(ColoredFormatter())
    _logger.addHandler(stream_handler)

    log_file = os.getenv("TICTACTOE_LOG_FILE", "").strip()
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(PlainFormatter())
        _logger.addHandler(file_handler)

    # Silenciar loggers de librerías
    for name in ("uvicorn.access", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return _logger


def get_logger(component: str) -> logging.LoggerAdapter:
    """Devuelve un LoggerAdapter con el component indicado.

    Siempre envuelve el logger base, de modo que setup_logging() reemplaza los
    handlers en un único sitio y no hay salida duplicada.
    """
    base = logging.getLogger(LOGGER_NAME)
    if _logger is None and not base.handlers:
        # Sin setup previo (p. ej. `uvicorn tictactoe.api.app:app` o tests)
        log_level = _env_level()
        base.setLevel(log_level)
        h = logging.StreamHandler(sys.stderr)
        h.setLevel(log_level)
        h.setFormatter(PlainFormatter())
        base.addHandler(h)
    return logging.LoggerAdapter(base, {"component": component})
