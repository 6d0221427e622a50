"""Servicio de Tic-Tac-Toe: motor de partida y API HTTP."""

__version__ = "0.1.0"
