"""Punto de entrada del servidor de Tic-Tac-Toe."""

from tictactoe.server import main

if __name__ == "__main__":
    main()
