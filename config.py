"""Server-wide configuration constants for Playground Server."""

import os

TICTACTOE_SIZE = 3           # 3x3 board
CONNECT_FOUR_ROWS = 6
CONNECT_FOUR_COLS = 7
CONNECT_FOUR_RUN = 4         # Pieces in a row needed to win
BATTLESHIP_GRID_SIZE = 6     # Square grid, rows labelled A-F
NUMBER_DUEL_MIN = 1
NUMBER_DUEL_MAX = 100
WORD_GUESS_MAX_ATTEMPTS = 6
WORDLE_WORD_LENGTH = 5
WORDLE_MAX_ATTEMPTS = 6
GEO_QUIZ_TOTAL_ROUNDS = 5
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
MAX_SESSIONS = max(1, int(os.environ.get("MAX_SESSIONS", "500")))  # In-memory session cap
