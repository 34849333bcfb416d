"""
constants.py — Shared constants for term_snake.

Board geometry, timing, glyphs, escape sequences and key bytes live
here so every other module can import them from a single
authoritative source.
"""

# ═══════════════════════════════════════════════════════════════════════════
#  BOARD & TIMING
# ═══════════════════════════════════════════════════════════════════════════

BOARD_WIDTH  = 40
BOARD_HEIGHT = 20

# Seconds between two game ticks (update + render).
TICK_SECONDS = 0.14

# Head first, laid out horizontally and moving right.
START_BODY      = [(10, 10), (9, 10), (8, 10)]
START_DIRECTION = (1, 0)

# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

# (x, y) deltas for each compass direction.  y grows downwards.
DIR_DELTA = {
    "up":    ( 0, -1),
    "down":  ( 0,  1),
    "left":  (-1,  0),
    "right": ( 1,  0),
}

# ═══════════════════════════════════════════════════════════════════════════
#  INPUT
# ═══════════════════════════════════════════════════════════════════════════

KEY_ESCAPE     = 0x1B
KEY_CSI        = ord("[")
QUIT_KEYS      = {ord("q"), ord("Q")}
RESTART_KEYS   = {ord("r"), ord("R")}

# Final byte of an ``ESC [ x`` arrow-key sequence → direction name.
ARROW_KEYS = {
    ord("A"): "up",
    ord("B"): "down",
    ord("C"): "right",
    ord("D"): "left",
}

CMD_QUIT    = "quit"
CMD_RESTART = "restart"

# ═══════════════════════════════════════════════════════════════════════════
#  RENDERING
# ═══════════════════════════════════════════════════════════════════════════

CLEAR_SCREEN = "\033[H\033[2J"

WALL_CHAR  = "█"
EMPTY_CHAR = " "
FOOD_CHAR  = "♦"
SNAKE_CHAR = "■"

STATUS_LINE = "Score: {score} | Arrow Keys to Move | Q to Quit"
GAME_OVER_LINES = (
    "",
    "GAME OVER! Final Score: {score}",
    "Press Q to quit or R to restart",
)

FAREWELL_MESSAGE   = "\nThx for playing!"
TERMINATED_MESSAGE = "\nGame terminated!"

# Environment variable naming a file that receives debug logs.
LOG_FILE_ENV = "TERM_SNAKE_LOG"
