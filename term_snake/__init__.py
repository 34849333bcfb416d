"""
term_snake — A classic Snake game for the raw terminal.

This package exposes the modules needed to run the game or drive it
from tests:

  constants   – board size, tick length, glyphs, key bytes, deltas.
  entities    – Point, Snake and Game state classes.
  engine      – init_game(), spawn_food(), update(), apply_command().
  renderer    – build_frame(), render().
  controls    – decode_key(), InputReader thread.
  terminal    – RawTerminal context manager (termios raw mode).
  app         – tick loop, signal handlers and main().
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
