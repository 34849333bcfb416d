"""
app.py — Process wiring for term_snake.

Owns the tick loop, the signal handlers and the startup / shutdown
sequence around the raw terminal and the input thread.
"""

import logging
import os
import queue
import signal
import sys
import time

from term_snake.constants import (
    FAREWELL_MESSAGE, LOG_FILE_ENV, TERMINATED_MESSAGE, TICK_SECONDS,
)
from term_snake.controls import InputReader
from term_snake.engine import apply_command, new_game, update
from term_snake.renderer import render
from term_snake.terminal import RawTerminal

logger = logging.getLogger(__name__)


def configure_logging():
    """Send debug logs to the file named by TERM_SNAKE_LOG, if any."""
    path = os.environ.get(LOG_FILE_ENV)
    if not path:
        return
    logging.basicConfig(
        filename=path,
        level=logging.DEBUG,
        format="%(asctime)s %(threadName)s %(name)s %(levelname)s %(message)s",
    )


def drain_commands(game, commands):
    """Apply every queued command, oldest first."""
    while True:
        try:
            command = commands.get_nowait()
        except queue.Empty:
            return
        apply_command(game, command)


def run(game, commands, out=None, tick=TICK_SECONDS):
    """
    Drive the game until it is quit.

    Each tick drains pending input, advances the game unless it is
    over, then redraws the whole frame.
    """
    deadline = time.monotonic()
    while True:
        deadline += tick
        delay = deadline - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        else:
            # Fell behind: don't try to catch up with a burst of ticks.
            deadline = time.monotonic()

        drain_commands(game, commands)
        if game.quit:
            return
        if not game.game_over:
            update(game)
        render(game, out)


def install_signal_handlers(term):
    """Restore *term*, say goodbye and exit 0 on SIGINT / SIGTERM."""

    def _terminate(signum, frame):
        logger.info("received signal %d, exiting", signum)
        term.restore()
        print(TERMINATED_MESSAGE, flush=True)
        sys.exit(0)

    signal.signal(signal.SIGINT, _terminate)
    signal.signal(signal.SIGTERM, _terminate)


def main():
    configure_logging()
    fd = sys.stdin.fileno()
    commands = queue.Queue()

    with RawTerminal(fd) as term:
        if not term.active:
            logger.warning("stdin is not in raw mode, keys need Enter")
        install_signal_handlers(term)
        game = new_game()
        reader = InputReader(fd, commands)
        reader.start()
        run(game, commands)
        reader.stop()
        logger.info("player quit with score %d", game.score)

    print(FAREWELL_MESSAGE)
