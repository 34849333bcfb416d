"""
controls.py — Keyboard input for term_snake.

A daemon thread reads raw bytes from stdin and turns them into
command strings posted on a queue.  The main loop is the only
consumer and applies them between ticks, so the game state itself is
never touched from this thread.

Commands
--------
  'up' | 'down' | 'left' | 'right'  – arrow keys (ESC [ A/B/C/D)
  'quit'                            – q / Q
  'restart'                         – r / R
"""

import logging
import os
import queue
import threading
from typing import Callable, Optional

from term_snake.constants import (
    ARROW_KEYS, CMD_QUIT, CMD_RESTART, KEY_CSI, KEY_ESCAPE, QUIT_KEYS,
    RESTART_KEYS,
)

logger = logging.getLogger(__name__)


def decode_key(byte: int, read_byte: Callable[[], Optional[int]]) -> Optional[str]:
    """
    Translate one input byte into a command, or None if it means nothing.

    *read_byte* is called to fetch the two trailing bytes of an escape
    sequence; it may return None when nothing could be read.
    """
    if byte == KEY_ESCAPE:
        introducer = read_byte()
        final = read_byte()
        if introducer == KEY_CSI:
            return ARROW_KEYS.get(final)
        return None
    if byte in QUIT_KEYS:
        return CMD_QUIT
    if byte in RESTART_KEYS:
        return CMD_RESTART
    return None


class InputReader(threading.Thread):
    """
    Blocking one-byte-at-a-time reader on file descriptor *fd*.

    Stops after posting 'quit' or once ``stop()`` has been called and
    the pending read returns.
    """

    def __init__(self, fd: int, commands: "queue.Queue[str]"):
        super().__init__(name="term-snake-input", daemon=True)
        self.fd       = fd
        self.commands = commands
        self._stopped = threading.Event()

    def stop(self):
        self._stopped.set()

    def _read_byte(self) -> Optional[int]:
        try:
            data = os.read(self.fd, 1)
        except OSError as exc:
            logger.debug("transient read error on fd %d: %s", self.fd, exc)
            return None
        if not data:
            return None
        return data[0]

    def run(self):
        while not self._stopped.is_set():
            byte = self._read_byte()
            if byte is None:
                continue

            command = decode_key(byte, self._read_byte)
            if command is None:
                continue

            logger.debug("key %#04x -> %s", byte, command)
            self.commands.put(command)
            if command == CMD_QUIT:
                self._stopped.set()
