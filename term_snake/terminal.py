"""
terminal.py — Raw-mode control for the player's terminal.

RawTerminal captures the original termios attributes once and puts
the terminal into a mode where keystrokes arrive one at a time,
unechoed, without waiting for Enter.  ``restore()`` can be called from
any exit path (normal return, exception, signal handler) and only
acts once.
"""

import logging
import termios

logger = logging.getLogger(__name__)


class RawTerminal:
    """Context manager switching file descriptor *fd* into raw mode."""

    def __init__(self, fd: int = 0):
        self.fd = fd
        self._original = None

    def enable(self):
        try:
            self._original = termios.tcgetattr(self.fd)
        except termios.error as exc:
            # Not a tty: keep going in whatever mode it is in.
            logger.warning("cannot read terminal attributes of fd %d: %s",
                           self.fd, exc)
            return

        raw = [*self._original[:6], list(self._original[6])]
        raw[3] &= ~(termios.ICANON | termios.ECHO)   # lflag
        raw[6][termios.VMIN]  = 1
        raw[6][termios.VTIME] = 0
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, raw)
        except termios.error as exc:
            logger.warning("cannot enter raw mode on fd %d: %s", self.fd, exc)

    def restore(self):
        if self._original is None:
            return
        original, self._original = self._original, None
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, original)
        except termios.error as exc:
            logger.warning("cannot restore terminal on fd %d: %s", self.fd, exc)

    @property
    def active(self) -> bool:
        return self._original is not None

    def __enter__(self):
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False
