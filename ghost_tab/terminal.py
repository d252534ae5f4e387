"""Controlling-terminal acquisition for the interactive screens.

Textual reads keys from file descriptor 0 and draws on file descriptor 2.
When the launcher runs us with stdout captured (and possibly stdin or stderr
redirected too), both descriptors are pointed at ``/dev/tty`` for the length
of the run so the JSON result on stdout never mixes with rendered frames.
"""

import logging
import os
from contextlib import contextmanager
from typing import Iterator, List, Tuple

from ghost_tab.errors import TerminalUnavailableError

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"
SCREEN_FDS = (0, 2)


@contextmanager
def controlling_terminal(path: str = TTY_PATH) -> Iterator[None]:
    """Route stdin and stderr to the terminal; restore them on every exit path."""
    redirect = [fd for fd in SCREEN_FDS if not os.isatty(fd)]
    if not redirect:
        logger.debug("stdin and stderr already attached to a terminal")
        yield
        return

    try:
        tty_fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
    except OSError as e:
        raise TerminalUnavailableError(f"could not open {path}: {e.strerror or e}") from e

    saved: List[Tuple[int, int]] = []
    try:
        for fd in redirect:
            saved.append((fd, os.dup(fd)))
            os.dup2(tty_fd, fd)
        logger.debug("attached fds %s to %s", redirect, path)
        yield
    finally:
        for fd, backup in saved:
            os.dup2(backup, fd)
            os.close(backup)
        os.close(tty_fd)
        logger.debug("restored fds %s", [fd for fd, _ in saved])
