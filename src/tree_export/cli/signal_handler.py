"""Signal handling utilities for the tree-export CLI.

SIGPIPE is raised when the reading end of the output pipe goes away (for example
``tree-export | head``) and SIGINT on Ctrl+C. Both are recorded rather than
acted on immediately so the CLI can stop writing and exit with the conventional
status (141 and 130 respectively).
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

# SIGPIPE does not exist on Windows
HAS_SIGPIPE = hasattr(signal, "SIGPIPE")


class SignalHandler:
    """Records SIGPIPE and SIGINT so output can stop cleanly.

    Each handler restores the original disposition after the first delivery, so
    a second Ctrl+C behaves as it normally would.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigpipe_handler: SIGPIPE disposition before setup, or None without SIGPIPE.
        original_sigint_handler: SIGINT disposition before setup.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(signal.SIGPIPE) if HAS_SIGPIPE else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def exit_code(self) -> Optional[int]:
        """Return the exit status implied by the received signals, if any."""
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE (where available) and SIGINT handlers."""
    if HAS_SIGPIPE:
        signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Registered with atexit so that flushing stdout at interpreter shutdown does
    not print a second broken-pipe error.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
