"""Signal-aware output writing for the tree-export CLI."""

import errno
import io
import sys
import types
from typing import Optional, TextIO, Type

from tree_export.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text to a stream, stopping as soon as the output goes away.

    Every write checks whether SIGPIPE or SIGINT has been received and flushes
    immediately, so a closed pipe surfaces as BrokenPipeError at the write that
    hit it. The writer never closes the underlying stream.

    Attributes:
        stream: The text stream written to (standard output by default). Standard
            output is switched to backslash escapes for unencodable characters.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> with SafeWriter(buffer) as writer:
        ...     writer.write(".\\n")
        >>> buffer.getvalue()
        '.\\n'
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        if stream is None:
            stream = sys.stdout
            # Entry names the output encoding cannot represent (such as undecodable
            # bytes surrogate-escaped by os.listdir) are written as backslash escapes
            if isinstance(stream, io.TextIOWrapper):
                stream.reconfigure(errors="backslashreplace")
        self.stream = stream
        self._closed = False

    def write(self, data: str) -> None:
        """Write and flush data.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: If any other I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        try:
            self.stream.write(data)
            self.stream.flush()
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Mark the writer closed; later writes raise ValueError."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
