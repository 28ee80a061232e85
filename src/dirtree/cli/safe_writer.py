"""Line output for the dirtree CLI.

Rows are written straight to a file descriptor so that an interruption is noticed
between rows and a closed pipe surfaces as ``BrokenPipeError`` instead of a stray
error during interpreter shutdown.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler

# Filenames that are not valid UTF-8 reach us as lone surrogates; write their
# original bytes back out.
ENCODING_ERRORS = "surrogateescape"


class SafeWriter:
    """Writes rows to a file descriptor or a file, stopping on interruption.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.

    Example:
        >>> import tempfile
        >>> with tempfile.NamedTemporaryFile(delete=False) as f:
        ...     path = f.name
        >>> with SafeWriter(path) as writer:
        ...     writer.write_line("└── notes.txt")
        >>> open(path, encoding="utf-8").read()
        '└── notes.txt\\n'
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the writer.

        Args:
            file: A file descriptor (int), or a path to create or truncate.

        Raises:
            TypeError: If ``file`` is neither a descriptor nor path-like.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write ``data`` in full.

        Raises:
            BrokenPipeError: If a signal was received or the reader went away.
            OSError: If an I/O error occurs during writing.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8", ENCODING_ERRORS)
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_line(self, line: str) -> None:
        self.write(line + "\n")

    def close(self) -> None:
        """Close the file if this writer opened it; descriptors passed in stay open."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence.
            if exc_type is None:
                raise
