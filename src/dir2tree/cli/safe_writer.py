"""Safe output writing utilities for dir2tree CLI.

This module provides a writing interface with an explicit text encoding that
treats a closed output pipe as a normal end of output.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union


class SafeWriter:
    """Encoding-aware writer for file descriptors and files.

    The encoding is chosen by the caller instead of being taken from the console,
    so glyph output is byte-for-byte the same on every platform.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
        encoding: Text encoding applied to every write.
    """

    def __init__(self, file: Union[int, Path], encoding: str = "utf-8"):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or Path object for writing output.
            encoding: Text encoding used for every write. Defaults to UTF-8.
        """
        self.file = file
        self.encoding = encoding
        self._closed = False

        if isinstance(file, int):
            # It's already a file descriptor
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            self._file_obj = path.open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Encode and write data.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If the pipe is broken.
            UnicodeEncodeError: If data can't be represented in the configured encoding.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        payload = data.encode(self.encoding)
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if it was opened by this class."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                # Handle broken pipe errors during close gracefully
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
            # Only suppress close errors if there was already an exception
            if exc_type is None:
                raise
