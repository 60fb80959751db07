"""
Non-blocking line input for the session loop.

Lines are delivered through an ``asyncio.StreamReader``. On POSIX terminals and
pipes the loop watches the file descriptor directly; anywhere that is not
possible (regular files redirected to stdin, Windows consoles) a daemon thread
feeds the reader instead, so a blocked read can never hold up shutdown.
"""

import asyncio
import logging
import os
import sys
import threading
from typing import BinaryIO, Optional

READ_SIZE = 4096
LINE_LIMIT = 1024 * 1024


class StdinFeeder:
    """Feeds bytes from a binary stream into an asyncio.StreamReader."""

    def __init__(
        self,
        stream: Optional[BinaryIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin.buffer
        self._logger = logger or logging.getLogger(__name__)
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._fd: Optional[int] = None
        self.reader: Optional[asyncio.StreamReader] = None

    def start(self) -> asyncio.StreamReader:
        self._loop = asyncio.get_running_loop()
        self.reader = asyncio.StreamReader(limit=LINE_LIMIT)
        try:
            fd = self._stream.fileno()
            self._loop.add_reader(fd, self._on_readable)
            self._fd = fd
            self._logger.debug(f"Watching fd {fd} for input")
        except (NotImplementedError, OSError, ValueError) as e:
            self._logger.debug(f"Falling back to a reader thread: {e}")
            threading.Thread(
                target=self._read_in_thread, name="stdin-feeder", daemon=True
            ).start()
        return self.reader

    def close(self) -> None:
        if self._loop is not None and self._fd is not None:
            self._loop.remove_reader(self._fd)
            self._fd = None

    def _on_readable(self) -> None:
        try:
            data = os.read(self._fd, READ_SIZE)
        except OSError as e:
            self._logger.error(f"Reading input failed: {e}")
            data = b""
        if data:
            self.reader.feed_data(data)
        else:
            self.close()
            self.reader.feed_eof()

    def _read_in_thread(self) -> None:
        loop = self._loop
        try:
            for line in iter(self._stream.readline, b""):
                loop.call_soon_threadsafe(self.reader.feed_data, line)
        except (OSError, ValueError) as e:
            self._logger.error(f"Reading input failed: {e}")
        finally:
            try:
                loop.call_soon_threadsafe(self.reader.feed_eof)
            except RuntimeError:
                # loop already closed; nobody is waiting for input any more
                pass
