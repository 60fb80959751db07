"""
Interactive session: greeting, prompt loop and termination.
"""

import asyncio
import logging
import os
import signal
from typing import Optional

from rich.console import Console

from file_manager.entities.working_directory import WorkingDirectory
from file_manager.shell.dispatcher import CommandDispatcher
from file_manager.shell.stdin_reader import StdinFeeder
from file_manager.utils.paths import displayable

TERMINATION_SIGNALS = (signal.SIGINT, signal.SIGTERM)
# seconds .exit and end of input wait for in-flight operations to report
DEFAULT_EXIT_GRACE_PERIOD = 2.0


class Session:
    """
    One run of the file manager for one user.

    The session is Interactive until ``.exit``, end of input or an interrupt
    signal, then Terminated. The farewell is printed exactly once, whichever
    way termination happens.
    """

    def __init__(
        self,
        username: str,
        working_directory: WorkingDirectory,
        dispatcher: CommandDispatcher,
        console: Console,
        prompt: str = ">",
        exit_grace_period: float = DEFAULT_EXIT_GRACE_PERIOD,
        logger: Optional[logging.Logger] = None,
    ):
        self.username = username
        self.working_directory = working_directory
        self._dispatcher = dispatcher
        self._console = console
        self._prompt = prompt
        self._exit_grace_period = exit_grace_period
        self._logger = logger or logging.getLogger(__name__)
        self._terminating: Optional[asyncio.Event] = None
        self._interrupted = False
        self._said_goodbye = False

    @property
    def terminated(self) -> bool:
        return self._said_goodbye

    def greet(self) -> None:
        self._console.print(f"Welcome to the File Manager, {self.username}!")
        self.print_current_directory()

    def print_current_directory(self) -> None:
        self._console.print(
            displayable(f"You are currently in {self.working_directory.current}")
        )

    def farewell(self) -> None:
        if self._said_goodbye:
            return
        self._said_goodbye = True
        if self._interrupted:
            # the interrupted prompt line is still open
            self._console.print()
        self._console.print(
            f"Thank you for using File Manager, {self.username}, goodbye!"
        )

    def interrupt(self) -> None:
        """Request termination from a signal handler."""
        self._logger.info("Interrupt received, ending session")
        self._interrupted = True
        if self._terminating is not None:
            self._terminating.set()

    async def run(self, reader: Optional[asyncio.StreamReader] = None) -> int:
        """
        Run the prompt loop until the session terminates.

        Args:
            reader: Source of input lines; stdin when None

        Returns:
            The process exit status, always 0
        """
        loop = asyncio.get_running_loop()
        self._terminating = asyncio.Event()
        feeder: Optional[StdinFeeder] = None
        if reader is None:
            feeder = StdinFeeder(logger=self._logger)
            reader = feeder.start()
        installed = self._install_signal_handlers(loop)
        try:
            self.greet()
            while not self._terminating.is_set():
                self._console.print(self._prompt, end="")
                line = await self._read_line(reader)
                if not line:
                    self._logger.debug("End of input")
                    break
                if not self._dispatcher.dispatch(os.fsdecode(line)):
                    break
            # .exit and end of input let in-flight operations report first
            if not self._terminating.is_set() and self._dispatcher.pending:
                await self._until_terminated(
                    self._dispatcher.drain(), timeout=self._exit_grace_period
                )
                if self._dispatcher.pending:
                    self._logger.warning(
                        f"Leaving {self._dispatcher.pending} operation(s) unfinished"
                    )
        finally:
            self._remove_signal_handlers(loop, installed)
            if feeder is not None:
                feeder.close()
            self.farewell()
        return 0

    async def _until_terminated(self, awaitable, timeout: Optional[float] = None):
        """
        Await ``awaitable`` unless termination is requested or ``timeout``
        expires first; then return None.
        """
        work = asyncio.ensure_future(awaitable)
        stop = asyncio.ensure_future(self._terminating.wait())
        try:
            done, _ = await asyncio.wait(
                {work, stop}, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            stop.cancel()
        if work in done:
            return work.result()
        work.cancel()
        return None

    async def _read_line(self, reader: asyncio.StreamReader) -> Optional[bytes]:
        try:
            return await self._until_terminated(reader.readline())
        except ValueError as e:
            # line longer than the reader's limit; treat it as a blank line
            self._logger.warning(f"Discarded oversized input: {e}")
            return b"\n"

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> list:
        installed = []
        for sig in TERMINATION_SIGNALS:
            try:
                loop.add_signal_handler(sig, self.interrupt)
                installed.append(sig)
            except (NotImplementedError, RuntimeError, ValueError) as e:
                # Windows event loops, or not running in the main thread
                self._logger.debug(f"Cannot watch {sig!r} from the loop: {e}")
                if sig is signal.SIGINT:
                    self._install_fallback_sigint(loop)
        return installed

    def _install_fallback_sigint(self, loop: asyncio.AbstractEventLoop) -> None:
        try:
            signal.signal(
                signal.SIGINT, lambda *_: loop.call_soon_threadsafe(self.interrupt)
            )
        except ValueError as e:
            self._logger.debug(f"Cannot install SIGINT handler: {e}")

    @staticmethod
    def _remove_signal_handlers(loop: asyncio.AbstractEventLoop, installed: list) -> None:
        for sig in installed:
            loop.remove_signal_handler(sig)
