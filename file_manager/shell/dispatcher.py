"""
Command dispatcher: one flat table from command name to handler.

Path arguments are resolved against the working directory while the line is
being dispatched. Filesystem work is then scheduled as an asyncio task and
``dispatch`` returns straight away, so the prompt comes back before the
operation reports its outcome.
"""

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Optional, Union

from rich.console import Console

from file_manager.entities.command_line import CommandLine
from file_manager.entities.operation_result import OperationResult
from file_manager.entities.working_directory import WorkingDirectory
from file_manager.exceptions import FileOperationError, InvalidInputError
from file_manager.use_cases.files.change_directory import ChangeDirectoryUseCase
from file_manager.use_cases.files.compress_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.files.copy_file import CopyFileUseCase
from file_manager.use_cases.files.delete_file import DeleteFileUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.files.move_file import MoveFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.system.os_info import GetOsInfoUseCase
from file_manager.utils.paths import displayable

EXIT_COMMAND = ".exit"
INVALID_INPUT_MESSAGE = "Invalid input"

Outcome = Union[OperationResult, Awaitable[OperationResult]]
Handler = Callable[[tuple[str, ...]], Outcome]


class CommandDispatcher:
    """Routes one command line at a time to the matching operation."""

    def __init__(
        self,
        working_directory: WorkingDirectory,
        console: Console,
        change_directory: ChangeDirectoryUseCase,
        list_directory: ListDirectoryUseCase,
        copy_file: CopyFileUseCase,
        move_file: MoveFileUseCase,
        delete_file: DeleteFileUseCase,
        rename_file: RenameFileUseCase,
        compress_file: CompressFileUseCase,
        decompress_file: DecompressFileUseCase,
        hash_file: HashFileUseCase,
        os_info: GetOsInfoUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._working_directory = working_directory
        self._console = console
        self._change_directory = change_directory
        self._list_directory = list_directory
        self._copy_file = copy_file
        self._move_file = move_file
        self._delete_file = delete_file
        self._rename_file = rename_file
        self._compress_file = compress_file
        self._decompress_file = decompress_file
        self._hash_file = hash_file
        self._os_info = os_info
        self._logger = logger or logging.getLogger(__name__)
        self._pending: set[asyncio.Task] = set()

        # name -> (required argument count, handler)
        self._commands: dict[str, tuple[int, Handler]] = {
            "cd": (1, self._handle_cd),
            "up": (0, self._handle_up),
            "ls": (0, self._handle_ls),
            "copy": (2, self._handle_copy),
            "move": (2, self._handle_move),
            "rm": (1, self._handle_rm),
            "rn": (2, self._handle_rn),
            "compress": (2, self._handle_compress),
            "decompress": (2, self._handle_decompress),
            "hash": (1, self._handle_hash),
            "os-info": (0, self._handle_os_info),
        }

    @property
    def commands(self) -> list[str]:
        return [*self._commands, EXIT_COMMAND]

    @property
    def pending(self) -> int:
        """Number of operations still in flight."""
        return len(self._pending)

    def dispatch(self, raw: str) -> bool:
        """
        Handle one line of input.

        Args:
            raw: The line as typed by the user

        Returns:
            False when the line asks the session to end, True otherwise
        """
        command = CommandLine.parse(raw)
        if command.is_blank():
            return True
        if command.name == EXIT_COMMAND:
            return False

        try:
            required, handler = self._lookup(command)
        except InvalidInputError as e:
            self._logger.debug(str(e))
            self._print(INVALID_INPUT_MESSAGE)
            return True

        try:
            outcome = handler(command.args[:required])
        except Exception as e:
            self._logger.exception(f"Command {command.name} failed: {e}")
            self._report(OperationResult.failure())
            return True

        if inspect.isawaitable(outcome):
            self._schedule(command.name, outcome)
        else:
            self._report(outcome)
        return True

    async def drain(self) -> None:
        """Wait until every in-flight operation has reported."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _lookup(self, command: CommandLine) -> tuple[int, Handler]:
        entry = self._commands.get(command.name)
        if entry is None:
            raise InvalidInputError(f"Unknown command: {command.name}")
        required, _ = entry
        if not command.has_args(required):
            raise InvalidInputError(
                f"{command.name} expects {required} argument(s), got {len(command.args)}"
            )
        return entry

    def _schedule(self, name: str, operation: Awaitable[OperationResult]) -> None:
        task = asyncio.ensure_future(self._run(name, operation))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run(self, name: str, operation: Awaitable[OperationResult]) -> None:
        try:
            result = await operation
        except FileOperationError as e:
            self._logger.warning(f"{name} failed: {e}")
            result = OperationResult.failure()
        except Exception as e:
            self._logger.exception(f"Unexpected error in {name}: {e}")
            result = OperationResult.failure()
        self._report(result)

    def _report(self, result: OperationResult) -> None:
        for line in result.lines():
            self._print(line)

    def _print(self, text: str) -> None:
        self._console.print(displayable(text))

    def _resolve(self, *names: str) -> list[str]:
        return [self._working_directory.resolve(name) for name in names]

    # Handlers. Each receives exactly its required arguments.

    def _handle_cd(self, args: tuple[str, ...]) -> Outcome:
        (target,) = self._resolve(*args)
        return self._change_directory.execute(self._working_directory, target)

    def _handle_up(self, args: tuple[str, ...]) -> Outcome:
        current = self._working_directory.move_to_parent()
        return OperationResult.success(f"You are currently in {current}", payload=current)

    def _handle_ls(self, args: tuple[str, ...]) -> Outcome:
        return self._list_directory.execute(self._working_directory.current)

    def _handle_copy(self, args: tuple[str, ...]) -> Outcome:
        source, destination = self._resolve(*args)
        return self._copy_file.execute(source, destination, *args)

    def _handle_move(self, args: tuple[str, ...]) -> Outcome:
        source, destination = self._resolve(*args)
        return self._move_file.execute(source, destination, *args)

    def _handle_rm(self, args: tuple[str, ...]) -> Outcome:
        (path,) = self._resolve(*args)
        return self._delete_file.execute(path, *args)

    def _handle_rn(self, args: tuple[str, ...]) -> Outcome:
        old_path, new_path = self._resolve(*args)
        return self._rename_file.execute(old_path, new_path, *args)

    def _handle_compress(self, args: tuple[str, ...]) -> Outcome:
        source, destination = self._resolve(*args)
        return self._compress_file.execute(source, destination, *args)

    def _handle_decompress(self, args: tuple[str, ...]) -> Outcome:
        source, destination = self._resolve(*args)
        return self._decompress_file.execute(source, destination, *args)

    def _handle_hash(self, args: tuple[str, ...]) -> Outcome:
        (path,) = self._resolve(*args)
        return self._hash_file.execute(path, *args)

    def _handle_os_info(self, args: tuple[str, ...]) -> Outcome:
        return self._os_info.execute()
