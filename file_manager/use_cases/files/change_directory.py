"""
Use case for changing the session's working directory.
"""

import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.entities.working_directory import WorkingDirectory
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class ChangeDirectoryUseCase:
    """Use case for moving the working directory to an existing directory."""

    def __init__(
        self,
        file_operations: FileOperationsPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_operations: Port used to check the target directory
            logger: Logger instance to use for logging
        """
        self._file_operations = file_operations
        self._logger = logger or logging.getLogger(__name__)

    async def execute(
        self, working_directory: WorkingDirectory, target: str
    ) -> OperationResult:
        """
        Point the working directory at target if it is an accessible directory.

        Args:
            working_directory: The session's working directory state
            target: Absolute path, already resolved at dispatch time

        Returns:
            OperationResult naming the new current directory

        Raises:
            FileOperationError: If target is missing, not a directory or inaccessible
        """
        try:
            self._logger.info(f"Changing directory to: {target}")
            if not await run_blocking(self._file_operations.is_directory, target):
                raise FileOperationError(f"Not an accessible directory: {target}")
            working_directory.set_to(target)
            return OperationResult.success(
                f"You are currently in {working_directory.current}",
                payload=working_directory.current,
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise FileOperationError(f"Failed to change directory to {target}: {str(e)}")
