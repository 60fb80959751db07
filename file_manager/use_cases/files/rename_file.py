import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class RenameFileUseCase:
    """Use case for renaming a file. Both names resolve against the working directory."""

    def __init__(
        self,
        file_operations: FileOperationsPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_operations = file_operations
        self._logger = logger or logging.getLogger(__name__)

    async def execute(
        self,
        old_path: str,
        new_path: str,
        old_name: Optional[str] = None,
        new_name: Optional[str] = None,
    ) -> OperationResult:
        try:
            self._logger.info(f"Renaming {old_path} to {new_path}")
            await run_blocking(self._file_operations.rename_file, old_path, new_path)
            return OperationResult.success(
                f"File renamed from {old_name or old_path} to {new_name or new_path}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error renaming file: {e}")
            raise FileOperationError(f"Failed to rename {old_path} to {new_path}: {str(e)}")
