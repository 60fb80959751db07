import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class MoveFileUseCase:
    """Use case for an atomic move (rename across directories on one device)."""

    def __init__(
        self,
        file_operations: FileOperationsPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_operations = file_operations
        self._logger = logger or logging.getLogger(__name__)

    async def execute(
        self,
        source: str,
        destination: str,
        source_name: Optional[str] = None,
        destination_name: Optional[str] = None,
    ) -> OperationResult:
        try:
            self._logger.info(f"Moving {source} to {destination}")
            await run_blocking(self._file_operations.move_file, source, destination)
            return OperationResult.success(
                f"File moved from {source_name or source} to {destination_name or destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error moving file: {e}")
            raise FileOperationError(f"Failed to move {source} to {destination}: {str(e)}")
