import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class DeleteFileUseCase:
    def __init__(
        self,
        file_operations: FileOperationsPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_operations = file_operations
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, path: str, name: Optional[str] = None) -> OperationResult:
        try:
            self._logger.info(f"Deleting file: {path}")
            await run_blocking(self._file_operations.delete_file, path)
            return OperationResult.success(f"File {name or path} deleted")
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting file: {e}")
            raise FileOperationError(f"Failed to delete {path}: {str(e)}")
