"""
Use case for copying a file.
"""

import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class CopyFileUseCase:
    """Use case for a byte-for-byte stream copy of one file."""

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
        """
        Copy source to destination.

        Args:
            source: Absolute source path
            destination: Absolute destination path
            source_name: Name to show in the message (defaults to source)
            destination_name: Name to show in the message (defaults to destination)

        Raises:
            FileOperationError: If reading or writing fails; partial output is kept
        """
        try:
            self._logger.info(f"Copying {source} to {destination}")
            await run_blocking(self._file_operations.copy_file, source, destination)
            return OperationResult.success(
                f"File copied from {source_name or source} to {destination_name or destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise FileOperationError(f"Failed to copy {source} to {destination}: {str(e)}")
