"""
Use case for hashing a file.
"""

import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class HashFileUseCase:
    """Use case for computing the SHA-256 digest of a file."""

    def __init__(
        self,
        file_operations: FileOperationsPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_operations = file_operations
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, path: str, name: Optional[str] = None) -> OperationResult:
        """
        Hash a file.

        Args:
            path: Absolute path of the file
            name: Name to show in the message (defaults to path)

        Returns:
            OperationResult whose payload is the lowercase hex digest

        Raises:
            FileOperationError: If the file cannot be read
        """
        try:
            self._logger.info(f"Hashing file: {path}")
            digest = await run_blocking(self._file_operations.hash_file, path)
            return OperationResult.success(
                f"SHA-256 hash of {name or path}: {digest}", payload=digest
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error hashing file: {e}")
            raise FileOperationError(f"Failed to hash {path}: {str(e)}")
