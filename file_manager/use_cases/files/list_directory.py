"""
Use case for listing the working directory.
"""

import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class ListDirectoryUseCase:
    """Use case for listing a directory: sorted directories, then sorted files."""

    def __init__(
        self,
        file_operations: FileOperationsPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_operations = file_operations
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, directory: str) -> OperationResult:
        """
        List a directory.

        Args:
            directory: Absolute path of the directory to list

        Returns:
            OperationResult with one entry per line; the payload is the DirectoryListing

        Raises:
            FileOperationError: If listing fails
        """
        try:
            self._logger.info(f"Listing directory: {directory}")
            listing = await run_blocking(self._file_operations.list_directory, directory)
            self._logger.info(
                f"Found {len(listing.directories)} directories and {len(listing.files)} files"
            )
            return OperationResult.success("\n".join(listing.entries), payload=listing)
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileOperationError(f"Failed to list {directory}: {str(e)}")
