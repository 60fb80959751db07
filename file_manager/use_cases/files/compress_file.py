"""
Use cases for gzip compression and decompression.
"""

import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.utils.concurrency import run_blocking


class CompressFileUseCase:
    """Use case for streaming a file through gzip into a new file."""

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
        Compress source into destination as a standard gzip stream.

        Raises:
            FileOperationError: On any stream error
        """
        try:
            self._logger.info(f"Compressing {source} to {destination}")
            await run_blocking(self._file_operations.compress_file, source, destination)
            return OperationResult.success(
                f"File {source_name or source} compressed to {destination_name or destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error compressing file: {e}")
            raise FileOperationError(f"Failed to compress {source}: {str(e)}")


class DecompressFileUseCase:
    """Use case for inflating a gzip file into a new file."""

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
        Decompress the gzip stream in source into destination.

        Raises:
            FileOperationError: On any stream error, including malformed input
        """
        try:
            self._logger.info(f"Decompressing {source} to {destination}")
            await run_blocking(self._file_operations.decompress_file, source, destination)
            return OperationResult.success(
                f"File {source_name or source} decompressed to {destination_name or destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error decompressing file: {e}")
            raise FileOperationError(f"Failed to decompress {source}: {str(e)}")
