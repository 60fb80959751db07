"""
Local file system adapter implementation for file operations.
"""

import gzip
import hashlib
import logging
import os
import zlib
from typing import BinaryIO, Callable, Optional

from typing_extensions import override

from file_manager.config.settings import DEFAULT_CHUNK_SIZE
from file_manager.entities.directory_listing import DirectoryListing
from file_manager.exceptions import FileOperationError
from file_manager.ports.files.file_operations_port import FileOperationsPort

# Errors a gzip stream can raise besides OSError (BadGzipFile is an OSError).
_STREAM_ERRORS = (OSError, EOFError, zlib.error)


class LocalFileSystemAdapter(FileOperationsPort):
    """Local file system implementation of the file operations port."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            chunk_size: Number of bytes read per step by the streaming operations
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size

    def _iter_chunks(self, stream: BinaryIO):
        while True:
            chunk = stream.read(self._chunk_size)
            if not chunk:
                return
            yield chunk

    def _pipe(
        self,
        source: str,
        destination: str,
        wrap_reader: Callable[[BinaryIO], BinaryIO] = lambda f: f,
        wrap_writer: Callable[[BinaryIO], BinaryIO] = lambda f: f,
    ) -> int:
        """
        Stream source into destination through optional reader/writer transforms.

        The source is opened before the destination so a missing source never
        leaves an empty destination behind. Partial output is not removed.

        Returns:
            Number of bytes written to the (possibly wrapped) writer
        """
        written = 0
        with open(source, "rb") as raw_in:
            with open(destination, "wb") as raw_out:
                reader = wrap_reader(raw_in)
                writer = wrap_writer(raw_out)
                try:
                    for chunk in self._iter_chunks(reader):
                        writer.write(chunk)
                        written += len(chunk)
                finally:
                    if writer is not raw_out:
                        writer.close()
                    if reader is not raw_in:
                        reader.close()
        return written

    @staticmethod
    def _is_same_file(source: str, destination: str) -> bool:
        try:
            return os.path.samefile(source, destination)
        except OSError:
            return False

    @override
    def is_directory(self, path: str) -> bool:
        # a directory we cannot enter is as good as missing for cd
        return os.path.isdir(path) and os.access(path, os.X_OK)

    @override
    def list_directory(self, directory: str) -> DirectoryListing:
        """
        List the directories and regular files inside a directory.

        Symlinks count as the type of their target; anything that is neither a
        directory nor a regular file (sockets, broken links, ...) is skipped.

        Raises:
            FileOperationError: If listing fails
        """
        try:
            directories: list[str] = []
            files: list[str] = []
            with os.scandir(directory) as it:
                for entry in it:
                    try:
                        if entry.is_dir():
                            directories.append(entry.name)
                        elif entry.is_file():
                            files.append(entry.name)
                    except OSError as e:
                        # Log the error but continue with other entries
                        self._logger.warning(f"Could not inspect {entry.path}: {e}")
            return DirectoryListing.from_names(directory, directories, files)
        except OSError as e:
            raise FileOperationError(f"Failed to list {directory}: {str(e)}")

    @override
    def copy_file(self, source: str, destination: str) -> None:
        if self._is_same_file(source, destination):
            raise FileOperationError(f"Source and destination are the same file: {source}")
        try:
            copied = self._pipe(source, destination)
            self._logger.debug(f"Copied {copied} bytes from {source} to {destination}")
        except OSError as e:
            raise FileOperationError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

    @override
    def move_file(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileOperationError(
                f"Failed to move {source} to {destination}: {str(e)}"
            )

    @override
    def rename_file(self, old_path: str, new_path: str) -> None:
        try:
            os.rename(old_path, new_path)
        except OSError as e:
            raise FileOperationError(
                f"Failed to rename {old_path} to {new_path}: {str(e)}"
            )

    @override
    def delete_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileOperationError(f"Failed to delete {path}: {str(e)}")

    @override
    def compress_file(self, source: str, destination: str) -> None:
        if self._is_same_file(source, destination):
            raise FileOperationError(f"Source and destination are the same file: {source}")
        try:
            consumed = self._pipe(
                source,
                destination,
                wrap_writer=lambda f: gzip.GzipFile(fileobj=f, mode="wb"),
            )
            self._logger.debug(f"Compressed {consumed} bytes from {source} into {destination}")
        except _STREAM_ERRORS as e:
            raise FileOperationError(
                f"Failed to compress {source} to {destination}: {str(e)}"
            )

    @override
    def decompress_file(self, source: str, destination: str) -> None:
        if self._is_same_file(source, destination):
            raise FileOperationError(f"Source and destination are the same file: {source}")
        try:
            produced = self._pipe(
                source,
                destination,
                wrap_reader=lambda f: gzip.GzipFile(fileobj=f, mode="rb"),
            )
            self._logger.debug(f"Decompressed {source} into {produced} bytes at {destination}")
        except _STREAM_ERRORS as e:
            raise FileOperationError(
                f"Failed to decompress {source} to {destination}: {str(e)}"
            )

    @override
    def hash_file(self, path: str) -> str:
        digest = hashlib.sha256()
        try:
            with open(path, "rb") as stream:
                for chunk in self._iter_chunks(stream):
                    digest.update(chunk)
        except OSError as e:
            raise FileOperationError(f"Failed to hash {path}: {str(e)}")
        return digest.hexdigest()
