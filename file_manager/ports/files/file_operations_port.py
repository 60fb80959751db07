"""
File operations port interface defining the contract for filesystem access.
"""

from abc import ABC, abstractmethod

from file_manager.entities.directory_listing import DirectoryListing


class FileOperationsPort(ABC):
    """Port interface for the shell's filesystem operations.

    Every path is absolute. Implementations are blocking; callers run them off
    the event loop.
    """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Check whether a path exists and is a directory.

        Args:
            path: Absolute path to check

        Returns:
            True if the path is an accessible directory, False otherwise
        """
        pass

    @abstractmethod
    def list_directory(self, directory: str) -> DirectoryListing:
        """
        List the directories and regular files inside a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            A DirectoryListing with both groups sorted

        Raises:
            FileOperationError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Stream the bytes of source into destination.

        Raises:
            FileOperationError: If reading or writing fails at any point
        """
        pass

    @abstractmethod
    def move_file(self, source: str, destination: str) -> None:
        """
        Atomically rename source to destination.

        Raises:
            FileOperationError: If the rename fails (missing source, cross-device, ...)
        """
        pass

    @abstractmethod
    def rename_file(self, old_path: str, new_path: str) -> None:
        """
        Give a file a new name.

        Raises:
            FileOperationError: If the rename fails
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a single file.

        Raises:
            FileOperationError: If the file is missing, a directory or not removable
        """
        pass

    @abstractmethod
    def compress_file(self, source: str, destination: str) -> None:
        """
        Write a gzip stream of source into destination.

        Raises:
            FileOperationError: On any stream error
        """
        pass

    @abstractmethod
    def decompress_file(self, source: str, destination: str) -> None:
        """
        Inflate the gzip stream in source into destination.

        Raises:
            FileOperationError: On any stream error, including malformed input
        """
        pass

    @abstractmethod
    def hash_file(self, path: str) -> str:
        """
        Compute the SHA-256 digest of a file.

        Returns:
            Lowercase hex digest

        Raises:
            FileOperationError: If the file cannot be read
        """
        pass
