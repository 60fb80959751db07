"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from rich.console import Console

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.adapters.system.local_system_adapter import LocalSystemInfoAdapter
from file_manager.config.settings import Settings
from file_manager.entities.working_directory import WorkingDirectory
from file_manager.ports.files.file_operations_port import FileOperationsPort
from file_manager.ports.system.system_info_port import SystemInfoPort
from file_manager.shell.dispatcher import CommandDispatcher
from file_manager.shell.session import Session
from file_manager.use_cases.files.change_directory import ChangeDirectoryUseCase
from file_manager.use_cases.files.compress_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.files.copy_file import CopyFileUseCase
from file_manager.use_cases.files.delete_file import DeleteFileUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.files.move_file import MoveFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.system.os_info import GetOsInfoUseCase


def create_console() -> Console:
    """Console for user-facing output: file names print verbatim, nothing is wrapped."""
    return Console(soft_wrap=True, highlight=False, markup=False, emoji=False)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def configure(self, settings: Settings) -> None:
        """Use these settings from now on, dropping anything built with the old ones."""
        self._settings = settings
        self.reset()

    def get_settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> Console:
        if "console" not in self._instances:
            self._instances["console"] = create_console()
        return self._instances["console"]

    def get_file_operations(self) -> FileOperationsPort:
        """
        Get file operations adapter instance.

        Returns:
            FileOperationsPort implementation
        """
        if "file_operations" not in self._instances:
            self._instances["file_operations"] = LocalFileSystemAdapter(
                self._logger, chunk_size=self.get_settings().chunk_size
            )
        return self._instances["file_operations"]

    def get_system_info(self) -> SystemInfoPort:
        """
        Get system info adapter instance.

        Returns:
            SystemInfoPort implementation
        """
        if "system_info" not in self._instances:
            self._instances["system_info"] = LocalSystemInfoAdapter(self._logger)
        return self._instances["system_info"]

    def get_dispatcher(self, working_directory: WorkingDirectory) -> CommandDispatcher:
        """
        Build a dispatcher bound to one session's working directory.

        Returns:
            Configured CommandDispatcher
        """
        files = self.get_file_operations()
        return CommandDispatcher(
            working_directory=working_directory,
            console=self.get_console(),
            change_directory=ChangeDirectoryUseCase(files, self._logger),
            list_directory=ListDirectoryUseCase(files, self._logger),
            copy_file=CopyFileUseCase(files, self._logger),
            move_file=MoveFileUseCase(files, self._logger),
            delete_file=DeleteFileUseCase(files, self._logger),
            rename_file=RenameFileUseCase(files, self._logger),
            compress_file=CompressFileUseCase(files, self._logger),
            decompress_file=DecompressFileUseCase(files, self._logger),
            hash_file=HashFileUseCase(files, self._logger),
            os_info=GetOsInfoUseCase(self.get_system_info(), self._logger),
            logger=self._logger,
        )

    def create_session(self) -> Session:
        """
        Create a fresh session starting in the configured directory.

        Returns:
            Session with its own WorkingDirectory and dispatcher
        """
        settings = self.get_settings()
        working_directory = WorkingDirectory(settings.start_dir)
        return Session(
            username=settings.username,
            working_directory=working_directory,
            dispatcher=self.get_dispatcher(working_directory),
            console=self.get_console(),
            prompt=settings.prompt,
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
