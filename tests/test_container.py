"""
Tests for the DependencyContainer.
"""

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.adapters.system.local_system_adapter import LocalSystemInfoAdapter
from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer
from file_manager.shell.dispatcher import CommandDispatcher
from file_manager.shell.session import Session


class TestDependencyContainer:
    def test_adapters_are_singletons(self, dependency_container):
        files = dependency_container.get_file_operations()

        assert isinstance(files, LocalFileSystemAdapter)
        assert dependency_container.get_file_operations() is files
        assert isinstance(dependency_container.get_system_info(), LocalSystemInfoAdapter)

    def test_chunk_size_comes_from_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "4096")
        container = DependencyContainer(Settings(start_dir=str(tmp_path)))

        assert container.get_file_operations()._chunk_size == 4096

    def test_create_session(self, dependency_container, temp_directory):
        session = dependency_container.create_session()

        assert isinstance(session, Session)
        assert session.username == "Tester"
        assert session.working_directory.current == temp_directory
        assert isinstance(session._dispatcher, CommandDispatcher)
        assert session._dispatcher._working_directory is session.working_directory

    def test_sessions_do_not_share_working_directory(self, dependency_container):
        first = dependency_container.create_session()
        second = dependency_container.create_session()

        first.working_directory.move_to_parent()

        assert first.working_directory.current != second.working_directory.current

    def test_configure_replaces_settings(self, dependency_container, tmp_path):
        old_files = dependency_container.get_file_operations()

        dependency_container.configure(Settings(username="Other", start_dir=str(tmp_path)))

        assert dependency_container.get_settings().username == "Other"
        assert dependency_container.get_file_operations() is not old_files

    def test_reset(self, dependency_container):
        console = dependency_container.get_console()

        dependency_container.reset()

        assert dependency_container.get_console() is not console
