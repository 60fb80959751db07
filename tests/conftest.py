"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer
from file_manager.entities.working_directory import WorkingDirectory


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def console():
    """Console that records plain text into a StringIO (read it with ``console.file.getvalue()``)."""
    return Console(
        file=io.StringIO(),
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
        color_system=None,
        width=200,
    )


@pytest.fixture
def dependency_container(temp_directory, console, mock_logger):
    """
    Create a dependency container rooted in the temporary directory.

    Returns:
        DependencyContainer whose sessions start in temp_directory and print to ``console``
    """
    container = DependencyContainer(
        Settings(username="Tester", start_dir=temp_directory, log_level="DEBUG")
    )
    container._logger = mock_logger
    container._instances["console"] = console
    return container


@pytest.fixture
def working_directory(temp_directory):
    return WorkingDirectory(temp_directory)


@pytest.fixture
def dispatcher(dependency_container, working_directory):
    return dependency_container.get_dispatcher(working_directory)


@pytest.fixture
def output(console):
    """Return a callable giving the lines written to the test console so far."""

    def _lines() -> list[str]:
        return console.file.getvalue().splitlines()

    return _lines
