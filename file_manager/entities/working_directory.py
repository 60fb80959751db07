"""
Working directory domain entity.
"""

import os

from file_manager.utils.paths import parent_of, resolve_path


class WorkingDirectory:
    """
    Mutable cursor holding the session's current absolute directory.

    Only the command loop touches this object, so it carries no locking.
    """

    def __init__(self, path: str):
        """
        Initialize the working directory.

        Args:
            path: Absolute starting directory

        Raises:
            ValueError: If path is empty or relative
        """
        if not path or not os.path.isabs(path):
            raise ValueError(f"Working directory must be an absolute path: {path!r}")
        self._current = os.path.normpath(path)

    @property
    def current(self) -> str:
        """The present working directory."""
        return self._current

    def move_to_parent(self) -> str:
        """
        Ascend one level without touching the filesystem.

        Returns:
            The new current directory (unchanged when already at a root)
        """
        parent = parent_of(self._current)
        if parent != self._current:
            self._current = parent
        return self._current

    def set_to(self, path: str) -> None:
        """Overwrite the current directory. Callers validate the target first."""
        self._current = os.path.normpath(path)

    def resolve(self, raw: str) -> str:
        """Resolve a user-supplied path against the current directory."""
        return resolve_path(self._current, raw)

    def __str__(self) -> str:
        return self._current

    def __repr__(self) -> str:
        return f"WorkingDirectory(current='{self._current}')"
