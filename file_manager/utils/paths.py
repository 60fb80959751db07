"""Path resolution against the session's working directory.

Resolution is purely syntactic: nothing here touches the filesystem, so the
result may name a path that does not exist. The operation that uses the path
is responsible for reporting that.
"""

import os


def resolve_path(base: str, raw: str) -> str:
    """Return the normalized absolute form of ``raw`` relative to ``base``.

    Absolute inputs ignore ``base``. ``.`` and ``..`` segments are collapsed.
    """
    if os.path.isabs(raw):
        return os.path.normpath(raw)
    return os.path.normpath(os.path.join(base, raw))


def parent_of(path: str) -> str:
    """Return the parent directory of an absolute path; a root is its own parent."""
    return os.path.dirname(os.path.normpath(path))


def displayable(text: str) -> str:
    """Replace undecodable filename bytes (surrogate escapes) for printing."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
