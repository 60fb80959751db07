"""
Tests for path resolution.
"""

import os

import pytest

from file_manager.utils.paths import displayable, parent_of, resolve_path

pytestmark = pytest.mark.skipif(os.name == "nt", reason="POSIX path layout")


class TestResolvePath:
    """Test cases for resolve_path."""

    @pytest.mark.parametrize(
        "raw",
        ["a.txt", "docs/a.txt", "./a.txt", "../x", "a/../../b", "deep/./er/../file"],
    )
    def test_relative_input_joins_and_normalizes(self, raw):
        base = "/home/alice"
        result = resolve_path(base, raw)

        assert os.path.isabs(result)
        assert result == os.path.normpath(base + "/" + raw)

    def test_absolute_input_ignores_base(self):
        assert resolve_path("/home/alice", "/etc/hosts") == "/etc/hosts"

    def test_absolute_input_is_normalized(self):
        assert resolve_path("/home/alice", "/var/./log/../tmp/") == "/var/tmp"

    def test_parent_segments_stop_at_root(self):
        assert resolve_path("/home", "../../..") == "/"

    def test_no_filesystem_access(self):
        # the base does not need to exist
        assert resolve_path("/no/such/place", "child") == "/no/such/place/child"


class TestParentOf:
    def test_parent_of_nested_path(self):
        assert parent_of("/home/alice") == "/home"

    def test_root_is_its_own_parent(self):
        assert parent_of("/") == "/"


class TestDisplayable:
    def test_plain_text_unchanged(self):
        assert displayable("File copied from a.txt to b.txt") == "File copied from a.txt to b.txt"

    def test_undecodable_bytes_are_replaced(self):
        name = os.fsdecode(b"caf\xe9.txt")

        assert displayable(name) == "caf\ufffd.txt"
