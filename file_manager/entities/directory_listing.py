from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryListing:
    """Contents of one directory, split by entry type."""

    path: str
    directories: list[str]
    files: list[str]

    @classmethod
    def from_names(
        cls, path: str, directories: list[str], files: list[str]
    ) -> "DirectoryListing":
        # case-sensitive code point order within each group
        return cls(path=path, directories=sorted(directories), files=sorted(files))

    @property
    def entries(self) -> list[str]:
        """Directories first, then regular files."""
        return [*self.directories, *self.files]
