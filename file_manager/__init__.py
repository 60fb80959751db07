"""file_manager package: an interactive shell for navigating and managing files."""

__all__: list[str] = []
