from dataclasses import dataclass


@dataclass(frozen=True)
class CommandLine:
    """One tokenized line of user input."""

    raw: str
    name: str
    args: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> "CommandLine":
        # whitespace-delimited; no quoting or globbing
        tokens = raw.strip().split()
        if not tokens:
            return cls(raw=raw, name="", args=())
        return cls(raw=raw, name=tokens[0], args=tuple(tokens[1:]))

    def is_blank(self) -> bool:
        return not self.name

    def has_args(self, count: int) -> bool:
        return len(self.args) >= count
