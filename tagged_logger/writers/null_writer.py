"""Discard sink used as the default stream under test runners"""


class NullStream:
    """Text sink that accepts and drops every chunk."""

    def write(self, chunk: str) -> int:
        return len(chunk)

    def flush(self) -> None:
        pass

    def isatty(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullStream()"
