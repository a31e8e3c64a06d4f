"""Writer Protocol — the single character sink all console output goes through."""

from typing import Protocol


class Writer(Protocol):
    """Writes text to the terminal immediately, without adding a newline."""

    def write(self, text: str) -> None: ...
