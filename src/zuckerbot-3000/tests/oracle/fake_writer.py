"""FakeWriter — in-memory Writer implementation for use in tests."""

from tests.oracle.timeline import Timeline


class FakeWriter:
    """Satisfies the Writer protocol. Accumulates everything written.

    If a Timeline is given, each write is also appended to it so tests can
    check how writes interleave with sleeps.
    """

    def __init__(self, timeline: Timeline | None = None) -> None:
        self._chunks: list[str] = []
        self._timeline = timeline

    @property
    def text(self) -> str:
        return "".join(self._chunks)

    @property
    def lines(self) -> list[str]:
        """Completed lines only; a line still being printed is left out."""
        return self.text.split("\n")[:-1]

    def write(self, text: str) -> None:
        self._chunks.append(text)
        if self._timeline is not None:
            self._timeline.append(("write", text))
