"""ScriptedRandom — a random.Random whose draws are chosen by the test."""

import random
from collections.abc import Sequence
from typing import Any


class ScriptedRandom(random.Random):
    """Returns scripted values from randrange and a fixed index from choice.

    ``randrange_values`` are handed out front to back; once exhausted, every
    call returns the lowest value of the requested range (or the highest, if
    ``high`` is set). ``choice`` always picks ``seq[choice_index]``, or the
    last element when ``high`` is set.
    """

    def __init__(
        self,
        randrange_values: list[int] | None = None,
        choice_index: int = 0,
        high: bool = False,
    ) -> None:
        super().__init__(0)
        self._values = list(randrange_values) if randrange_values is not None else []
        self._choice_index = choice_index
        self._high = high
        self.randrange_calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:  # type: ignore[override]
        if stop is None:
            start, stop = 0, start
        self.randrange_calls.append((start, stop))
        if self._values:
            return self._values.pop(0)
        return stop - 1 if self._high else start

    def choice(self, seq: Sequence[Any]) -> Any:
        if self._high:
            return seq[-1]
        return seq[self._choice_index]
