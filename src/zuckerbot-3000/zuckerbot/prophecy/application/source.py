"""ProphecySource — background producer of unprompted prophecies."""

import asyncio
import random

from zuckerbot.config.domain.config import TimingConfig
from zuckerbot.oracle.domain.observer import OracleObserver
from zuckerbot.oracle.domain.pacing import Sleep, prophecy_delay
from zuckerbot.prophecy.domain.prophecies import PROPHECIES


class ProphecySource:
    """Emits a random prophecy after a random delay, then cools down, forever.

    Shares the output queue with the dispatcher's answer tasks; it never
    writes to the terminal itself.
    """

    def __init__(
        self,
        output: asyncio.Queue[str],
        timing: TimingConfig,
        rng: random.Random,
        observer: OracleObserver,
        prophecies: tuple[str, ...] = PROPHECIES,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._output = output
        self._timing = timing
        self._rng = rng
        self._observer = observer
        self._prophecies = prophecies
        self._sleep = sleep

    async def run(self) -> None:
        while True:
            await self._sleep(prophecy_delay(timing=self._timing, rng=self._rng))
            prophecy = self._rng.choice(self._prophecies)
            self._output.put_nowait(prophecy)
            self._observer.prophecy_emitted(length=len(prophecy))
            await self._sleep(self._timing.prophecy_cooldown_seconds)
