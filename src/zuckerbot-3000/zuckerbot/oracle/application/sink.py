"""OutputSink — the only consumer of oracle messages and the only paced printer."""

import asyncio
import random

from zuckerbot.config.domain.config import TimingConfig
from zuckerbot.oracle.domain.observer import OracleObserver
from zuckerbot.oracle.domain.pacing import Sleep, char_delay
from zuckerbot.oracle.domain.writer import Writer


class OutputSink:
    """Prints queued messages one at a time, one character at a time.

    Each message is wrapped in double quotes; every character (quotes
    included) is preceded by its own random delay. After the closing newline
    the sink cools down before taking the next message, which is what keeps
    answers and prophecies from piling up on screen.
    """

    def __init__(
        self,
        messages: asyncio.Queue[str],
        writer: Writer,
        timing: TimingConfig,
        rng: random.Random,
        observer: OracleObserver,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._messages = messages
        self._writer = writer
        self._timing = timing
        self._rng = rng
        self._observer = observer
        self._sleep = sleep

    async def run(self) -> None:
        while True:
            message = await self._messages.get()
            await self.print_message(message=message)
            self._observer.message_printed(
                length=len(message), pending=self._messages.qsize()
            )
            await self._sleep(self._timing.output_cooldown_seconds)

    async def print_message(self, message: str) -> None:
        await self._spooky_print(f'"{message}"')
        self._writer.write("\n")

    async def _spooky_print(self, text: str) -> None:
        for char in text:
            await self._sleep(char_delay(timing=self._timing, rng=self._rng))
            self._writer.write(char)
