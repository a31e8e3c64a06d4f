"""Console loop — feeds stdin lines to the oracle and echoes what it heard."""

import asyncio
import threading
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Protocol, TextIO

from zuckerbot.config.domain.config import PersonaConfig
from zuckerbot.oracle.domain.observer import OracleObserver
from zuckerbot.oracle.domain.writer import Writer


class QuestionIntake(Protocol):
    def ask(self, question: str) -> None: ...


@dataclass(frozen=True)
class _Closed:
    """Pushed by the reader thread once the stream ends or fails."""

    reason: str


def banner(persona: PersonaConfig) -> str:
    return (
        f"Welcome to {persona.star}, the oracle of {persona.venue}.\n"
        "Your questions will be answered in due time.\n"
    )


class ConsoleLoop:
    """Reads lines, skips blank ones, echoes the rest and hands them to the oracle.

    Never waits on the oracle: ``ask`` returns immediately, so typing is never
    held up by pending answers or a busy output sink.
    """

    def __init__(
        self,
        intake: QuestionIntake,
        writer: Writer,
        persona: PersonaConfig,
    ) -> None:
        self._intake = intake
        self._writer = writer
        self._persona = persona

    async def run(self, lines: AsyncIterator[str]) -> None:
        async for raw in lines:
            question = raw.strip()
            if not question:
                continue
            self._writer.write(f"{self._persona.star} heard: {question}\n")
            self._intake.ask(question)


async def stdin_lines(stream: TextIO, observer: OracleObserver) -> AsyncIterator[str]:
    """Yield lines from ``stream`` without blocking the event loop.

    A daemon thread does the blocking reads so a pending read never holds up
    shutdown. End of stream and read errors both just end the iteration; a
    read that fails part way through a line forwards nothing.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[str | _Closed] = asyncio.Queue()

    def pump() -> None:
        reason = "eof"
        try:
            for line in iter(stream.readline, ""):
                loop.call_soon_threadsafe(queue.put_nowait, line)
        except (OSError, ValueError):
            reason = "error"
        loop.call_soon_threadsafe(queue.put_nowait, _Closed(reason=reason))

    threading.Thread(target=pump, name="stdin-reader", daemon=True).start()

    while True:
        item = await queue.get()
        if isinstance(item, _Closed):
            observer.input_closed(reason=item.reason)
            return
        yield item
