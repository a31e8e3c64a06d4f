"""Dispatcher — fans every question out to its own delayed answer task."""

import asyncio
import random

from zuckerbot.config.domain.config import TimingConfig
from zuckerbot.oracle.domain.observer import OracleObserver
from zuckerbot.oracle.domain.pacing import Sleep, answer_delay
from zuckerbot.responder.domain.responder import compose_answer, interpret


class Dispatcher:
    """Accepts questions without blocking and answers each one independently.

    There is no cap on in-flight answers and no ordering between them: a
    question asked later may be answered first if its random delay is shorter.
    """

    def __init__(
        self,
        output: asyncio.Queue[str],
        timing: TimingConfig,
        rng: random.Random,
        observer: OracleObserver,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._questions: asyncio.Queue[str] = asyncio.Queue()
        self._output = output
        self._timing = timing
        self._rng = rng
        self._observer = observer
        self._sleep = sleep
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def in_flight(self) -> int:
        """Number of answer tasks that have not yet delivered."""
        return len(self._in_flight)

    def submit(self, question: str) -> None:
        """Queue a question for answering. Never blocks."""
        self._questions.put_nowait(question)
        self._observer.question_received(question=question)

    async def run(self) -> None:
        try:
            while True:
                question = await self._questions.get()
                task = asyncio.create_task(self._answer(question=question))
                self._in_flight.add(task)
                task.add_done_callback(self._in_flight.discard)
        finally:
            await self._cancel_in_flight()

    async def _answer(self, question: str) -> None:
        # Keep them waiting.
        delay = answer_delay(timing=self._timing, rng=self._rng)
        self._observer.answer_scheduled(question=question, delay_seconds=delay)
        await self._sleep(delay)

        interpretation = interpret(question)
        answer = compose_answer(interpretation=interpretation, rng=self._rng)
        self._output.put_nowait(answer)
        self._observer.answer_delivered(
            question=question,
            question_type=str(interpretation.question_type),
            keywords=sorted(interpretation.keywords),
        )

    async def _cancel_in_flight(self) -> None:
        pending = list(self._in_flight)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
