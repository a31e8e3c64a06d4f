"""Oracle — wires the dispatcher, prophecy source and output sink together."""

import asyncio
import random
from types import TracebackType
from typing import Self

from zuckerbot.config.domain.config import OracleConfig
from zuckerbot.oracle.application.dispatcher import Dispatcher
from zuckerbot.oracle.application.errors import OracleNotRunningError
from zuckerbot.oracle.application.sink import OutputSink
from zuckerbot.oracle.domain.observer import OracleObserver
from zuckerbot.oracle.domain.pacing import Sleep
from zuckerbot.oracle.domain.writer import Writer
from zuckerbot.prophecy.application.source import ProphecySource


class Oracle:
    """Accepts questions and answers them on the writer, when it so decides.

    Two producers (per-question answer tasks and the prophecy source) feed one
    unbounded output queue, drained by a single OutputSink. Asking never
    blocks, however many answers are pending or however far behind the sink is.

    The oracle is free of terminal and logging dependencies; the writer,
    observer, random source and sleep function are all injected so tests can
    substitute deterministic versions.
    """

    def __init__(
        self,
        config: OracleConfig,
        writer: Writer,
        rng: random.Random,
        observer: OracleObserver,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._config = config
        self._observer = observer
        output: asyncio.Queue[str] = asyncio.Queue()
        self._dispatcher = Dispatcher(
            output=output,
            timing=config.timing,
            rng=rng,
            observer=observer,
            sleep=sleep,
        )
        self._prophecies = ProphecySource(
            output=output,
            timing=config.timing,
            rng=rng,
            observer=observer,
            sleep=sleep,
        )
        self._sink = OutputSink(
            messages=output,
            writer=writer,
            timing=config.timing,
            rng=rng,
            observer=observer,
            sleep=sleep,
        )
        self._tasks: list[asyncio.Task[None]] = []

    @property
    def running(self) -> bool:
        return bool(self._tasks)

    @property
    def in_flight(self) -> int:
        return self._dispatcher.in_flight

    def ask(self, question: str) -> None:
        """Submit a question. Returns immediately; the answer arrives later.

        Raises:
            OracleNotRunningError: if called before start() or after stop().
        """
        if not self.running:
            raise OracleNotRunningError(question=question)
        self._dispatcher.submit(question=question)

    def start(self) -> None:
        if self.running:
            return
        self._tasks = [
            asyncio.create_task(self._dispatcher.run(), name="oracle-dispatcher"),
            asyncio.create_task(self._prophecies.run(), name="oracle-prophecies"),
            asyncio.create_task(self._sink.run(), name="oracle-output"),
        ]
        persona = self._config.persona
        self._observer.oracle_started(star=persona.star, venue=persona.venue)

    async def serve_forever(self) -> None:
        """Wait on the background tasks. They only end when cancelled."""
        await asyncio.gather(*self._tasks)

    async def stop(self) -> None:
        if not self.running:
            return
        in_flight = self._dispatcher.in_flight
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._observer.oracle_stopped(in_flight=in_flight)

    async def __aenter__(self) -> Self:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()
