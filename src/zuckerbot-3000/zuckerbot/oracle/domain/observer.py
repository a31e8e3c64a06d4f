"""Observer port for the oracle domain — defines events in domain language."""

from typing import Protocol


class OracleObserver(Protocol):
    """Observer port emitting structured events while the oracle runs.

    Implementations may log to structlog or record for tests.
    """

    def oracle_started(self, star: str, venue: str) -> None: ...

    def oracle_stopped(self, in_flight: int) -> None: ...

    def question_received(self, question: str) -> None: ...

    def answer_scheduled(self, question: str, delay_seconds: float) -> None: ...

    def answer_delivered(
        self,
        question: str,
        question_type: str,
        keywords: list[str],
    ) -> None: ...

    def prophecy_emitted(self, length: int) -> None: ...

    def message_printed(self, length: int, pending: int) -> None: ...

    def input_closed(self, reason: str) -> None: ...
