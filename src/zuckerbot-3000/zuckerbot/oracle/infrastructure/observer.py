"""StructlogOracleObserver — production observer that delegates to structlog."""

import structlog


class StructlogOracleObserver:
    """Logs oracle domain events to structlog.

    Does NOT inherit from OracleObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def oracle_started(self, star: str, venue: str) -> None:
        self._log.info("oracle.started", star=star, venue=venue)

    def oracle_stopped(self, in_flight: int) -> None:
        self._log.info("oracle.stopped", in_flight=in_flight)

    def question_received(self, question: str) -> None:
        self._log.info("oracle.question.received", question=question)

    def answer_scheduled(self, question: str, delay_seconds: float) -> None:
        self._log.debug(
            "oracle.answer.scheduled",
            question=question,
            delay_seconds=round(delay_seconds, 3),
        )

    def answer_delivered(
        self,
        question: str,
        question_type: str,
        keywords: list[str],
    ) -> None:
        self._log.info(
            "oracle.answer.delivered",
            question=question,
            question_type=question_type,
            keywords=keywords,
        )

    def prophecy_emitted(self, length: int) -> None:
        self._log.info("oracle.prophecy.emitted", length=length)

    def message_printed(self, length: int, pending: int) -> None:
        self._log.debug("oracle.message.printed", length=length, pending=pending)

    def input_closed(self, reason: str) -> None:
        self._log.info("oracle.input.closed", reason=reason)
