"""Tests for StructlogOracleObserver."""

from structlog.testing import capture_logs

from zuckerbot.oracle.infrastructure.observer import StructlogOracleObserver


class TestStructlogOracleObserver:
    """Each domain event becomes one structlog entry at the documented level."""

    def test_oracle_started(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().oracle_started(star="Zuckerbot 3000", venue="NSA")

        assert logs == [
            {
                "event": "oracle.started",
                "log_level": "info",
                "star": "Zuckerbot 3000",
                "venue": "NSA",
            }
        ]

    def test_question_received(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().question_received(question="why?")

        assert logs[0]["event"] == "oracle.question.received"
        assert logs[0]["question"] == "why?"

    def test_answer_scheduled_is_debug_and_rounded(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().answer_scheduled(
                question="why?", delay_seconds=1.23456
            )

        assert logs[0]["log_level"] == "debug"
        assert logs[0]["delay_seconds"] == 1.235

    def test_answer_delivered(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().answer_delivered(
                question="Is zuckerbot dead?",
                question_type="name",
                keywords=["dead", "zuckerbot"],
            )

        assert logs[0]["event"] == "oracle.answer.delivered"
        assert logs[0]["question_type"] == "name"
        assert logs[0]["keywords"] == ["dead", "zuckerbot"]

    def test_prophecy_emitted(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().prophecy_emitted(length=7)

        assert logs[0]["event"] == "oracle.prophecy.emitted"
        assert logs[0]["length"] == 7

    def test_message_printed_is_debug(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().message_printed(length=3, pending=2)

        assert logs[0]["log_level"] == "debug"
        assert logs[0]["pending"] == 2

    def test_input_closed(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().input_closed(reason="eof")

        assert logs[0]["event"] == "oracle.input.closed"
        assert logs[0]["reason"] == "eof"

    def test_oracle_stopped(self) -> None:
        with capture_logs() as logs:
            StructlogOracleObserver().oracle_stopped(in_flight=4)

        assert logs[0]["event"] == "oracle.stopped"
        assert logs[0]["in_flight"] == 4
