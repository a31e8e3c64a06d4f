"""Interpretation value object — what the responder made of one question."""

from pydantic import BaseModel, ConfigDict

from zuckerbot.responder.domain.question_type import QuestionType


class Interpretation(BaseModel, frozen=True):
    """Immutable result of scanning a question, before a reply is chosen.

    ``echo_words`` always starts with the capitalised longest token (possibly
    empty) followed by every matched keyword in keyword-table order.
    """

    model_config = ConfigDict(frozen=True)

    echo_words: tuple[str, ...]
    keywords: frozenset[str]
    question_type: QuestionType
