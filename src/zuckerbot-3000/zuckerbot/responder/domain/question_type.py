"""QuestionType — the classification outcome of keyword matching."""

from enum import StrEnum


class QuestionType(StrEnum):
    EXIT = "exit"
    NAME = "name"
    DEATH = "death"
    OP = "op"
    DEFAULT = "default"
