"""Keyword responder — turns a question into the oracle's reply.

Pure functions with no concurrency. The only source of nondeterminism is the
``random.Random`` passed in, which picks among pooled replies.
"""

import random

from zuckerbot.responder.domain.interpretation import Interpretation
from zuckerbot.responder.domain.question_type import QuestionType
from zuckerbot.responder.domain.replies import (
    ECHO_SEPARATOR,
    KEYWORDS,
    replies_for,
)


def respond(question: str, rng: random.Random) -> str:
    """Build the full answer for ``question``: echoed words, then a reply."""
    return compose_answer(interpretation=interpret(question), rng=rng)


def interpret(question: str) -> Interpretation:
    """Scan ``question`` for its longest word and keywords, then classify it."""
    lowered = question.lower()
    keywords = [keyword for keyword in KEYWORDS if keyword in lowered]
    matched = frozenset(keywords)
    return Interpretation(
        echo_words=(_longest_word(lowered), *keywords),
        keywords=matched,
        question_type=classify(matched),
    )


def classify(keywords: frozenset[str]) -> QuestionType:
    """First match wins: banana > zuckerbot > dead/death > michel > default."""
    if "banana" in keywords:
        return QuestionType.EXIT
    if "zuckerbot" in keywords:
        return QuestionType.NAME
    if "dead" in keywords or "death" in keywords:
        return QuestionType.DEATH
    if "michel" in keywords:
        return QuestionType.OP
    return QuestionType.DEFAULT


def compose_answer(interpretation: Interpretation, rng: random.Random) -> str:
    echoed = "".join(f"{word}{ECHO_SEPARATOR}" for word in interpretation.echo_words)
    return echoed + pick_reply(question_type=interpretation.question_type, rng=rng)


def pick_reply(question_type: QuestionType, rng: random.Random) -> str:
    replies = replies_for(question_type)
    if len(replies) == 1:
        return replies[0]
    return rng.choice(replies)


def _longest_word(lowered: str) -> str:
    """Return the longest token with its first letter upper-cased.

    Length is counted in characters, not encoded bytes. Strict comparison keeps
    the first of several equally long tokens. Leading punctuation is skipped
    when capitalising, so ``(banana)`` becomes ``(Banana)``.
    """
    longest = ""
    for word in lowered.split():
        if len(word) > len(longest):
            longest = word
    for index, char in enumerate(longest):
        if char.isalpha():
            return longest[:index] + char.upper() + longest[index + 1 :]
    return longest
