"""Error types raised by the oracle application layer."""

from zuckerbot.core.errors import ZuckerbotError


class OracleNotRunningError(ZuckerbotError):
    """Raised when a question is asked of an oracle that is not running."""

    def __init__(self, question: str) -> None:
        self.question = question
        super().__init__(
            f"Failed to ask question {question!r}: the oracle is not running"
        )
