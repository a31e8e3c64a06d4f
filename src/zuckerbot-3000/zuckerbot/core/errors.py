"""Base exception class for all zuckerbot-specific errors."""


class ZuckerbotError(Exception):
    """Base class for all zuckerbot errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
