"""Shared record of writes and sleeps, in the order they happened."""

from typing import TypeAlias

Timeline: TypeAlias = list[tuple[str, str | float]]
