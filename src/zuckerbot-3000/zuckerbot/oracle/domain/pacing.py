"""Random delay samplers. Each draws uniformly from its documented range."""

import random
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from zuckerbot.config.domain.config import TimingConfig

Sleep: TypeAlias = Callable[[float], Awaitable[None]]


def answer_delay(timing: TimingConfig, rng: random.Random) -> float:
    """Whole units in [0, answer_delay_units)."""
    return rng.randrange(timing.answer_delay_units) * timing.time_unit_seconds


def prophecy_delay(timing: TimingConfig, rng: random.Random) -> float:
    """Whole units in [0, prophecy_delay_units)."""
    return rng.randrange(timing.prophecy_delay_units) * timing.time_unit_seconds


def char_delay(timing: TimingConfig, rng: random.Random) -> float:
    """Whole milliseconds in [char_delay_min_ms, char_delay_max_ms), scaled to the unit."""
    millis = rng.randrange(timing.char_delay_min_ms, timing.char_delay_max_ms)
    return millis / 1000 * timing.time_unit_seconds
