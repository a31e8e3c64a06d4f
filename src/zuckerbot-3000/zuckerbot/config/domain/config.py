"""OracleConfig aggregate — persona and pacing for one oracle session."""

from pydantic import BaseModel, Field, model_validator


class PersonaConfig(BaseModel, frozen=True):
    star: str = Field(default="Zuckerbot 3000", min_length=1)
    venue: str = Field(default="NSA", min_length=1)


class TimingConfig(BaseModel, frozen=True):
    """Pacing of answers, prophecies and printing, measured in time units.

    One unit is ``time_unit_seconds`` long. Character delays are expressed in
    milliseconds of a unit so the whole schedule scales together.
    """

    time_unit_seconds: float = Field(default=1.0, gt=0)
    answer_delay_units: int = Field(default=10, ge=1)
    prophecy_delay_units: int = Field(default=10, ge=1)
    prophecy_cooldown_units: int = Field(default=5, ge=0)
    output_cooldown_units: int = Field(default=5, ge=0)
    char_delay_min_ms: int = Field(default=10, ge=0)
    char_delay_max_ms: int = Field(default=60, ge=1)

    @model_validator(mode="after")
    def _check_char_delay_range(self) -> "TimingConfig":
        if self.char_delay_min_ms >= self.char_delay_max_ms:
            raise ValueError(
                "char_delay_min_ms must be smaller than char_delay_max_ms"
            )
        return self

    @property
    def prophecy_cooldown_seconds(self) -> float:
        return self.prophecy_cooldown_units * self.time_unit_seconds

    @property
    def output_cooldown_seconds(self) -> float:
        return self.output_cooldown_units * self.time_unit_seconds


class OracleConfig(BaseModel, frozen=True):
    """Root configuration aggregate. The defaults are the oracle's fixed behaviour."""

    persona: PersonaConfig = PersonaConfig()
    timing: TimingConfig = TimingConfig()
