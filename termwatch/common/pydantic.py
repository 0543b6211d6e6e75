"""Pydantic base model."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)


class ExpiryInterval(FrozenBaseModel):
    """Monotonic interval during which a "time's up" notification was delivered."""

    start_ns: int
    end_ns: int

    @model_validator(mode="after")
    def _check_order(self) -> "ExpiryInterval":
        if self.end_ns < self.start_ns:
            raise ValueError("end_ns must not precede start_ns")
        return self

    def contains(self, t_ns: int) -> bool:
        """Whether t_ns falls strictly inside the interval."""
        return self.start_ns < t_ns < self.end_ns


class Lap(FrozenBaseModel):
    """A recorded stopwatch lap."""

    number: int = Field(ge=1)
    lap_seconds: int = Field(ge=0)
    total_seconds: int = Field(ge=0)
