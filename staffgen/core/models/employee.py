"""Employee models for staffgen.

This module contains the value types produced and consumed by the generator:
- Gender and Workload domains
- Employee: one generated record
- AgeRange / GenerationRequest: strict request shape (CLI, strict mode)
- GenerationStats: batch summary for reports
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Domains
# =============================================================================

# Average year length; keeps birthdate distributions reproducible.
MS_PER_YEAR = 365.25 * 24 * 60 * 60 * 1000

Workload = Literal[10, 20, 30, 40]

WORKLOADS: tuple[int, ...] = (10, 20, 30, 40)


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


# =============================================================================
# Employee
# =============================================================================


class Employee(BaseModel):
    """One generated employee record.

    Immutable once created. Serialized field order matches the record
    shape callers receive: gender, birthdate, name, surname, workload.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    gender: Gender
    birthdate: str = Field(description="ISO-8601 UTC timestamp, millisecond precision")
    name: str
    surname: str
    workload: Workload

    def to_dict(self) -> dict:
        """Return a JSON-ready dict in record field order."""
        return self.model_dump(mode="json")

    def birth_datetime(self) -> datetime:
        """Parse the birthdate back into an aware UTC datetime."""
        value = self.birthdate
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value).astimezone(timezone.utc)

    def age_at(self, moment: datetime | None = None) -> float:
        """Age in years at ``moment`` (default: now), using 365.25-day years."""
        moment = moment or datetime.now(timezone.utc)
        delta = moment - self.birth_datetime()
        return (delta.total_seconds() * 1000) / MS_PER_YEAR


# =============================================================================
# Requests
# =============================================================================


class AgeRange(BaseModel):
    """Age bounds in years. Fractional years are allowed."""

    model_config = ConfigDict(from_attributes=True)

    min: float = Field(ge=0, description="Youngest allowed age in years")
    max: float = Field(ge=0, description="Oldest allowed age in years")

    @model_validator(mode="after")
    def _check_order(self) -> "AgeRange":
        if self.min > self.max:
            raise ValueError(
                f"age.min ({self.min:g}) must not exceed age.max ({self.max:g})"
            )
        return self


class GenerationRequest(BaseModel):
    """Strict generation request.

    The library entry point accepts looser input (see ``generate``); this
    model is what the CLI builds and what ``strict=True`` validates against.
    """

    model_config = ConfigDict(from_attributes=True)

    count: int = Field(
        ge=0, strict=True, description="Number of employees to produce"
    )
    age: AgeRange


# =============================================================================
# Stats
# =============================================================================


class GenerationStats(BaseModel):
    """Summary of one generated batch."""

    count: int = 0
    gender_counts: dict[str, int] = Field(default_factory=dict)
    workload_counts: dict[int, int] = Field(default_factory=dict)
    min_age: float | None = None
    max_age: float | None = None
    mean_age: float | None = None
