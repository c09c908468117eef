"""Pydantic models shared across staffgen."""

from .employee import (
    WORKLOADS,
    MS_PER_YEAR,
    AgeRange,
    Employee,
    Gender,
    GenerationRequest,
    GenerationStats,
    Workload,
)

__all__ = [
    "WORKLOADS",
    "MS_PER_YEAR",
    "AgeRange",
    "Employee",
    "Gender",
    "GenerationRequest",
    "GenerationStats",
    "Workload",
]
