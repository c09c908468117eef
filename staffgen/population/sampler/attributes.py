"""Independent attribute draws: gender, workload, birthdate."""

from __future__ import annotations

import math
import time
from datetime import datetime, timedelta, timezone
from typing import Any

from ...core.models import MS_PER_YEAR, WORKLOADS, Gender
from ...utils.selection import UniformSource, pick

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

GENDERS: tuple[Gender, ...] = (Gender.MALE, Gender.FEMALE)


def current_millis() -> int:
    """Wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def generate_gender(rng: UniformSource) -> Gender:
    return pick(GENDERS, rng)


def generate_workload(rng: UniformSource) -> int:
    return pick(WORKLOADS, rng)


def coerce_age(value: Any) -> float:
    """Coerce an age bound to float. Numeric strings are accepted.

    Raises:
        ValueError: If the value has no numeric reading
    """
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Age bound {value!r} is not a number") from e


def format_timestamp(ms: float) -> str:
    """Format epoch milliseconds as ISO-8601 UTC, e.g. 1990-05-14T12:03:21.456Z.

    Fractional milliseconds are truncated toward zero.

    Raises:
        ValueError: If the timestamp is NaN, infinite, or outside datetime range
    """
    if not math.isfinite(ms):
        raise ValueError(f"Invalid time value: {ms}")
    try:
        moment = _EPOCH + timedelta(milliseconds=math.trunc(ms))
    except OverflowError as e:
        raise ValueError(f"Time value out of range: {ms}") from e
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def birth_interval(min_age: float, max_age: float, now_ms: float) -> tuple[float, float]:
    """Return (earliest, latest) birth timestamps in ms for an age range.

    The earliest instant belongs to the oldest person (``max_age``). An
    inverted range (max_age < min_age) yields an inverted interval.
    """
    earliest = now_ms - max_age * MS_PER_YEAR
    latest = now_ms - min_age * MS_PER_YEAR
    return earliest, latest


def generate_birthdate(
    min_age: Any,
    max_age: Any,
    rng: UniformSource,
    now_ms: float | None = None,
) -> str:
    """Draw a birthdate whose implied age is uniform in [min_age, max_age].

    Args:
        min_age: Youngest age in years (may be fractional)
        max_age: Oldest age in years (may be fractional)
        rng: Uniform source for the draw
        now_ms: Reference instant in epoch ms (default: current time)

    Returns:
        ISO-8601 UTC timestamp string with millisecond precision

    Raises:
        ValueError: If an age bound is not numeric or the result is not a
            representable timestamp
    """
    if now_ms is None:
        now_ms = current_millis()
    earliest, latest = birth_interval(coerce_age(min_age), coerce_age(max_age), now_ms)
    birth_ms = rng.random() * (latest - earliest) + earliest
    return format_timestamp(birth_ms)
