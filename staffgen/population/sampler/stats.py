"""Batch summaries for generated employees."""

from collections import Counter
from datetime import datetime, timezone

from ...core.models import WORKLOADS, Employee, Gender, GenerationStats
from .attributes import current_millis


def compute_stats(
    employees: list[Employee], now_ms: float | None = None
) -> GenerationStats:
    """Summarize gender, workload and age for a batch.

    Ages are measured at ``now_ms`` (default: current time).
    """
    if now_ms is None:
        now_ms = current_millis()
    moment = datetime.fromtimestamp(now_ms / 1000, tz=timezone.utc)

    genders = Counter(str(e.gender) for e in employees)
    workloads = Counter(e.workload for e in employees)
    stats = GenerationStats(
        count=len(employees),
        gender_counts={g.value: genders.get(g.value, 0) for g in Gender},
        workload_counts={w: workloads.get(w, 0) for w in WORKLOADS},
    )
    if employees:
        ages = [e.age_at(moment) for e in employees]
        stats.min_age = min(ages)
        stats.max_age = max(ages)
        stats.mean_age = sum(ages) / len(ages)
    return stats
