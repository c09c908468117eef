"""Gender-matched name generation from the bundled Czech tables.

First names and surnames are drawn independently from the tables that
match the employee's gender, so pairs are not correlated the way real
name/surname pairs are.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from ...core.models import Gender
from ...utils.selection import UniformSource, pick

_DATA_DIR = Path(__file__).parent / "data"
_NAMES_FILE = _DATA_DIR / "names_cs.csv"


@dataclass(frozen=True)
class NameTables:
    """Immutable gender -> ordered name lists."""

    first_names: Mapping[Gender, tuple[str, ...]]
    surnames: Mapping[Gender, tuple[str, ...]]

    def first_names_for(self, gender: Gender | str) -> tuple[str, ...]:
        return self.first_names[Gender(gender)]

    def surnames_for(self, gender: Gender | str) -> tuple[str, ...]:
        return self.surnames[Gender(gender)]


def _load_tables(path: Path) -> NameTables:
    """Load a names CSV (gender, kind, name) preserving file order."""
    first: dict[Gender, list[str]] = {g: [] for g in Gender}
    last: dict[Gender, list[str]] = {g: [] for g in Gender}
    with open(path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            gender = Gender(row["gender"].strip().lower())
            kind = row["kind"].strip().lower()
            name = row["name"].strip()
            if kind == "first":
                first[gender].append(name)
            elif kind == "last":
                last[gender].append(name)
            else:
                raise ValueError(f"Unknown name kind {kind!r} in {path}")
    return NameTables(
        first_names=MappingProxyType({g: tuple(v) for g, v in first.items()}),
        surnames=MappingProxyType({g: tuple(v) for g, v in last.items()}),
    )


@lru_cache(maxsize=1)
def default_tables() -> NameTables:
    """Bundled Czech name tables, loaded once."""
    return _load_tables(_NAMES_FILE)


def generate_name(
    gender: Gender | str,
    rng: UniformSource,
    tables: NameTables | None = None,
) -> tuple[str, str]:
    """Draw a (name, surname) pair matching ``gender``.

    Args:
        gender: "male" or "female"
        rng: Uniform source used for both draws
        tables: Name tables to draw from (default: bundled Czech tables)

    Returns:
        Tuple of (name, surname)
    """
    tables = tables or default_tables()
    name = pick(tables.first_names_for(gender), rng)
    surname = pick(tables.surnames_for(gender), rng)
    return name, surname
