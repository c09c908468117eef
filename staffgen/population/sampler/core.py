"""Core generation loop for synthetic employees.

Each employee is assembled from independent draws (gender, workload,
gender-matched name, birthdate) on one injectable uniform source. The
batch driver validates the request, repeats the assembler ``count``
times, and returns the records in generation order.
"""

import csv
import json
import logging
import math
import numbers
import random
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ...core.models import Employee, GenerationRequest
from ...utils.selection import UniformSource
from ..names import NameTables, default_tables, generate_name
from .attributes import (
    current_millis,
    generate_birthdate,
    generate_gender,
    generate_workload,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Your input is invalid"

OUTPUT_FORMATS = ("json", "jsonl", "csv", "yaml")

Clock = Callable[[], float]
ProgressCallback = Callable[[int, int], None]


class InvalidInputError(ValueError):
    """Raised when a generation request is rejected before any output exists.

    Attributes:
        details: Validation messages (populated in strict mode)
    """

    def __init__(
        self, message: str = INVALID_INPUT_MESSAGE, details: list[str] | None = None
    ):
        super().__init__(message)
        self.details = list(details or [])


# =============================================================================
# Assembler
# =============================================================================


class EmployeeGenerator:
    """Assembles employees from one uniform source and one clock.

    Args:
        rng: Uniform source (anything with ``random() -> float`` in [0, 1))
        seed: Seed for a fresh ``random.Random`` when ``rng`` is not given
        clock: Callable returning the current time in epoch milliseconds
        tables: Name tables (default: bundled Czech tables)
    """

    def __init__(
        self,
        rng: UniformSource | None = None,
        seed: int | None = None,
        clock: Clock | None = None,
        tables: NameTables | None = None,
    ):
        self.rng = rng if rng is not None else random.Random(seed)
        self.clock = clock or current_millis
        self.tables = tables or default_tables()

    def employee(self, min_age: Any, max_age: Any) -> Employee:
        """Generate one employee with an age in [min_age, max_age].

        Raises:
            ValueError: If the age bounds do not yield a valid birthdate
        """
        gender = generate_gender(self.rng)
        workload = generate_workload(self.rng)
        name, surname = generate_name(gender, self.rng, self.tables)
        birthdate = generate_birthdate(min_age, max_age, self.rng, self.clock())
        return Employee(
            gender=gender,
            birthdate=birthdate,
            name=name,
            surname=surname,
            workload=workload,
        )

    def batch(
        self,
        count: float,
        min_age: Any,
        max_age: Any,
        on_progress: ProgressCallback | None = None,
    ) -> list[Employee]:
        """Generate ``count`` employees in order.

        A fractional count yields ``ceil(count)`` records; zero, negative
        and NaN counts yield none.

        Raises:
            InvalidInputError: If the count is infinite or a record cannot
                be generated from the age bounds. No partial list is returned.
        """
        n = _iteration_count(count)
        employees: list[Employee] = []
        for i in range(n):
            try:
                employees.append(self.employee(min_age, max_age))
            except ValueError as e:
                logger.debug("Employee %d rejected: %s", i, e)
                raise InvalidInputError() from e
            if on_progress:
                on_progress(i + 1, n)
        return employees


# =============================================================================
# Batch driver
# =============================================================================


def generate(
    request: Any,
    *,
    rng: UniformSource | None = None,
    seed: int | None = None,
    clock: Clock | None = None,
    strict: bool = False,
    on_progress: ProgressCallback | None = None,
) -> list[Employee]:
    """Generate a batch of employees.

    ``request`` carries ``count`` and ``age`` (with ``min`` and ``max``) and
    may be a mapping, a GenerationRequest, or any object with those
    attributes:

        generate({"count": 3, "age": {"min": 20, "max": 30}})

    By default only the request itself, a numeric ``count`` and a present
    ``age`` are checked; inverted age ranges and negative or fractional
    counts pass through. With ``strict=True`` the request must satisfy
    GenerationRequest.

    Args:
        request: Generation request
        rng: Uniform source to draw from (default: fresh random.Random)
        seed: Seed for the default source
        clock: Callable returning epoch milliseconds (default: wall clock)
        strict: Validate against GenerationRequest
        on_progress: Optional callback(current, total)

    Returns:
        List of Employee records, exactly one per requested count

    Raises:
        InvalidInputError: If the request is rejected
    """
    if strict:
        parsed = _parse_strict(request)
        count, min_age, max_age = parsed.count, parsed.age.min, parsed.age.max
    else:
        count, min_age, max_age = _parse_lenient(request)

    if _is_number(min_age) and _is_number(max_age) and min_age > max_age:
        logger.debug("Inverted age range %s > %s accepted as-is", min_age, max_age)

    generator = EmployeeGenerator(rng=rng, seed=seed, clock=clock)
    employees = generator.batch(count, min_age, max_age, on_progress=on_progress)
    logger.info(
        "Generated %d employees (age %s-%s)", len(employees), min_age, max_age
    )
    return employees


def _read_field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_present(value: Any) -> bool:
    """Presence check: None, False, 0, NaN and "" are absent; containers are present."""
    if value is None or value is False or value == "":
        return False
    if _is_number(value) and (value == 0 or math.isnan(value)):
        return False
    return True


def _parse_lenient(request: Any) -> tuple[float, Any, Any]:
    if not _is_present(request):
        raise InvalidInputError()
    count = _read_field(request, "count")
    age = _read_field(request, "age")
    if not _is_number(count) or not _is_present(age):
        raise InvalidInputError()
    return count, _read_field(age, "min"), _read_field(age, "max")


def _parse_strict(request: Any) -> GenerationRequest:
    if isinstance(request, GenerationRequest):
        return request
    if request is None:
        raise InvalidInputError(details=["request: missing"])
    try:
        if isinstance(request, Mapping):
            return GenerationRequest.model_validate(dict(request))
        return GenerationRequest.model_validate(request, from_attributes=True)
    except ValidationError as e:
        details = [
            f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidInputError(details=details) from e


def _iteration_count(count: float) -> int:
    if math.isnan(count):
        return 0
    if math.isinf(count):
        if count > 0:
            raise InvalidInputError(details=["count: must be finite"])
        return 0
    return max(0, math.ceil(count))


# =============================================================================
# Output
# =============================================================================


def _rows(employees: list[Employee]) -> list[dict[str, Any]]:
    return [e.to_dict() for e in employees]


def _prepare(path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def save_json(
    employees: list[Employee], path: Path | str, meta: dict | None = None
) -> None:
    """Save employees to a JSON file with a meta block."""
    path = _prepare(path)
    output = {"meta": meta or {}, "employees": _rows(employees)}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=str)


def save_jsonl(employees: list[Employee], path: Path | str) -> None:
    """Save employees as JSON lines, one record per line."""
    path = _prepare(path)
    with open(path, "w", encoding="utf-8") as f:
        for row in _rows(employees):
            f.write(json.dumps(row, ensure_ascii=False) + "\n")


def save_csv(employees: list[Employee], path: Path | str) -> None:
    """Save employees to CSV with a header row."""
    path = _prepare(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(Employee.model_fields))
        writer.writeheader()
        writer.writerows(_rows(employees))


def save_yaml(
    employees: list[Employee], path: Path | str, meta: dict | None = None
) -> None:
    """Save employees to YAML with a meta block."""
    path = _prepare(path)
    output = {"meta": meta or {}, "employees": _rows(employees)}
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(output, f, allow_unicode=True, sort_keys=False)


def save_employees(
    employees: list[Employee],
    path: Path | str,
    fmt: str = "json",
    meta: dict | None = None,
) -> None:
    """Save employees in one of OUTPUT_FORMATS."""
    if fmt == "json":
        save_json(employees, path, meta)
    elif fmt == "jsonl":
        save_jsonl(employees, path)
    elif fmt == "csv":
        save_csv(employees, path)
    elif fmt == "yaml":
        save_yaml(employees, path, meta)
    else:
        raise ValueError(
            f"Unknown output format {fmt!r}. Expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
