"""Employee sampler: attribute draws, assembler, batch driver and output."""

from .attributes import (
    GENDERS,
    current_millis,
    format_timestamp,
    generate_birthdate,
    generate_gender,
    generate_workload,
)
from .core import (
    INVALID_INPUT_MESSAGE,
    OUTPUT_FORMATS,
    EmployeeGenerator,
    InvalidInputError,
    generate,
    save_csv,
    save_employees,
    save_json,
    save_jsonl,
    save_yaml,
)
from .stats import compute_stats

__all__ = [
    "GENDERS",
    "INVALID_INPUT_MESSAGE",
    "OUTPUT_FORMATS",
    "EmployeeGenerator",
    "InvalidInputError",
    "compute_stats",
    "current_millis",
    "format_timestamp",
    "generate",
    "generate_birthdate",
    "generate_gender",
    "generate_workload",
    "save_csv",
    "save_employees",
    "save_json",
    "save_jsonl",
    "save_yaml",
]
