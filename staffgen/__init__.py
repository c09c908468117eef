"""staffgen: synthetic employee record generator.

Generates employees (name, surname, gender, birthdate, workload) for a
requested count and age range, drawing names from bundled Czech tables.

Example:
    from staffgen import generate

    employees = generate({"count": 3, "age": {"min": 20, "max": 30}})
"""

__version__ = "0.1.0"

from .core.models import Employee, Gender, GenerationRequest  # noqa: E402
from .population.sampler import (  # noqa: E402
    EmployeeGenerator,
    InvalidInputError,
    generate,
)

__all__ = [
    "__version__",
    "Employee",
    "EmployeeGenerator",
    "Gender",
    "GenerationRequest",
    "InvalidInputError",
    "generate",
]
