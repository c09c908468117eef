"""Generate command for producing synthetic employees."""

import logging
import time
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from ...config import get_config
from ...core.models import Employee, GenerationRequest, GenerationStats
from ..app import app, console, err_console, get_json_mode
from ..utils import Output, ExitCode, format_elapsed


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging for generation."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=True)],
        force=True,
    )
    logging.getLogger("staffgen").setLevel(level)


@app.command("generate")
def generate_command(
    count: int | None = typer.Option(
        None, "--count", "-n", help="Number of employees (default from config)"
    ),
    min_age: float | None = typer.Option(
        None, "--min-age", help="Youngest age in years (default from config)"
    ),
    max_age: float | None = typer.Option(
        None, "--max-age", help="Oldest age in years (default from config)"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducibility"
    ),
    output: Path | None = typer.Option(
        None, "--to", "-o", help="Write employees to this file"
    ),
    fmt: str | None = typer.Option(
        None, "--format", "-f", help="Output file format: json, jsonl, csv, yaml"
    ),
    report: bool = typer.Option(
        False, "--report", "-r", help="Show gender, workload and age summaries"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
    debug: bool = typer.Option(False, "--debug", help="Log debug details"),
):
    """
    Generate synthetic employees with Czech names.

    Without --to, employees are printed (a table, or JSON with --json).

    EXIT CODES:
        0 = Success
        1 = Validation error
        3 = File error
        4 = Generation error

    Examples:
        staffgen generate -n 20 --min-age 25 --max-age 40
        staffgen generate -n 1000 --seed 42 --to staff.csv --format csv --report
        staffgen --json generate -n 3
    """
    from ...population.sampler import (
        InvalidInputError,
        OUTPUT_FORMATS,
        compute_stats,
        current_millis,
        generate,
        save_employees,
    )

    setup_logging(verbose, debug)
    json_mode = get_json_mode()
    out = Output(console=console, json_mode=json_mode)
    start_time = time.time()

    defaults = get_config().defaults
    fmt = fmt or defaults.output_format
    if fmt not in OUTPUT_FORMATS:
        out.error(
            f"Unknown format: {fmt}",
            field="format",
            suggestion=f"Use one of: {', '.join(OUTPUT_FORMATS)}",
        )
        raise typer.Exit(out.finish())

    try:
        request = GenerationRequest.model_validate(
            {
                "count": defaults.count if count is None else count,
                "age": {
                    "min": defaults.min_age if min_age is None else min_age,
                    "max": defaults.max_age if max_age is None else max_age,
                },
            }
        )
    except ValidationError as e:
        for err in e.errors():
            location = ".".join(str(p) for p in err["loc"])
            out.error(f"{location}: {err['msg']}", field=location)
        raise typer.Exit(out.finish())

    # Generation
    now_ms = current_millis()
    show_progress = request.count >= 1000 and not json_mode
    try:
        if show_progress:
            from rich.progress import (
                Progress,
                SpinnerColumn,
                TextColumn,
                BarColumn,
                TaskProgressColumn,
            )

            with Progress(
                SpinnerColumn(),
                TextColumn("[cyan]Generating employees...[/cyan]"),
                BarColumn(),
                TaskProgressColumn(),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task("Generating", total=request.count)

                def on_progress(current: int, total: int):
                    progress.update(task, completed=current)

                employees = generate(
                    request, seed=seed, strict=True, on_progress=on_progress
                )
        else:
            employees = generate(request, seed=seed, strict=True)
    except InvalidInputError as e:
        out.error(
            f"Generation failed: {e}",
            exit_code=ExitCode.GENERATION_ERROR,
        )
        for detail in e.details:
            out.text(f"  [dim]{detail}[/dim]")
        raise typer.Exit(out.finish())

    out.success(
        f"Generated [bold]{len(employees)}[/bold] employees "
        f"(age {request.age.min:g}-{request.age.max:g})",
        count=len(employees),
        age={"min": request.age.min, "max": request.age.max},
        seed=seed,
    )

    # Output
    if output is not None:
        meta = {
            "count": len(employees),
            "age": {"min": request.age.min, "max": request.age.max},
            "seed": seed,
            "generated_at_ms": now_ms,
        }
        try:
            save_employees(employees, output, fmt=fmt, meta=meta)
        except OSError as e:
            out.error(
                f"Failed to write {output}: {e}",
                exit_code=ExitCode.FILE_ERROR,
            )
            raise typer.Exit(out.finish())
        out.success(f"Saved to [bold]{output}[/bold] ({fmt})", output=str(output))
    elif json_mode:
        out.set_data("employees", [e.to_dict() for e in employees])
    else:
        _print_employees(out, employees)

    if report:
        _print_report(out, compute_stats(employees, now_ms))

    out.text(f"[dim]Done in {format_elapsed(time.time() - start_time)}[/dim]")
    raise typer.Exit(out.finish())


def _print_employees(out: Output, employees: list[Employee]) -> None:
    out.table(
        "Employees",
        ["Name", "Surname", "Gender", "Birthdate", "Workload"],
        [
            [e.name, e.surname, str(e.gender), e.birthdate, str(e.workload)]
            for e in employees
        ],
    )


def _print_report(out: Output, stats: GenerationStats) -> None:
    out.blank()
    out.table(
        "Gender",
        ["Gender", "Count"],
        [[g, str(n)] for g, n in stats.gender_counts.items()],
        data_key="gender_counts",
    )
    out.table(
        "Workload",
        ["Workload", "Count"],
        [[str(w), str(n)] for w, n in stats.workload_counts.items()],
        data_key="workload_counts",
    )
    if stats.count:
        out.table(
            "Age",
            ["Statistic", "Years"],
            [
                ["min", f"{stats.min_age:.2f}"],
                ["mean", f"{stats.mean_age:.2f}"],
                ["max", f"{stats.max_age:.2f}"],
            ],
            data_key="age_stats",
        )
