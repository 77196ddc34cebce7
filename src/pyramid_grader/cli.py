"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import UTC, datetime
from pathlib import Path

import click

from pyramid_grader.case_catalog import (
    CaseFixtureError,
    TestCase,
    default_pyramid_cases,
    read_case_fixture,
    write_case_fixture,
)
from pyramid_grader.case_catalog.fixture_writer import DEFAULT_CASES_FILENAME
from pyramid_grader.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    ExecutionSettings,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from pyramid_grader.grading_run import (
    GradingOutcome,
    GradingRequest,
    execution_summary,
    grade_submission,
)
from pyramid_grader.program_execution import CompiledProgramExecutor, ProgramExecutor
from pyramid_grader.results_writing import RunMetadata, resolve_output_path, write_results_workbook

ExecutorFactory = Callable[[ExecutionSettings], AbstractContextManager[ProgramExecutor]]


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pyramid-grader")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each grading step.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Grade C pyramid programs against expected star shapes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj.setdefault("executor_factory", CompiledProgramExecutor)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML grader configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML grader configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-cases")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CASES_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML case fixture to write",
)
def generate_cases(output_path: str) -> None:
    """Write the built-in pyramid cases as an editable YAML fixture."""
    try:
        resolved_output = write_case_fixture(default_pyramid_cases(), output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="grade")
@click.argument("source_path", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML grader configuration file",
)
@click.option(
    "--cases",
    "cases_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML case fixture; overrides the configured cases",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for storing the results workbook",
)
@click.pass_context
def grade(
    ctx: click.Context,
    source_path: str,
    config_path: str | None,
    cases_path: str | None,
    output_dir: str | None,
) -> None:
    """Compile SOURCE_PATH, run every case and report score and feedback."""
    run_start = datetime.now(UTC)
    try:
        configuration = load_configuration(config_path) if config_path else default_configuration()
        cases = _load_cases(configuration, cases_path)
        program_source = _read_source(source_path)
    except (ConfigurationError, CaseFixtureError) as exc:
        raise CliError(str(exc)) from exc

    executor_factory: ExecutorFactory = ctx.obj["executor_factory"]
    with executor_factory(configuration.execution) as executor:
        outcome = grade_submission(
            GradingRequest(program_source=program_source, cases=cases),
            executor,
        )

    _echo_outcome(outcome)

    destination = output_dir or configuration.report.output_dir
    if destination is not None:
        try:
            workbook_path = write_results_workbook(
                outcome,
                RunMetadata(
                    run_start=run_start,
                    source_path=Path(source_path).resolve(),
                    output_path=resolve_output_path(source_path, destination, run_start),
                ),
            )
        except OSError as exc:
            raise CliError(str(exc)) from exc
        click.echo(str(workbook_path))


def _load_cases(configuration: Configuration, cases_path: str | None) -> tuple[TestCase, ...]:
    if cases_path:
        return read_case_fixture(cases_path)
    if configuration.cases.path is not None:
        return read_case_fixture(configuration.cases.path)
    return default_pyramid_cases()


def _read_source(source_path: str) -> str:
    path = Path(source_path)
    if not path.is_file():
        raise CliError(f"Source file not found: {path}")
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CliError(f"Failed to read source file {path}: {exc}") from exc
    if not source.strip():
        raise CliError(f"Source file is empty: {path}")
    return source


def _echo_outcome(outcome: GradingOutcome) -> None:
    click.echo(execution_summary(outcome))
    for index, verdict in enumerate(outcome.verdicts, start=1):
        status = "PASS" if verdict.passed else "FAIL"
        click.echo(f"{index}. [{status}] {verdict.case.name}: {verdict.diagnostic}")
    click.echo(f"Score: {outcome.score}/100")
    click.echo(outcome.feedback)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
