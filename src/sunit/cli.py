from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="sunit", help="Run unit-test suites and print their failures")


@app.command()
def run(
    targets: list[str] | None = typer.Argument(
        None, help="Suites to run, as module:attribute"
    ),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to a sunit YAML config"
    ),
    trace: bool = typer.Option(
        False, "--trace", help="Print the traceback under each failure"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Write debug output to this file"
    ),
):
    """Run the given suites and print one line per failure."""
    from sunit.config import RunConfig, load_config
    from sunit.loader import TargetError, add_search_path, load_target
    from sunit.result import TestResult
    from sunit.console import print_failures
    from sunit.verbose import setup_logger

    config_path: Path | None = None
    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            run_config = load_config(config_path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    else:
        run_config = RunConfig()

    # Command-line values take precedence over the config file
    all_targets = list(targets or []) or run_config.suites
    trace = trace or run_config.trace
    verbose = verbose or run_config.verbose
    log_path = debug_log or run_config.debug_log

    if not all_targets:
        typer.echo("Error: no suites given", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        Path(log_path) if log_path else None, verbose=verbose, logger_name="sunit"
    )
    # Suite modules are imported from the caller's directory
    if targets:
        search_dir = Path.cwd()
    else:
        search_dir = config_path.parent
    add_search_path(search_dir)
    logger.debug(f"Importing suites from {search_dir.resolve()}")
    logger.debug(f"Loading {len(all_targets)} suite(s)")

    tests = []
    for target in all_targets:
        try:
            tests.append(load_target(target))
        except TargetError as e:
            logger.error(f"Could not load '{target}': {e}")
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    result = TestResult(logger=logger)
    case_count = 0
    for target, test in zip(all_targets, tests):
        logger.debug(f"Running suite '{target}'")
        test.run(result)
        case_count += _count_cases(test)

    print_failures(result, trace=trace, out=typer.echo)
    typer.echo(f"{case_count} test case(s), {result.failure_count()} failure(s)")
    logger.debug(
        f"Run complete: {case_count} test case(s), {result.failure_count()} failure(s)"
    )

    if not result.was_successful():
        raise typer.Exit(1)


def _count_cases(test) -> int:
    from sunit.suite import TestSuite

    if isinstance(test, TestSuite):
        return test.count_test_cases()
    return 1


@app.command()
def init(
    dir: str = typer.Option(
        ".", "--dir", help="Directory to write the example config and suite into"
    ),
):
    """Write an example config and suite module."""
    project_dir = Path(dir)

    if not project_dir.exists():
        project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "sunit.yaml"
    if example.exists():
        typer.echo(f"sunit.yaml already exists in {dir}, skipping.")
        return

    example.write_text("""\
suites:
  - example_suite:suite
trace: false
debug_log: "${SUNIT_LOG_DIR:-.}/sunit-debug.log"
""")

    (project_dir / "example_suite.py").write_text('''\
from sunit import TestCase, TestSuite


class ArithmeticTest(TestCase):
    def run_test(self):
        if self.name == "addition":
            self.assert_equals(4, 2 + 2)
        elif self.name == "truth":
            self.assert_true(1 < 2, "one is less than two")


def suite():
    return TestSuite.from_names(["addition", "truth"], ArithmeticTest)
''')

    typer.echo(f"Initialized sunit project in {dir}:")
    typer.echo("  sunit.yaml        - example run config")
    typer.echo("  example_suite.py  - example suite module")
