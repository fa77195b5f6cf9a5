"""Command-line interface for elmtest."""

import logging
import sys

import click

from .errors import ElmTestError
from .pipeline import RunOptions, run_tests
from .project.loader import find_project_root
from .project.settings import load_settings


def _report_error(error: ElmTestError) -> None:
    click.echo(f"Error: {error}", err=True)
    for err in getattr(error, "errors", []):
        click.echo(f"  - {err['loc']}: {err['msg']}", err=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="elmtest")
@click.argument("files", nargs=-1)
@click.option(
    "--compiler",
    envvar="ELM_TEST_COMPILER",
    default=None,
    help="Path to the elm compiler [default: elm]",
)
@click.option("--seed", type=int, default=None, help="Initial random seed [default: random]")
@click.option("--fuzz", type=int, default=None, help="Number of runs per fuzz test [default: 100]")
@click.option("--workers", type=int, default=None, help="Number of worker threads [default: CPU count]")
@click.option(
    "--report",
    default=None,
    help="Report format: console, json or junit [default: console]",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with default values for the options above",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logs")
def main(
    files: tuple[str, ...],
    compiler: str | None,
    seed: int | None,
    fuzz: int | None,
    workers: int | None,
    report: str | None,
    config_path: str | None,
    verbose: bool,
):
    """Run the Elm tests of the current project.

    FILES are test files or glob patterns; by default every .elm file under
    tests/ is used.

    Exit codes:
      0 - All tests passed
      1 - Tests failed, or compilation or a tool failed
      2 - Invalid options or project
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        settings = load_settings(config_path).merged(
            compiler=compiler, seed=seed, fuzz=fuzz, workers=workers, report=report
        )
        project_root = find_project_root()
    except ElmTestError as e:
        _report_error(e)
        sys.exit(e.exit_code)

    options = RunOptions(
        compiler=settings.compiler,
        seed=settings.seed,
        fuzz=settings.fuzz,
        workers=settings.workers,
        report=settings.report,
        files=list(files),
    )
    result = run_tests(options, project_root)

    failure = result.failure
    if failure is not None and failure.error is not None:
        _report_error(failure.error)
    sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
