"""Node supervisor control modules and process handling."""

import logging
import subprocess
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from ..generator.templates import create_templated, template_path
from .errors import InvalidReporterError, ToolNotFoundError

logger = logging.getLogger(__name__)

SUPERVISOR_MODULE = "js/node_supervisor.js"


class Reporter(str, Enum):
    """Supported report formats."""

    CONSOLE = "console"
    JSON = "json"
    JUNIT = "junit"


def parse_reporter(value: str) -> Reporter:
    """Validate a report format name.

    Raises:
        InvalidReporterError: If ``value`` is not a supported format.
    """
    try:
        return Reporter(value)
    except ValueError as e:
        raise InvalidReporterError(value, [r.value for r in Reporter]) from e


def read_polyfills() -> str:
    return template_path("node_polyfills.js").read_text(encoding="utf-8")


def generate_node_runner(output: str | Path, seed: int, fuzz: int) -> Path:
    """Write the worker module that embeds the compiled runner."""
    return create_templated(
        template_path("node_runner.js"),
        output,
        {
            "polyfills": read_polyfills(),
            "initialSeed": str(seed),
            "fuzzRuns": str(fuzz),
        },
    )


def generate_node_supervisor(
    output: str | Path, workers: int, seed: int, fuzz: int, reporter: Reporter
) -> Path:
    """Write the supervisor module that distributes tests to workers."""
    return create_templated(
        template_path("node_supervisor.js"),
        output,
        {
            "polyfills": read_polyfills(),
            "nb_workers": str(workers),
            "initialSeed": str(seed),
            "fuzzRuns": str(fuzz),
            "reporter": reporter.value,
        },
    )


class Supervisor:
    """Runs the generated supervisor under node."""

    def __init__(
        self,
        executable: str = "node",
        popen: Callable[..., subprocess.Popen] | None = None,
    ):
        self.executable = executable
        self._popen = popen or subprocess.Popen

    def run(self, tests_root: str | Path, node_runner_path: str | Path) -> int:
        """Start the supervisor, hand it the runner path and wait for it.

        Returns:
            The supervisor's exit code, or 1 if it has none (killed by a signal).

        Raises:
            ToolNotFoundError: If node cannot be started.
        """
        command = [self.executable, SUPERVISOR_MODULE]
        logger.debug("Starting %s in %s", " ".join(command), tests_root)
        try:
            process = self._popen(command, cwd=tests_root, stdin=subprocess.PIPE)
        except OSError as e:
            raise ToolNotFoundError(self.executable, str(e)) from e

        # Leaving the block closes the pipe and reaps the child, even on
        # KeyboardInterrupt.
        with process:
            process.communicate(input=f"{node_runner_path}\n".encode("utf-8"))
        returncode = process.returncode
        logger.debug("Supervisor exited with %s", returncode)

        if returncode is None or returncode < 0:
            return 1
        return returncode
