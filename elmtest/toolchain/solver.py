"""Dependency solving with elm-json."""

import logging
import shlex
import subprocess
from pathlib import Path

from ..project.errors import ElmJsonError
from ..project.loader import parse_dependencies
from ..project.models import Dependencies
from .compiler import CommandRunner
from .errors import MalformedDependenciesError, ToolNotFoundError

logger = logging.getLogger(__name__)

# Packages the generated runner and reporter import.
EXTRA_PACKAGES = (
    "elm/core",
    "elm/json",
    "elm/time",
    "elm/random",
    "billstclair/elm-xml-eeue56",
    "jorgengranseth/elm-string-format",
)


class DependencySolver:
    """Runs ``elm-json solve`` on a generated elm.json."""

    def __init__(
        self,
        executable: str = "elm-json",
        run_command: CommandRunner | None = None,
        extra: tuple[str, ...] = EXTRA_PACKAGES,
    ):
        self.executable = executable
        self.extra = extra
        self._run = run_command or subprocess.run

    def command(self, elm_json_path: str | Path) -> list[str]:
        return [
            self.executable,
            "solve",
            "--test",
            "--extra",
            *self.extra,
            "--",
            str(elm_json_path),
        ]

    def solve(self, elm_json_path: str | Path) -> Dependencies:
        """Solve the dependencies of the elm.json at ``elm_json_path``.

        A solver failure shows up as unparsable output; its own message is
        already on stderr.

        Raises:
            ToolNotFoundError: If the solver cannot be started.
            MalformedDependenciesError: If stdout is not a dependency mapping.
        """
        command = self.command(elm_json_path)
        logger.debug("Running %s", shlex.join(command))
        try:
            completed = self._run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=None,
            )
        except OSError as e:
            raise ToolNotFoundError(self.executable, str(e)) from e

        try:
            output = completed.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDependenciesError(completed.returncode) from e
        try:
            return parse_dependencies(output)
        except ElmJsonError as e:
            raise MalformedDependenciesError(completed.returncode, e.errors) from e
