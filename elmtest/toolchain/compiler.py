"""Elm compiler invocation."""

import logging
import os
import shlex
import subprocess
from collections.abc import Callable, Iterable
from pathlib import Path

from .errors import CompilationError, ToolNotFoundError

logger = logging.getLogger(__name__)

CommandRunner = Callable[..., subprocess.CompletedProcess]

NULL_OUTPUT = Path(os.devnull)


class ElmCompiler:
    """Runs ``elm make`` for one set of sources at a time."""

    def __init__(self, executable: str = "elm", run_command: CommandRunner | None = None):
        self.executable = executable
        self._run = run_command or subprocess.run

    def command(self, output: str | Path, sources: Iterable[str | Path]) -> list[str]:
        return [self.executable, "make", f"--output={output}", *map(str, sources)]

    def compile(
        self,
        working_dir: str | Path,
        output: str | Path,
        sources: Iterable[str | Path],
    ) -> None:
        """Compile ``sources`` into ``output`` from ``working_dir``.

        Compiler errors go to stderr untouched.

        Raises:
            ToolNotFoundError: If the compiler cannot be started.
            CompilationError: If it exits with a non-zero code.
        """
        command = self.command(output, sources)
        logger.debug("Running %s in %s", shlex.join(command), working_dir)
        try:
            completed = self._run(
                command,
                cwd=working_dir,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=None,
            )
        except OSError as e:
            raise ToolNotFoundError(self.executable, str(e)) from e
        if completed.returncode != 0:
            raise CompilationError(command[3:], completed.returncode)
