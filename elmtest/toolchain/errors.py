"""External tool exceptions."""

from ..errors import ElmTestError, ErrorKind


class ToolNotFoundError(ElmTestError):
    """Raised when an external executable cannot be started."""

    kind = ErrorKind.TOOL_START

    def __init__(self, executable: str, reason: str | None = None):
        self.executable = executable
        message = f"Command {executable} failed to start"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class CompilationError(ElmTestError):
    """Raised when the compiler exits with a non-zero code."""

    kind = ErrorKind.TOOL_FAILURE

    def __init__(self, sources: list[str], returncode: int):
        self.sources = sources
        self.returncode = returncode
        super().__init__(
            f"Compilation failed with exit code {returncode}: " + " ".join(sources)
        )


class MalformedDependenciesError(ElmTestError):
    """Raised when the solver's output is not a dependency mapping."""

    kind = ErrorKind.TOOL_FAILURE

    def __init__(self, returncode: int, errors: list[dict] | None = None):
        self.returncode = returncode
        self.errors = errors or []
        super().__init__(
            f"Wrongly formed dependencies from the solver (exit code {returncode})"
        )


class InvalidReporterError(ElmTestError):
    """Raised for a report format that is not supported."""

    kind = ErrorKind.USER_INPUT

    def __init__(self, value: str, choices: list[str]):
        self.value = value
        self.choices = choices
        super().__init__(
            f"Wrong --report value: {value} (expected one of {', '.join(choices)})"
        )
