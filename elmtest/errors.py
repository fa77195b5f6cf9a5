"""Base exception and error taxonomy shared by all elmtest layers."""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a pipeline failure."""

    USER_INPUT = "user_input"
    ENVIRONMENT = "environment"
    TOOL_START = "tool_start"
    TOOL_FAILURE = "tool_failure"
    INTERNAL = "internal"

    @property
    def exit_code(self) -> int:
        if self in (ErrorKind.USER_INPUT, ErrorKind.ENVIRONMENT):
            return 2
        return 1


class ElmTestError(Exception):
    """Base exception for every failure the pipeline reports."""

    kind: ErrorKind = ErrorKind.INTERNAL

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code


class GeneratedProjectError(ElmTestError):
    """Raised when the generated project cannot be written or read back."""

    kind = ErrorKind.ENVIRONMENT


class ProjectRootNotFoundError(ElmTestError):
    """Raised when no elm.json is found above the working directory."""

    kind = ErrorKind.ENVIRONMENT

    def __init__(self, start: str):
        self.start = start
        super().__init__(f"Could not find an elm.json in {start} or any parent directory")
