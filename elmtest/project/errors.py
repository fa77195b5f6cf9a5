"""Project configuration exceptions."""

from ..errors import ElmTestError, ErrorKind


class ElmJsonError(ElmTestError):
    """Raised when an elm.json cannot be read or does not match its schema."""

    kind = ErrorKind.ENVIRONMENT

    def __init__(
        self,
        message: str,
        path: str | None = None,
        errors: list[dict] | None = None,
    ):
        self.path = path
        self.errors = errors or []
        super().__init__(message)


class SourceDirectoryError(ElmTestError):
    """Raised when a configured source directory does not exist."""

    kind = ErrorKind.ENVIRONMENT

    def __init__(self, directory: str, project_root: str):
        self.directory = directory
        self.project_root = project_root
        super().__init__(
            f"Source directory {directory!r} does not exist in {project_root}"
        )


class SettingsError(ElmTestError):
    """Raised when the settings file is invalid."""

    kind = ErrorKind.USER_INPUT

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
