"""Test discovery exceptions."""

from ..errors import ElmTestError, ErrorKind


class NoTestFilesError(ElmTestError):
    """Raised when the requested patterns match no test file."""

    kind = ErrorKind.USER_INPUT

    def __init__(self, patterns: list[str]):
        self.patterns = patterns
        super().__init__(
            "No test file found for: " + ", ".join(patterns)
            if patterns
            else "No test file found"
        )


class MissingTestFileError(ElmTestError):
    """Raised when an explicitly given test file does not exist."""

    kind = ErrorKind.USER_INPUT

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Test file not found: {path}")


class UnreadableTestFileError(ElmTestError):
    """Raised when a test file cannot be read as UTF-8 text."""

    kind = ErrorKind.ENVIRONMENT

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read test file {path}: {reason}")


class ModuleNameError(ElmTestError):
    """Base exception for module name resolution failures."""

    kind = ErrorKind.INTERNAL


class NoMatchingSourceDirectoryError(ModuleNameError):
    """Raised when a test file is under none of the source directories."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"This file:\n{path}\n...matches no source directory! Imports won't work then."
        )


class AmbiguousSourceDirectoryError(ModuleNameError):
    """Raised when a test file is under two or more source directories."""

    def __init__(self, path: str, directories: list[str]):
        self.path = path
        self.directories = directories
        super().__init__(
            f"{path} matches {len(directories)} source directories: "
            + ", ".join(directories)
        )


class InvalidModuleNameError(ModuleNameError):
    """Raised when a path segment is not a valid Elm module name part."""

    def __init__(self, path: str, segment: str):
        self.path = path
        self.segment = segment
        super().__init__(f"{segment!r} in {path} is not a valid module name")
