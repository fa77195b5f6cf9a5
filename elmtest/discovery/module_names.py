"""Deriving Elm module names from file paths."""

from collections.abc import Iterable
from pathlib import Path

from .errors import (
    AmbiguousSourceDirectoryError,
    InvalidModuleNameError,
    NoMatchingSourceDirectoryError,
)

ELM_SUFFIX = ".elm"


def is_upper_name(segment: str) -> bool:
    """Check that a segment is an uppercase letter followed by letters, digits or _."""
    if not segment or not (segment[0].isalpha() and segment[0].isupper()):
        return False
    return all(c.isalpha() or c.isdecimal() or c == "_" for c in segment[1:])


def matching_source_directory(roots: Iterable[Path], test_file: Path) -> Path:
    """Return the single root containing ``test_file``."""
    matches = [root for root in roots if test_file.is_relative_to(root)]
    if not matches:
        raise NoMatchingSourceDirectoryError(str(test_file))
    if len(matches) > 1:
        raise AmbiguousSourceDirectoryError(str(test_file), [str(m) for m in matches])
    return matches[0]


def resolve_module_name(roots: Iterable[str | Path], test_file: str | Path) -> str:
    """Compute the module name of ``test_file`` from its source directory.

    The name comes from the path alone, so a file full of compile errors
    can still be imported and have its errors reported by the compiler.

    Raises:
        NoMatchingSourceDirectoryError: If no root contains the file.
        AmbiguousSourceDirectoryError: If several roots contain it.
        InvalidModuleNameError: If a segment is not an upper name.
    """
    test_file = Path(test_file)
    root = matching_source_directory([Path(r) for r in roots], test_file)

    parts = list(test_file.relative_to(root).parts)
    if not parts:
        raise InvalidModuleNameError(str(test_file), "")
    if parts[-1].endswith(ELM_SUFFIX):
        parts[-1] = parts[-1][: -len(ELM_SUFFIX)]

    for part in parts:
        if not is_upper_name(part):
            raise InvalidModuleNameError(str(test_file), part)
    return ".".join(parts)
