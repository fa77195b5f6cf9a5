"""Finding test files on disk."""

import glob
import logging
from pathlib import Path

from .errors import MissingTestFileError, NoTestFilesError

logger = logging.getLogger(__name__)


def default_test_globs(project_root: str | Path) -> list[str]:
    """Globs matching every Elm file under the project's tests/ directory."""
    root = str(project_root)
    return [f"{root}/tests/*.elm", f"{root}/tests/**/*.elm"]


def discover_test_files(patterns: list[str]) -> set[Path]:
    """Expand glob patterns into a set of canonical file paths.

    Paths that cannot be canonicalized are dropped.
    """
    found: set[Path] = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            try:
                path = Path(match).resolve(strict=True)
            except OSError:
                logger.debug("Dropping %s: cannot canonicalize", match)
                continue
            if path.is_file():
                found.add(path)
    return found


def canonicalize_test_files(paths: list[str | Path]) -> set[Path]:
    """Canonicalize an explicit list of test files.

    Raises:
        MissingTestFileError: If a file does not exist.
    """
    found: set[Path] = set()
    for path in paths:
        try:
            canonical = Path(path).resolve(strict=True)
        except OSError as e:
            raise MissingTestFileError(str(path)) from e
        if not canonical.is_file():
            raise MissingTestFileError(str(path))
        found.add(canonical)
    return found


def collect_test_files(targets: list[str], project_root: str | Path) -> set[Path]:
    """Resolve command line targets into test files.

    No targets means the default globs. Targets with glob characters are
    expanded, the others must be existing files.

    Raises:
        NoTestFilesError: If nothing is found.
        MissingTestFileError: If an explicit file does not exist.
    """
    if not targets:
        patterns = default_test_globs(project_root)
        files = discover_test_files(patterns)
    else:
        patterns = [t for t in targets if glob.has_magic(t)]
        explicit = [t for t in targets if not glob.has_magic(t)]
        files = discover_test_files(patterns) | canonicalize_test_files(explicit)
        patterns = list(targets)

    if not files:
        raise NoTestFilesError(patterns)
    return files
