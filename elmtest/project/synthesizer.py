"""Synthesis of the generated test project's elm.json."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import SourceDirectoryError
from .loader import parse_elm_json
from .models import ApplicationConfig, PackageConfig

TESTS_DIRECTORY = "tests"
GENERATED_SOURCE_DIRECTORY = "src"


@dataclass
class SynthesizedConfig:
    """The generated project's config and the roots used to name test modules."""

    config: ApplicationConfig
    test_directories: list[Path] = field(default_factory=list)


def canonical_source_directories(
    source_directories: list[str], project_root: Path
) -> list[Path]:
    """Canonicalize source directories plus the implicit ``tests`` directory.

    Duplicates (after canonicalization) are dropped, first occurrence wins.

    Raises:
        SourceDirectoryError: If a directory does not exist.
    """
    canonical: list[Path] = []
    for directory in [*source_directories, TESTS_DIRECTORY]:
        try:
            path = (project_root / directory).resolve(strict=True)
        except OSError as e:
            raise SourceDirectoryError(directory, str(project_root)) from e
        if not path.is_dir():
            raise SourceDirectoryError(directory, str(project_root))
        if path not in canonical:
            canonical.append(path)
    return canonical


def relative_to_tests_root(directories: list[Path], tests_root: Path) -> list[str]:
    """Express each directory relative to the generated project root."""
    return [os.path.relpath(directory, tests_root) for directory in directories]


def synthesize_test_config(
    elm_json_text: str,
    project_root: str | Path,
    tests_root: str | Path,
    helper_src_dir: str | Path,
) -> SynthesizedConfig:
    """Derive the generated test project's elm.json from the host project's.

    Args:
        elm_json_text: Content of the host project's elm.json.
        project_root: Directory holding the host elm.json.
        tests_root: Root of the generated test project.
        helper_src_dir: Source directory of the packaged Elm helper library.

    Returns:
        The synthesized config, ready for dependency solving, and the
        canonical test directories.

    Raises:
        ElmJsonError: If the host elm.json is malformed.
        SourceDirectoryError: If a source directory does not exist.
    """
    project_root = Path(project_root).resolve()
    tests_root = (project_root / tests_root).resolve()

    info = parse_elm_json(elm_json_text, str(project_root / "elm.json"))
    if isinstance(info, PackageConfig):
        config = info.to_application()
    else:
        config = info

    test_directories = canonical_source_directories(
        config.source_directories, project_root
    )
    config.source_directories = [
        *relative_to_tests_root(test_directories, tests_root),
        GENERATED_SOURCE_DIRECTORY,
        str(Path(helper_src_dir)),
    ]
    config.promote_test_dependencies()

    return SynthesizedConfig(config=config, test_directories=test_directories)
