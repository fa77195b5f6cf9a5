"""Reading and writing elm.json files."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import ProjectRootNotFoundError
from .errors import ElmJsonError
from .models import ApplicationConfig, Dependencies, ElmJson, PackageConfig

logger = logging.getLogger(__name__)

ELM_JSON = "elm.json"

_ELM_JSON_ADAPTER = TypeAdapter(ElmJson)


def find_project_root(start: str | Path | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding an elm.json.

    Raises:
        ProjectRootNotFoundError: If no ancestor holds an elm.json.
    """
    current = Path(start or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        if (directory / ELM_JSON).is_file():
            return directory
    raise ProjectRootNotFoundError(str(current))


def _validation_errors(error: ValidationError) -> list[dict]:
    return [
        {
            "loc": ".".join(str(x) for x in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]


def parse_elm_json(
    text: str, path: str | None = None
) -> ApplicationConfig | PackageConfig:
    """Parse elm.json text into an application or package config.

    Raises:
        ElmJsonError: If the text is not JSON or does not match either shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ElmJsonError(f"Invalid JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise ElmJsonError(
            f"Expected a JSON object at root, got {type(data).__name__}", path
        )

    try:
        return _ELM_JSON_ADAPTER.validate_python(data)
    except ValidationError as e:
        errors = _validation_errors(e)
        raise ElmJsonError(
            f"elm.json validation failed with {len(errors)} error(s)", path, errors
        ) from e


def read_elm_json(path: str | Path) -> str:
    """Read the text of an elm.json file.

    Raises:
        ElmJsonError: If the file is missing, unreadable or not UTF-8.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ElmJsonError(f"Unable to read {path}: {e}", str(path)) from e


def load_elm_json(path: str | Path) -> ApplicationConfig | PackageConfig:
    """Read and parse an elm.json file."""
    return parse_elm_json(read_elm_json(path), str(path))


def parse_dependencies(text: str) -> Dependencies:
    """Parse a ``{"direct": ..., "indirect": ...}`` dependency mapping."""
    try:
        return Dependencies.model_validate_json(text)
    except ValidationError as e:
        errors = _validation_errors(e)
        raise ElmJsonError(
            f"Wrongly formed dependencies ({len(errors)} error(s))", errors=errors
        ) from e


def write_elm_json(config: ApplicationConfig, path: str | Path) -> Path:
    """Write ``config`` to ``path`` in its canonical form, overwriting it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_json(), encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path
