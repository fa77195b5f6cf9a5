"""Run settings, optionally loaded from a YAML file."""

import os
import random
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SettingsError


def random_seed() -> int:
    return random.randint(0, 2**32 - 1)


def default_workers() -> int:
    return os.cpu_count() or 1


class RunSettings(BaseModel):
    """Settings of a test run.

    ``report`` is validated by the pipeline, not here, so that a bad value
    is reported the same way whatever its origin.
    """

    model_config = ConfigDict(extra="forbid")

    compiler: str = "elm"
    seed: int = Field(default_factory=random_seed, ge=0, lt=2**32)
    fuzz: int = Field(default=100, ge=1)
    workers: int = Field(default_factory=default_workers, ge=1)
    report: str = "console"

    def merged(self, **overrides) -> "RunSettings":
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        data = self.model_dump()
        data.update(values)
        try:
            return RunSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid settings: {details}"


def load_settings(path: str | Path | None = None) -> RunSettings:
    """Load settings from a YAML file, or return defaults when ``path`` is None.

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    if path is None:
        return RunSettings()

    path = Path(path)
    if not path.is_file():
        raise SettingsError(f"Settings file not found: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML: {e}", str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    try:
        return RunSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(_describe(e), str(path)) from e
