"""Project layer: host elm.json parsing and generated config synthesis."""

from .errors import ElmJsonError, SettingsError, SourceDirectoryError
from .loader import (
    find_project_root,
    load_elm_json,
    read_elm_json,
    parse_dependencies,
    parse_elm_json,
    write_elm_json,
)
from .models import (
    ApplicationConfig,
    Dependencies,
    PackageConfig,
    pin_constraint,
)
from .settings import RunSettings, load_settings
from .synthesizer import SynthesizedConfig, synthesize_test_config

__all__ = [
    "ElmJsonError",
    "SettingsError",
    "SourceDirectoryError",
    "ApplicationConfig",
    "Dependencies",
    "PackageConfig",
    "RunSettings",
    "SynthesizedConfig",
    "find_project_root",
    "load_elm_json",
    "load_settings",
    "read_elm_json",
    "parse_dependencies",
    "parse_elm_json",
    "pin_constraint",
    "synthesize_test_config",
    "write_elm_json",
]
