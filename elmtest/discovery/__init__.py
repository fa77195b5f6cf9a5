"""Discovery of test files, module names and exposed test values."""

from .errors import (
    AmbiguousSourceDirectoryError,
    InvalidModuleNameError,
    MissingTestFileError,
    ModuleNameError,
    NoMatchingSourceDirectoryError,
    NoTestFilesError,
    UnreadableTestFileError,
)
from .files import (
    canonicalize_test_files,
    collect_test_files,
    default_test_globs,
    discover_test_files,
)
from .models import DiscoveryResult, ElmTestModule
from .module_names import is_upper_name, resolve_module_name
from .test_finder import find_all_tests, find_exposed_values

__all__ = [
    "AmbiguousSourceDirectoryError",
    "InvalidModuleNameError",
    "MissingTestFileError",
    "ModuleNameError",
    "NoMatchingSourceDirectoryError",
    "NoTestFilesError",
    "UnreadableTestFileError",
    "DiscoveryResult",
    "ElmTestModule",
    "canonicalize_test_files",
    "collect_test_files",
    "default_test_globs",
    "discover_test_files",
    "find_all_tests",
    "find_exposed_values",
    "is_upper_name",
    "resolve_module_name",
]
