"""Adapters for the external tools: compiler, dependency solver and node."""

from .compiler import NULL_OUTPUT, ElmCompiler
from .errors import (
    CompilationError,
    InvalidReporterError,
    MalformedDependenciesError,
    ToolNotFoundError,
)
from .solver import EXTRA_PACKAGES, DependencySolver
from .supervisor import (
    Reporter,
    Supervisor,
    generate_node_runner,
    generate_node_supervisor,
    parse_reporter,
)

__all__ = [
    "NULL_OUTPUT",
    "ElmCompiler",
    "CompilationError",
    "InvalidReporterError",
    "MalformedDependenciesError",
    "ToolNotFoundError",
    "EXTRA_PACKAGES",
    "DependencySolver",
    "Reporter",
    "Supervisor",
    "generate_node_runner",
    "generate_node_supervisor",
    "parse_reporter",
]
