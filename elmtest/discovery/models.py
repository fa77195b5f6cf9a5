"""Data models for discovered tests."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ElmTestModule:
    """A test module and the exposed values that may be tests."""


    path: Path
    name: str
    tests: list[str] = field(default_factory=list)

    def qualified(self, value: str) -> str:
        """Fully qualified reference to one of the module's values."""
        return f"{self.name}.{value}"


@dataclass
class DiscoveryResult:
    """All discovered test modules."""

    modules: list[ElmTestModule] = field(default_factory=list)

    @property
    def total_tests(self) -> int:
        """Number of candidate test values across all modules."""
        return sum(len(m.tests) for m in self.modules)
