"""Generation of the aggregate Runner.elm module."""

from pathlib import Path

from ..discovery.models import ElmTestModule
from .templates import create_templated, render_template

CHECK_FUNCTION = "check"


def runner_imports(modules: list[ElmTestModule]) -> str:
    """One import line per test module."""
    return "\n".join(f"import {module.name}" for module in modules)


def module_test_group(module: ElmTestModule) -> str:
    """Elm record listing the checked tests of one module."""
    checks = "\n            , ".join(
        f"{CHECK_FUNCTION} {module.qualified(test)}" for test in module.tests
    )
    record = f"""
      {{ module_ = "{module.name}"
      , maybeTests =
            [ {checks}
            ]
      }}"""
    return record.strip()


def runner_replacements(modules: list[ElmTestModule]) -> dict[str, str]:
    """Replacements for the Runner.elm template."""
    return {
        "user_imports": runner_imports(modules),
        "tests": "\n    , ".join(module_test_group(m) for m in modules),
    }


def render_runner(template: str, modules: list[ElmTestModule]) -> str:
    """Render Runner.elm source text for the given modules."""
    return render_template(template, runner_replacements(modules), "Runner.elm")


def generate_runner(
    template: str | Path, output: str | Path, modules: list[ElmTestModule]
) -> Path:
    """Write the generated Runner.elm."""
    return create_templated(template, output, runner_replacements(modules))
