"""Shared fixtures for tests."""

import json
from pathlib import Path

import pytest

from elmtest.pipeline.models import Toolchain
from elmtest.project.models import Dependencies

APPLICATION_ELM_JSON = {
    "type": "application",
    "source-directories": ["src"],
    "elm-version": "0.19.1",
    "dependencies": {
        "direct": {"elm/browser": "1.0.2", "elm/core": "1.0.5"},
        "indirect": {"elm/json": "1.1.3"},
    },
    "test-dependencies": {
        "direct": {"elm-explorations/test": "2.1.1"},
        "indirect": {"elm/random": "1.0.0"},
    },
}

PACKAGE_ELM_JSON = {
    "type": "package",
    "name": "author/thing",
    "summary": "A thing",
    "license": "BSD-3-Clause",
    "version": "1.0.0",
    "exposed-modules": ["Thing"],
    "elm-version": "0.19.0 <= v < 0.20.0",
    "dependencies": {"elm/core": "1.0.0 <= v < 2.0.0"},
    "test-dependencies": {"elm-explorations/test": "2.0.0 <= v < 3.0.0"},
}

EXAMPLE_TEST = """module ExampleTest exposing (suite, other)

import Expect
import Test exposing (Test, describe, test)


suite : Test
suite =
    describe "Example"
        [ test "one" <| \\_ -> Expect.pass ]


other : Test
other =
    test "two" <| \\_ -> Expect.pass


helper : Int -> Int
helper x =
    x
"""

COMPILED_RUNNER = """(function(scope){
'use strict';
var $elm_explorations$test$Test$Internal$UnitTest = function (a) {
\treturn {$: 'UnitTest', a: a};
};
var $elm_explorations$test$Test$Internal$Labeled = F2(
\tfunction (a, b) {
\t\treturn {$: 'Labeled', a: a, b: b};
\t});
var $elm_explorations$test$Test$Internal$Batch = function (a) {
\treturn {$: 'Batch', a: a};
};
var $author$project$Runner$checkHelperReplaceMe___ = function (_v0) {
\treturn _Debug_todo('Runner', {start: {line: 30, column: 5}});
};
var $author$project$Runner$check = $author$project$Runner$checkHelperReplaceMe___;
}(this));
"""


@pytest.fixture
def application_elm_json() -> str:
    """Return an application elm.json."""
    return json.dumps(APPLICATION_ELM_JSON, indent=4)


@pytest.fixture
def package_elm_json() -> str:
    """Return a package elm.json."""
    return json.dumps(PACKAGE_ELM_JSON, indent=4)


@pytest.fixture
def example_test_source() -> str:
    """Return the source of the ExampleTest module."""
    return EXAMPLE_TEST


@pytest.fixture
def compiled_runner() -> str:
    """Return a trimmed-down compiled Runner.elm."""
    return COMPILED_RUNNER


@pytest.fixture
def elm_project(tmp_path, application_elm_json) -> Path:
    """Create an application project with one test module."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "tests").mkdir()
    (root / "elm.json").write_text(application_elm_json)
    (root / "tests" / "ExampleTest.elm").write_text(EXAMPLE_TEST)
    return root


class FakeCompiler:
    """Records compilations and writes a compiled runner for Runner.elm."""

    def __init__(self, fail_on: int | None = None, error=None):
        self.calls: list[tuple[Path, Path, list[str]]] = []
        self.fail_on = fail_on
        self.error = error

    def compile(self, working_dir, output, sources):
        sources = [str(s) for s in sources]
        self.calls.append((Path(working_dir), Path(output), sources))
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            raise self.error
        if any(s.endswith("Runner.elm") and "templates" not in s for s in sources):
            Path(output).parent.mkdir(parents=True, exist_ok=True)
            Path(output).write_text(COMPILED_RUNNER)


class FakeSolver:
    """Returns fixed dependencies and keeps the elm.json it was asked to solve."""

    def __init__(self, error=None):
        self.calls: list[Path] = []
        self.drafts: list[str | None] = []
        self.error = error

    def solve(self, elm_json_path):
        path = Path(elm_json_path)
        self.calls.append(path)
        self.drafts.append(path.read_text() if path.is_file() else None)
        if self.error is not None:
            raise self.error
        return Dependencies(
            direct={"elm/core": "1.0.5", "elm-explorations/test": "2.1.1"},
            indirect={"elm/random": "1.0.0"},
        )


class FakeSupervisor:
    """Returns a fixed exit code."""

    def __init__(self, exit_code: int = 0):
        self.calls: list[tuple[Path, Path]] = []
        self.exit_code = exit_code

    def run(self, tests_root, node_runner_path):
        self.calls.append((Path(tests_root), Path(node_runner_path)))
        return self.exit_code


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def fake_solver() -> FakeSolver:
    return FakeSolver()


@pytest.fixture
def fake_supervisor() -> FakeSupervisor:
    return FakeSupervisor()


@pytest.fixture
def toolchain(fake_compiler, fake_solver, fake_supervisor) -> Toolchain:
    """Return a toolchain made of the fake tools."""
    return Toolchain(
        compiler=fake_compiler, solver=fake_solver, supervisor=fake_supervisor
    )
