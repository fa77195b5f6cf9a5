"""Data models for the test pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..errors import ElmTestError
from ..toolchain.compiler import ElmCompiler
from ..toolchain.solver import DependencySolver
from ..toolchain.supervisor import Supervisor

COMPILER_VERSION = "0.19.1"


class Stage(str, Enum):
    """Pipeline stages, in execution order."""

    VALIDATE_OPTIONS = "validate_options"
    DISCOVER = "discover"
    SYNTHESIZE = "synthesize"
    SOLVE = "solve"
    COMPILE_TESTS = "compile_tests"
    FIND_TESTS = "find_tests"
    GENERATE_RUNNER = "generate_runner"
    COMPILE_RUNNER = "compile_runner"
    GENERATE_NODE_RUNNER = "generate_node_runner"
    COMPILE_REPORTER = "compile_reporter"
    GENERATE_SUPERVISOR = "generate_supervisor"
    SUPERVISE = "supervise"


@dataclass
class RunOptions:
    """Options of one test run."""

    compiler: str = "elm"
    seed: int = 0
    fuzz: int = 100
    workers: int = 1
    report: str = "console"
    files: list[str] = field(default_factory=list)


@dataclass
class Toolchain:
    """External tools used by the pipeline."""

    compiler: ElmCompiler
    solver: DependencySolver
    supervisor: Supervisor

    @classmethod
    def default(cls, compiler: str = "elm") -> "Toolchain":
        return cls(
            compiler=ElmCompiler(compiler),
            solver=DependencySolver(),
            supervisor=Supervisor(),
        )


@dataclass(frozen=True)
class GeneratedProject:
    """Layout of the generated test project inside the host project."""

    project_root: Path
    compiler_version: str = COMPILER_VERSION

    @property
    def root(self) -> Path:
        return self.project_root / "elm-stuff" / f"tests-{self.compiler_version}"

    @property
    def elm_json(self) -> Path:
        return self.root / "elm.json"

    @property
    def src_dir(self) -> Path:
        return self.root / "src"

    @property
    def js_dir(self) -> Path:
        return self.root / "js"

    @property
    def runner_source(self) -> Path:
        return self.src_dir / "Runner.elm"

    @property
    def runner_js(self) -> Path:
        return self.js_dir / "Runner.elm.js"

    @property
    def node_runner(self) -> Path:
        return self.js_dir / "node_runner.js"

    @property
    def reporter_js(self) -> Path:
        return self.js_dir / "Reporter.elm.js"

    @property
    def node_supervisor(self) -> Path:
        return self.js_dir / "node_supervisor.js"

    def create_directories(self) -> None:
        self.src_dir.mkdir(parents=True, exist_ok=True)
        self.js_dir.mkdir(parents=True, exist_ok=True)


@dataclass
class StageOutcome:
    """Outcome of a single stage."""

    stage: Stage
    ok: bool
    error: ElmTestError | None = None
    detail: str | None = None

    def __str__(self) -> str:
        if self.ok:
            suffix = f" ({self.detail})" if self.detail else ""
            return f"{self.stage.value}: ok{suffix}"
        return f"{self.stage.value}: failed - {self.error}"


@dataclass
class PipelineResult:
    """Result of running the pipeline."""

    outcomes: list[StageOutcome] = field(default_factory=list)
    supervisor_exit_code: int | None = None

    @property
    def failure(self) -> StageOutcome | None:
        """The failing stage, if any."""
        for outcome in self.outcomes:
            if not outcome.ok:
                return outcome
        return None

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @property
    def completed_stages(self) -> list[Stage]:
        return [o.stage for o in self.outcomes if o.ok]

    @property
    def exit_code(self) -> int:
        """Exit code for the whole run.

        The supervisor's when it ran, otherwise the failure's.
        """
        failure = self.failure
        if failure is not None:
            return failure.error.exit_code if failure.error else 1
        if self.supervisor_exit_code is not None:
            return self.supervisor_exit_code
        return 0
