"""The compile, generate, patch and hand-off pipeline.

Stages run in order and each one depends on the previous. The first failure
stops the run; files already written in the generated project stay as they
are and are overwritten by the next run.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

import click

from ..discovery.files import collect_test_files
from ..discovery.models import DiscoveryResult
from ..discovery.test_finder import find_all_tests
from ..errors import ElmTestError, GeneratedProjectError
from ..generator.patcher import KernelTestPatcher, patch_compiled_file
from ..generator.runner import generate_runner
from ..generator.templates import HELPER_SRC_DIR, template_path
from ..project.loader import read_elm_json, write_elm_json
from ..project.synthesizer import SynthesizedConfig, synthesize_test_config
from ..toolchain.compiler import NULL_OUTPUT
from ..toolchain.supervisor import (
    Reporter,
    generate_node_runner,
    generate_node_supervisor,
    parse_reporter,
)
from .models import (
    GeneratedProject,
    PipelineResult,
    RunOptions,
    Stage,
    StageOutcome,
    Toolchain,
)

logger = logging.getLogger(__name__)

TestFinder = Callable[[Iterable[Path], Iterable[Path]], DiscoveryResult]


def _progress(message: str) -> None:
    click.echo(message, err=True)


class ElmTestPipeline:
    """Prepares the generated test project and runs it under the supervisor."""

    def __init__(
        self,
        options: RunOptions,
        project_root: str | Path,
        toolchain: Toolchain | None = None,
        test_finder: TestFinder = find_all_tests,
        patcher: KernelTestPatcher | None = None,
        echo: Callable[[str], None] = _progress,
    ):
        self.options = options
        self.project_root = Path(project_root).resolve()
        self.project = GeneratedProject(self.project_root)
        self.toolchain = toolchain or Toolchain.default(options.compiler)
        self.test_finder = test_finder
        self.patcher = patcher or KernelTestPatcher()
        self.echo = echo

        self.reporter: Reporter | None = None
        self.test_files: set[Path] = set()
        self.synthesized: SynthesizedConfig | None = None
        self.discovery: DiscoveryResult | None = None
        self.result = PipelineResult()

    def run(self) -> PipelineResult:
        """Run every stage until one fails."""
        for stage in Stage:
            step = getattr(self, stage.value)
            try:
                detail = step()
            except ElmTestError as e:
                logger.debug("Stage %s failed", stage.value, exc_info=True)
                self.result.outcomes.append(StageOutcome(stage, ok=False, error=e))
                break
            except OSError as e:
                error = GeneratedProjectError(f"{stage.value}: {e}")
                self.result.outcomes.append(StageOutcome(stage, ok=False, error=error))
                break
            self.result.outcomes.append(StageOutcome(stage, ok=True, detail=detail))
        return self.result

    def validate_options(self) -> str:
        self.reporter = parse_reporter(self.options.report)
        return self.reporter.value

    def discover(self) -> str:
        self.test_files = collect_test_files(self.options.files, self.project_root)
        return f"{len(self.test_files)} file(s)"

    def synthesize(self) -> str:
        text = read_elm_json(self.project_root / "elm.json")
        self.synthesized = synthesize_test_config(
            text, self.project_root, self.project.root, HELPER_SRC_DIR
        )
        self.project.create_directories()
        write_elm_json(self.synthesized.config, self.project.elm_json)
        return str(self.project.elm_json)

    def solve(self) -> str:
        self.echo("Running elm-json to solve dependency issues ...")
        config = self.synthesized.config
        config.dependencies = self.toolchain.solver.solve(self.project.elm_json)
        write_elm_json(config, self.project.elm_json)
        return f"{len(config.dependencies.keys())} package(s)"

    def compile_tests(self) -> None:
        self.echo("Compiling all test files ...")
        self.toolchain.compiler.compile(
            self.project.root, NULL_OUTPUT, sorted(self.test_files)
        )

    def find_tests(self) -> str:
        self.echo("Finding all modules and tests ...")
        self.discovery = self.test_finder(
            self.test_files, self.synthesized.test_directories
        )
        return f"{self.discovery.total_tests} candidate test(s)"

    def generate_runner(self) -> str:
        path = generate_runner(
            template_path("Runner.elm"),
            self.project.runner_source,
            self.discovery.modules,
        )
        return str(path)

    def compile_runner(self) -> str:
        self.echo("Compiling the generated templated src/Runner.elm ...")
        self.toolchain.compiler.compile(
            self.project.root,
            self.project.runner_js,
            [self.project.runner_source.relative_to(self.project.root)],
        )
        patch_compiled_file(self.project.runner_js, self.patcher)
        return str(self.project.runner_js)

    def generate_node_runner(self) -> str:
        path = generate_node_runner(
            self.project.node_runner, self.options.seed, self.options.fuzz
        )
        return str(path)

    def compile_reporter(self) -> str:
        self.echo("Compiling Reporter.elm.js ...")
        self.toolchain.compiler.compile(
            self.project.root,
            self.project.reporter_js,
            [template_path("Reporter.elm")],
        )
        return str(self.project.reporter_js)

    def generate_supervisor(self) -> str:
        path = generate_node_supervisor(
            self.project.node_supervisor,
            self.options.workers,
            self.options.seed,
            self.options.fuzz,
            self.reporter,
        )
        return str(path)

    def supervise(self) -> str:
        self.echo("Starting the supervisor ...")
        self.echo("Running tests ...")
        code = self.toolchain.supervisor.run(
            self.project.root, self.project.node_runner
        )
        self.result.supervisor_exit_code = code
        self.echo(f"Exited with code {code}")
        return f"exit code {code}"


def run_tests(
    options: RunOptions,
    project_root: str | Path,
    toolchain: Toolchain | None = None,
) -> PipelineResult:
    """Run the whole pipeline for the project at ``project_root``."""
    return ElmTestPipeline(options, project_root, toolchain).run()
