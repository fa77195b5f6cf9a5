"""Sequential pipeline turning Elm test files into a supervised test run."""

from .models import (
    COMPILER_VERSION,
    GeneratedProject,
    PipelineResult,
    RunOptions,
    Stage,
    StageOutcome,
    Toolchain,
)
from .runner import ElmTestPipeline, run_tests

__all__ = [
    "COMPILER_VERSION",
    "GeneratedProject",
    "PipelineResult",
    "RunOptions",
    "Stage",
    "StageOutcome",
    "Toolchain",
    "ElmTestPipeline",
    "run_tests",
]
