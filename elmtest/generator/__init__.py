"""Generation of the runner sources and patching of compiled output."""

from .errors import PatchPatternNotFoundError, TemplateMismatchError
from .patcher import IdentityTag, KernelTestPatcher, patch_compiled_file
from .runner import (
    generate_runner,
    module_test_group,
    render_runner,
    runner_imports,
)
from .templates import (
    HELPER_SRC_DIR,
    TEMPLATES_DIR,
    create_templated,
    placeholders,
    render_template,
    template_path,
)

__all__ = [
    "PatchPatternNotFoundError",
    "TemplateMismatchError",
    "IdentityTag",
    "KernelTestPatcher",
    "patch_compiled_file",
    "generate_runner",
    "module_test_group",
    "render_runner",
    "runner_imports",
    "HELPER_SRC_DIR",
    "TEMPLATES_DIR",
    "create_templated",
    "placeholders",
    "render_template",
    "template_path",
]
