"""Patching of the compiled runner so that ``check`` only accepts real tests.

Elm offers no way to ask whether a value is a ``Test``. The compiled output
is rewritten instead: every internal ``Test`` variant gets a hidden field
holding a symbol that only this file can reference, and ``check`` is
replaced by a function looking for that field. Records that merely look like
tests are rejected.

The patterns follow the output of elm 0.19.1 and elm-explorations/test and
must be updated if either changes the shape of these definitions.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from .errors import PatchPatternNotFoundError

logger = logging.getLogger(__name__)

# Older elm-explorations/test versions need every variant listed; newer ones
# prefix all of them with ElmTestVariant__.
TEST_VARIANTS = ("UnitTest", "FuzzTest", "Labeled", "Skipped", "Only", "Batch")
VARIANT_PREFIX = "ElmTestVariant__"

CHECK_TARGET = r"\$author\$project\$Runner\$check"
CHECK_PLACEHOLDER = r"\$author\$project\$Runner\$checkHelperReplaceMe___"


@dataclass(frozen=True)
class IdentityTag:
    """The unforgeable token marking genuine test values."""

    binding: str = "__elmTestSymbol"
    field: str = "__elmTestSymbol"
    description: str = "elmTestSymbol"

    @property
    def allocation_line(self) -> str:
        return f"const {self.binding} = Symbol('{self.description}');"


class KernelTestPatcher:
    """Rewrites compiled Runner.elm output to check test identity."""

    def __init__(self, tag: IdentityTag | None = None):
        self.tag = tag or IdentityTag()
        variants = "|".join([rf"{VARIANT_PREFIX}\w+", *TEST_VARIANTS])
        self._variant_definition = re.compile(
            r"^var\s+\$elm_explorations\$test\$Test\$Internal\$"
            rf"(?:{variants})"
            r"\s*=\s*(?:\w+\(\s*)?function\s*\([\w, ]*\)\s*\{\s*return\s*\{"
            rf"(?P<tagged>\s*{re.escape(self.tag.field)}:)?",
            re.MULTILINE,
        )
        self._check_definition = re.compile(
            rf"^(var\s+{CHECK_TARGET})\s*=\s*{CHECK_PLACEHOLDER};?$",
            re.MULTILINE,
        )
        self._patched_check = re.compile(
            rf"^var\s+{CHECK_TARGET}\s*=\s*value\s*=>.*{re.escape(self.tag.field)}",
            re.MULTILINE,
        )

    def check_function(self) -> str:
        tag = self.tag
        return (
            f"value => value && value.{tag.field} === {tag.binding}"
            " ? $elm$core$Maybe$Just(value) : $elm$core$Maybe$Nothing;"
        )

    def tag_variants(self, js: str) -> str:
        """Add the hidden field to every test variant constructor."""
        count = 0

        def add_field(match: re.Match) -> str:
            nonlocal count
            count += 1
            if match.group("tagged"):
                return match.group(0)
            return f"{match.group(0)} {self.tag.field}: {self.tag.binding}, "

        js = self._variant_definition.sub(add_field, js)
        if count == 0:
            raise PatchPatternNotFoundError("the Test variant definitions")
        logger.debug("Tagged %d test variant definitions", count)
        return js

    def replace_check(self, js: str) -> str:
        """Replace the first ``check`` placeholder definition."""
        js, count = self._check_definition.subn(
            lambda m: f"{m.group(1)} = {self.check_function()}", js, count=1
        )
        if count == 0 and not self._patched_check.search(js):
            raise PatchPatternNotFoundError("the check function definition")
        return js

    def allocate_token(self, js: str) -> str:
        """Prepend the token allocation unless it is already there."""
        if js.startswith(self.tag.allocation_line):
            return js
        return "\n".join([self.tag.allocation_line, js])

    def patch(self, js: str) -> str:
        """Apply the whole patch. Patching twice changes nothing."""
        js = self.tag_variants(js)
        js = self.replace_check(js)
        return self.allocate_token(js)


def patch_compiled_file(path: str | Path, patcher: KernelTestPatcher) -> Path:
    """Patch a compiled JS file in place."""
    path = Path(path)
    js = path.read_text(encoding="utf-8")
    path.write_text(patcher.patch(js), encoding="utf-8")
    return path
