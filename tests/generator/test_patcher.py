"""Tests for patching the compiled runner."""

import pytest

from elmtest.generator.errors import PatchPatternNotFoundError
from elmtest.generator.patcher import (
    IdentityTag,
    KernelTestPatcher,
    patch_compiled_file,
)

PREFIXED_VARIANT = """var $elm_explorations$test$Test$Internal$ElmTestVariant__UnitTest = function (a) {
\treturn {$: 'ElmTestVariant__UnitTest', a: a};
};
"""


@pytest.fixture
def patcher():
    return KernelTestPatcher()


class TestTagVariants:
    def test_every_variant_tagged(self, patcher, compiled_runner):
        js = patcher.tag_variants(compiled_runner)

        assert js.count("__elmTestSymbol: __elmTestSymbol,") == 3
        assert "return { __elmTestSymbol: __elmTestSymbol, $: 'UnitTest'" in js
        assert "return { __elmTestSymbol: __elmTestSymbol, $: 'Labeled'" in js

    def test_prefixed_variants(self, patcher):
        js = patcher.tag_variants(PREFIXED_VARIANT)

        assert "__elmTestSymbol: __elmTestSymbol, $: 'ElmTestVariant__UnitTest'" in js

    def test_no_variants(self, patcher):
        with pytest.raises(PatchPatternNotFoundError):
            patcher.tag_variants("var x = 1;")


class TestReplaceCheck:
    def test_replaces_placeholder(self, patcher, compiled_runner):
        js = patcher.replace_check(compiled_runner)

        assert (
            "var $author$project$Runner$check = value => value && "
            "value.__elmTestSymbol === __elmTestSymbol" in js
        )
        assert "var $author$project$Runner$check = $author$project" not in js

    def test_missing_check(self, patcher):
        with pytest.raises(PatchPatternNotFoundError) as exc_info:
            patcher.replace_check("var x = 1;")
        assert exc_info.value.exit_code == 1


class TestPatch:
    def test_token_allocated_once(self, patcher, compiled_runner):
        js = patcher.patch(compiled_runner)

        assert js.startswith("const __elmTestSymbol = Symbol('elmTestSymbol');\n")
        assert js.count("Symbol('elmTestSymbol')") == 1

    def test_idempotent(self, patcher, compiled_runner):
        once = patcher.patch(compiled_runner)

        assert patcher.patch(once) == once

    def test_custom_tag(self, compiled_runner):
        tag = IdentityTag(binding="__tag", field="__isTest", description="tag")

        js = KernelTestPatcher(tag).patch(compiled_runner)

        assert js.startswith("const __tag = Symbol('tag');")
        assert "__isTest: __tag," in js
        assert "value.__isTest === __tag" in js


class TestPatchCompiledFile:
    def test_in_place(self, tmp_path, patcher, compiled_runner):
        path = tmp_path / "Runner.elm.js"
        path.write_text(compiled_runner)

        patch_compiled_file(path, patcher)

        assert path.read_text() == patcher.patch(compiled_runner)
