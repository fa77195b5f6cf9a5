"""Tests for template rendering."""

import pytest

from elmtest.generator.errors import TemplateMismatchError
from elmtest.generator.templates import (
    TEMPLATES_DIR,
    create_templated,
    placeholders,
    render_template,
    template_path,
)


class TestRenderTemplate:
    def test_replaces_every_placeholder(self):
        rendered = render_template("a={{ a }} b={{b}}", {"a": "1", "b": "2"})

        assert rendered == "a=1 b=2"

    def test_repeated_placeholder(self):
        assert render_template("{{ x }}-{{ x }}", {"x": "y"}) == "y-y"

    def test_values_are_not_rescanned(self):
        rendered = render_template("{{ a }}|{{ b }}", {"a": "{{ b }}", "b": "2"})

        assert rendered == "{{ b }}|2"

    def test_missing_replacement(self):
        with pytest.raises(TemplateMismatchError) as exc_info:
            render_template("{{ a }} {{ b }}", {"a": "1"}, "T.elm")

        assert exc_info.value.missing == {"b"}
        assert exc_info.value.unused == set()
        assert "T.elm" in str(exc_info.value)

    def test_unused_replacement(self):
        with pytest.raises(TemplateMismatchError) as exc_info:
            render_template("{{ a }}", {"a": "1", "c": "3"})

        assert exc_info.value.unused == {"c"}
        assert exc_info.value.exit_code == 1

    def test_single_braces_are_left_alone(self):
        assert render_template("{ a = 1 }", {}) == "{ a = 1 }"


class TestPackagedTemplates:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Runner.elm", {"user_imports", "tests"}),
            ("Reporter.elm", set()),
            ("node_runner.js", {"polyfills", "initialSeed", "fuzzRuns"}),
            (
                "node_supervisor.js",
                {"polyfills", "nb_workers", "initialSeed", "fuzzRuns", "reporter"},
            ),
        ],
    )
    def test_placeholders(self, name, expected):
        assert placeholders(template_path(name).read_text()) == expected

    def test_templates_dir_is_packaged(self):
        assert (TEMPLATES_DIR / "node_polyfills.js").is_file()


class TestCreateTemplated:
    def test_writes_output(self, tmp_path):
        template = tmp_path / "in.txt"
        template.write_text("hello {{ who }}\n")

        output = create_templated(template, tmp_path / "out" / "result.txt", {"who": "elm"})

        assert output.read_text() == "hello elm\n"

    def test_mismatch_names_the_template(self, tmp_path):
        template = tmp_path / "in.txt"
        template.write_text("{{ who }}")

        with pytest.raises(TemplateMismatchError, match="in.txt"):
            create_templated(template, tmp_path / "out.txt", {})
        assert not (tmp_path / "out.txt").exists()
