"""Tests for elm.json models."""

import pytest

from elmtest.project.models import (
    ApplicationConfig,
    Dependencies,
    PackageConfig,
    pin_constraint,
)


def _application(**kwargs) -> ApplicationConfig:
    return ApplicationConfig(
        source_directories=["src"], elm_version="0.19.1", **kwargs
    )


class TestPinConstraint:
    def test_range_pins_to_lower_bound(self):
        assert pin_constraint("1.0.0 <= v < 2.0.0") == "1.0.0"

    def test_exact_version_kept(self):
        assert pin_constraint("1.2.3") == "1.2.3"

    def test_tolerates_spacing(self):
        assert pin_constraint("  1.1.0<=v<2.0.0 ") == "1.1.0"

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            pin_constraint("latest")


class TestPromoteTestDependencies:
    def test_moves_test_dependencies(self):
        config = _application(
            dependencies=Dependencies(direct={"elm/core": "1.0.5"}),
            test_dependencies=Dependencies(
                direct={"elm-explorations/test": "2.1.1"},
                indirect={"elm/random": "1.0.0"},
            ),
        )

        config.promote_test_dependencies()

        assert config.dependencies.direct == {
            "elm/core": "1.0.5",
            "elm-explorations/test": "2.1.1",
        }
        assert config.dependencies.indirect == {"elm/random": "1.0.0"}
        assert config.test_dependencies.keys() == set()

    def test_normal_version_wins(self):
        config = _application(
            dependencies=Dependencies(direct={"elm/core": "1.0.5"}),
            test_dependencies=Dependencies(direct={"elm/core": "1.0.2"}),
        )

        config.promote_test_dependencies()

        assert config.dependencies.direct == {"elm/core": "1.0.5"}

    def test_direct_test_dependency_leaves_indirect(self):
        config = _application(
            dependencies=Dependencies(indirect={"elm/random": "1.0.0"}),
            test_dependencies=Dependencies(direct={"elm/random": "1.0.0"}),
        )

        config.promote_test_dependencies()

        assert config.dependencies.direct == {"elm/random": "1.0.0"}
        assert config.dependencies.indirect == {}

    def test_idempotent(self):
        config = _application(
            dependencies=Dependencies(
                direct={"elm/core": "1.0.5"}, indirect={"elm/json": "1.1.3"}
            ),
            test_dependencies=Dependencies(
                direct={"elm-explorations/test": "2.1.1", "elm/json": "1.1.3"},
                indirect={"elm/random": "1.0.0"},
            ),
        )

        config.promote_test_dependencies()
        once = config.dependencies.model_copy(deep=True)
        config.promote_test_dependencies()

        assert config.dependencies == once
        assert config.dependencies.keys() == {
            "elm/core",
            "elm/json",
            "elm-explorations/test",
            "elm/random",
        }


class TestToApplication:
    def test_converts_package(self):
        package = PackageConfig.model_validate(
            {
                "type": "package",
                "name": "author/thing",
                "version": "1.0.0",
                "elm-version": "0.19.0 <= v < 0.20.0",
                "dependencies": {"elm/core": "1.0.0 <= v < 2.0.0"},
                "test-dependencies": {"elm-explorations/test": "2.0.0 <= v < 3.0.0"},
            }
        )

        application = package.to_application()

        assert application.type == "application"
        assert application.source_directories == ["src"]
        assert application.elm_version == "0.19.1"
        assert application.dependencies.direct == {"elm/core": "1.0.0"}
        assert application.test_dependencies.direct == {
            "elm-explorations/test": "2.0.0"
        }


class TestToJson:
    def test_uses_elm_json_keys(self):
        text = _application().to_json()

        assert '"source-directories"' in text
        assert '"elm-version"' in text
        assert '"test-dependencies"' in text
        assert text.index('"type"') < text.index('"dependencies"')
