"""Pydantic models for the two shapes of elm.json."""

import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ELM_VERSION = "0.19.1"

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")
CONSTRAINT_PATTERN = re.compile(
    r"^\s*(?P<lower>\d+\.\d+\.\d+)\s*<=\s*v\s*<\s*(?P<upper>\d+\.\d+\.\d+)\s*$"
)


def pin_constraint(constraint: str) -> str:
    """Pin a package constraint such as ``1.0.0 <= v < 2.0.0`` to its lower bound.

    An exact version is returned unchanged.
    """
    if VERSION_PATTERN.match(constraint.strip()):
        return constraint.strip()
    match = CONSTRAINT_PATTERN.match(constraint)
    if match is None:
        raise ValueError(f"Invalid version constraint: {constraint!r}")
    return match.group("lower")


class Dependencies(BaseModel):
    """Direct and indirect dependencies of an application.

    This is also the shape of the dependency solver's output.
    """

    model_config = ConfigDict(extra="forbid")

    direct: dict[str, str] = Field(default_factory=dict)
    indirect: dict[str, str] = Field(default_factory=dict)

    def keys(self) -> set[str]:
        """All package names, direct or indirect."""
        return set(self.direct) | set(self.indirect)


class ApplicationConfig(BaseModel):
    """An application elm.json."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["application"] = "application"
    source_directories: list[str] = Field(alias="source-directories")
    elm_version: str = Field(alias="elm-version")
    dependencies: Dependencies = Field(default_factory=Dependencies)
    test_dependencies: Dependencies = Field(
        default_factory=Dependencies, alias="test-dependencies"
    )

    def promote_test_dependencies(self) -> None:
        """Move test dependencies into the normal dependencies.

        Versions already present in the normal dependencies win over test
        ones, and a package never stays indirect once it is direct.
        Running this twice has the same effect as running it once.
        """
        normal = self.dependencies
        test = self.test_dependencies

        direct = dict(test.direct)
        for name in test.direct:
            if name in normal.indirect:
                direct[name] = normal.indirect[name]
        direct.update(normal.direct)

        indirect = dict(test.indirect)
        indirect.update(normal.indirect)
        indirect = {k: v for k, v in indirect.items() if k not in direct}

        self.dependencies = Dependencies(direct=direct, indirect=indirect)
        self.test_dependencies = Dependencies()

    def to_json(self) -> str:
        """Canonical on-disk text form."""
        return self.model_dump_json(by_alias=True, indent=4) + "\n"


class PackageConfig(BaseModel):
    """A package elm.json."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["package"] = "package"
    name: str
    summary: str = ""
    license: str = ""
    version: str
    exposed_modules: list[str] | dict[str, list[str]] = Field(
        default_factory=list, alias="exposed-modules"
    )
    elm_version: str = Field(alias="elm-version")
    dependencies: dict[str, str] = Field(default_factory=dict)
    test_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="test-dependencies"
    )

    @field_validator("dependencies", "test_dependencies")
    @classmethod
    def check_constraints(cls, value: dict[str, str]) -> dict[str, str]:
        """Reject constraints that cannot be pinned."""
        for constraint in value.values():
            pin_constraint(constraint)
        return value

    def to_application(self) -> ApplicationConfig:
        """Convert to an equivalent application config.

        Name, summary, license, version and exposed modules are dropped,
        and every constraint is pinned to its lower bound.
        """
        return ApplicationConfig(
            source_directories=["src"],
            elm_version=DEFAULT_ELM_VERSION,
            dependencies=Dependencies(
                direct={k: pin_constraint(v) for k, v in self.dependencies.items()}
            ),
            test_dependencies=Dependencies(
                direct={
                    k: pin_constraint(v) for k, v in self.test_dependencies.items()
                }
            ),
        )


ElmJson = Annotated[ApplicationConfig | PackageConfig, Field(discriminator="type")]
