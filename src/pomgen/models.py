"""Pydantic models for the build graph and the generated pom.xml."""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class DependencyKind(str, Enum):
    """What a declared dependency points at."""

    EXTERNAL_MODULE = "external_module"
    PROJECT = "project"
    FILES = "files"
    OTHER = "other"


# Characters allowed in XML 1.0 text.
_XML_INVALID_RE = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _xml_text(value: str | None) -> str | None:
    if value and _XML_INVALID_RE.search(value):
        raise ValueError(f"Value contains characters not allowed in XML: {value!r}")
    return value


class DeclaredDependency(BaseModel):
    """A first-level dependency as declared in a build configuration."""

    group: str = ""
    name: str = ""
    version: str = ""
    kind: DependencyKind = DependencyKind.EXTERNAL_MODULE

    @field_validator("group", "name", "version", mode="before")
    @classmethod
    def none_as_empty(cls, value: object) -> object:
        # Hosts report missing coordinates as null, e.g. platform-managed versions.
        return "" if value is None else value

    @field_validator("group", "name", "version")
    @classmethod
    def xml_compatible(cls, value: str) -> str:
        return _xml_text(value)

    @model_validator(mode="after")
    def external_module_has_name(self) -> DeclaredDependency:
        if self.is_external() and not self.name:
            raise ValueError("An external module dependency requires a name")
        return self

    def module(self) -> str:
        """Return `group:name`, the key used by resolved version maps."""
        return f"{self.group}:{self.name}"

    def coordinates(self) -> str:
        """Return a compact string representation.

        Returns:
            A string like `group:name:version`.
        """
        return f"{self.group}:{self.name}:{self.version}"

    def is_external(self) -> bool:
        return self.kind is DependencyKind.EXTERNAL_MODULE


class Configuration(BaseModel):
    """A named bucket of dependencies exposed by a project."""

    name: str = Field(..., min_length=1)
    can_be_resolved: bool = True
    dependencies: list[DeclaredDependency] = Field(default_factory=list)
    resolved_versions: dict[str, str] = Field(default_factory=dict)
    resolution_failures: list[str] = Field(default_factory=list)


class Project(BaseModel):
    """A project of the build graph, possibly with nested subprojects."""

    group: str | None = None
    name: str | None = None
    version: str | None = None
    project_dir: Path | None = None
    configurations: list[Configuration] = Field(default_factory=list)
    subprojects: list[Project] = Field(default_factory=list)

    @field_validator("group", "name", "version")
    @classmethod
    def xml_compatible(cls, value: str | None) -> str | None:
        return _xml_text(value)

    def iter_projects(self) -> Iterator[Project]:
        """Yield this project followed by every descendant, depth first."""
        yield self
        for sub in self.subprojects:
            yield from sub.iter_projects()


class ScopeKind(str, Enum):
    """A Maven dependency scope.

    `import` is a Maven scope as well, but it is only valid inside
    `<dependencyManagement>`, which is never generated.
    """

    COMPILE = "compile"
    PROVIDED = "provided"
    RUNTIME = "runtime"
    TEST = "test"
    SYSTEM = "system"
    UNDEFINED = "undefined"

    @property
    def priority(self) -> int:
        """Layout priority; dependencies with a lower number are listed first."""
        return _SCOPE_PRIORITY.get(self, 3)


_SCOPE_PRIORITY: dict[ScopeKind, int] = {
    ScopeKind.COMPILE: 0,
    ScopeKind.RUNTIME: 1,
    ScopeKind.TEST: 2,
}


class ClassifiedDependency(BaseModel, frozen=True):
    """An external dependency together with its inferred Maven scope.

    Two instances are equal when their coordinates match; the scope is ignored.
    """

    group: str
    artifact: str
    version: str
    scope: ScopeKind = ScopeKind.UNDEFINED

    @field_validator("group", "artifact", "version")
    @classmethod
    def xml_compatible(cls, value: str) -> str:
        return _xml_text(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassifiedDependency):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def key(self) -> tuple[str, str, str]:
        """Identity used for de-duplication; the scope is not part of it."""
        return (self.group, self.artifact, self.version)

    def sort_key(self) -> tuple[int, str, str, str]:
        """Scope priority first, then group, artifact and plain string version."""
        return (self.scope.priority, self.group, self.artifact, self.version)

    def has_defined_scope(self) -> bool:
        return self.scope is not ScopeKind.UNDEFINED

    def label(self) -> str:
        """Return a user-facing label for the dependency.

        Returns:
            A formatted string including coordinates and scope when defined.
        """
        parts: list[str] = [f"{self.group}:{self.artifact}:{self.version}"]
        if self.has_defined_scope():
            parts.append(f"(scope={self.scope.value})")
        return " ".join(parts)


class ProjectIdentity(BaseModel):
    """Coordinates of the root project written at the top of the pom.xml."""

    group_id: str = ""
    artifact_id: str = ""
    version: str = ""

    @field_validator("group_id", "artifact_id", "version")
    @classmethod
    def xml_compatible(cls, value: str) -> str:
        return _xml_text(value)

    def compact(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


class IdentityOverrides(BaseModel):
    """Fallback coordinates used when the root project does not define its own."""

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
