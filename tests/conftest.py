"""Pytest configuration and fixtures for pomgen tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from pomgen.models import Configuration, DeclaredDependency, DependencyKind, Project


@pytest.fixture(autouse=True)
def clear_pomgen_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of the tests."""
    for name in ("POMGEN_GROUP_ID", "POMGEN_ARTIFACT_ID", "POMGEN_VERSION", "POMGEN_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


def dep(coordinates: str, kind: DependencyKind = DependencyKind.EXTERNAL_MODULE) -> DeclaredDependency:
    group, name, version = (coordinates.split(":") + ["", ""])[:3]
    return DeclaredDependency(group=group, name=name, version=version, kind=kind)


@pytest.fixture
def multi_project(tmp_path: Path) -> Project:
    """Root with an `implementation` dependency and a subproject with a test one."""
    return Project(
        group="io.example",
        name="app",
        version="1.0",
        project_dir=tmp_path,
        configurations=[
            Configuration(name="implementation", dependencies=[dep("a:b:1.0")]),
        ],
        subprojects=[
            Project(
                name="core",
                configurations=[
                    Configuration(name="testImplementation", dependencies=[dep("c:d:2.0")]),
                ],
            )
        ],
    )
