"""Generate the pom.xml for a project and write it to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from pomgen.aggregator import aggregate
from pomgen.identity import resolve_identity
from pomgen.models import IdentityOverrides, Project
from pomgen.renderer import render_pom
from pomgen.resolution import Resolver, resolve_configuration


logger = logging.getLogger(__name__)

POM_FILE_NAME = "pom.xml"


def default_pom_path(project: Project) -> Path:
    """Return `<project_dir>/pom.xml`, falling back to the working directory."""
    base = project.project_dir if project.project_dir is not None else Path.cwd()
    return base / POM_FILE_NAME


def write_pom(text: str, path: Path) -> Path:
    """Write the pom text, replacing any existing file at `path`.

    Raises:
        OSError: If the file cannot be removed or written.
    """
    path.unlink(missing_ok=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(text)
    return path


def generate_pom(
    project: Project,
    overrides: IdentityOverrides | None = None,
    out: Path | None = None,
    resolver: Resolver = resolve_configuration,
) -> Path:
    """Generate the pom.xml describing the project and all of its subprojects.

    Args:
        project: Root project of the build graph.
        overrides: Coordinates used when the root project lacks its own.
        out: Target file; defaults to `<project_dir>/pom.xml`.
        resolver: Callable forcing resolution of a configuration.

    Raises:
        ResolutionError: If a configuration cannot be resolved.
        OSError: If the file cannot be written.

    Returns:
        Path of the written file.
    """
    dependencies = aggregate(project, resolver)
    identity = resolve_identity(project, overrides)
    text = render_pom(identity, dependencies)
    target = write_pom(text, out or default_pom_path(project))
    logger.info("Wrote %d dependencies of %s to %s", len(dependencies), identity.compact(), target)
    return target
