"""Collect the first-level external dependencies of a project tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pomgen.models import ClassifiedDependency, Project
from pomgen.resolution import Resolver, resolve_configuration
from pomgen.scopes import classify


logger = logging.getLogger(__name__)


def dependencies_of(project: Project, resolver: Resolver = resolve_configuration) -> list[ClassifiedDependency]:
    """Return the classified external dependencies of a single project.

    Resolvable configurations are resolved first so their dependency metadata is
    complete. Project, file and other non-module dependencies are skipped.

    Args:
        project: Project whose configurations are read.
        resolver: Callable forcing resolution of a configuration.

    Returns:
        Dependencies in configuration declaration order (may contain duplicates).
    """
    result: list[ClassifiedDependency] = []
    for configuration in project.configurations:
        if configuration.can_be_resolved:
            configuration = resolver(configuration)
        scope = classify(configuration.name)
        logger.debug(
            "Project %s, configuration %s -> %s",
            project.name,
            configuration.name,
            scope.value,
        )
        for dep in configuration.dependencies:
            if not dep.is_external():
                continue
            result.append(
                ClassifiedDependency(
                    group=dep.group,
                    artifact=dep.name,
                    version=dep.version,
                    scope=scope,
                )
            )
    return result


def merge(dependencies: Iterable[ClassifiedDependency]) -> list[ClassifiedDependency]:
    """De-duplicate on coordinates and sort for output.

    When the same coordinates come with different scopes, the scope with the
    lowest priority number wins. Equal priorities keep the first seen.
    """
    merged: dict[tuple[str, str, str], ClassifiedDependency] = {}
    for dep in dependencies:
        existing = merged.get(dep.key())
        if existing is None or dep.scope.priority < existing.scope.priority:
            merged[dep.key()] = dep
    return sorted(merged.values(), key=ClassifiedDependency.sort_key)


def aggregate(project: Project, resolver: Resolver = resolve_configuration) -> list[ClassifiedDependency]:
    """Collect dependencies of the project and all of its subprojects.

    Transitive dependencies are not included.

    Returns:
        Unique dependencies ordered by scope priority, group, artifact and version.
    """
    collected: list[ClassifiedDependency] = []
    for proj in project.iter_projects():
        collected.extend(dependencies_of(proj, resolver))
    result = merge(collected)
    logger.debug("Collected %d dependencies, %d unique", len(collected), len(result))
    return result
