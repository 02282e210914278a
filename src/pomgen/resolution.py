"""Force resolution of build configurations before reading their dependencies."""

from __future__ import annotations

import logging
from typing import Callable

from pomgen.exceptions import ResolutionError
from pomgen.models import Configuration


logger = logging.getLogger(__name__)

Resolver = Callable[[Configuration], Configuration]


def resolve_configuration(configuration: Configuration) -> Configuration:
    """Resolve a configuration using the versions recorded by the host build.

    External dependencies declared without a version (e.g. managed by a
    platform) take the version the host selected for `group:name`.

    Args:
        configuration: A resolvable configuration.

    Raises:
        ResolutionError: If the host reported modules it failed to resolve.

    Returns:
        A copy of the configuration with resolved versions filled in.
    """
    if configuration.resolution_failures:
        failed = ", ".join(configuration.resolution_failures)
        raise ResolutionError(
            f"Could not resolve configuration '{configuration.name}': {failed}"
        )

    resolved = []
    for dep in configuration.dependencies:
        if dep.is_external() and not dep.version:
            version = configuration.resolved_versions.get(dep.module())
            if version:
                logger.debug("Resolved %s to version %s", dep.module(), version)
                dep = dep.model_copy(update={"version": version})
        resolved.append(dep)
    return configuration.model_copy(update={"dependencies": resolved})
