"""Map build configuration names to Maven dependency scopes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pomgen.models import ScopeKind


# Known configuration names and their Maven scope equivalents.
#
# compile: propagated to dependent projects.
# runtime: required for execution only.
# provided: required for compilation but not propagated.
# See https://docs.gradle.org/current/userguide/java_plugin.html#tab:configurations
CONFIG_TO_SCOPE: Mapping[str, ScopeKind] = MappingProxyType(
    {
        "compile": ScopeKind.COMPILE,
        "implementation": ScopeKind.COMPILE,
        "api": ScopeKind.COMPILE,
        "runtime": ScopeKind.RUNTIME,
        "runtimeOnly": ScopeKind.RUNTIME,
        "runtimeClasspath": ScopeKind.RUNTIME,
        "default": ScopeKind.RUNTIME,
        "compileOnly": ScopeKind.PROVIDED,
        "compileOnlyApi": ScopeKind.PROVIDED,
        "annotationProcessor": ScopeKind.PROVIDED,
    }
)

_TEST_PREFIX = "test"


def classify(configuration_name: str) -> ScopeKind:
    """Infer the Maven scope of dependencies declared in a configuration.

    Exact table matches win. Otherwise a name starting with "test" (any case)
    maps to the test scope, and everything else is undefined.

    Args:
        configuration_name: Name of the build configuration, e.g. `testImplementation`.

    Returns:
        The inferred scope. Never fails.
    """
    scope = CONFIG_TO_SCOPE.get(configuration_name)
    if scope is not None:
        return scope
    if configuration_name.lower().startswith(_TEST_PREFIX):
        return ScopeKind.TEST
    return ScopeKind.UNDEFINED
