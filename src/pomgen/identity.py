from __future__ import annotations

from pomgen.models import IdentityOverrides, Project, ProjectIdentity


def _missing(value: str | None) -> bool:
    return value is None or value == ""


def _either(own: str | None, fallback: str | None) -> str:
    value = fallback if _missing(own) else own
    return value or ""


def resolve_identity(project: Project, overrides: IdentityOverrides | None = None) -> ProjectIdentity:
    """Determine the coordinates of the root project.

    Values defined by the project win. Each missing (None or empty) value is
    taken from the overrides; if those lack it too, it stays empty.
    """
    overrides = overrides or IdentityOverrides()
    return ProjectIdentity(
        group_id=_either(project.group, overrides.group_id),
        artifact_id=_either(project.name, overrides.artifact_id),
        version=_either(project.version, overrides.version),
    )
