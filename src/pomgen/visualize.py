"""Rich rendering utilities for classified dependencies."""

from __future__ import annotations

from collections.abc import Sequence

from rich.tree import Tree

from pomgen.models import ClassifiedDependency, ProjectIdentity, ScopeKind


def build_scope_tree(identity: ProjectIdentity, dependencies: Sequence[ClassifiedDependency]) -> Tree:
    """Build a Rich Tree of dependencies grouped by scope.

    Args:
        identity: Coordinates of the root project.
        dependencies: Sorted dependencies, as produced by `aggregate`.

    Returns:
        A Rich Tree object for rendering.
    """
    root = Tree(f"[bold]{identity.compact()}[/bold]")
    if not dependencies:
        root.add("[dim]No external dependencies found[/dim]")
        return root

    # provided/system/undefined share a priority, so branches are keyed by scope.
    branches: dict[ScopeKind, Tree] = {}
    for dep in dependencies:
        branch = branches.get(dep.scope)
        if branch is None:
            branch = branches[dep.scope] = root.add(dep.scope.value)
        branch.add(f"{dep.group}:{dep.artifact}:{dep.version}")
    return root
