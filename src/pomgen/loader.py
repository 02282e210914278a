"""Load a build graph exported by the host build as JSON."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from pomgen.exceptions import BuildGraphNotFoundError, BuildGraphParseError
from pomgen.models import Project


logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    """Read the export file.

    Raises:
        BuildGraphNotFoundError: If the file does not exist.
        BuildGraphParseError: If the file cannot be read.
    """
    if not path.exists():
        raise BuildGraphNotFoundError(f"Build graph not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildGraphParseError(f"Failed to read build graph: {path}") from exc


def load_build_graph(path: str | Path) -> Project:
    """Load and validate a build graph export.

    The export describes the root project: its coordinates, configurations with
    their declared dependencies, and nested subprojects. When the root does not
    state its `project_dir`, the directory of the export is used; a relative
    `project_dir` is taken relative to that directory.

    Args:
        path: Path to the JSON export.

    Raises:
        BuildGraphNotFoundError: If the file does not exist.
        BuildGraphParseError: If the content is not a valid build graph.

    Returns:
        The root `Project`.
    """
    graph_path = Path(path)
    raw = _read_text(graph_path)
    try:
        project = Project.model_validate_json(raw)
    except ValidationError as exc:
        raise BuildGraphParseError(f"Invalid build graph: {graph_path}: {exc}") from exc

    export_dir = graph_path.resolve().parent
    if project.project_dir is None:
        project = project.model_copy(update={"project_dir": export_dir})
    elif not project.project_dir.is_absolute():
        project = project.model_copy(update={"project_dir": export_dir / project.project_dir})

    logger.debug(
        "Loaded build graph %s with %d project(s)",
        graph_path,
        sum(1 for _ in project.iter_projects()),
    )
    return project
