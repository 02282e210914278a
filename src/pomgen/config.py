"""Settings module.

Identity overrides and the output location are read from environment variables.
CLI options take precedence over them.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from pomgen.models import IdentityOverrides


@dataclass
class PomSettings:
    """Settings for pom.xml generation.

    Attributes:
        group_id: Group ID used when the root project defines none
        artifact_id: Artifact ID used when the root project defines none
        version: Version used when the root project defines none
        output: Target pom.xml path (defaults to `<project_dir>/pom.xml`)
    """

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    output: Path | None = None

    @classmethod
    def from_env(cls) -> "PomSettings":
        """Create settings from environment variables.

        Environment variables:
            POMGEN_GROUP_ID: Fallback group ID
            POMGEN_ARTIFACT_ID: Fallback artifact ID
            POMGEN_VERSION: Fallback version
            POMGEN_OUTPUT: Target pom.xml path
        """
        output = os.getenv("POMGEN_OUTPUT")
        return cls(
            group_id=os.getenv("POMGEN_GROUP_ID") or None,
            artifact_id=os.getenv("POMGEN_ARTIFACT_ID") or None,
            version=os.getenv("POMGEN_VERSION") or None,
            output=Path(output) if output else None,
        )

    def with_options(
        self,
        *,
        group_id: str | None = None,
        artifact_id: str | None = None,
        version: str | None = None,
        output: Path | None = None,
    ) -> "PomSettings":
        """Return a copy where every given (non-None) option replaces the current value."""
        return replace(
            self,
            group_id=group_id if group_id is not None else self.group_id,
            artifact_id=artifact_id if artifact_id is not None else self.artifact_id,
            version=version if version is not None else self.version,
            output=output if output is not None else self.output,
        )

    def overrides(self) -> IdentityOverrides:
        return IdentityOverrides(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self.version,
        )

    def validate(self) -> None:
        """Validate the settings.

        Raises:
            ValueError: If the output path points at a directory.
        """
        if self.output is not None and self.output.is_dir():
            raise ValueError(f"Output path is a directory: {self.output}")
