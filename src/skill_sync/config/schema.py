"""Pydantic models for skill sync configuration."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SyncMode(str, Enum):
    """How the target directory is reconciled with the source."""

    MIRROR = "mirror"
    ADDITIVE = "additive"


class SyncSettings(BaseModel):
    """User settings read from the optional YAML settings file."""

    exclude: list[str] = Field(
        default_factory=list,
        description="Extra filename patterns to leave out of the sync",
    )
    codex_home: Optional[str] = Field(
        default=None,
        description="Codex base directory used when CODEX_HOME is unset",
    )

    @field_validator("exclude")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject blank patterns and patterns that name a path.

        Patterns are matched against file names only, the one form both
        rsync and the plain copy interpret the same way.
        """
        for pattern in v:
            if not pattern.strip():
                raise ValueError("Exclude patterns must not be empty")
            if "/" in pattern:
                raise ValueError(
                    f"Exclude pattern must be a file name, not a path: {pattern}"
                )
        return [p.strip() for p in v]


class SyncConfig(BaseModel):
    """Fully resolved configuration for a single sync run."""

    source_dir: Path = Field(description="Skills directory inside the repository")
    target_dir: Path = Field(description="Skills directory inside the Codex home")
    exclude: list[str] = Field(
        default_factory=list, description="Filename patterns never synchronized"
    )
