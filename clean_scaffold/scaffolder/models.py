"""Pydantic v2 models shared by the scaffolding core.

Defines the artifact kinds, generation options, planned writes, and the
result objects returned to the host.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, computed_field

from .naming import to_pascal_case, to_snake_case


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactKind(str, Enum):
    """Every kind of artifact the scaffolder can plan."""
    FEATURE_SKELETON = "feature_skeleton"
    USE_CASE = "use_case"
    REPOSITORY_INTERFACE = "repository_interface"
    REPOSITORY_IMPLEMENTATION = "repository_implementation"
    REMOTE_DATA_SOURCE_INTERFACE = "remote_data_source_interface"
    REMOTE_DATA_SOURCE_IMPLEMENTATION = "remote_data_source_implementation"


class FailureKind(str, Enum):
    """Why a command was aborted."""
    MISSING_WORKSPACE = "missing_workspace"
    EMPTY_NAME = "empty_name"
    INVALID_NAME = "invalid_name"
    MISSING_PREREQUISITE = "missing_prerequisite"
    WRITE_FAILED = "write_failed"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class FeatureName(BaseModel):
    """A raw user-supplied name and its derived forms.

    The derived forms are recomputed on every access and never stored.
    """

    raw: str = Field(..., description="Name as typed by the user, e.g. 'user auth'")

    @computed_field  # type: ignore[misc]
    @property
    def snake_form(self) -> str:
        return to_snake_case(self.raw)

    @computed_field  # type: ignore[misc]
    @property
    def pascal_form(self) -> str:
        # Built from the snake form so camelCase input keeps its word
        # boundaries and the class name always matches the file name.
        return to_pascal_case(self.snake_form)

    def is_blank(self) -> bool:
        return not self.raw.strip()


class GenerationOptions(BaseModel):
    """Switches that alter generated file content."""

    include_di_annotations: bool = Field(
        default=False,
        description="Emit injectable imports and lifecycle annotations",
    )


# ---------------------------------------------------------------------------
# Planning / materialization
# ---------------------------------------------------------------------------

class PlannedWrite(BaseModel):
    """A single directory or file the materializer should ensure exists."""

    path: Path = Field(..., description="Absolute target path")
    kind: ArtifactKind = Field(..., description="Artifact kind that produced this entry")
    content: Optional[str] = Field(
        default=None, description="File content, or None for a directory-only entry"
    )

    @property
    def is_directory(self) -> bool:
        return self.content is None


class ScaffoldReport(BaseModel):
    """What the materializer did with a batch of planned writes."""

    created: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Results returned to the host
# ---------------------------------------------------------------------------

class ScaffoldSuccess(BaseModel):
    """The command completed; lists every created and skipped path."""

    success: Literal[True] = True
    created_paths: list[str] = Field(default_factory=list)
    skipped_paths: list[str] = Field(default_factory=list)


class ScaffoldFailure(BaseModel):
    """The command was aborted.

    ``created_paths`` is only non-empty for ``WRITE_FAILED``, where writes
    completed before the failure remain on disk.
    """

    success: Literal[False] = False
    kind: FailureKind
    detail: str = ""
    created_paths: list[str] = Field(default_factory=list)


ScaffoldResult = Union[ScaffoldSuccess, ScaffoldFailure]
