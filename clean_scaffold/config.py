"""clean-scaffold configuration.

Typed settings for the command-line host.  Uses Pydantic v2 so values are
validated at construction time and round-trip through JSON or environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

PROJECT_MARKER = "pubspec.yaml"
CONFIG_FILENAME = ".clean_scaffold.json"

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


class ScaffoldConfig(BaseModel):
    """Settings for a scaffolding session.

    Instances are created by the CLI from the environment, an optional
    ``.clean_scaffold.json`` in the project, and command-line flags, in that
    order of increasing precedence.
    """

    project_root: Optional[Path] = Field(
        default=None, description="Flutter project root; discovered when unset"
    )
    include_di_annotations: Optional[bool] = Field(
        default=None,
        description="Emit injectable annotations; None means ask interactively",
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only property)
    # ------------------------------------------------------------------

    @property
    def config_path(self) -> Optional[Path]:
        """Location of the per-project settings file."""
        if self.project_root is None:
            return None
        return self.project_root / CONFIG_FILENAME

    # ------------------------------------------------------------------
    # Loading helpers
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a ``.clean_scaffold.json`` settings file."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            CLEAN_SCAFFOLD_ROOT, CLEAN_SCAFFOLD_INJECTABLE.

        Raises:
            ValueError: ``CLEAN_SCAFFOLD_INJECTABLE`` is not a yes/no value.
        """
        root = os.environ.get("CLEAN_SCAFFOLD_ROOT")
        return cls(
            project_root=Path(root) if root else None,
            include_di_annotations=parse_bool(os.environ.get("CLEAN_SCAFFOLD_INJECTABLE")),
        )

    def merged_with(self, other: "ScaffoldConfig") -> "ScaffoldConfig":
        """Return a copy where every field set on *other* overrides this one."""
        return self.model_copy(update=other.model_dump(exclude_none=True))


def parse_bool(value: str | None) -> bool | None:
    """Parse a yes/no string; empty or missing values give ``None``."""
    if value is None or not value.strip():
        return None
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"Expected a yes/no value, got {value!r}")


def discover_project_root(start: str | Path | None = None) -> Path | None:
    """Walk up from *start* to the nearest directory holding ``pubspec.yaml``.

    Returns ``None`` when no Flutter project encloses *start*.
    """
    current = Path(start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / PROJECT_MARKER).is_file():
            return candidate
    return None


def resolve_config(
    start: str | Path | None = None,
    overrides: ScaffoldConfig | None = None,
) -> ScaffoldConfig:
    """Combine environment, project file, and *overrides* into one config.

    The project root comes from the overrides, then ``CLEAN_SCAFFOLD_ROOT``,
    then discovery from *start*.  A ``.clean_scaffold.json`` found in that
    root is layered between the environment and the overrides.
    """
    overrides = overrides or ScaffoldConfig()
    config = ScaffoldConfig.from_env()
    root = overrides.project_root or config.project_root or discover_project_root(start)
    config = config.model_copy(update={"project_root": root})

    if config.config_path is not None and config.config_path.is_file():
        config = config.merged_with(ScaffoldConfig.load(config.config_path))
        config = config.model_copy(update={"project_root": root})

    return config.merged_with(overrides)
