"""Path planning for feature scaffolding.

Expands canonical (snake_case) names into the ordered list of directories and
files a command should materialize.  Planning never looks at whether target
files exist; it only checks the directories a command requires as a
precondition.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional

from .errors import InvalidNameError, MissingPrerequisiteError
from .models import ArtifactKind


# ---------------------------------------------------------------------------
# Fixed layout
# ---------------------------------------------------------------------------

FEATURES_DIR = PurePosixPath("lib/features")

# Relative to the feature root.  "" is the feature root itself.
SKELETON_DIRS: tuple[str, ...] = (
    "",
    "domain",
    "domain/entities",
    "domain/repo",
    "domain/usecases",
    "data",
    "data/datasources/remote",
    "data/models",
    "data/repo",
    "presentation",
    "presentation/pages",
    "presentation/widgets",
    "presentation/blocs",
)

# Checked in order; the first existing one receives new repository interfaces.
REPO_DIR_CANDIDATES: tuple[str, ...] = ("domain/repo", "domain/repository")

USE_CASES_DIR = "domain/usecases"
REPO_IMPL_DIR = "data/repo"
REMOTE_DATA_SOURCE_DIR = "data/datasources/remote"

_FILE_SUFFIXES: dict[ArtifactKind, str] = {
    ArtifactKind.USE_CASE: "_use_case.dart",
    ArtifactKind.REPOSITORY_INTERFACE: "_repo.dart",
    ArtifactKind.REPOSITORY_IMPLEMENTATION: "_repo_impl.dart",
    ArtifactKind.REMOTE_DATA_SOURCE_INTERFACE: "_remote_data_source.dart",
    ArtifactKind.REMOTE_DATA_SOURCE_IMPLEMENTATION: "_remote_data_source_impl.dart",
}


@dataclass(frozen=True)
class PlannedPath:
    """One directory or file, relative to the project root.

    Implementation files also carry the relative path of the interface they
    implement so the renderer can emit the import line.
    """

    kind: ArtifactKind
    relative: PurePosixPath
    is_directory: bool = False
    interface: Optional[PurePosixPath] = None

    def resolve(self, project_root: str | Path) -> Path:
        return Path(project_root).joinpath(*self.relative.parts)

    @property
    def interface_import(self) -> Optional[str]:
        """Dart import path of the implemented interface, relative to this file."""
        if self.interface is None:
            return None
        return relative_import(self.relative, self.interface)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def feature_root(project_root: str | Path, feature_snake: str) -> Path:
    """Absolute path of ``lib/features/<feature_snake>``."""
    return Path(project_root).joinpath(*FEATURES_DIR.parts, feature_snake)


def plan_paths(
    project_root: str | Path,
    feature_snake: str,
    kind: ArtifactKind,
    secondary_snake: str | None = None,
) -> list[PlannedPath]:
    """Plan the paths for a single artifact kind.

    Args:
        project_root: Absolute project root.
        feature_snake: Snake-case feature name.
        kind: Artifact kind to plan.
        secondary_snake: Snake-case use case or repository name.  Falls back
            to *feature_snake* when omitted.

    Returns:
        Ordered list of planned paths.

    Raises:
        InvalidNameError: A name is not a single path segment.
        MissingPrerequisiteError: The feature root (use cases) or a
            repository folder (repository interfaces) does not exist.
    """
    check_path_segment(feature_snake)
    if secondary_snake:
        check_path_segment(secondary_snake)

    base = FEATURES_DIR / feature_snake
    name = secondary_snake or feature_snake

    if kind is ArtifactKind.FEATURE_SKELETON:
        return [
            PlannedPath(kind, base / rel if rel else base, is_directory=True)
            for rel in SKELETON_DIRS
        ]

    if kind is ArtifactKind.USE_CASE:
        if not feature_root(project_root, feature_snake).is_dir():
            raise MissingPrerequisiteError(
                feature_snake,
                f'Feature "{feature_snake}" does not exist. '
                "Please enter a valid feature name.",
            )
        return [_file(kind, base / USE_CASES_DIR, name)]

    if kind is ArtifactKind.REPOSITORY_INTERFACE:
        repo_dir = find_repo_dir(project_root, feature_snake)
        if repo_dir is None:
            raise MissingPrerequisiteError(
                feature_snake,
                f'Feature "{feature_snake}" has no domain/repo or '
                "domain/repository folder.",
            )
        return [_file(kind, base / repo_dir, name)]

    return [_fixed_file(kind, base, name)]


def plan_full_structure(project_root: str | Path, feature_snake: str) -> list[PlannedPath]:
    """Plan the skeleton directories plus the repository and data source pairs."""
    base = FEATURES_DIR / feature_snake
    planned = plan_paths(project_root, feature_snake, ArtifactKind.FEATURE_SKELETON)
    planned.extend(
        _fixed_file(kind, base, feature_snake)
        for kind in (
            ArtifactKind.REPOSITORY_INTERFACE,
            ArtifactKind.REPOSITORY_IMPLEMENTATION,
            ArtifactKind.REMOTE_DATA_SOURCE_INTERFACE,
            ArtifactKind.REMOTE_DATA_SOURCE_IMPLEMENTATION,
        )
    )
    return planned


def check_path_segment(name: str) -> str:
    """Return *name* if it names exactly one folder or file.

    Absolute paths, separators, drive prefixes and ``.``/``..`` would let the
    planned path escape ``lib/features`` under the project root.
    """
    if (
        name in ("", ".", "..")
        or "/" in name
        or "\\" in name
        or PureWindowsPath(name).drive
    ):
        raise InvalidNameError(name)
    return name


def find_repo_dir(project_root: str | Path, feature_snake: str) -> str | None:
    """Return the first existing repository folder under the feature root."""
    root = feature_root(project_root, feature_snake)
    for candidate in REPO_DIR_CANDIDATES:
        if root.joinpath(*candidate.split("/")).is_dir():
            return candidate
    return None


def relative_import(from_file: PurePosixPath, to_file: PurePosixPath) -> str:
    """Relative Dart import from *from_file* to *to_file*.

    E.g. ``data/repo/x_repo_impl.dart`` -> ``domain/repo/x_repo.dart`` gives
    ``'../../domain/repo/x_repo.dart'``.
    """
    return posixpath.relpath(str(to_file), str(from_file.parent))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _file(
    kind: ArtifactKind,
    directory: PurePosixPath,
    name: str,
    interface: Optional[PurePosixPath] = None,
) -> PlannedPath:
    return PlannedPath(kind, directory / f"{name}{_FILE_SUFFIXES[kind]}", interface=interface)


def _fixed_file(kind: ArtifactKind, base: PurePosixPath, name: str) -> PlannedPath:
    """File at its standard location inside a freshly created skeleton."""
    repo_interface = _file(ArtifactKind.REPOSITORY_INTERFACE, base / REPO_DIR_CANDIDATES[0], name)
    data_source_interface = _file(
        ArtifactKind.REMOTE_DATA_SOURCE_INTERFACE, base / REMOTE_DATA_SOURCE_DIR, name
    )

    if kind is ArtifactKind.REPOSITORY_INTERFACE:
        return repo_interface
    if kind is ArtifactKind.REPOSITORY_IMPLEMENTATION:
        return _file(kind, base / REPO_IMPL_DIR, name, interface=repo_interface.relative)
    if kind is ArtifactKind.REMOTE_DATA_SOURCE_INTERFACE:
        return data_source_interface
    if kind is ArtifactKind.REMOTE_DATA_SOURCE_IMPLEMENTATION:
        return _file(
            kind, base / REMOTE_DATA_SOURCE_DIR, name, interface=data_source_interface.relative
        )
    raise ValueError(f"{kind.value} has no fixed location")
