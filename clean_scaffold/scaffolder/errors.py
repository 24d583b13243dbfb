"""Exceptions raised by the scaffolding core.

Every condition that aborts a command is a ``ScaffoldError`` carrying the
``FailureKind`` the host uses to pick its notification.
"""

from __future__ import annotations

from pathlib import Path

from .models import FailureKind


class ScaffoldError(Exception):
    """Base class for conditions that end the current invocation."""

    kind: FailureKind

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class MissingWorkspaceError(ScaffoldError):
    """Raised when no project root is available."""

    kind = FailureKind.MISSING_WORKSPACE


class EmptyNameError(ScaffoldError):
    """Raised when a required name is blank."""

    kind = FailureKind.EMPTY_NAME

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required.")


class InvalidNameError(ScaffoldError):
    """Raised when a name would leave its folder under ``lib/features``."""

    kind = FailureKind.INVALID_NAME

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'"{name}" is not a valid name: it must not contain path '
            'separators or be "." or "..".'
        )


class MissingPrerequisiteError(ScaffoldError):
    """Raised when an expected feature directory does not exist."""

    kind = FailureKind.MISSING_PREREQUISITE

    def __init__(self, feature: str, detail: str) -> None:
        self.feature = feature
        super().__init__(detail)


class WriteFailedError(ScaffoldError):
    """Raised when the filesystem refuses a planned write."""

    kind = FailureKind.WRITE_FAILED

    def __init__(self, path: Path, reason: str, created: list[Path] | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        # Paths written earlier in the same batch; they stay on disk.
        self.created = list(created or [])
        super().__init__(f"Could not write {self.path}: {reason}")
