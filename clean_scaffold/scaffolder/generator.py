"""Main scaffolding orchestrator.

Chains name normalization, path planning, template rendering, and
materialization for each command, and turns any ``ScaffoldError`` into a
``ScaffoldFailure`` the host can report.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Awaitable, Callable

from .errors import EmptyNameError, MissingWorkspaceError, ScaffoldError, WriteFailedError
from .materializer import Materializer
from .models import (
    ArtifactKind,
    FeatureName,
    GenerationOptions,
    PlannedWrite,
    ScaffoldFailure,
    ScaffoldReport,
    ScaffoldResult,
    ScaffoldSuccess,
)
from .planner import PlannedPath, plan_full_structure, plan_paths
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)


class ScaffoldGenerator:
    """Runs scaffolding commands against one project root.

    The project root and every user choice are passed in explicitly; the
    generator never prompts.
    """

    def __init__(
        self,
        project_root: str | Path | None,
        renderer: TemplateRenderer | None = None,
        materializer: Materializer | None = None,
    ) -> None:
        self.project_root = Path(project_root) if project_root else None
        self.renderer = renderer or TemplateRenderer()
        self.materializer = materializer or Materializer()

    # -- Public API --------------------------------------------------------

    async def create_feature(
        self,
        feature_name: str,
        options: GenerationOptions | None = None,
        *,
        skeleton_only: bool = False,
    ) -> ScaffoldResult:
        """Create the feature skeleton plus the repository and data source pairs.

        With *skeleton_only* only the 13 layer directories are created.
        """
        async def _run() -> ScaffoldReport:
            root = self._require_root()
            feature = _require_name(feature_name, "Feature name")
            if skeleton_only:
                planned = plan_paths(root, feature.snake_form, ArtifactKind.FEATURE_SKELETON)
            else:
                planned = plan_full_structure(root, feature.snake_form)
            return await self._apply(root, planned, feature, options)

        return await self._execute("feature", _run)

    async def create_use_case(
        self,
        feature_name: str,
        use_case_name: str,
        options: GenerationOptions | None = None,
    ) -> ScaffoldResult:
        """Create ``domain/usecases/<name>_use_case.dart`` in an existing feature."""
        async def _run() -> ScaffoldReport:
            root = self._require_root()
            feature = _require_name(feature_name, "Feature name")
            use_case = _require_name(use_case_name, "Use case name")
            planned = plan_paths(
                root, feature.snake_form, ArtifactKind.USE_CASE, use_case.snake_form
            )
            return await self._apply(root, planned, use_case, options)

        return await self._execute("usecase", _run)

    async def create_repository(
        self,
        feature_name: str,
        repo_name: str | None = None,
        options: GenerationOptions | None = None,
    ) -> ScaffoldResult:
        """Create ``<name>_repo.dart`` in the feature's ``domain/repo`` folder.

        Falls back to ``domain/repository`` when ``domain/repo`` is absent.
        Without *repo_name* the repository is named after the feature.
        """
        async def _run() -> ScaffoldReport:
            root = self._require_root()
            feature = _require_name(feature_name, "Feature name")
            repo = _require_name(repo_name, "Repository name") if repo_name is not None else feature
            planned = plan_paths(
                root, feature.snake_form, ArtifactKind.REPOSITORY_INTERFACE, repo.snake_form
            )
            return await self._apply(root, planned, repo, options)

        return await self._execute("repo", _run)

    # -- Planning -> writes ------------------------------------------------

    def build_writes(
        self,
        project_root: Path,
        planned: list[PlannedPath],
        name: FeatureName,
        options: GenerationOptions | None = None,
    ) -> list[PlannedWrite]:
        """Attach rendered content to every planned file."""
        writes: list[PlannedWrite] = []
        for item in planned:
            content = None
            if not item.is_directory:
                content = self.renderer.render_artifact(
                    item.kind,
                    name.pascal_form,
                    name.snake_form,
                    options,
                    interface_import=item.interface_import,
                )
            writes.append(
                PlannedWrite(path=item.resolve(project_root), kind=item.kind, content=content)
            )
        return writes

    async def _apply(
        self,
        project_root: Path,
        planned: list[PlannedPath],
        name: FeatureName,
        options: GenerationOptions | None,
    ) -> ScaffoldReport:
        writes = self.build_writes(project_root, planned, name, options)
        return await self.materializer.materialize(writes)

    # -- Helpers -----------------------------------------------------------

    def _require_root(self) -> Path:
        if self.project_root is None or not self.project_root.is_dir():
            raise MissingWorkspaceError("Please open a workspace first.")
        return self.project_root

    async def _execute(
        self, command: str, run: Callable[[], Awaitable[ScaffoldReport]]
    ) -> ScaffoldResult:
        try:
            report = await run()
        except WriteFailedError as exc:
            logger.debug("%s failed at %s", command, exc.path)
            return ScaffoldFailure(
                kind=exc.kind,
                detail=exc.detail,
                created_paths=[str(p) for p in exc.created],
            )
        except ScaffoldError as exc:
            logger.debug("%s aborted: %s", command, exc.detail)
            return ScaffoldFailure(kind=exc.kind, detail=exc.detail)

        logger.debug(
            "%s finished: %d created, %d skipped",
            command, len(report.created), len(report.skipped),
        )
        return ScaffoldSuccess(
            created_paths=[str(p) for p in report.created],
            skipped_paths=[str(p) for p in report.skipped],
        )


def _require_name(value: str | None, field: str) -> FeatureName:
    name = FeatureName(raw=(value or "").strip())
    if name.is_blank():
        raise EmptyNameError(field)
    return name
