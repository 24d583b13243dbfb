"""Jinja2 template rendering for generated Dart files.

Provides the TemplateRenderer class which loads the ``.dart.j2`` templates
shipped in ``clean_scaffold/scaffolder/templates/`` and renders them for an
artifact kind.  Rendering is pure: the same kind, names, and options always
produce byte-identical content, and nothing here touches the project tree.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .models import ArtifactKind, GenerationOptions


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ARTIFACT_TEMPLATES: dict[ArtifactKind, str] = {
    ArtifactKind.USE_CASE: "use_case.dart.j2",
    ArtifactKind.REPOSITORY_INTERFACE: "repo.dart.j2",
    ArtifactKind.REPOSITORY_IMPLEMENTATION: "repo_impl.dart.j2",
    ArtifactKind.REMOTE_DATA_SOURCE_INTERFACE: "remote_data_source.dart.j2",
    ArtifactKind.REMOTE_DATA_SOURCE_IMPLEMENTATION: "remote_data_source_impl.dart.j2",
}

_IMPLEMENTATION_KINDS = frozenset({
    ArtifactKind.REPOSITORY_IMPLEMENTATION,
    ArtifactKind.REMOTE_DATA_SOURCE_IMPLEMENTATION,
})


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 templates for each file-producing artifact kind.

    Block tags sit on their own lines in the templates; ``trim_blocks`` and
    ``lstrip_blocks`` remove those lines entirely so a disabled annotation
    leaves no blank line behind.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"use_case.dart.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Artifact rendering ------------------------------------------------

    def render_artifact(
        self,
        kind: ArtifactKind,
        pascal_name: str,
        snake_name: str,
        options: GenerationOptions | None = None,
        *,
        interface_import: str | None = None,
    ) -> str:
        """Render the file content for one artifact.

        Args:
            kind: File-producing artifact kind.
            pascal_name: PascalCase name embedded in class names.
            snake_name: snake_case name the file is named after.
            options: Generation switches; defaults to no annotations.
            interface_import: Relative import of the implemented interface.
                Required for the two implementation kinds.

        Raises:
            ValueError: *kind* has no file content, or an implementation kind
                was rendered without *interface_import*.
        """
        template_path = ARTIFACT_TEMPLATES.get(kind)
        if template_path is None:
            raise ValueError(f"{kind.value} has no file template")
        if kind in _IMPLEMENTATION_KINDS and not interface_import:
            raise ValueError(f"{kind.value} requires the interface import path")

        options = options or GenerationOptions()
        context = {
            "pascal_name": pascal_name,
            "snake_name": snake_name,
            "inject": options.include_di_annotations,
            "interface_import": interface_import or "",
        }
        return self.render(template_path, context)
