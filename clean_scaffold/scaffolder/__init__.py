"""Clean-architecture feature scaffolder.

Turns a feature name into the ``lib/features/<feature>/`` layer folders and
the Dart boilerplate for use cases, repositories, and remote data sources.

Quick usage::

    from clean_scaffold.scaffolder import GenerationOptions, ScaffoldGenerator

    generator = ScaffoldGenerator("/path/to/flutter_app")
    result = await generator.create_feature(
        "blog post", GenerationOptions(include_di_annotations=True)
    )
"""

from clean_scaffold.scaffolder.generator import ScaffoldGenerator
from clean_scaffold.scaffolder.models import (
    ArtifactKind,
    FailureKind,
    FeatureName,
    GenerationOptions,
    ScaffoldFailure,
    ScaffoldResult,
    ScaffoldSuccess,
)
from clean_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactKind",
    "FailureKind",
    "FeatureName",
    "GenerationOptions",
    "ScaffoldFailure",
    "ScaffoldGenerator",
    "ScaffoldResult",
    "ScaffoldSuccess",
    "TemplateRenderer",
]
