"""Command-line host for the scaffolder.

Finds the Flutter project, prompts for any names or choices not given on the
command line, runs the requested command, and reports the outcome.

Usage::

    clean-scaffold feature "blog post"
    clean-scaffold usecase blog_post "get posts" --inject
    clean-scaffold repo blog_post comments
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.prompt import Confirm, Prompt

from clean_scaffold import __version__
from clean_scaffold.config import ScaffoldConfig, resolve_config
from clean_scaffold.scaffolder import (
    GenerationOptions,
    ScaffoldFailure,
    ScaffoldGenerator,
    ScaffoldResult,
)
from clean_scaffold.scaffolder.errors import InvalidNameError
from clean_scaffold.scaffolder.models import FailureKind, FeatureName
from clean_scaffold.scaffolder.planner import check_path_segment, feature_root
from clean_scaffold.utils import (
    console,
    display_path,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    setup_logging,
)

INJECTABLE_QUESTION = "Do you want to use Injectable annotations (LazySingleton)?"


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clean-scaffold",
        description="Scaffold clean-architecture features in a Flutter project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  clean-scaffold feature "blog post"\n'
            '  clean-scaffold feature auth --skeleton-only\n'
            '  clean-scaffold usecase blog_post "get posts" --inject\n'
            "  clean-scaffold repo blog_post comments\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Shared by every command so the options can follow the command name.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--root", "-r",
        default=None,
        help="Flutter project root (default: nearest directory with pubspec.yaml)",
    )
    inject = common.add_mutually_exclusive_group()
    inject.add_argument(
        "--inject",
        dest="inject",
        action="store_const",
        const=True,
        default=None,
        help="Add injectable imports and @LazySingleton annotations",
    )
    inject.add_argument(
        "--no-inject",
        dest="inject",
        action="store_const",
        const=False,
        help="Never add injectable annotations",
    )
    common.add_argument("--verbose", "-v", action="store_true", help="Log every path touched")
    common.add_argument("--json", dest="as_json", action="store_true", help="Print the result as JSON")

    commands = parser.add_subparsers(dest="command", required=True)

    feature = commands.add_parser(
        "feature", parents=[common], help="Create a feature's folders and base files"
    )
    feature.add_argument("name", nargs="?", help="Feature name, e.g. 'user auth'")
    feature.add_argument(
        "--skeleton-only",
        action="store_true",
        help="Only create the layer directories",
    )

    usecase = commands.add_parser(
        "usecase", parents=[common], help="Create a use case in an existing feature"
    )
    usecase.add_argument("feature", nargs="?", help="Existing feature name")
    usecase.add_argument("name", nargs="?", help="Use case name, e.g. 'get posts'")

    repo = commands.add_parser(
        "repo", parents=[common], help="Create a repository interface in an existing feature"
    )
    repo.add_argument("feature", nargs="?", help="Existing feature name")
    repo.add_argument("name", nargs="?", help="Repository name (default: the feature name)")

    return parser


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


def _ask(value: Optional[str], prompt: str) -> str:
    if value is not None:
        return value
    return Prompt.ask(prompt, default="", show_default=False, console=console)


def _ask_injectable(config: ScaffoldConfig) -> GenerationOptions:
    choice = config.include_di_annotations
    if choice is None:
        choice = Confirm.ask(INJECTABLE_QUESTION, default=False, console=console)
    return GenerationOptions(include_di_annotations=choice)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


async def run_command(args: argparse.Namespace, config: ScaffoldConfig) -> ScaffoldResult:
    """Collect the inputs for *args.command* and run it."""
    root = config.project_root
    if root is None or not Path(root).is_dir():
        return ScaffoldFailure(
            kind=FailureKind.MISSING_WORKSPACE,
            detail="Please open a workspace first.",
        )

    generator = ScaffoldGenerator(root)

    if args.command == "feature":
        name = _ask(args.name, "Enter the feature name (e.g., login, auth)")
        options = GenerationOptions()
        if name.strip() and not args.skeleton_only:
            options = _ask_injectable(config)
        return await generator.create_feature(name, options, skeleton_only=args.skeleton_only)

    feature = _ask(args.feature, "Enter the feature name")
    # Stop before asking for the second name when the feature is unusable.
    if not feature.strip():
        return ScaffoldFailure(kind=FailureKind.EMPTY_NAME, detail="Feature name is required.")
    snake = FeatureName(raw=feature.strip()).snake_form
    try:
        check_path_segment(snake)
    except InvalidNameError as exc:
        return ScaffoldFailure(kind=exc.kind, detail=exc.detail)
    if not feature_root(root, snake).is_dir():
        return ScaffoldFailure(
            kind=FailureKind.MISSING_PREREQUISITE,
            detail=f'Feature "{feature}" does not exist. Please enter a valid feature name.',
        )

    if args.command == "usecase":
        name = _ask(args.name, "Enter the use case name")
        options = _ask_injectable(config) if name.strip() else GenerationOptions()
        return await generator.create_use_case(feature, name, options)

    name = _ask(args.name, "Enter the repository name (blank for the feature name)")
    return await generator.create_repository(feature, name or None)


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def report(result: ScaffoldResult, root: Optional[Path], command: str) -> None:
    """Print *result* for a person at a terminal."""
    if isinstance(result, ScaffoldFailure):
        print_error(result.detail)
        if result.created_paths:
            print_warning(
                f"{len(result.created_paths)} path(s) were created before the failure "
                "and were left in place."
            )
        return

    rows = {display_path(p, root): "created" for p in result.created_paths}
    rows.update({display_path(p, root): "skipped (exists)" for p in result.skipped_paths})
    if rows:
        print_summary_table(rows, title=f"clean-scaffold {command}")

    if not result.created_paths:
        print_warning("Nothing to do: every path already exists.")
    else:
        print_success(
            f"Created {len(result.created_paths)} path(s), "
            f"skipped {len(result.skipped_paths)}."
        )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def run(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, run the command, and return the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = resolve_config(
            overrides=ScaffoldConfig(
                project_root=Path(args.root) if args.root else None,
                include_di_annotations=args.inject,
            )
        )
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    result = asyncio.run(run_command(args, config))

    if args.as_json:
        console.print_json(result.model_dump_json())
    else:
        report(result, config.project_root, args.command)

    return 0 if result.success else 1


def main() -> None:
    """CLI entry point for ``clean-scaffold`` and ``python -m clean_scaffold``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
