"""Tests for the command-line host (clean_scaffold.cli).

Covers:
- Argument parsing for every command
- Prompting for missing names and the injectable choice
- Exit codes and JSON output for success and each failure kind
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from clean_scaffold import cli
from clean_scaffold.cli import build_parser, run


pytestmark = pytest.mark.unit


@pytest.fixture
def answers(monkeypatch):
    """Queue answers for Prompt.ask / Confirm.ask and record the questions."""
    state = {"text": [], "confirm": [], "asked": []}

    def fake_prompt(prompt, *args, **kwargs):
        state["asked"].append(prompt)
        return state["text"].pop(0)

    def fake_confirm(prompt, *args, **kwargs):
        state["asked"].append(prompt)
        return state["confirm"].pop(0)

    monkeypatch.setattr(cli.Prompt, "ask", fake_prompt)
    monkeypatch.setattr(cli.Confirm, "ask", fake_confirm)
    return state


def _json_result(capsys) -> dict:
    return json.loads(capsys.readouterr().out)


class TestParser:
    def test_feature_command(self):
        args = build_parser().parse_args(["feature", "blog post", "--skeleton-only", "--inject"])
        assert args.command == "feature"
        assert args.name == "blog post"
        assert args.skeleton_only is True
        assert args.inject is True

    def test_inject_defaults_to_ask(self):
        args = build_parser().parse_args(["usecase"])
        assert args.inject is None
        assert args.feature is None
        assert args.name is None

    def test_no_inject(self):
        args = build_parser().parse_args(["repo", "auth", "--no-inject", "--root", "/tmp/x"])
        assert args.inject is False
        assert args.root == "/tmp/x"

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestFeatureCommand:
    def test_arguments_only(self, tmp_project_dir: Path, answers):
        code = run(["feature", "blog post", "--root", str(tmp_project_dir), "--no-inject"])

        assert code == 0
        assert answers["asked"] == []
        assert (tmp_project_dir / "lib/features/blog_post/data/repo/blog_post_repo_impl.dart").is_file()

    def test_prompts_for_name_and_injectable(self, tmp_project_dir: Path, answers):
        answers["text"].append("blog post")
        answers["confirm"].append(True)

        code = run(["feature", "--root", str(tmp_project_dir)])

        assert code == 0
        assert answers["asked"][1] == cli.INJECTABLE_QUESTION
        impl = tmp_project_dir / "lib/features/blog_post/data/repo/blog_post_repo_impl.dart"
        assert "@LazySingleton(as: BlogPostRepo)" in impl.read_text(encoding="utf-8")

    def test_skeleton_only_does_not_ask_injectable(self, tmp_project_dir: Path, answers):
        code = run(["feature", "auth", "--skeleton-only", "--root", str(tmp_project_dir)])
        assert code == 0
        assert answers["asked"] == []

    def test_empty_prompt_answer(self, tmp_project_dir: Path, answers, capsys):
        answers["text"].append("  ")

        code = run(["feature", "--root", str(tmp_project_dir), "--json"])

        assert code == 1
        result = _json_result(capsys)
        assert result["kind"] == "empty_name"
        assert answers["asked"] == ["Enter the feature name (e.g., login, auth)"]
        assert not (tmp_project_dir / "lib" / "features").exists()

    def test_path_like_name_writes_nothing(self, tmp_project_dir: Path, capsys):
        code = run([
            "feature", "../../outside", "--skeleton-only",
            "--root", str(tmp_project_dir), "--json",
        ])

        assert code == 1
        assert _json_result(capsys)["kind"] == "invalid_name"
        assert not (tmp_project_dir / "outside").exists()
        assert not (tmp_project_dir / "lib" / "features").exists()

    def test_json_output(self, tmp_project_dir: Path, capsys):
        code = run(["feature", "auth", "--root", str(tmp_project_dir), "--no-inject", "--json"])

        result = _json_result(capsys)
        assert code == 0
        assert result["success"] is True
        assert len(result["created_paths"]) == 17
        assert result["skipped_paths"] == []

    def test_injectable_from_environment(self, tmp_project_dir: Path, answers, monkeypatch):
        monkeypatch.setenv("CLEAN_SCAFFOLD_INJECTABLE", "true")
        code = run(["feature", "auth", "--root", str(tmp_project_dir)])
        assert code == 0
        assert answers["asked"] == []


class TestWorkspace:
    def test_missing_workspace_does_not_prompt(self, tmp_path: Path, answers, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)

        code = run(["usecase", "--json"])

        assert code == 1
        assert answers["asked"] == []
        assert _json_result(capsys)["kind"] == "missing_workspace"

    def test_discovers_root_from_cwd(self, tmp_project_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_project_dir / "lib")
        assert run(["feature", "auth", "--skeleton-only"]) == 0
        assert (tmp_project_dir / "lib" / "features" / "auth").is_dir()

    def test_invalid_environment(self, tmp_project_dir: Path, monkeypatch, capsys):
        monkeypatch.setenv("CLEAN_SCAFFOLD_INJECTABLE", "perhaps")
        code = run(["feature", "auth", "--root", str(tmp_project_dir)])
        assert code == 1
        assert "Invalid configuration" in capsys.readouterr().out


class TestUseCaseCommand:
    def test_prompts_in_order(self, tmp_project_dir: Path, existing_feature: Path, answers):
        answers["text"].extend(["blog post", "get posts"])
        answers["confirm"].append(False)

        code = run(["usecase", "--root", str(tmp_project_dir)])

        assert code == 0
        assert answers["asked"] == [
            "Enter the feature name",
            "Enter the use case name",
            cli.INJECTABLE_QUESTION,
        ]
        target = existing_feature / "domain/usecases/get_posts_use_case.dart"
        assert "@lazySingleton" not in target.read_text(encoding="utf-8")

    def test_unknown_feature_stops_before_second_prompt(
        self, tmp_project_dir: Path, answers, capsys
    ):
        answers["text"].append("payments")

        code = run(["usecase", "--root", str(tmp_project_dir), "--json"])

        assert code == 1
        assert answers["asked"] == ["Enter the feature name"]
        result = _json_result(capsys)
        assert result["kind"] == "missing_prerequisite"
        assert "payments" in result["detail"]

    def test_empty_feature_name(self, tmp_project_dir: Path, answers, capsys):
        answers["text"].append("")
        code = run(["usecase", "--root", str(tmp_project_dir), "--json"])
        assert code == 1
        assert _json_result(capsys)["detail"] == "Feature name is required."

    def test_empty_use_case_name(self, tmp_project_dir: Path, existing_feature: Path, answers, capsys):
        answers["text"].append("")
        code = run(["usecase", "blog_post", "--root", str(tmp_project_dir), "--json"])
        assert code == 1
        assert _json_result(capsys)["detail"] == "Use case name is required."
        assert answers["asked"] == ["Enter the use case name"]

    def test_path_like_feature_name(self, tmp_project_dir: Path, answers, capsys):
        code = run(["usecase", "../..", "--root", str(tmp_project_dir), "--json"])

        assert code == 1
        assert answers["asked"] == []
        assert _json_result(capsys)["kind"] == "invalid_name"


class TestRepoCommand:
    def test_named_repository(self, tmp_project_dir: Path, existing_feature: Path, answers):
        code = run(["repo", "blog post", "comments", "--root", str(tmp_project_dir)])
        assert code == 0
        assert answers["asked"] == []
        assert (existing_feature / "domain/repo/comments_repo.dart").is_file()

    def test_blank_name_uses_feature(self, tmp_project_dir: Path, existing_feature: Path, answers):
        answers["text"].append("")
        code = run(["repo", "blog post", "--root", str(tmp_project_dir)])
        assert code == 0
        assert (existing_feature / "domain/repo/blog_post_repo.dart").is_file()

    def test_missing_repo_folder(self, tmp_project_dir: Path, answers, capsys):
        (tmp_project_dir / "lib/features/blog_post/domain").mkdir(parents=True)

        code = run(["repo", "blog post", "comments", "--root", str(tmp_project_dir), "--json"])

        assert code == 1
        assert _json_result(capsys)["kind"] == "missing_prerequisite"


class TestReport:
    def test_second_run_reports_nothing_to_do(self, tmp_project_dir: Path, capsys):
        args = ["feature", "auth", "--skeleton-only", "--root", str(tmp_project_dir)]
        run(args)
        capsys.readouterr()

        assert run(args) == 0
        assert "Nothing to do" in capsys.readouterr().out

    def test_failure_message(self, tmp_project_dir: Path, capsys):
        code = run(["usecase", "payments", "x", "--root", str(tmp_project_dir)])
        assert code == 1
        assert 'Feature "payments" does not exist' in capsys.readouterr().out
