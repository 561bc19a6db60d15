"""Tests for monotag push."""

from pathlib import Path

from click.testing import CliRunner

from monotag.cli.commands.push import push_cmd
from monotag.gateway.git.fake import FakeGit
from monotag.gateway.git.tag_ops.types import PushError
from tests.test_utils.context_builders import build_test_context, make_monorepo


def test_push_existing_local_tag(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path}, local_tags={"@web/1.4.0"})
    runner = CliRunner()

    result = runner.invoke(push_cmd, ["web", "1.4.0"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert "Pushed @web/1.4.0 to origin" in result.output
    assert git.tag.pushed_tags == [("origin", "@web/1.4.0")]


def test_push_uses_configured_remote(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    (tmp_path / ".monotag").mkdir()
    (tmp_path / ".monotag" / "config.toml").write_text('remote = "upstream"\n', encoding="utf-8")
    git = FakeGit(repository_roots={tmp_path}, local_tags={"@web/1.4.0"})
    runner = CliRunner()

    result = runner.invoke(push_cmd, ["web", "1.4.0"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert git.tag.pushed_tags == [("upstream", "@web/1.4.0")]


def test_push_already_on_remote_succeeds(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(
        repository_roots={tmp_path},
        local_tags={"@web/1.4.0"},
        remote_tags={"origin": {"@web/1.4.0"}},
    )
    runner = CliRunner()

    result = runner.invoke(push_cmd, ["web", "1.4.0"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert "Everything up-to-date" in result.output


def test_push_missing_local_tag_fails_without_pushing(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path})
    runner = CliRunner()

    result = runner.invoke(push_cmd, ["web", "1.4.0"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 1
    assert "Tag @web/1.4.0 does not exist locally" in result.output
    assert git.tag.push_attempts == 0


def test_push_rejects_invalid_version(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path}, local_tags={"@web/1.4.0"})
    runner = CliRunner()

    result = runner.invoke(push_cmd, ["web", "v1.4"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 1
    assert "Invalid version 'v1.4'" in result.output
    assert git.tag.push_attempts == 0


def test_push_failure_reports_diagnostic(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(
        repository_roots={tmp_path},
        local_tags={"@web/1.4.0"},
        push_tag_error=PushError(message="! [rejected] @web/1.4.0 (already exists)"),
    )
    runner = CliRunner()

    result = runner.invoke(push_cmd, ["web", "1.4.0"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 1
    assert "Push failed: @web/1.4.0 -> origin" in result.output
    assert "[rejected]" in result.output
    assert git.tag.pushed_tags == []
