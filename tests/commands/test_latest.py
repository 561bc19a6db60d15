"""Tests for monotag latest and monotag next."""

from pathlib import Path

from click.testing import CliRunner

from monotag.cli.commands.latest import latest_cmd, next_cmd
from monotag.gateway.git.fake import FakeGit
from tests.test_utils.context_builders import build_test_context, make_monorepo


def test_latest_merges_local_and_remote_tags(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(
        repository_roots={tmp_path},
        local_tags={"@web/1.2.0", "@web/1.10.0"},
        remote_tags={"origin": {"@web/1.9.3", "@api/9.0.0"}},
    )
    runner = CliRunner()

    result = runner.invoke(latest_cmd, ["web"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert result.stdout == "1.10.0\n"


def test_latest_ignores_tags_of_other_namespaces(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web", "web-admin"])
    git = FakeGit(
        repository_roots={tmp_path},
        local_tags={"@web/0.3.0", "@web-admin/4.0.0", "@web/beta", "@web/1.0.0-rc1"},
    )
    runner = CliRunner()

    result = runner.invoke(latest_cmd, ["web"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert result.stdout == "0.3.0\n"


def test_latest_without_tags_is_zero(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path})
    runner = CliRunner()

    result = runner.invoke(latest_cmd, ["web"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert result.stdout == "0.0.0\n"


def test_latest_warns_when_remote_is_unreachable(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(
        repository_roots={tmp_path},
        local_tags={"@web/2.0.0"},
        list_remote_error="fatal: unable to access remote",
    )
    runner = CliRunner()

    result = runner.invoke(latest_cmd, ["web"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert result.stdout == "2.0.0\n"
    assert "could not list tags on 'origin'" in result.output
    assert "fatal: unable to access remote" in result.output
    assert "Latest version of" not in result.output


def test_latest_outside_repository_fails(tmp_path: Path) -> None:
    git = FakeGit()
    runner = CliRunner()

    result = runner.invoke(latest_cmd, ["web"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 1
    assert "is not inside a git repository" in result.output


def test_latest_rejects_unknown_app(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path})
    runner = CliRunner()

    result = runner.invoke(latest_cmd, ["mobile"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 1
    assert "Unknown app 'mobile'. Known apps: web" in result.output


def test_latest_accepts_any_namespace_without_apps_dir(tmp_path: Path) -> None:
    git = FakeGit(repository_roots={tmp_path}, local_tags={"@tools/0.4.1"})
    runner = CliRunner()

    result = runner.invoke(latest_cmd, ["tools"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert result.stdout == "0.4.1\n"


def test_next_defaults_to_patch(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path}, remote_tags={"origin": {"@web/1.2.3"}})
    runner = CliRunner()

    result = runner.invoke(next_cmd, ["web"], obj=build_test_context(git, tmp_path))

    assert result.exit_code == 0, result.output
    assert result.stdout == "1.2.4\n"


def test_next_major_resets_lower_components(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path}, local_tags={"@web/1.2.3"})
    runner = CliRunner()

    result = runner.invoke(
        next_cmd, ["web", "--bump", "major"], obj=build_test_context(git, tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert result.stdout == "2.0.0\n"


def test_next_rejects_unknown_bump(tmp_path: Path) -> None:
    make_monorepo(tmp_path, ["web"])
    git = FakeGit(repository_roots={tmp_path})
    runner = CliRunner()

    result = runner.invoke(
        next_cmd, ["web", "--bump", "huge"], obj=build_test_context(git, tmp_path)
    )

    assert result.exit_code == 2
