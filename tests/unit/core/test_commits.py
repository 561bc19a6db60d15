"""Tests for recent commit history and subject parsing."""

from pathlib import Path

from monotag.core.commits import (
    CommitReference,
    ConventionalSubject,
    get_latest_commit_id,
    get_recent_commits,
    parse_commit_subject,
)
from monotag.gateway.git.fake import FakeGit
from tests.test_utils.context_builders import make_commit

REPO = Path("/repo")


class TestParseCommitSubject:
    def test_extracts_scope_and_message(self) -> None:
        assert parse_commit_subject("feat(billing): add invoices") == ConventionalSubject(
            scope="billing", message="add invoices"
        )

    def test_no_scope_returns_none(self) -> None:
        assert parse_commit_subject("feat: add invoices") is None

    def test_plain_subject_returns_none(self) -> None:
        assert parse_commit_subject("Merge branch 'main'") is None

    def test_uppercase_type_returns_none(self) -> None:
        assert parse_commit_subject("Feat(billing): add invoices") is None

    def test_empty_message_returns_none(self) -> None:
        assert parse_commit_subject("fix(web):") is None


class TestCommitReferenceDisplay:
    def _commit(self, scope: str, message: str) -> CommitReference:
        return CommitReference(
            sha="a" * 40, short_sha="aaaaaaa", subject="irrelevant", scope=scope, message=message
        )

    def test_with_scope(self) -> None:
        assert self._commit("web", "fix login").display_text() == "(web): fix login"

    def test_without_scope(self) -> None:
        assert self._commit("", "fix login").display_text() == "fix login"

    def test_truncates_long_text(self) -> None:
        text = self._commit("", "x" * 80).display_text(max_length=20)
        assert text == "x" * 17 + "..."
        assert len(text) == 20


class TestGetRecentCommits:
    def test_returns_commits_newest_first_with_parsed_scope(self) -> None:
        git = FakeGit(
            repository_roots={REPO},
            commits=[
                make_commit(3, "feat(billing): add invoices"),
                make_commit(2, "Initial import"),
            ],
        )

        commits = get_recent_commits(git, REPO, 15)

        assert [c.subject for c in commits] == ["feat(billing): add invoices", "Initial import"]
        assert commits[0].scope == "billing"
        assert commits[0].message == "add invoices"
        assert commits[1].scope == ""
        assert commits[1].message == "Initial import"
        assert commits[0].short_sha == commits[0].sha[:7]

    def test_respects_count(self) -> None:
        git = FakeGit(
            repository_roots={REPO},
            commits=[make_commit(i, f"commit {i}") for i in range(10, 0, -1)],
        )

        commits = get_recent_commits(git, REPO, 3)

        assert [c.subject for c in commits] == ["commit 10", "commit 9", "commit 8"]

    def test_not_a_repository_returns_empty(self) -> None:
        git = FakeGit(commits=[make_commit(1, "x")])

        assert get_recent_commits(git, REPO, 5) == []

    def test_empty_history_returns_empty(self) -> None:
        git = FakeGit(repository_roots={REPO})

        assert get_recent_commits(git, REPO, 5) == []

    def test_git_failure_returns_empty(self) -> None:
        git = FakeGit(repository_roots={REPO}, log_error="fatal: bad revision")

        assert get_recent_commits(git, REPO, 5) == []


class TestGetLatestCommitId:
    def test_returns_head(self) -> None:
        head = make_commit(2, "second")
        git = FakeGit(repository_roots={REPO}, commits=[head, make_commit(1, "first")])

        assert get_latest_commit_id(git, REPO) == head.sha

    def test_none_outside_repository(self) -> None:
        git = FakeGit(commits=[make_commit(1, "first")])

        assert get_latest_commit_id(git, REPO) is None

    def test_none_without_commits(self) -> None:
        git = FakeGit(repository_roots={REPO})

        assert get_latest_commit_id(git, REPO) is None

    def test_none_when_reading_head_fails(self) -> None:
        git = FakeGit(repository_roots={REPO}, commits=[make_commit(1, "first")])

        def missing_git(repo_root: Path) -> str | None:
            raise FileNotFoundError("git")

        git.commit.get_head_commit = missing_git  # type: ignore[method-assign]

        assert get_latest_commit_id(git, REPO) is None
