"""Tests for parsing `git ls-remote --tags` output."""

from monotag.gateway.git.tag_ops.real import parse_ls_remote_tags


def test_strips_ref_prefix_and_peeled_entries() -> None:
    output = (
        "1111111111111111111111111111111111111111\trefs/tags/@web/1.0.0\n"
        "2222222222222222222222222222222222222222\trefs/tags/@web/1.0.0^{}\n"
        "3333333333333333333333333333333333333333\trefs/tags/@web/1.1.0\n"
    )

    assert parse_ls_remote_tags(output) == ["@web/1.0.0", "@web/1.1.0"]


def test_ignores_non_tag_refs_and_blank_lines() -> None:
    output = (
        "\n"
        "1111111111111111111111111111111111111111\trefs/heads/main\n"
        "garbage line\n"
        "3333333333333333333333333333333333333333\trefs/tags/@web/2.0.0\n"
    )

    assert parse_ls_remote_tags(output) == ["@web/2.0.0"]


def test_empty_output() -> None:
    assert parse_ls_remote_tags("") == []
