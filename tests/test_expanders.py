"""Tests for the inline reference expanders."""

from __future__ import annotations

import pytest

from changelog_yaml.errors import ReferenceParseError, UnknownAdmonitionError
from changelog_yaml.expanders import (
    ExpansionContext,
    admonition_kind,
    expand_admonitions,
    expand_commit_hashes,
    expand_line,
    expand_notice,
    expand_profile_mentions,
    expand_pull_requests,
)
from changelog_yaml.formatters import AdmonitionKind, AsciiDocFormatter, MarkdownFormatter


@pytest.fixture
def markdown_context() -> ExpansionContext:
    return ExpansionContext(formatter=MarkdownFormatter(), repository="org/core")


@pytest.mark.parametrize("number", [0, 5, 42, 12345])
def test_pull_request_links_label_and_target(
    markdown_context: ExpansionContext, number: int
) -> None:
    result = expand_pull_requests(f"Fixed in #{number}.", markdown_context)

    assert result == f"Fixed in [#{number}](https://github.com/org/core/pull/{number})."


def test_pull_request_normalizes_leading_zeros(markdown_context: ExpansionContext) -> None:
    assert (
        expand_pull_requests("#007", markdown_context)
        == "[#7](https://github.com/org/core/pull/7)"
    )


def test_pull_request_expands_every_match(markdown_context: ExpansionContext) -> None:
    result = expand_pull_requests("#1 and #2", markdown_context)

    assert result == (
        "[#1](https://github.com/org/core/pull/1) and [#2](https://github.com/org/core/pull/2)"
    )


def test_bare_hash_is_a_parse_error(markdown_context: ExpansionContext) -> None:
    with pytest.raises(ReferenceParseError, match="malformed pull request reference '#'"):
        expand_pull_requests("Support for C# projects", markdown_context)


@pytest.mark.parametrize("commit", ["abcdef", "1a2b3c4d", "0"])
def test_commit_hash_links_label_and_target(
    markdown_context: ExpansionContext, commit: str
) -> None:
    result = expand_commit_hashes(f"Reverted ${commit}", markdown_context)

    assert result == f"Reverted [{commit}](https://github.com/org/core/commit/{commit})"


def test_bare_dollar_yields_empty_commit_link(markdown_context: ExpansionContext) -> None:
    result = expand_commit_hashes("costs $ nothing", markdown_context)

    assert result == "costs [](https://github.com/org/core/commit/) nothing"


@pytest.mark.parametrize("username", ["alice", "bob-2", "x"])
def test_profile_mentions(markdown_context: ExpansionContext, username: str) -> None:
    result = expand_profile_mentions(f"thanks @{username}!", markdown_context)

    assert result == f"thanks [@{username}](https://github.com/{username})!"


def test_profile_mention_ignores_repository(markdown_context: ExpansionContext) -> None:
    result = expand_profile_mentions("@alice", markdown_context)

    assert "org/core" not in result


def test_asciidoc_links() -> None:
    result = expand_line("Initial support #5 by @alice", AsciiDocFormatter(), "org/core")

    assert result == (
        "Initial support https://github.com/org/core/pull/5[#5] "
        "by https://github.com/alice[@alice]"
    )


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Nothing to see here.",
        "Improve startup time by 20%",
        "Use the new API (see docs)",
    ],
)
def test_line_without_references_is_unchanged(line: str) -> None:
    assert expand_line(line, MarkdownFormatter(), "org/core") == line
    assert expand_line(line, AsciiDocFormatter(), "org/core") == line


def test_full_chain_markdown() -> None:
    result = expand_line("Initial support #5 by @alice", MarkdownFormatter(), "org/core")

    assert result == (
        "Initial support [#5](https://github.com/org/core/pull/5) "
        "by [@alice](https://github.com/alice)"
    )


def test_chain_mixes_all_reference_kinds() -> None:
    result = expand_line("Fix crash #12 ($beef) by @bob", MarkdownFormatter(), "org/core")

    assert result == (
        "Fix crash [#12](https://github.com/org/core/pull/12) "
        "([beef](https://github.com/org/core/commit/beef)) "
        "by [@bob](https://github.com/bob)"
    )


def test_replacement_text_is_never_rescanned() -> None:
    # The host contains an '@', so a rescan of the pull request link would
    # turn it into a profile link.
    result = expand_line(
        "see #5", MarkdownFormatter(), "org/core", host="https://git@example.com"
    )

    assert result == "see [#5](https://git@example.com/org/core/pull/5)"


def test_host_trailing_slash_is_ignored() -> None:
    result = expand_line("#3", MarkdownFormatter(), "org/core", host="https://example.com/")

    assert result == "[#3](https://example.com/org/core/pull/3)"


@pytest.mark.parametrize(
    ("keyword", "kind"),
    [
        ("NOTE", AdmonitionKind.NOTE),
        ("IMPORTANT", AdmonitionKind.IMPORTANT),
        ("WARNING", AdmonitionKind.WARNING),
    ],
)
def test_admonition_kind_mapping(keyword: str, kind: AdmonitionKind) -> None:
    assert admonition_kind(keyword) is kind


@pytest.mark.parametrize("keyword", ["TIP", "CAUTION", "note"])
def test_unmapped_admonition_keywords_fail(keyword: str) -> None:
    with pytest.raises(UnknownAdmonitionError):
        admonition_kind(keyword)


def test_admonition_markdown(markdown_context: ExpansionContext) -> None:
    result = expand_admonitions("WARNING: config moved: see docs", markdown_context)

    assert result == "> [!WARNING]\\\n> config moved: see docs"


def test_admonition_asciidoc() -> None:
    context = ExpansionContext(formatter=AsciiDocFormatter())

    assert expand_admonitions("Heads up. NOTE: read this", context) == (
        "Heads up. NOTE: read this"
    )
    assert expand_admonitions("IMPORTANT: upgrade now", context) == "IMPORTANT: upgrade now"


def test_admonition_keeps_prefix_text(markdown_context: ExpansionContext) -> None:
    result = expand_admonitions("Heads up. NOTE: read this", markdown_context)

    assert result == "Heads up. > [!NOTE]\\\n> read this"


def test_tip_admonition_is_fatal(markdown_context: ExpansionContext) -> None:
    with pytest.raises(UnknownAdmonitionError, match="TIP"):
        expand_admonitions("TIP: use the cache", markdown_context)


def test_keyword_without_separator_is_plain_text(markdown_context: ExpansionContext) -> None:
    assert expand_admonitions("NOTE this is fine", markdown_context) == "NOTE this is fine"


def test_notice_expands_mentions_inside_callout() -> None:
    result = expand_notice("NOTE: thanks @alice for testing", MarkdownFormatter())

    assert result == (
        "> [!NOTE]\\\n> thanks [@alice](https://github.com/alice) for testing"
    )


def test_notice_does_not_expand_pull_requests() -> None:
    assert expand_notice("Released with #5", MarkdownFormatter()) == "Released with #5"


def test_notice_mention_before_later_keyword_stays_one_callout() -> None:
    result = expand_notice("WARNING: ask @bob NOTE: later", MarkdownFormatter())

    assert result == (
        "> [!WARNING]\\\n> ask [@bob](https://github.com/bob) NOTE: later"
    )


def test_notice_unmapped_keyword_inside_callout_is_plain_text() -> None:
    result = expand_notice("WARNING: ask @bob TIP: later", AsciiDocFormatter())

    assert result == "WARNING: ask https://github.com/bob[@bob] TIP: later"


def test_notice_links_mentions_before_the_callout() -> None:
    result = expand_notice("Thanks @alice. NOTE: see @bob", MarkdownFormatter())

    assert result == (
        "Thanks [@alice](https://github.com/alice). "
        "> [!NOTE]\\\n> see [@bob](https://github.com/bob)"
    )
