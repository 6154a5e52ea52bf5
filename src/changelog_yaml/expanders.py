"""Inline reference expanders for change lines and release notices.

Each expander scans raw text for one shorthand pattern and replaces every
match with formatter markup:

- ``#123`` becomes a pull request link,
- ``$abc123`` becomes a commit link,
- ``@name`` becomes a profile link,
- ``NOTE: text`` (and ``WARNING``/``IMPORTANT``) turns the rest of the line
  into an admonition, with mentions inside it linked.

Expanders compose over a list of fragments. Text produced by one expander is
marked as rendered and is never scanned again, so a link emitted by the pull
request expander cannot be picked up by the profile expander.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence

from .errors import ReferenceParseError, UnknownAdmonitionError
from .formatters import AdmonitionKind, Formatter

__all__ = [
    "DEFAULT_HOST",
    "ExpansionContext",
    "Fragment",
    "Expander",
    "PULL_REQUEST",
    "COMMIT_HASH",
    "PROFILE_MENTION",
    "ADMONITION",
    "LINE_EXPANDERS",
    "NOTICE_EXPANDERS",
    "admonition_kind",
    "expand",
    "expand_line",
    "expand_notice",
    "expand_pull_requests",
    "expand_commit_hashes",
    "expand_profile_mentions",
    "expand_admonitions",
]

DEFAULT_HOST = "https://github.com"


@dataclass(frozen=True)
class ExpansionContext:
    """Inputs shared by all expanders for one line."""

    formatter: Formatter
    repository: str = ""
    host: str = DEFAULT_HOST

    def url(self, *parts: object) -> str:
        """Join the host with path parts."""
        return "/".join([self.host.rstrip("/"), *(str(part) for part in parts)])


@dataclass(frozen=True)
class Fragment:
    """A piece of a line; rendered fragments are never rescanned."""

    text: str
    rendered: bool = False


Replacement = Callable[[re.Match[str], ExpansionContext], str]


@dataclass(frozen=True)
class Expander:
    """A single regex-driven rewrite."""

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def scan(self, text: str, context: ExpansionContext) -> list[tuple[int, int, str]]:
        """Return ``(start, end, replacement)`` for every match in ``text``."""
        return [
            (match.start(), match.end(), self.replacement(match, context))
            for match in self.pattern.finditer(text)
        ]

    def apply(
        self, fragments: Iterable[Fragment], context: ExpansionContext
    ) -> list[Fragment]:
        """Rewrite the raw fragments, leaving rendered ones untouched."""
        result: list[Fragment] = []
        for fragment in fragments:
            if fragment.rendered:
                result.append(fragment)
                continue
            result.extend(_rebuild(fragment.text, self.scan(fragment.text, context)))
        return result

    def __call__(self, line: str, context: ExpansionContext) -> str:
        return expand(line, context, (self,))


def _rebuild(text: str, spans: Sequence[tuple[int, int, str]]) -> Iterator[Fragment]:
    position = 0
    for start, end, replacement in spans:
        if start > position:
            yield Fragment(text[position:start])
        yield Fragment(replacement, rendered=True)
        position = end
    if position < len(text):
        yield Fragment(text[position:])


def _pull_request_link(match: re.Match[str], context: ExpansionContext) -> str:
    digits = match.group("number")
    if not digits:
        raise ReferenceParseError(match.group(0), match.string)
    number = int(digits)
    return context.formatter.link(f"#{number}", context.url(context.repository, "pull", number))


def _commit_hash_link(match: re.Match[str], context: ExpansionContext) -> str:
    commit = match.group("hash")
    return context.formatter.link(commit, context.url(context.repository, "commit", commit))


def _profile_link(match: re.Match[str], context: ExpansionContext) -> str:
    username = match.group("username")
    return context.formatter.link(f"@{username}", context.url(username))


_ADMONITION_KEYWORDS: dict[str, AdmonitionKind] = {
    "NOTE": AdmonitionKind.NOTE,
    "IMPORTANT": AdmonitionKind.IMPORTANT,
    "WARNING": AdmonitionKind.WARNING,
}


def admonition_kind(keyword: str) -> AdmonitionKind:
    """Map an admonition keyword to its kind.

    TIP and CAUTION trigger the admonition pattern but have no rendering in
    either format, so they fail like any other unknown keyword.
    """
    try:
        return _ADMONITION_KEYWORDS[keyword]
    except KeyError:
        raise UnknownAdmonitionError(keyword) from None


def _admonition_block(match: re.Match[str], context: ExpansionContext) -> str:
    kind = admonition_kind(match.group("keyword"))
    text = expand(match.group("text"), context, (PROFILE_MENTION,))
    return context.formatter.admonition(kind, text)


# ASCII-only \d so that non-ASCII digits never reach int().
PULL_REQUEST = Expander("pull-request", re.compile(r"#(?P<number>[0-9]*)"), _pull_request_link)
COMMIT_HASH = Expander("commit-hash", re.compile(r"\$(?P<hash>[a-f0-9]*)"), _commit_hash_link)
PROFILE_MENTION = Expander(
    "profile-mention", re.compile(r"@(?P<username>[a-z0-9-]*)"), _profile_link
)
ADMONITION = Expander(
    "admonition",
    re.compile(r"(?P<keyword>WARNING|TIP|NOTE|IMPORTANT|CAUTION):\s(?P<text>.*)"),
    _admonition_block,
)

LINE_EXPANDERS: tuple[Expander, ...] = (PULL_REQUEST, COMMIT_HASH, PROFILE_MENTION)
# One callout per line; mentions inside it are linked by the callout itself.
NOTICE_EXPANDERS: tuple[Expander, ...] = (ADMONITION, PROFILE_MENTION)


def expand(
    line: str,
    context: ExpansionContext,
    expanders: Sequence[Expander],
) -> str:
    """Run ``expanders`` in order over ``line`` and join the result."""
    fragments = [Fragment(line)]
    for expander in expanders:
        fragments = expander.apply(fragments, context)
    return "".join(fragment.text for fragment in fragments)


def expand_line(
    line: str,
    formatter: Formatter,
    repository: str,
    *,
    host: Optional[str] = None,
) -> str:
    """Expand pull requests, commit hashes, and mentions in a change line."""
    context = ExpansionContext(
        formatter=formatter, repository=repository, host=host or DEFAULT_HOST
    )
    return expand(line, context, LINE_EXPANDERS)


def expand_notice(notice: str, formatter: Formatter, *, host: Optional[str] = None) -> str:
    """Expand admonitions and mentions in a release notice."""
    context = ExpansionContext(formatter=formatter, host=host or DEFAULT_HOST)
    return expand(notice, context, NOTICE_EXPANDERS)


def expand_pull_requests(line: str, context: ExpansionContext) -> str:
    return PULL_REQUEST(line, context)


def expand_commit_hashes(line: str, context: ExpansionContext) -> str:
    return COMMIT_HASH(line, context)


def expand_profile_mentions(line: str, context: ExpansionContext) -> str:
    return PROFILE_MENTION(line, context)


def expand_admonitions(line: str, context: ExpansionContext) -> str:
    return ADMONITION(line, context)
