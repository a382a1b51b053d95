"""Turn raw chat message text into an ordered render plan.

Assistant replies embed card tags in free text:

- single tags: ``<project_chatbot>``, ``<aboutmecard>``
- groups: ``[<skill_ai>, <skill_leadership>]``

A tag is a fixed prefix (``work_``, ``project_``, ``tool_``, ``skill_``,
``gallery_``) followed by one or more characters other than ``>``, or the
literal ``aboutmecard``, enclosed in angle brackets.

Scanning happens in two passes over the input string. Groups are found
first and their spans are cut out; single tags are only looked for in the
text between groups. A single tag that overlaps a group therefore never wins.
Anything that fails the grammar stays plain text, so rendering cannot fail.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from portfolio_chat.constants.identifiers import ABOUT_IDENTIFIER, IDENTIFIER_PREFIXES

__all__ = [
    "PARAGRAPH_PAUSE",
    "WORD_DURATION",
    "WORD_STAGGER",
    "Bold",
    "CardBlock",
    "CardGroupBlock",
    "CardGroupSegment",
    "CardSegment",
    "FormattedText",
    "LineBreak",
    "Link",
    "StagedParagraph",
    "StagedText",
    "TextRun",
    "TextSegment",
    "build_render_plan",
    "format_user_text",
    "is_identifier",
    "paragraph_duration",
    "render",
    "split_paragraphs",
    "stage_paragraphs",
]

# Reveal timing for assistant paragraphs, in seconds.
WORD_STAGGER = 0.05
WORD_DURATION = 0.6
PARAGRAPH_PAUSE = 0.3

_PREFIXES = tuple(IDENTIFIER_PREFIXES)
_PARAGRAPH_BREAK = re.compile(r"\n{2,}")


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextSegment:
    text: str


@dataclass(frozen=True)
class CardSegment:
    identifier: str


@dataclass(frozen=True)
class CardGroupSegment:
    identifiers: tuple[str, ...]


Segment = Union[TextSegment, CardSegment, CardGroupSegment]


def is_identifier(body: str) -> bool:
    """Return True if ``body`` (the text between ``<`` and ``>``) is a valid identifier."""
    if body == ABOUT_IDENTIFIER:
        return True
    if ">" in body:
        return False
    return any(body.startswith(prefix) and len(body) > len(prefix) for prefix in _PREFIXES)


def _match_tag(text: str, pos: int) -> tuple[str, int] | None:
    """Match a ``<identifier>`` tag starting at ``pos``; return (identifier, end)."""
    if pos >= len(text) or text[pos] != "<":
        return None
    close = text.find(">", pos + 1)
    if close == -1:
        return None
    body = text[pos + 1 : close]
    if not is_identifier(body):
        return None
    return body, close + 1


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _match_group(text: str, pos: int) -> tuple[tuple[str, ...], int] | None:
    """Match ``[<id>, <id>, ...]`` starting at ``pos``; return (identifiers, end).

    Every element must be a valid tag; empty brackets are not a group.
    """
    if text[pos] != "[":
        return None

    identifiers: list[str] = []
    cursor = _skip_spaces(text, pos + 1)
    while True:
        tag = _match_tag(text, cursor)
        if tag is None:
            return None
        identifiers.append(tag[0])
        cursor = _skip_spaces(text, tag[1])
        if cursor >= len(text):
            return None
        if text[cursor] == "]":
            return tuple(identifiers), cursor + 1
        if text[cursor] != ",":
            return None
        cursor = _skip_spaces(text, cursor + 1)


def _find_groups(text: str) -> list[tuple[int, int, tuple[str, ...]]]:
    spans = []
    pos = 0
    while pos < len(text):
        group = _match_group(text, pos) if text[pos] == "[" else None
        if group is None:
            pos += 1
            continue
        identifiers, end = group
        spans.append((pos, end, identifiers))
        pos = end
    return spans


def _split_singles(text: str) -> list[Segment]:
    segments: list[Segment] = []
    buffer_start = 0
    pos = 0
    while pos < len(text):
        tag = _match_tag(text, pos) if text[pos] == "<" else None
        if tag is None:
            pos += 1
            continue
        identifier, end = tag
        _append_text(segments, text[buffer_start:pos])
        segments.append(CardSegment(identifier))
        buffer_start = pos = end
    _append_text(segments, text[buffer_start:])
    return segments


def _append_text(segments: list[Segment], text: str) -> None:
    stripped = text.strip()
    if stripped:
        segments.append(TextSegment(stripped))


def render(content: str) -> list[Segment]:
    """Split message content into text, card and card-group segments.

    Text segments are stripped of surrounding whitespace and whitespace-only
    text is dropped. The function is pure: the same input always produces the
    same segments.
    """
    segments: list[Segment] = []
    cursor = 0
    for start, end, identifiers in _find_groups(content):
        segments.extend(_split_singles(content[cursor:start]))
        segments.append(CardGroupSegment(identifiers))
        cursor = end
    segments.extend(_split_singles(content[cursor:]))
    return segments


# ---------------------------------------------------------------------------
# Assistant paragraph staging
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StagedParagraph:
    """A paragraph and the offset (seconds) at which its reveal starts."""

    text: str
    delay: float


def split_paragraphs(text: str) -> list[str]:
    """Split text on runs of two or more newlines, dropping empty paragraphs."""
    normalized = text.replace("\r\n", "\n")
    return [p.strip() for p in _PARAGRAPH_BREAK.split(normalized) if p.strip()]


def paragraph_duration(paragraph: str) -> float:
    """Time a paragraph takes to animate plus the pause before the next one."""
    return len(paragraph.split()) * WORD_STAGGER + WORD_DURATION + PARAGRAPH_PAUSE


def stage_paragraphs(text: str, start: float = 0.0) -> list[StagedParagraph]:
    """Assign each paragraph a start offset after the previous one has finished."""
    staged = []
    offset = start
    for paragraph in split_paragraphs(text):
        staged.append(StagedParagraph(paragraph, round(offset, 4)))
        offset += paragraph_duration(paragraph)
    return staged


# ---------------------------------------------------------------------------
# User text formatting
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextRun:
    text: str


@dataclass(frozen=True)
class Bold:
    text: str


@dataclass(frozen=True)
class Link:
    text: str
    url: str


@dataclass(frozen=True)
class LineBreak:
    pass


InlineToken = Union[TextRun, Bold, Link, LineBreak]

_INLINE = re.compile(
    r"\*\*(?P<bold>.+?)\*\*"
    r"|\[(?P<label>[^\]]+)\]\((?P<href>https?://[^\s)]+)\)"
    r"|(?P<url>https?://[^\s<>()]+)"
)
_URL_TRAILING = ".,;:!?'\""


def _format_line(line: str, tokens: list[InlineToken]) -> None:
    cursor = 0
    for match in _INLINE.finditer(line):
        if match.start() > cursor:
            tokens.append(TextRun(line[cursor : match.start()]))
        if match.group("bold") is not None:
            tokens.append(Bold(match.group("bold")))
        elif match.group("label") is not None:
            tokens.append(Link(match.group("label"), match.group("href")))
        else:
            url = match.group("url").rstrip(_URL_TRAILING)
            tokens.append(Link(url, url))
            trailing = match.group("url")[len(url) :]
            if trailing:
                tokens.append(TextRun(trailing))
        cursor = match.end()
    if cursor < len(line):
        tokens.append(TextRun(line[cursor:]))


def format_user_text(text: str) -> list[InlineToken]:
    """Tokenize user text: newlines, ``**bold**``, markdown links and bare URLs."""
    tokens: list[InlineToken] = []
    for index, line in enumerate(text.replace("\r\n", "\n").split("\n")):
        if index:
            tokens.append(LineBreak())
        _format_line(line, tokens)
    return tokens


# ---------------------------------------------------------------------------
# Render plan
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StagedText:
    """Assistant text revealed paragraph by paragraph."""

    paragraphs: tuple[StagedParagraph, ...]


@dataclass(frozen=True)
class FormattedText:
    """User text shown at once as formatted inline tokens."""

    tokens: tuple[InlineToken, ...]


@dataclass(frozen=True)
class CardBlock:
    identifier: str
    delay: float = 0.0


@dataclass(frozen=True)
class CardGroupBlock:
    identifiers: tuple[str, ...]
    delay: float = 0.0


Block = Union[StagedText, FormattedText, CardBlock, CardGroupBlock]


def build_render_plan(content: str, is_user: bool) -> list[Block]:
    """Build the presentation plan for one message.

    For assistant messages the reveal offset runs across the whole message:
    a card appears once the text before it has finished, and text after a
    card continues from there. User messages are not staged.
    """
    plan: list[Block] = []
    offset = 0.0
    for segment in render(content):
        if isinstance(segment, TextSegment):
            if is_user:
                plan.append(FormattedText(tuple(format_user_text(segment.text))))
                continue
            paragraphs = stage_paragraphs(segment.text, start=offset)
            if paragraphs:
                last = paragraphs[-1]
                offset = last.delay + paragraph_duration(last.text)
                plan.append(StagedText(tuple(paragraphs)))
        elif isinstance(segment, CardSegment):
            plan.append(CardBlock(segment.identifier, round(offset, 4)))
        else:
            plan.append(CardGroupBlock(segment.identifiers, round(offset, 4)))
    return plan
