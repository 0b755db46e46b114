"""Link scanning — find URLs and hashtags in one region of a document.

Pure functions, no infrastructure dependencies.  Consumed by the
extraction pipeline once for the frontmatter and once for the body.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from collections.abc import Iterator
from typing import Any

from notelinks.domain.types import LinkOrigin
from notelinks.domain.urls import TLD_ALLOWLIST, normalize_url

_SCHEME_PATTERN = re.compile(r"https?://[^\s\]]+")

# Two or more labels plus an optional path.  Labels begin and end with a
# letter or digit; bare domains never start mid-word, mid-path or after @.
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_BARE_PATTERN = re.compile(
    rf"(?<![\w.@/-])(?:{_LABEL}\.)+{_LABEL}(?:/[^\s\]]*)?"
)

# #tag or #multi-word-tag — the leading # is not part of the tag.
_TAG_PATTERN = re.compile(r"#([\w-]+)")

# key: value — only the value portion of a header line is scanned.
_PROPERTY_PATTERN = re.compile(r"^(\w+):\s*(.*)")


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line/column location in a document."""

    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """Half-open range ``[start, end)`` in document coordinates."""

    start: Position
    end: Position

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {
            "start": {"line": self.start.line, "column": self.start.column},
            "end": {"line": self.end.line, "column": self.end.column},
        }


@dataclass(frozen=True)
class LinkRecord:
    """One link occurrence found in a document."""

    canonical_url: str
    display_text: str
    span: Span
    origin: LinkOrigin
    tags: tuple[str, ...] = field(default_factory=tuple)
    property_key: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.canonical_url,
            "text": self.display_text,
            "tags": list(self.tags),
            "span": self.span.to_dict(),
            "origin": str(self.origin),
            "property_key": self.property_key,
        }


def extract_tags(line: str) -> list[str]:
    """Return every ``#tag`` on *line*, in order, without the ``#``.

    Examples:
        >>> extract_tags("read later #reading #to-do")
        ['reading', 'to-do']
    """
    return _TAG_PATTERN.findall(line)


def _candidates(text: str) -> Iterator[re.Match[str]]:
    """Yield scheme URLs, and bare domains from the text between them, in column order."""
    gap_start = 0
    for scheme in _SCHEME_PATTERN.finditer(text):
        yield from _BARE_PATTERN.finditer(text, gap_start, scheme.start())
        yield scheme
        gap_start = scheme.end()
    yield from _BARE_PATTERN.finditer(text, gap_start)


def _find_links(
    text: str,
    *,
    line: int,
    base_column: int,
    origin: LinkOrigin,
    tags: tuple[str, ...],
    property_key: str | None,
    tlds: frozenset[str],
) -> list[LinkRecord]:
    """Find every accepted URL in *text*, left to right.

    *base_column* is where *text* starts within its source line.
    """
    records: list[LinkRecord] = []
    for match in _candidates(text):
        url = normalize_url(match.group(0), tlds=tlds)
        if url is None:
            continue
        start = base_column + match.start()
        records.append(
            LinkRecord(
                canonical_url=url.canonical,
                display_text=url.display,
                span=Span(
                    start=Position(line, start),
                    end=Position(line, start + len(url.display)),
                ),
                origin=origin,
                tags=tags,
                property_key=property_key,
            )
        )
    return records


def scan_links(
    region_text: str,
    line_offset: int,
    origin: LinkOrigin,
    *,
    tlds: frozenset[str] = TLD_ALLOWLIST,
) -> list[LinkRecord]:
    """Scan a header or body region for links.

    Header regions only consider ``key: value`` lines and only the value
    part; lines of any other shape are skipped.  Body regions scan every
    line in full, and every link on a line gets all tags on that line.

    Returns an empty list for empty text or text without links.
    """
    if not region_text:
        return []

    records: list[LinkRecord] = []
    for index, text in enumerate(region_text.split("\n")):
        line = line_offset + index
        if origin is LinkOrigin.HEADER:
            prop = _PROPERTY_PATTERN.match(text)
            if prop is None:
                continue
            records.extend(
                _find_links(
                    prop.group(2),
                    line=line,
                    base_column=prop.start(2),
                    origin=origin,
                    tags=(),
                    property_key=prop.group(1),
                    tlds=tlds,
                )
            )
        else:
            records.extend(
                _find_links(
                    text,
                    line=line,
                    base_column=0,
                    origin=origin,
                    tags=tuple(extract_tags(text)),
                    property_key=None,
                    tlds=tlds,
                )
            )
    return records


def text_at_span(document: str, span: Span) -> str:
    """Return the substring of *document* covered by *span*.

    Columns past the end of a line are clamped; an out-of-range line
    yields an empty string.
    """
    lines = document.split("\n")
    first, last = span.start.line, span.end.line
    if first < 0 or last >= len(lines) or span.end < span.start:
        return ""
    if first == last:
        return lines[first][span.start.column : span.end.column]
    parts = [lines[first][span.start.column :]]
    parts.extend(lines[first + 1 : last])
    parts.append(lines[last][: span.end.column])
    return "\n".join(parts)
