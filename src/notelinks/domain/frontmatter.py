"""Frontmatter splitting — separate the ``---`` header from the body.

Both halves keep their absolute line offset in the original document so
that scanners can report positions in document coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass

FRONTMATTER_DELIMITER = "---"


@dataclass(frozen=True)
class FrontmatterSplit:
    """Header and body text of one document, anchored to line offsets."""

    header_text: str
    header_line_offset: int
    body_text: str
    body_line_offset: int
    has_header: bool = False


def _is_delimiter(line: str) -> bool:
    return line.rstrip("\r") == FRONTMATTER_DELIMITER


def split_frontmatter(document: str) -> FrontmatterSplit:
    """Split *document* into frontmatter and body.

    A header exists only when the very first line is ``---`` and a later
    line is ``---`` as well.  An unterminated opening delimiter means no
    header: the whole document is returned as body with both offsets 0.

    Examples:
        >>> split = split_frontmatter("---\\nsite: a.com\\n---\\nbody")
        >>> split.header_text, split.body_text, split.body_line_offset
        ('site: a.com', 'body', 3)
    """
    lines = document.split("\n")
    if not _is_delimiter(lines[0]):
        return FrontmatterSplit("", 0, document, 0)

    closing: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            closing = i
            break

    if closing is None:
        return FrontmatterSplit("", 0, document, 0)

    return FrontmatterSplit(
        header_text="\n".join(lines[1:closing]),
        header_line_offset=1,
        body_text="\n".join(lines[closing + 1 :]),
        body_line_offset=closing + 1,
        has_header=True,
    )
