"""Extraction pipeline — split, scan both regions, optionally dedupe.

``extract_links`` is a pure function of the document text: calling it
twice on unchanged text yields equal results, and no state survives
between calls.
"""

from __future__ import annotations

from notelinks.domain.dedupe import ExtractedLinks, dedupe_links
from notelinks.domain.frontmatter import split_frontmatter
from notelinks.domain.links import scan_links
from notelinks.domain.types import LinkOrigin
from notelinks.domain.urls import TLD_ALLOWLIST


def extract_links(
    document: str,
    *,
    dedupe: bool = False,
    tlds: frozenset[str] = TLD_ALLOWLIST,
) -> ExtractedLinks:
    """Extract header and body links from *document*.

    Malformed frontmatter degrades to "no header"; the result is always
    well-formed, possibly with both sections empty.
    """
    split = split_frontmatter(document)
    header = scan_links(split.header_text, split.header_line_offset, LinkOrigin.HEADER, tlds=tlds)
    body = scan_links(split.body_text, split.body_line_offset, LinkOrigin.BODY, tlds=tlds)
    return dedupe_links(dedupe, header, body)
