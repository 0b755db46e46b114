"""De-duplication of extracted links across header and body."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from notelinks.domain.links import LinkRecord


@dataclass(frozen=True)
class ExtractedLinks:
    """Full extraction result for one document."""

    header: tuple[LinkRecord, ...] = ()
    body: tuple[LinkRecord, ...] = ()

    @property
    def count(self) -> int:
        return len(self.header) + len(self.body)

    def to_dict(self) -> dict[str, Any]:
        return {
            "header": [r.to_dict() for r in self.header],
            "body": [r.to_dict() for r in self.body],
            "count": self.count,
        }


def _first_occurrences(records: Iterable[LinkRecord], seen: set[str]) -> tuple[LinkRecord, ...]:
    kept: list[LinkRecord] = []
    for record in records:
        key = record.canonical_url.lower()
        if key in seen:
            continue
        seen.add(key)
        kept.append(record)
    return tuple(kept)


def dedupe_links(
    enabled: bool,
    header: Sequence[LinkRecord],
    body: Sequence[LinkRecord],
) -> ExtractedLinks:
    """Collapse repeated URLs, keeping the first occurrence.

    URLs are compared case-insensitively on their canonical form.  The
    header is walked before the body with one shared seen-set, so a URL
    present in both survives only in the header.  When *enabled* is
    False both sequences pass through unchanged.
    """
    if not enabled:
        return ExtractedLinks(header=tuple(header), body=tuple(body))

    seen: set[str] = set()
    kept_header = _first_occurrences(header, seen)
    kept_body = _first_occurrences(body, seen)
    return ExtractedLinks(header=kept_header, body=kept_body)
