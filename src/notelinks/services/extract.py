"""ExtractService — run the link pipeline on a document.

Reads the document (file, stdin, or raw text), runs the pure extraction
pipeline with the configured preferences, and wraps the result in a
:class:`ServiceResult`.  Also resolves a listed link back to its source
span for editors that want to jump to it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from notelinks.domain.extraction import extract_links
from notelinks.domain.links import text_at_span
from notelinks.domain.types import LinkOrigin
from notelinks.services.base import BaseService
from notelinks.services.result import ServiceResult
from notelinks.services.telemetry import trace_span, traced

TEXT_SOURCE = "<text>"


class ExtractService(BaseService):
    """Extracts links from one document at a time."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def extract_text(
        self,
        text: str,
        *,
        source: str = TEXT_SOURCE,
        dedupe: bool | None = None,
    ) -> ServiceResult:
        """Extract header and body links from *text*.

        *dedupe* overrides the configured ``[extract] dedupe`` preference
        when not None.
        """
        enabled = self._dedupe_enabled(dedupe)
        with trace_span("extract_links") as span:
            links = extract_links(text, dedupe=enabled, tlds=self._settings.tlds)
            if span is not None:
                span.annotate("count", links.count)

        self._log.debug(
            "links.extracted",
            source=source,
            header=len(links.header),
            body=len(links.body),
            dedupe=enabled,
        )
        return ServiceResult(
            ok=True,
            op="extract_links",
            data={"source": source, "dedupe": enabled, **links.to_dict()},
        )

    def extract_file(self, path: Path, *, dedupe: bool | None = None) -> ServiceResult:
        """Extract links from the UTF-8 document at *path*."""
        text, error = self._read("extract_links", path)
        if error is not None:
            return error
        return self.extract_text(text, source=str(path), dedupe=dedupe)

    @traced
    def locate_text(
        self,
        text: str,
        index: int,
        *,
        section: str = LinkOrigin.BODY,
        source: str = TEXT_SOURCE,
        dedupe: bool | None = None,
    ) -> ServiceResult:
        """Resolve the *index*-th (1-based) link of *section* to its span.

        Indexes follow the listing produced by :meth:`extract_text` with
        the same dedupe preference.
        """
        op = "locate_link"
        try:
            origin = LinkOrigin(section)
        except ValueError:
            return ServiceResult.failure(
                op,
                "INVALID_SECTION",
                f"Unknown section: {section!r} (expected 'header' or 'body')",
                section=section,
            )

        links = extract_links(text, dedupe=self._dedupe_enabled(dedupe), tlds=self._settings.tlds)
        records = links.header if origin is LinkOrigin.HEADER else links.body
        if not 1 <= index <= len(records):
            return ServiceResult.failure(
                op,
                "INDEX_OUT_OF_RANGE",
                f"No {origin} link #{index} in {source} ({len(records)} found)",
                index=index,
                available=len(records),
            )

        record = records[index - 1]
        line_text = text.split("\n")[record.span.start.line]
        data: dict[str, Any] = {
            "source": source,
            "index": index,
            **record.to_dict(),
            "selected": text_at_span(text, record.span),
            "line_text": line_text,
        }
        return ServiceResult(ok=True, op=op, data=data)

    def locate_file(
        self,
        path: Path,
        index: int,
        *,
        section: str = LinkOrigin.BODY,
        dedupe: bool | None = None,
    ) -> ServiceResult:
        """Resolve a link of the document at *path* to its span."""
        text, error = self._read("locate_link", path)
        if error is not None:
            return error
        return self.locate_text(text, index, section=section, source=str(path), dedupe=dedupe)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _dedupe_enabled(self, override: bool | None) -> bool:
        if override is not None:
            return override
        return self._settings.extract.dedupe

    def _read(self, op: str, path: Path) -> tuple[str, ServiceResult | None]:
        """Read *path* as UTF-8, returning a failed result on error."""
        if not path.is_file():
            return "", ServiceResult.failure(
                op, "NOT_FOUND", f"No such file: {path}", path=str(path)
            )
        try:
            return path.read_text(encoding="utf-8"), None
        except (OSError, UnicodeDecodeError) as exc:
            self._log.warning("document.read_failed", path=str(path), error=str(exc))
            return "", ServiceResult.failure(
                op, "READ_ERROR", f"Cannot read {path}: {exc}", path=str(path)
            )
