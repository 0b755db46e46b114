"""End-to-end tests for the pure extraction pipeline."""

from __future__ import annotations

import pytest

from notelinks.domain.extraction import extract_links
from notelinks.domain.links import Position, text_at_span
from notelinks.domain.types import LinkOrigin
from tests.conftest import SAMPLE_NOTE


class TestScenarios:
    def test_single_body_link(self) -> None:
        links = extract_links("Check https://example.com/page #demo")
        assert links.header == ()
        assert len(links.body) == 1
        record = links.body[0]
        assert record.canonical_url == "https://example.com/page"
        assert record.display_text == "https://example.com/page"
        assert record.tags == ("demo",)
        assert record.span.start == Position(0, 6)
        assert record.span.end == Position(0, 30)

    def test_header_and_body(self) -> None:
        links = extract_links("---\nsite: example.com\n---\nVisit example.org")
        assert len(links.header) == 1
        assert links.header[0].property_key == "site"
        assert links.header[0].canonical_url == "https://example.com"
        assert links.header[0].origin is LinkOrigin.HEADER
        assert len(links.body) == 1
        assert links.body[0].canonical_url == "https://example.org"
        assert links.body[0].tags == ()
        assert links.body[0].span.start == Position(3, 6)

    def test_version_numbers(self) -> None:
        links = extract_links("version 1.2.3 and 4.5")
        assert links.count == 0

    def test_dedupe_prefers_header(self) -> None:
        doc = "---\nhome: https://example.com\n---\nSee https://example.com"
        links = extract_links(doc, dedupe=True)
        assert len(links.header) == 1
        assert links.body == ()
        assert len(extract_links(doc, dedupe=False).body) == 1

    def test_scheme_url_after_abbreviation(self) -> None:
        links = extract_links("e.g.https://a.com")
        assert [r.canonical_url for r in links.body] == ["https://a.com"]
        assert links.body[0].span.start == Position(0, 4)

    def test_no_links(self) -> None:
        links = extract_links("no links here")
        assert links.header == ()
        assert links.body == ()


class TestProperties:
    DOCUMENTS = [
        "",
        "no links here",
        SAMPLE_NOTE,
        "---\nsite: example.com\n---\nVisit example.org",
        "---\nunterminated: https://a.com\nstill header? https://b.com",
        "a.com b.org\n\n  https://c.net/x #t1 #t2\nv1.2.3 docs.python.org/3/",
        "---\r\nurl: https://a.com\r\n---\r\nbody https://b.com\r\n",
        "e.g.https://a.com v1.2/https://b.com --x.com y.org-",
    ]

    @pytest.mark.parametrize("doc", DOCUMENTS)
    def test_span_matches_display_text(self, doc: str) -> None:
        links = extract_links(doc)
        for record in (*links.header, *links.body):
            assert text_at_span(doc, record.span) == record.display_text

    @pytest.mark.parametrize("doc", DOCUMENTS)
    def test_idempotent(self, doc: str) -> None:
        assert extract_links(doc) == extract_links(doc)
        assert extract_links(doc, dedupe=True) == extract_links(doc, dedupe=True)

    @pytest.mark.parametrize("doc", DOCUMENTS)
    def test_record_fields_consistent(self, doc: str) -> None:
        links = extract_links(doc)
        for record in links.header:
            assert record.origin is LinkOrigin.HEADER
            assert record.property_key is not None
            assert record.tags == ()
        for record in links.body:
            assert record.origin is LinkOrigin.BODY
            assert record.property_key is None
        for record in (*links.header, *links.body):
            assert record.canonical_url.startswith(("http://", "https://"))
            assert record.span.end > record.span.start

    @pytest.mark.parametrize("doc", DOCUMENTS)
    def test_dedupe_monotonic(self, doc: str) -> None:
        on = extract_links(doc, dedupe=True)
        off = extract_links(doc, dedupe=False)
        assert set(on.header) <= set(off.header)
        assert set(on.body) <= set(off.body)

    def test_unterminated_header_scanned_as_body(self) -> None:
        doc = "---\nunterminated: https://a.com"
        links = extract_links(doc)
        assert links.header == ()
        assert links.body[0].span.start == Position(1, 14)


class TestSampleNote:
    def test_sections(self) -> None:
        links = extract_links(SAMPLE_NOTE)
        assert [(r.property_key, r.canonical_url) for r in links.header] == [
            ("source", "https://example.com/feed"),
            ("homepage", "https://example.org"),
        ]
        assert [r.canonical_url for r in links.body] == [
            "https://example.com/feed",
            "https://docs.python.org/3/library/re.html",
            "https://example.com/feed",
        ]
        assert links.body[1].tags == ("python", "docs")
        assert links.body[0].span.start == Position(8, 9)

    def test_sample_deduped(self) -> None:
        links = extract_links(SAMPLE_NOTE, dedupe=True)
        assert len(links.header) == 2
        assert [r.canonical_url for r in links.body] == [
            "https://docs.python.org/3/library/re.html"
        ]
