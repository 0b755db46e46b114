"""URL normalization — decide whether a matched string is a link.

Explicit ``http://`` / ``https://`` candidates are always accepted.
Bare domains (``example.com/page``) are accepted only when their last
host label is in a closed allow-list; dotted strings such as version
numbers or abbreviations are rejected.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

SCHEMES: tuple[str, ...] = ("http://", "https://")
DEFAULT_SCHEME = "https://"

TLD_ALLOWLIST: frozenset[str] = frozenset(
    {
        # generic
        "com",
        "net",
        "org",
        "edu",
        "gov",
        "mil",
        "int",
        "info",
        "biz",
        "name",
        "pro",
        # tech / startup
        "io",
        "ai",
        "app",
        "dev",
        "co",
        "tv",
        "xyz",
        "tech",
        "site",
        "online",
        "cloud",
        "blog",
        "page",
        "wiki",
        "sh",
        "gg",
        "ly",
        # country codes
        "uk",
        "us",
        "ca",
        "au",
        "nz",
        "de",
        "fr",
        "es",
        "nl",
        "ch",
        "se",
        "dk",
        "fi",
        "pl",
        "cz",
        "pt",
        "ie",
        "eu",
        "ru",
        "ua",
        "jp",
        "cn",
        "kr",
        "sg",
        "hk",
        "tw",
        "br",
        "mx",
        "ar",
        "za",
    }
)


@dataclass(frozen=True)
class NormalizedUrl:
    """A candidate accepted as a link."""

    canonical: str  # scheme-qualified navigation target
    display: str  # the candidate exactly as it appeared


def has_scheme(candidate: str) -> bool:
    """Return True if *candidate* starts with an explicit http(s) scheme."""
    return candidate.startswith(SCHEMES)


def top_level_label(candidate: str) -> str:
    """Return the lower-cased last host label of a bare-domain candidate.

    Examples:
        >>> top_level_label("docs.Example.COM/path/x.html")
        'com'
        >>> top_level_label("1.2.3")
        '3'
    """
    host = candidate.split("/", 1)[0]
    return host.rsplit(".", 1)[-1].lower()


def build_allowlist(extra: Iterable[str] = ()) -> frozenset[str]:
    """Return the default allow-list widened with *extra* labels.

    Labels are lower-cased and stripped of a leading dot, so ``".Museum"``
    and ``"museum"`` are equivalent.
    """
    cleaned = {label.strip().lstrip(".").lower() for label in extra}
    cleaned.discard("")
    if not cleaned:
        return TLD_ALLOWLIST
    return TLD_ALLOWLIST | cleaned


def normalize_url(
    candidate: str,
    *,
    tlds: frozenset[str] = TLD_ALLOWLIST,
) -> NormalizedUrl | None:
    """Normalize a raw matched substring into a link, or reject it.

    Returns ``None`` when *candidate* has no scheme and its top-level
    label is not in *tlds*.
    """
    if has_scheme(candidate):
        return NormalizedUrl(canonical=candidate, display=candidate)
    if top_level_label(candidate) not in tlds:
        return None
    return NormalizedUrl(canonical=DEFAULT_SCHEME + candidate, display=candidate)
