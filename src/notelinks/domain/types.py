"""Classification enums for extracted links."""

from __future__ import annotations

from enum import StrEnum


class LinkOrigin(StrEnum):
    """Document region a link was found in."""

    HEADER = "header"
    BODY = "body"
