"""BaseService — foundation for notelinks services.

Every service receives the unified :class:`NlSettings` at construction
time and reads its preferences (dedupe, allow-list) from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from notelinks.config.settings import NlSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ExtractService(BaseService):
            def extract_text(self, text: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: NlSettings) -> None:
        self._settings = settings
        self._log = structlog.get_logger(type(self).__module__)
