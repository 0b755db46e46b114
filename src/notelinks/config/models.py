"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, notelinks.toml only contains
overrides.  An empty (or absent) config file is valid.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ExtractConfig(BaseModel):
    """[extract] section."""

    model_config = {"frozen": True}

    dedupe: bool = False
    extra_tlds: list[str] = Field(default_factory=list)

    @field_validator("extra_tlds")
    @classmethod
    def _lower_labels(cls, value: list[str]) -> list[str]:
        return [label.strip().lstrip(".").lower() for label in value if label.strip()]
