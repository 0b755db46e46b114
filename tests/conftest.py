"""Shared pytest fixtures and test helpers for notelinks tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from notelinks.config.settings import NlSettings
from notelinks.services.telemetry import disable_telemetry

SAMPLE_NOTE = """\
---
title: Reading list
source: https://example.com/feed
homepage: example.org
tags: [reading]
---
# Reading list

Start at https://example.com/feed for updates #news
Docs live at docs.python.org/3/library/re.html #python #docs
Compare with https://example.com/feed and see also 1.2.3.
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _telemetry_off() -> Generator[None]:
    """Reset the telemetry context var that ``-v`` turns on."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of the tests."""
    for name in ("NOTELINKS_CONFIG", "NOTELINKS_QUIET", "NOTELINKS_EXTRACT__DEDUPE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp directory so no notelinks.toml is found."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> NlSettings:
    """Default settings with no config file."""
    return NlSettings.from_cli(start=workdir)


@pytest.fixture
def note_file(workdir: Path) -> Path:
    """A sample note with frontmatter, tags, and a repeated URL."""
    path = workdir / "reading.md"
    path.write_text(SAMPLE_NOTE, encoding="utf-8")
    return path
