"""Command: list the links of a note."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from notelinks.commands._base import NlCommand

if TYPE_CHECKING:
    from notelinks.commands._context import AppContext


@click.command(
    cls=NlCommand,
    examples="""\
  notelinks extract notes/reading-list.md
  notelinks extract notes/reading-list.md --dedupe
  cat draft.md | notelinks --json extract -
  notelinks -q extract notes/reading-list.md""",
)
@click.argument("file", type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--dedupe/--no-dedupe",
    default=None,
    help="Collapse repeated URLs (default: [extract] dedupe from config).",
)
@click.pass_obj
def extract(app: AppContext, file: str, dedupe: bool | None) -> None:
    """List the frontmatter and body links of FILE (use - for stdin)."""
    from notelinks.services.extract import ExtractService

    service = ExtractService(app.settings)
    if file == "-":
        text = click.get_text_stream("stdin").read()
        app.emit(service.extract_text(text, source="<stdin>", dedupe=dedupe))
    else:
        app.emit(service.extract_file(Path(file), dedupe=dedupe))
