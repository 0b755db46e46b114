"""Command: resolve a listed link to its position in the note."""

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
  notelinks locate notes/reading-list.md 2
  notelinks locate notes/reading-list.md 1 --section header
  notelinks -q locate notes/reading-list.md 3""",
)
@click.argument("file", type=click.Path(dir_okay=False, allow_dash=True))
@click.argument("index", type=click.IntRange(min=1))
@click.option(
    "--section",
    type=click.Choice(["body", "header"]),
    default="body",
    show_default=True,
    help="Which link list INDEX refers to.",
)
@click.option(
    "--dedupe/--no-dedupe",
    default=None,
    help="Number links as listed with or without dedupe.",
)
@click.pass_obj
def locate(app: AppContext, file: str, index: int, section: str, dedupe: bool | None) -> None:
    """Print the position of link INDEX (1-based, as listed by extract)."""
    from notelinks.services.extract import ExtractService

    service = ExtractService(app.settings)
    if file == "-":
        text = click.get_text_stream("stdin").read()
        result = service.locate_text(text, index, section=section, source="<stdin>", dedupe=dedupe)
    else:
        result = service.locate_file(Path(file), index, section=section, dedupe=dedupe)
    app.emit(result)
