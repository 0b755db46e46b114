"""Custom Click base class with --examples support.

When ``--examples`` is passed, the command prints usage examples and
exits.  This keeps ``--help`` concise while making examples available
on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(examples: str) -> click.Option:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=callback,
        help="Show usage examples.",
    )


class NlCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_show_examples(examples))
