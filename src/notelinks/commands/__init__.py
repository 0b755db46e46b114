"""Subcommand modules for notelinks.

Provides register_commands() which uses deferred imports to keep
``notelinks --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from notelinks.commands.extract import extract
    from notelinks.commands.locate import locate

    cli.add_command(extract)
    cli.add_command(locate)
