"""Subcommand modules for patternctl.

Provides register_commands(), which imports command modules lazily so
``patternctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every pattern command on the root CLI group."""
    from patternctl.commands.creation import build, clone, document, gui
    from patternctl.commands.singleton import singleton
    from patternctl.commands.support import support

    cli.add_command(document)
    cli.add_command(gui)
    cli.add_command(build)
    cli.add_command(clone)
    cli.add_command(support)
    cli.add_command(singleton)
