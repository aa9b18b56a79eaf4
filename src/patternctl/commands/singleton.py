"""Command: inspect singleton variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl singleton
  patternctl singleton thread-safe
  patternctl -v singleton serialization""",
)
@click.argument("variant", required=False)
@click.pass_obj
def singleton(app: AppContext, variant: str | None) -> None:
    """Check identity and guards of one VARIANT, or of all variants."""
    from patternctl.services.singleton import SingletonService

    app.emit(SingletonService(app.settings).inspect(variant))
