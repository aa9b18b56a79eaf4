"""Command: route a support request through the chain of responsibility."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl support billing "Refund not initiated."
  patternctl support technical "Unable to login."
  patternctl support complaint "Delay in delivery." """,
)
@click.argument("request_type")
@click.argument("query")
@click.pass_obj
def support(app: AppContext, request_type: str, query: str) -> None:
    """Dispatch a REQUEST_TYPE request with QUERY text to the support chain."""
    from patternctl.services.support import SupportService

    app.emit(SupportService(app.settings).dispatch(request_type, query))
