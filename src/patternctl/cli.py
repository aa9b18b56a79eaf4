"""``patternctl`` entry point.

Global flags are folded into one :class:`PatternSettings` together with
the environment and ``patternctl.toml``; each demo command then reads it
from the shared :class:`AppContext`.
"""

from __future__ import annotations

import click

from patternctl import __version__
from patternctl.commands import register_commands
from patternctl.commands._base import PatternGroup
from patternctl.commands._context import AppContext
from patternctl.config.settings import PatternSettings


@click.group(
    cls=PatternGroup,
    invoke_without_command=True,
    examples="""\
  patternctl document report
  patternctl -v gui macos
  patternctl support billing "Refund not initiated."
  patternctl --json singleton""",
)
@click.version_option(version=__version__, prog_name="patternctl")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print one line per result.")
@click.option("-v", "--verbose", is_flag=True, help="Log what each pattern does while it runs.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read this TOML file instead of searching for patternctl.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Run factory, builder, prototype, singleton, and support-chain demos."""
    ctx.obj = AppContext(
        PatternSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
