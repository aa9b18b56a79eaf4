"""Commands: factory, abstract factory, builder, and prototype demos."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand
from patternctl.domain.types import CopyStyle

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl document report
  patternctl -v document presentation
  patternctl --json document spreadsheet""",
)
@click.argument("kind", required=False)
@click.pass_obj
def document(app: AppContext, kind: str | None) -> None:
    """Create a document of KIND and open, save, and close it."""
    from patternctl.services.creation import DocumentService

    app.emit(DocumentService(app.settings).lifecycle(kind))


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl gui windows
  patternctl -v gui macos""",
)
@click.argument("kind", required=False)
@click.pass_obj
def gui(app: AppContext, kind: str | None) -> None:
    """Render an input, a button, and a checkbox from the KIND family."""
    from patternctl.services.creation import GuiService

    app.emit(GuiService(app.settings).render(kind))


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl build --name Ada
  patternctl build --name Ada --age 36 --gender F --address London
  patternctl --json build""",
)
@click.option("--name", default=None, help="Person name.")
@click.option("--age", type=int, default=None, help="Age in years.")
@click.option("--gender", default=None, help="Gender.")
@click.option("--address", default=None, help="Postal address.")
@click.pass_obj
def build(
    app: AppContext,
    name: str | None,
    age: int | None,
    gender: str | None,
    address: str | None,
) -> None:
    """Build an immutable person from the given fields."""
    from patternctl.services.creation import PersonService

    app.emit(PersonService(app.settings).build(name=name, age=age, gender=gender, address=address))


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl clone Ada 36 London --hobby chess --add-hobby music
  patternctl clone Ada 36 London --style clone --hobby chess --add-hobby music""",
)
@click.argument("name")
@click.argument("age", type=int)
@click.argument("address")
@click.option("--hobby", "hobbies", multiple=True, help="Hobby of the original (repeatable).")
@click.option("--add-hobby", default=None, help="Hobby added to the copy only.")
@click.option(
    "--style",
    type=click.Choice([s.value for s in CopyStyle]),
    default=CopyStyle.COPY.value,
    show_default=True,
    help="copy: copy constructor; clone: shallow clone + fresh hobby list.",
)
@click.pass_obj
def clone(
    app: AppContext,
    name: str,
    age: int,
    address: str,
    hobbies: tuple[str, ...],
    add_hobby: str | None,
    style: str,
) -> None:
    """Duplicate a person and show that the copy is independent."""
    from patternctl.services.creation import PersonService

    app.emit(
        PersonService(app.settings).clone(
            name,
            age,
            address,
            hobbies=list(hobbies) if hobbies else None,
            add_hobby=add_hobby,
            style=style,
        )
    )
