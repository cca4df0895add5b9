"""Command: mint a noid."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from noid.commands._base import NoidCommand, naa_option, scheme_option, template_option

if TYPE_CHECKING:
    from noid.commands._context import AppContext


@click.command(
    cls=NoidCommand,
    examples="""\
  noid mint
  noid mint -n 42
  noid mint -t zeeeeddddk -s https:// -N 83812
  noid mint -t empiar.dddddk -n 1234
  noid -q mint -s doi:""",
)
@template_option
@scheme_option
@naa_option
@click.option(
    "-n",
    "--index",
    type=int,
    default=-1,
    show_default=True,
    help="Index to encode; negative picks a random index.",
)
@click.pass_obj
def mint(
    app: AppContext,
    template: str | None,
    scheme: str | None,
    naa: str | None,
    index: int,
) -> None:
    """Mint a noid from a template.

    Reminting is not tracked: the same index always yields the same noid.
    """
    app.emit(app.service.mint(template=template, n=index, scheme=scheme, naa=naa))
