"""Command: recover the index of a minted noid."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from noid.commands._base import NoidCommand, naa_option, scheme_option, template_option

if TYPE_CHECKING:
    from noid.commands._context import AppContext


@click.command(
    cls=NoidCommand,
    examples="""\
  noid decode -t eek 1Hs
  noid decode -t zeeddk -s ark:/ -N 13030 ark:/13030/xt2b7k""",
)
@click.argument("noid")
@template_option
@scheme_option
@naa_option
@click.pass_obj
def decode(
    app: AppContext,
    noid: str,
    template: str | None,
    scheme: str | None,
    naa: str | None,
) -> None:
    """Recover the index NOID was minted from."""
    app.emit(app.service.decode(noid, template=template, scheme=scheme, naa=naa))
