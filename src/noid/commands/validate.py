"""Commands: check-digit validation and computation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from noid.commands._base import NoidCommand

if TYPE_CHECKING:
    from noid.commands._context import AppContext


@click.command(
    cls=NoidCommand,
    examples="""\
  noid validate 13030/xt2b7k
  noid validate ark:/13030/xt2b7k
  noid --json validate 1Hs""",
)
@click.argument("noid")
@click.pass_obj
def validate(app: AppContext, noid: str) -> None:
    """Check the trailing check digit of NOID."""
    app.emit(app.service.validate(noid))


@click.command(
    "check-digit",
    cls=NoidCommand,
    examples="""\
  noid check-digit 1H
  noid -q check-digit 13030/xt2b7""",
)
@click.argument("noid")
@click.pass_obj
def check_digit(app: AppContext, noid: str) -> None:
    """Compute the check digit to append to NOID."""
    app.emit(app.service.check_digit(noid))
