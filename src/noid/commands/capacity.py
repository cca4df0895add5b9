"""Command: namespace size of a template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from noid.commands._base import NoidCommand, template_option

if TYPE_CHECKING:
    from noid.commands._context import AppContext


@click.command(
    cls=NoidCommand,
    examples="""\
  noid capacity
  noid capacity -t zeeeeddddk""",
)
@template_option
@click.pass_obj
def capacity(app: AppContext, template: str | None) -> None:
    """Show how many noids a template can mint before it expands or overflows."""
    app.emit(app.service.capacity(template=template))
