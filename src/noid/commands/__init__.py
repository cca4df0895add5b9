"""Subcommand modules for noid.

Provides register_commands() which uses deferred imports to keep
``noid --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from noid.commands.capacity import capacity
    from noid.commands.decode import decode
    from noid.commands.mint import mint
    from noid.commands.validate import check_digit, validate

    cli.add_command(mint)
    cli.add_command(validate)
    cli.add_command(check_digit)
    cli.add_command(decode)
    cli.add_command(capacity)
