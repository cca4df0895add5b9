"""Custom Click base classes with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class NoidCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class NoidGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = NoidCommand`` so subcommands accept ``examples``
    without an explicit ``cls=``.
    """

    command_class = NoidCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def template_option(fn: Any) -> Any:
    """``-t/--template``; None means use the configured template."""
    return click.option(
        "-t",
        "--template",
        default=None,
        help="Template to mint with, e.g. 'zeeddk' or 'prefix.dddddk'.",
    )(fn)


def scheme_option(fn: Any) -> Any:
    """``-s/--scheme``; None means use the configured scheme."""
    return click.option("-s", "--scheme", default=None, help="Scheme, e.g. 'ark:/' or 'doi:'.")(fn)


def naa_option(fn: Any) -> Any:
    """``-N/--naa``; None means use the configured NAA."""
    return click.option("-N", "--naa", default=None, help="Name assigning authority.")(fn)
