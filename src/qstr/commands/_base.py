"""Custom Click base classes with --examples support, plus shared options.

Provides QstrCommand and QstrGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
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


class QstrCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class QstrGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = QstrCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = QstrCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def text_argument(func: F) -> F:
    """Optional TEXT argument; omitted or ``-`` means read stdin."""
    return click.argument("text", required=False, default=None)(func)


def decode_option(func: F) -> F:
    return click.option(
        "--decode/--no-decode",
        default=True,
        show_default=True,
        help="Apply the configured decode table before rendering.",
    )(func)


def read_text(text: str | None) -> str:
    """Return *text*, or stdin (minus trailing newlines) when it is None or ``-``."""
    if text is None or text == "-":
        return click.get_text_stream("stdin").read().rstrip("\r\n")
    return text
