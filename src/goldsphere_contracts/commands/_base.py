"""Command classes for gsctl.

Every gsctl command can carry a block of sample invocations. Passing
``examples="..."`` to the decorator adds an ``--examples`` flag that
prints the block and exits before any argument is parsed, so
``gsctl validate --examples`` works without SCHEMA or DOCUMENT.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def _print(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print,
        help="Print sample invocations and exit.",
    )


class _WithExamples:
    examples: str | None

    def _attach_examples(self, params: list[click.Parameter], examples: str | None) -> None:
        self.examples = examples
        if examples:
            params.append(_examples_option(examples))


class GsCommand(_WithExamples, click.Command):
    """A gsctl leaf command; accepts ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(self.params, examples)


class GsGroup(_WithExamples, click.Group):
    """A gsctl command group.

    Commands declared with ``@group.command`` are built as
    :class:`GsCommand`, so they take ``examples=`` too.
    """

    command_class = GsCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(self.params, examples)
