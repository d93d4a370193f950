"""Strip the common indentation from a block of text."""

from __future__ import annotations

import click

from flatscript.build.assembler import split_lines
from flatscript.build.indent import deindent as deindent_lines
from flatscript.commands.inputs import load_config


@click.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--tab-width", type=click.IntRange(min=1), default=None,
              help="Visual width of a tab when measuring indentation (default: 4).")
def deindent(source, tab_width):
    """Remove the minimal common indent from SOURCE (or stdin).

    Whitespace-only lines become empty; output lines are joined with CRLF.
    """
    config = load_config(tab_width=tab_width)
    text = source.read().decode("utf-8", errors="replace")
    click.echo(deindent_lines(split_lines(text), config.tab_width).encode("utf-8"))
