"""Inspect or update the project configuration (.flatscript.json)."""

from __future__ import annotations

import click

from flatscript.commands.inputs import load_config
from flatscript.config import find_config, parse_value, write_config
from flatscript.exit_codes import ConfigError
from flatscript.output.formatter import json_envelope, to_json


@click.command("config")
@click.option("--set", "assignments", multiple=True, metavar="KEY=VALUE",
              help="Persist a setting to .flatscript.json in the current directory.")
@click.option("--show", is_flag=True, help="Print the effective configuration.")
@click.pass_context
def config(ctx, assignments, show):
    """Manage per-project flatscript configuration.

    \b
    Keys:
      program_class     wrapper class name (default: Program)
      tab_width         visual tab width for indent detection (default: 4)
      unstitched        drop | append | error (default: drop)
      include_comments  keep comment trivia around declarations (default: true)
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False

    if assignments:
        updates = {}
        for item in assignments:
            key, sep, raw = item.partition("=")
            if not sep:
                raise ConfigError(f"Expected KEY=VALUE, got {item!r}")
            try:
                updates[key.strip()] = parse_value(key.strip(), raw.strip())
            except ValueError as exc:
                raise ConfigError(str(exc)) from exc
        try:
            path = write_config(updates)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        if not json_mode:
            click.echo(f"Updated {path}")
        show = True

    if not show:
        click.echo(ctx.get_help())
        return

    effective = load_config()
    source = find_config(".")
    if json_mode:
        click.echo(
            to_json(
                json_envelope(
                    "config",
                    summary={"source": str(source) if source else None},
                    config=effective.to_dict(),
                )
            )
        )
        return
    click.echo(f"Config file: {source or '(defaults)'}")
    for key, value in effective.to_dict().items():
        click.echo(f"  {key:18s} {value}")
