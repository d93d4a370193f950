"""Flatten C# sources into the final single-file script."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from flatscript.build.generator import ScriptGenerator
from flatscript.commands.inputs import load_config, load_document
from flatscript.exit_codes import GateFailureError
from flatscript.output.formatter import json_envelope, to_json


@click.command()
@click.argument("files", nargs=-1, required=True)
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Write the script to this file instead of stdout.")
@click.option("--language", default=None,
              help="Source language, overriding detection from the first file extension.")
@click.option("--program-class", default=None,
              help="Name of the wrapper class holding the script body (default: Program).")
@click.option("--unstitched", type=click.Choice(["drop", "append", "error"]), default=None,
              help="What to do with extension content that has no closing brace.")
@click.option("--no-comments", is_flag=True, help="Render declarations without comment trivia.")
@click.option("--fail-empty", is_flag=True, help="Exit 5 when the generated script is empty.")
@click.pass_context
def generate(ctx, files, output, language, program_class, unstitched, no_comments, fail_empty):
    """Generate a flat script from one or more C# files.

    All FILES are read in order and parsed as a single document.  Members
    of the `Program` class form the script body; every other declaration
    is stitched in after it.

    \b
    Examples:
      flatscript generate Program.cs Helpers.cs -o Script.cs
      flatscript generate --unstitched error src/*.cs
      flatscript --json generate Program.cs
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False

    config = load_config(
        program_class=program_class,
        unstitched=unstitched,
        include_comments=False if no_comments else None,
    )
    document = load_document(files, language)
    root = asyncio.run(document.get_syntax_root())
    result = ScriptGenerator(config).flatten(root)

    if fail_empty and not result.script.strip():
        raise GateFailureError("Generated script is empty (no declarations found).")

    if output:
        Path(output).write_bytes(result.script.encode("utf-8"))

    if json_mode:
        click.echo(
            to_json(
                json_envelope(
                    "generate",
                    summary={
                        "program_declarations": len(result.program),
                        "extension_declarations": len(result.extension),
                        "stitched": result.stitched,
                        "dropped": result.dropped,
                        "chars": len(result.script),
                    },
                    files=[str(f) for f in files],
                    output=output,
                    script=None if output else result.script,
                )
            )
        )
    elif output:
        click.echo(f"Wrote {len(result.script)} chars to {output}", err=True)
    else:
        click.echo(result.script.encode("utf-8"))
