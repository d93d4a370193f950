"""List which bucket each declaration lands in."""

from __future__ import annotations

import asyncio

import click

from flatscript.build.generator import ScriptGenerator
from flatscript.commands.inputs import load_config, load_document
from flatscript.output.formatter import abbrev_kind, format_table, json_envelope, to_json


@click.command()
@click.argument("files", nargs=-1, required=True)
@click.option("--language", default=None,
              help="Source language, overriding detection from the first file extension.")
@click.option("--program-class", default=None, help="Name of the wrapper class (default: Program).")
@click.pass_context
def classify(ctx, files, language, program_class):
    """Show program and extension declarations in source order."""
    json_mode = ctx.obj.get("json") if ctx.obj else False

    config = load_config(program_class=program_class)
    document = load_document(files, language)
    root = asyncio.run(document.get_syntax_root())
    result = ScriptGenerator(config).flatten(root)

    if json_mode:
        def _rows(decls):
            return [{"kind": d.kind, "name": d.name, "line": d.line} for d in decls]

        click.echo(
            to_json(
                json_envelope(
                    "classify",
                    summary={
                        "program_declarations": len(result.program),
                        "extension_declarations": len(result.extension),
                        "stitched": result.stitched,
                    },
                    program=_rows(result.program),
                    extension=_rows(result.extension),
                )
            )
        )
        return

    rows = [["program", abbrev_kind(d.kind), d.name, str(d.line)] for d in result.program]
    rows += [["extension", abbrev_kind(d.kind), d.name, str(d.line)] for d in result.extension]
    click.echo(f"{len(result.program)} program, {len(result.extension)} extension declarations")
    click.echo(format_table(["bucket", "kind", "name", "line"], rows))
