"""Click CLI entry point with lazy-loaded subcommands."""

import logging
import os
import sys

# Fix Unicode output on Windows consoles (cp1253, cp1252, etc.)
if sys.platform == "win32" and not os.environ.get("PYTHONIOENCODING"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

import click


# Lazy-loading command group: imports command modules only when invoked.
# Keeps tree-sitter out of `--help` and `deindent`.
_COMMANDS = {
    "generate": ("flatscript.commands.cmd_generate", "generate"),
    "classify": ("flatscript.commands.cmd_classify", "classify"),
    "deindent": ("flatscript.commands.cmd_deindent", "deindent"),
    "config":   ("flatscript.commands.cmd_config",   "config"),
}


class LazyGroup(click.Group):
    """A Click group that lazy-loads command modules on first access."""

    def list_commands(self, ctx):
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx, cmd_name):
        if cmd_name not in _COMMANDS:
            return None
        module_path, attr_name = _COMMANDS[cmd_name]
        import importlib
        mod = importlib.import_module(module_path)
        return getattr(mod, attr_name)


@click.group(cls=LazyGroup)
@click.version_option(package_name="flatscript")
@click.option('--json', 'json_mode', is_flag=True, help='Output in JSON format')
@click.option('--verbose', '-v', is_flag=True, help='Log pipeline details to stderr')
@click.pass_context
def cli(ctx, json_mode, verbose):
    """Flatscript: flatten C# sources into a single script."""
    ctx.ensure_object(dict)
    ctx.obj['json'] = json_mode
    ctx.obj['verbose'] = verbose
    # Without --verbose, warnings reach stderr through logging's last-resort handler
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )
