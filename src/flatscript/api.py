"""Programmatic Python API for flattening sources in-process.

Build tools that already run an event loop should await
:func:`flatscript.build.generator.generate_script` directly; these helpers
are for synchronous callers.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from flatscript.build.documents import SourceDocument
from flatscript.build.generator import generate_script
from flatscript.config import resolve_config


def flatten_source(text: str, *, project_root: str | Path = ".", **overrides) -> str:
    """Flatten C# source text and return the final script.

    Parameters
    ----------
    text:
        Complete C# source of the document.
    project_root:
        Where to start looking for ``.flatscript.json``.
    **overrides:
        Config fields (``program_class``, ``tab_width``, ``unstitched``,
        ``include_comments``) that win over the config file.
    """
    config = resolve_config(project_root, **overrides)
    return asyncio.run(generate_script(SourceDocument.from_text(text), config))


def flatten_files(paths: list[str | Path], *, project_root: str | Path = ".", **overrides) -> str:
    """Flatten several C# files, read in order as one document."""
    config = resolve_config(project_root, **overrides)
    return asyncio.run(generate_script(SourceDocument.from_paths(paths), config))
