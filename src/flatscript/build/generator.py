"""Generate the final flat script from a document's syntax tree.

Pipeline: classify -> assemble -> normalize -> compose.  The only
suspension point is retrieving the tree root; everything after that runs
synchronously on fresh per-call state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from flatscript.build.assembler import TextAssembler
from flatscript.build.classifier import classify
from flatscript.build.composer import compose, find_seam
from flatscript.build.documents import SyntaxRoot
from flatscript.build.indent import deindent
from flatscript.config import FlattenConfig
from flatscript.languages.registry import get_adapter

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Declaration:
    """Listing record for one collected declaration."""

    kind: str
    name: str
    line: int
    text: str


@dataclass
class FlattenResult:
    script: str
    program_part: str
    extension_part: str
    stitched: bool
    dropped: bool
    program: list[Declaration] = field(default_factory=list)
    extension: list[Declaration] = field(default_factory=list)


class ScriptGenerator:
    """Produces the final single-file script for a parsed document."""

    def __init__(self, config: FlattenConfig | None = None):
        self.config = config or FlattenConfig()

    async def generate(self, document) -> str:
        """Await the document's tree root, then flatten it.

        *document* is anything with an async ``get_syntax_root()`` returning
        a :class:`SyntaxRoot`.  Errors from that call propagate unchanged.
        """
        root = await document.get_syntax_root()
        return self.flatten(root).script

    def flatten(self, root: SyntaxRoot) -> FlattenResult:
        cfg = self.config
        adapter = get_adapter(root.language)
        buckets = classify(root.node, adapter, root.source, cfg.program_class)
        assembler = TextAssembler(adapter, root.source, cfg.include_comments)

        program_part = deindent(assembler.program_lines(buckets.program), cfg.tab_width)
        extension_part = deindent(assembler.extension_lines(buckets.extension), cfg.tab_width)
        closing_tail = assembler.closing_tail(buckets.extension)

        stitched = find_seam(extension_part, closing_tail) is not None
        dropped = not stitched and bool(extension_part.strip()) and cfg.unstitched == "drop"
        script = compose(program_part, extension_part, closing_tail, cfg.unstitched)
        log.info(
            "generated %d char script (%d program, %d extension declarations, stitched=%s)",
            len(script),
            len(buckets.program),
            len(buckets.extension),
            stitched,
        )

        def _listing(nodes):
            return [
                Declaration(
                    kind=adapter.declaration_kind(n).value,
                    name=adapter.declaration_name(n, root.source),
                    line=adapter.node_line(n),
                    text=assembler.render(n),
                )
                for n in nodes
            ]

        return FlattenResult(
            script=script,
            program_part=program_part,
            extension_part=extension_part,
            stitched=stitched,
            dropped=dropped,
            program=_listing(buckets.program),
            extension=_listing(buckets.extension),
        )


async def generate_script(document, config: FlattenConfig | None = None) -> str:
    """Generate the final script for *document* with a fresh generator."""
    return await ScriptGenerator(config).generate(document)
