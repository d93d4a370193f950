"""Source documents: one or more fragments parsed into a single syntax tree."""

from __future__ import annotations

import asyncio
import codecs
import logging
from dataclasses import dataclass
from pathlib import Path

from flatscript.languages.registry import get_language_for_file, get_parser

log = logging.getLogger(__name__)

FRAGMENT_SEPARATOR = b"\n"


@dataclass(frozen=True)
class SyntaxRoot:
    """A parsed tree root together with the bytes it was parsed from."""

    node: object
    source: bytes
    language: str
    fragments: tuple[str, ...] = ()
    tree: object = None


def _count_errors(node) -> int:
    if node.type == "ERROR" or node.is_missing:
        return 1 + sum(_count_errors(child) for child in node.children)
    if not node.has_error:
        return 0
    return sum(_count_errors(child) for child in node.children)


class SourceDocument:
    """A multi-fragment source document.

    Fragments are concatenated in order, separated by a newline, and
    parsed as one tree.
    """

    def __init__(self, fragments: list[tuple[str, bytes]], language: str = "c_sharp"):
        self.fragments = [(name, _strip_bom(data)) for name, data in fragments]
        self.language = language

    @classmethod
    def from_text(cls, text: str, name: str = "<string>", language: str = "c_sharp") -> "SourceDocument":
        return cls([(name, text.encode("utf-8"))], language=language)

    @classmethod
    def from_paths(cls, paths: list[str | Path], language: str | None = None) -> "SourceDocument":
        """Read files into a document.

        The language is taken from the first path's extension unless given.
        Raises FileNotFoundError for missing files and ValueError when the
        language cannot be determined.
        """
        if not paths:
            raise ValueError("A document needs at least one source file")
        if language is None:
            language = get_language_for_file(str(paths[0]))
            if language is None:
                raise ValueError(f"Unsupported file type: {paths[0]}")
        fragments = [(str(p).replace("\\", "/"), Path(p).read_bytes()) for p in paths]
        return cls(fragments, language=language)

    @property
    def source(self) -> bytes:
        return FRAGMENT_SEPARATOR.join(data for _, data in self.fragments)

    def parse(self) -> SyntaxRoot:
        parser = get_parser(self.language)
        source = self.source
        tree = parser.parse(source)
        root = tree.root_node
        if root.has_error:
            log.warning(
                "%d syntax errors in %s; flattening anyway",
                _count_errors(root),
                ", ".join(name for name, _ in self.fragments) or "document",
            )
        log.debug("parsed %d fragments (%d bytes)", len(self.fragments), len(source))
        return SyntaxRoot(
            node=root,
            source=source,
            language=self.language,
            fragments=tuple(name for name, _ in self.fragments),
            tree=tree,
        )

    async def get_syntax_root(self) -> SyntaxRoot:
        """Parse in a worker thread so event loops stay responsive."""
        return await asyncio.to_thread(self.parse)


def _strip_bom(data: bytes) -> bytes:
    if data.startswith(codecs.BOM_UTF8):
        return data[len(codecs.BOM_UTF8):]
    return data
