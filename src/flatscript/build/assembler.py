"""Render bucket declarations to text and join them."""

from __future__ import annotations

import re

from flatscript.languages.base import SyntaxAdapter

PROGRAM_JOINER = "\n\n"
EXTENSION_JOINER = " "

_NEWLINE_RE = re.compile(r"\r\n|\n")


def split_lines(text: str) -> list[str]:
    """Split on CRLF or bare LF. A lone CR is not a line terminator."""
    return _NEWLINE_RE.split(text)


def line_starts(text: str) -> list[int]:
    """Offset of the first character of each line that :func:`split_lines` yields."""
    return [0] + [m.end() for m in _NEWLINE_RE.finditer(text)]


class TextAssembler:
    """Renders declaration nodes verbatim (with comment trivia) and joins them."""

    def __init__(self, adapter: SyntaxAdapter, source: bytes, include_comments: bool = True):
        self.adapter = adapter
        self.source = source
        self.include_comments = include_comments

    def render(self, node) -> str:
        span = self.adapter.render_span(node, self.include_comments)
        return self.adapter.span_text(span, self.source).strip()

    def assemble(self, nodes: list, joiner: str) -> list[str]:
        return split_lines(joiner.join(self.render(n) for n in nodes))

    def program_lines(self, nodes: list) -> list[str]:
        return self.assemble(nodes, PROGRAM_JOINER)

    def extension_lines(self, nodes: list) -> list[str]:
        return self.assemble(nodes, EXTENSION_JOINER)

    def closing_tail(self, nodes: list) -> str | None:
        """Text following the final closing brace of the last node.

        Returns ``""`` when the rendered block ends in the brace itself,
        the trailing trivia when a comment follows the brace, and None
        when the last significant token is not ``}`` (or there are no
        nodes).
        """
        if not nodes:
            return None
        last = nodes[-1]
        token = self.adapter.closing_token(last)
        if token.type != "}":
            return None
        _, end = self.adapter.render_span(last, self.include_comments)
        return self.source[token.end_byte : end].decode("utf-8", errors="replace").rstrip()
