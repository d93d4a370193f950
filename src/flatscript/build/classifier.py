"""Partition top-level declarations into program and extension buckets.

Declarations lexically inside the wrapper class (``Program`` by default)
form the executable body of the script; every other collected declaration
is supporting code appended after it.  Both buckets keep source order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from flatscript.languages.base import DeclarationKind, SyntaxAdapter

log = logging.getLogger(__name__)

DEFAULT_PROGRAM_CLASS = "Program"


@dataclass
class Buckets:
    program: list = field(default_factory=list)
    extension: list = field(default_factory=list)


class DeclarationClassifier:
    """Depth-first, pre-order walk that captures declarations into buckets.

    The active bucket and the enclosing type path travel down the
    recursion as arguments, so leaving any redirected scope restores
    exactly the bucket that was active when it was entered.
    """

    def __init__(self, adapter: SyntaxAdapter, source: bytes, program_class: str = DEFAULT_PROGRAM_CLASS):
        self.adapter = adapter
        self.source = source
        self.program_class = program_class

    def classify(self, root) -> Buckets:
        buckets = Buckets()
        self._visit(root, buckets, buckets.extension, ())
        log.debug(
            "classified %d program and %d extension declarations",
            len(buckets.program),
            len(buckets.extension),
        )
        return buckets

    def _visit(self, node, buckets: Buckets, active: list, type_path: tuple[str, ...]) -> None:
        kind = self.adapter.declaration_kind(node)
        if kind is None:
            if self.adapter.is_type_scope(node):
                type_path = type_path + (self.adapter.declaration_name(node, self.source),)
            for child in self.adapter.children(node):
                self._visit(child, buckets, active, type_path)
            return

        if kind is DeclarationKind.CLASS:
            name = self.adapter.declaration_name(node, self.source)
            if ".".join(type_path + (name,)) == self.program_class:
                for child in self.adapter.children(node):
                    self._visit(child, buckets, buckets.program, type_path + (name,))
                return

        active.append(node)


def classify(root, adapter: SyntaxAdapter, source: bytes, program_class: str = DEFAULT_PROGRAM_CLASS) -> Buckets:
    """Classify a tree with a fresh classifier."""
    return DeclarationClassifier(adapter, source, program_class).classify(root)
