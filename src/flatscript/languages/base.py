from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class DeclarationKind(Enum):
    """Declaration kinds the classifier collects. Anything else is walked through."""

    CLASS = "class"
    STRUCT = "struct"
    PROPERTY = "property"
    EVENT_FIELD = "event_field"
    EVENT = "event"
    FIELD = "field"
    DELEGATE = "delegate"
    CONSTRUCTOR = "constructor"
    ENUM = "enum"
    METHOD = "method"


class SyntaxAdapter(ABC):
    """Base class for language-specific access to a parsed syntax tree."""

    @abstractmethod
    def declaration_kind(self, node) -> DeclarationKind | None:
        """Map a tree node to a collected declaration kind, or None."""
        ...

    def is_type_scope(self, node) -> bool:
        """True for uncollected nodes that still name an enclosing type."""
        return False

    @abstractmethod
    def declaration_name(self, node, source: bytes) -> str:
        """Simple (unqualified) identifier of a declaration node."""
        ...

    @abstractmethod
    def closing_token(self, node):
        """Last significant (non-comment) leaf of a node."""
        ...

    def render_span(self, node, include_comments: bool = True) -> tuple[int, int]:
        """Byte extent of a declaration's verbatim text. Override per language."""
        return node.start_byte, node.end_byte

    def children(self, node) -> list:
        return list(node.children)

    def node_text(self, node, source: bytes) -> str:
        if node is None:
            return ""
        return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def span_text(self, span: tuple[int, int], source: bytes) -> str:
        start, end = span
        return source[start:end].decode("utf-8", errors="replace")

    def node_line(self, node) -> int:
        return node.start_point[0] + 1
