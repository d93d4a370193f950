from __future__ import annotations

from .base import DeclarationKind, SyntaxAdapter


_DECLARATION_KINDS = {
    "class_declaration": DeclarationKind.CLASS,
    "struct_declaration": DeclarationKind.STRUCT,
    "property_declaration": DeclarationKind.PROPERTY,
    "event_field_declaration": DeclarationKind.EVENT_FIELD,
    "event_declaration": DeclarationKind.EVENT,
    "field_declaration": DeclarationKind.FIELD,
    "delegate_declaration": DeclarationKind.DELEGATE,
    "constructor_declaration": DeclarationKind.CONSTRUCTOR,
    "enum_declaration": DeclarationKind.ENUM,
    "method_declaration": DeclarationKind.METHOD,
}

# Types walked member by member; they still qualify nested type names
_TYPE_SCOPES = frozenset({
    "interface_declaration",
    "record_declaration",
    "record_struct_declaration",
})


class CSharpAdapter(SyntaxAdapter):
    """C# declaration access over a tree-sitter ``c_sharp`` tree."""

    def declaration_kind(self, node) -> DeclarationKind | None:
        return _DECLARATION_KINDS.get(node.type)

    def is_type_scope(self, node) -> bool:
        return node.type in _TYPE_SCOPES

    def declaration_name(self, node, source: bytes) -> str:
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            return self.node_text(name_node, source)
        # fields and event fields: first declarator of the variable_declaration
        for child in node.children:
            if child.type == "variable_declaration":
                for sub in child.children:
                    if sub.type == "variable_declarator":
                        ident = sub.child_by_field_name("name")
                        if ident is None and sub.children:
                            ident = sub.children[0]
                        return self.node_text(ident, source)
        for child in node.children:
            if child.type == "identifier":
                return self.node_text(child, source)
        return ""

    def closing_token(self, node):
        current = node
        while current.child_count:
            significant = [c for c in current.children if c.type != "comment"]
            if not significant:
                break
            current = significant[-1]
        return current

    def render_span(self, node, include_comments: bool = True) -> tuple[int, int]:
        """Extent of a declaration plus its leading and trailing comment trivia.

        Leading trivia is the run of comment siblings directly above the
        node. A comment that starts on the line where the preceding
        non-comment sibling ends is that sibling's trailing trivia and
        stops the run. Trailing trivia is a single comment starting on the
        line the node ends on.
        """
        start = node.start_byte
        end = node.end_byte
        if not include_comments:
            return start, end

        prev = node.prev_sibling
        while prev is not None and prev.type == "comment":
            before = prev.prev_sibling
            if (
                before is not None
                and before.type != "comment"
                and before.end_point[0] == prev.start_point[0]
            ):
                break
            start = prev.start_byte
            prev = before

        nxt = node.next_sibling
        if nxt is not None and nxt.type == "comment" and nxt.start_point[0] == node.end_point[0]:
            end = nxt.end_byte
        return start, end
