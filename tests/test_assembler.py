"""Tests for declaration rendering, joining and line splitting."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
from conftest import parse_csharp

from flatscript.build.assembler import TextAssembler, split_lines
from flatscript.build.classifier import classify
from flatscript.languages.registry import get_adapter


def _assembler(source_text, include_comments=True):
    root = parse_csharp(source_text)
    adapter = get_adapter("c_sharp")
    buckets = classify(root.node, adapter, root.source)
    return TextAssembler(adapter, root.source, include_comments), buckets


class TestSplitLines:
    def test_crlf_and_lf(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_lone_cr_is_not_a_break(self):
        assert split_lines("a\rb") == ["a\rb"]

    def test_empty_text(self):
        assert split_lines("") == [""]

    def test_trailing_newline_yields_empty_line(self):
        assert split_lines("a\n") == ["a", ""]


class TestJoiners:
    def test_program_nodes_joined_with_blank_line(self):
        asm, buckets = _assembler(
            "class Program\n{\n    void A() { }\n\n    void B() { }\n}\n"
        )
        assert asm.program_lines(buckets.program) == ["void A() { }", "", "void B() { }"]

    def test_extension_nodes_joined_with_space(self):
        asm, buckets = _assembler("class X { }\nclass Y { }\n")
        assert asm.extension_lines(buckets.extension) == ["class X { } class Y { }"]

    def test_render_trims_and_keeps_interior_formatting(self):
        asm, buckets = _assembler(
            "class Program\n{\n    void Main()\n    {\n        // tick\n        Run();\n    }\n}\n"
        )
        assert asm.render(buckets.program[0]) == (
            "void Main()\n    {\n        // tick\n        Run();\n    }"
        )


class TestCommentTrivia:
    SOURCE = (
        "class Program\n"
        "{\n"
        "    // Entry point.\n"
        "    void Main() { }\n"
        "}\n"
        "\n"
        "class Helper\n"
        "{\n"
        "} // end helper\n"
    )

    def test_leading_comment_included(self):
        asm, buckets = _assembler(self.SOURCE)
        assert asm.render(buckets.program[0]) == "// Entry point.\n    void Main() { }"

    def test_trailing_comment_included(self):
        asm, buckets = _assembler(self.SOURCE)
        assert asm.render(buckets.extension[0]) == "class Helper\n{\n} // end helper"

    def test_comments_excluded_when_disabled(self):
        asm, buckets = _assembler(self.SOURCE, include_comments=False)
        assert asm.render(buckets.program[0]) == "void Main() { }"
        assert asm.render(buckets.extension[0]) == "class Helper\n{\n}"

    def test_closing_tail_is_trailing_trivia(self):
        asm, buckets = _assembler(self.SOURCE)
        assert asm.closing_tail(buckets.extension) == " // end helper"

    def test_comment_on_previous_line_end_not_leading(self):
        asm, buckets = _assembler(
            "class Program\n{\n    int a; // counter\n    int b;\n}\n"
        )
        assert asm.render(buckets.program[0]) == "int a; // counter"
        assert asm.render(buckets.program[1]) == "int b;"


class TestClosingTail:
    def test_brace_is_last(self):
        asm, buckets = _assembler("class Program { }\nclass Helper { }\n")
        assert asm.closing_tail(buckets.extension) == ""

    def test_semicolon_is_last(self):
        asm, buckets = _assembler("class Program { }\ndelegate void D();\n")
        assert asm.closing_tail(buckets.extension) is None

    def test_empty_bucket(self):
        asm, buckets = _assembler("class Program { void Main() { } }\n")
        assert asm.closing_tail(buckets.extension) is None
