"""Tests for seam stitching of program and extension parts."""

from __future__ import annotations

import logging

import pytest

from flatscript.build.composer import compose, find_seam
from flatscript.exit_codes import EXIT_GATE_FAILURE, UnstitchedExtensionError

PROGRAM = "void Main()\r\n{\r\n}"


class TestFindSeam:
    def test_literal_brace(self):
        assert find_seam("class A { }") == 10

    def test_no_brace(self):
        assert find_seam("int x;") is None

    def test_empty(self):
        assert find_seam("") is None

    def test_structured_tail(self):
        text = "class A { } // done"
        assert find_seam(text, closing_tail=" // done") == 10

    def test_tail_that_does_not_match_falls_back_to_text(self):
        assert find_seam("class A { }", closing_tail=" // gone") == 10

    def test_multiline_tail_after_normalization(self):
        text = "class A\r\n{\r\n} /* a\r\nb */"
        assert find_seam(text, closing_tail=" /* a\n   b */") == 12

    def test_multiline_tail_longer_than_text(self):
        assert find_seam("x */", closing_tail=" /* a\nb\nc */") is None


class TestCompose:
    def test_stitches_at_final_brace(self):
        ext = "class Helper\r\n{\r\n    int x;\r\n}"
        out = compose(PROGRAM, ext)
        assert out == PROGRAM + "\n\n}\n\n" + "class Helper\r\n{\r\n    int x;\r\n"

    def test_empty_extension_returns_program(self):
        assert compose(PROGRAM, "") == PROGRAM

    def test_whitespace_extension_returns_program(self):
        assert compose(PROGRAM, "\r\n", unstitched="error") == PROGRAM

    def test_trailing_comment_kept_after_removed_brace(self):
        ext = "class A { } // done"
        out = compose(PROGRAM, ext, closing_tail=" // done")
        assert out == PROGRAM + "\n\n}\n\n" + "class A {  // done"

    def test_drop_policy_discards_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="flatscript.build.composer"):
            out = compose(PROGRAM, "delegate void D();")
        assert out == PROGRAM
        assert any("dropped" in r.getMessage() for r in caplog.records)

    def test_append_policy_preserves_content(self):
        out = compose(PROGRAM, "delegate void D();", unstitched="append")
        assert out == PROGRAM + "\r\n\r\n" + "delegate void D();"

    def test_error_policy_raises(self):
        with pytest.raises(UnstitchedExtensionError) as excinfo:
            compose(PROGRAM, "delegate void D();", unstitched="error")
        assert excinfo.value.exit_code == EXIT_GATE_FAILURE

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            compose(PROGRAM, "int x;", unstitched="keep")

    def test_brace_inside_extension_only_last_removed(self):
        ext = "class A { } class B { }"
        assert compose("P", ext) == "P\n\n}\n\nclass A { } class B { "
