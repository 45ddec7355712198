"""Unit tests for the PIO line classifier.

WHY: The classifier's stripping steps interact (a colon may sit inside a
comment, "side" may sit inside an operand), so each rule and each known
boundary gets its own test.

HOW: Tests are grouped by stripping step, then by whole-program behavior:
  - skipped lines (blank, comment, directive)
  - comment extraction
  - label stripping
  - side-set and delay stripping
  - op/args splitting and case handling
  - line numbering across a full source
"""

import pytest

from tinypio.core.classifier import (
    classify_line,
    classify_source,
    split_fields,
    strip_comment,
    strip_delay,
    strip_label,
    strip_side_set,
)
from tinypio.core.ir import Instruction


class TestSkippedLines:
    """Blank, comment-only, and directive lines produce nothing."""

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "\t",
        "; a comment",
        "   ;indented comment",
        ".program squarewave",
        ".side_set 1 opt",
        "  .wrap",
    ])
    def test_line_is_skipped(self, text):
        assert classify_line(text, 1) is None

    def test_label_only_line_is_skipped(self):
        assert classify_line("again:", 2) is None

    def test_label_with_only_comment_is_skipped(self):
        assert classify_line("loop: ; comment: with colon", 5) is None

    def test_annotations_only_line_is_skipped(self):
        assert classify_line("    [3]", 1) is None
        assert classify_line("side 1", 1) is None


class TestCommentExtraction:
    """Trailing comments are captured and removed before anything else."""

    def test_strip_comment_splits_and_trims(self):
        assert strip_comment("set pins, 1 ; drive high ") == ("set pins, 1", "drive high")

    def test_strip_comment_without_comment(self):
        assert strip_comment("set pins, 1") == ("set pins, 1", "")

    def test_comment_is_recorded_on_instruction(self):
        inst = classify_line("    set pins, 0       ; Drive pin low", 4)
        assert inst == Instruction(line=4, op="set", args="pins, 0", comment="Drive pin low")

    def test_colon_inside_comment_is_not_a_label(self):
        inst = classify_line("jmp bitloop side 1 [4] ; Bit is 1: long pulse", 6)
        assert inst.op == "jmp"
        assert inst.args == "bitloop"
        assert inst.comment == "Bit is 1: long pulse"

    def test_only_first_semicolon_splits(self):
        inst = classify_line("nop ; a ; b", 1)
        assert inst.comment == "a ; b"


class TestLabelStripping:
    """A leading "name:" is dropped and the rest is classified."""

    def test_strip_label(self):
        assert strip_label("again: jmp again") == "jmp again"

    def test_strip_label_without_label(self):
        assert strip_label("jmp again") == "jmp again"

    def test_label_followed_by_instruction(self):
        inst = classify_line("again: set pins, 1", 3)
        assert inst.op == "set"
        assert inst.args == "pins, 1"

    def test_only_first_colon_is_a_label_separator(self):
        inst = classify_line("x: y: set pins, 1", 1)
        assert inst.op == "y:"
        assert inst.args == "set pins, 1"


class TestAnnotationStripping:
    """Side-set and delay annotations are removed from the arguments."""

    def test_strip_side_set(self):
        assert strip_side_set("out pins, 1  side 0") == "out pins, 1"

    def test_strip_delay(self):
        assert strip_delay("set pins, 1 [1]") == "set pins, 1"

    def test_side_set_and_delay(self):
        inst = classify_line("out pins, 1 side 0 [1]", 1)
        assert inst.op == "out"
        assert inst.args == "pins, 1"

    def test_delay_before_side_set(self):
        inst = classify_line("nop [2] side 1", 1)
        assert inst.op == "nop"
        assert inst.args == ""

    def test_side_is_case_sensitive(self):
        inst = classify_line("nop SIDE 1", 1)
        assert inst.args == "SIDE 1"

    def test_side_substring_inside_operand_truncates(self):
        """Known boundary: "side" is matched anywhere, even inside a name."""
        inst = classify_line("mov x, outside", 1)
        assert inst.op == "mov"
        assert inst.args == "x, out"

    def test_side_substring_inside_mnemonic_truncates(self):
        """Known boundary: a mnemonic containing "side" loses its tail."""
        inst = classify_line("insider x", 1)
        assert inst.op == "in"
        assert inst.args == ""


class TestOpAndArgs:
    """The first field is the lowercased op; the rest are the raw args."""

    def test_op_is_lowercased_args_are_not(self):
        inst = classify_line("    SET PINS, 1", 1)
        assert inst.op == "set"
        assert inst.args == "PINS, 1"

    def test_args_whitespace_is_collapsed(self):
        inst = classify_line("jmp   !x,\tdo_zero", 1)
        assert inst.args == "!x, do_zero"

    def test_no_args(self):
        inst = classify_line("nop", 1)
        assert inst.args == ""
        assert inst.comment == ""

    def test_ascii_separators_are_not_whitespace(self):
        assert classify_line("nop\x1fx", 1).op == "nop\x1fx"
        assert classify_line("\x1cnop", 1).op == "\x1cnop"

    def test_unicode_spaces_split_fields(self):
        assert split_fields("set\u3000pins,\t1\xa0") == ["set", "pins,", "1"]
        inst = classify_line("\u2003set\u3000pins, 1", 1)
        assert inst.op == "set"
        assert inst.args == "pins, 1"


class TestClassifySource:
    """Whole-program classification keeps order and original line numbers."""

    def test_squarewave(self, squarewave_source):
        instructions = classify_source(squarewave_source)
        assert [i.op for i in instructions] == ["set", "set", "jmp"]
        assert [i.line for i in instructions] == [3, 4, 5]

    def test_empty_source(self):
        assert classify_source("") == []

    def test_crlf_line_endings(self):
        instructions = classify_source("pull block\r\nout pins, 8\r\n")
        assert [(i.line, i.op, i.args) for i in instructions] == [
            (1, "pull", "block"),
            (2, "out", "pins, 8"),
        ]

    def test_duplicates_are_kept(self):
        instructions = classify_source("nop\nnop\nnop")
        assert [i.line for i in instructions] == [1, 2, 3]
