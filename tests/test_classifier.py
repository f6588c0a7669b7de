"""
Tests for import specifier classification.
"""

import pytest

from igo.classifier import (
    classify,
    classify_declaration,
    count_parent_hops,
    has_preceding_blank_line,
    strip_quotes,
)
from igo.types import DeclarationInput, ImportGroup, Span


class TestStripQuotes:

    @pytest.mark.parametrize("raw, expected", [
        ("'react'", "react"),
        ('"react"', "react"),
        ("react", "react"),
        ("'./a\"", "./a"),
        ("''", ""),
        ("'", ""),
    ])
    def test_one_quote_each_side(self, raw, expected):
        assert strip_quotes(raw) == expected

    def test_inner_quotes_kept(self):
        assert strip_quotes("''a''") == "'a'"


class TestClassify:

    @pytest.mark.parametrize("spec", ["fs", "react", "@angular/core", "lodash/fp", "src/app"])
    def test_library(self, spec):
        assert classify(spec) == (ImportGroup.LIBRARY, 0)

    @pytest.mark.parametrize("spec", [".", "./", "./local", "./sub/deep/module", ".hidden"])
    def test_local(self, spec):
        assert classify(spec) == (ImportGroup.LOCAL, 0)

    @pytest.mark.parametrize("spec, depth", [
        ("../utils", 1),
        ("../../config", 2),
        ("../../../a/b", 3),
        ("./../foo", 1),
        ("./../", 1),
    ])
    def test_non_local(self, spec, depth):
        assert classify(spec) == (ImportGroup.NON_LOCAL, depth)

    def test_quoted_input(self):
        assert classify("'../../x'") == (ImportGroup.NON_LOCAL, 2)
        assert classify('"react"') == (ImportGroup.LIBRARY, 0)

    def test_empty_string_is_library(self):
        assert classify("") == (ImportGroup.LIBRARY, 0)
        assert classify("''") == (ImportGroup.LIBRARY, 0)

    def test_parent_hops_counted_anywhere(self):
        # not only a leading run
        assert classify("./a/../b") == (ImportGroup.NON_LOCAL, 1)
        assert classify("../a/../b") == (ImportGroup.NON_LOCAL, 2)

    def test_parent_without_slash_is_local(self):
        # '..' alone has no '../'
        assert classify("..") == (ImportGroup.LOCAL, 0)

    def test_deterministic(self):
        for spec in ["fs", "./a", "../../b", "", "./../c/index"]:
            assert classify(spec) == classify(spec)


def test_count_parent_hops_non_overlapping():
    assert count_parent_hops("../../") == 2
    assert count_parent_hops(".../") == 1
    assert count_parent_hops("./a") == 0


def test_groups_are_ordered():
    assert ImportGroup.LIBRARY < ImportGroup.NON_LOCAL < ImportGroup.LOCAL
    assert sorted([ImportGroup.LOCAL, ImportGroup.LIBRARY, ImportGroup.NON_LOCAL]) == [
        ImportGroup.LIBRARY, ImportGroup.NON_LOCAL, ImportGroup.LOCAL,
    ]


class TestBlankLine:

    @pytest.mark.parametrize("trivia", ["\n\n", "\r\n\r\n", "\n\r\n", "\n\n\n", "\n\n  // note\n"])
    def test_blank_line_detected(self, trivia):
        assert has_preceding_blank_line(trivia) is True

    @pytest.mark.parametrize("trivia", ["", "\n", "\r\n", " \n\n", "\n// comment\n\n", "\n \n"])
    def test_no_blank_line(self, trivia):
        assert has_preceding_blank_line(trivia) is False


def test_classify_declaration():
    span = Span(start=10, width=25)
    imp = classify_declaration(DeclarationInput("'./../../lib'", span, "\n\n"))

    assert imp.specifier == "./../../lib"
    assert imp.group is ImportGroup.NON_LOCAL
    assert imp.depth == 2
    assert imp.preceded_by_blank_line is True
    assert imp.span == span
