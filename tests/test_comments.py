from __future__ import annotations

import pytest

from scholia.extractors import CommentLifter
from scholia.reader import read_forms
from scholia.utils import (
    cut_spans,
    decode_string_literal,
    is_doc_comment,
    strip_comment_marker,
)

NESTED = "\n".join(
    [
        "(defn f",
        "  [x]",
        "  ;; top level",
        "  (let [y 1]",
        "    ;; nested",
        "    y))",
    ]
)


def test_fragments_record_line_and_depth() -> None:
    lifted = CommentLifter().lift(read_forms(NESTED)[0])

    assert [(f.text, f.line, f.depth) for f in lifted.fragments] == [
        ("top level", 3, 1),
        ("nested", 5, 2),
    ]
    assert lifted.code == NESTED
    assert lifted.spans == ()


def test_excluding_lifted_comments_removes_their_lines() -> None:
    lifted = CommentLifter(exclude_lifted=True).lift(read_forms(NESTED)[0])
    assert lifted.code == "(defn f\n  [x]\n  (let [y 1]\n    y))"


def test_trailing_comment_is_cut_with_its_leading_space() -> None:
    form = read_forms("(f x ;; why x\n   y)")[0]
    lifted = CommentLifter(exclude_lifted=True).lift(form)
    assert lifted.fragments[0].text == "why x"
    assert lifted.code == "(f x\n   y)"


def test_plain_comments_stay_in_code() -> None:
    form = read_forms("(f ; plain\n  x)")[0]
    lifted = CommentLifter(exclude_lifted=True).lift(form)
    assert not lifted.has_comments
    assert lifted.code == form.raw_text


def test_comment_forms_lift_nothing() -> None:
    form = read_forms(";; only prose")[0]
    assert CommentLifter().lift(form).fragments == ()


@pytest.mark.parametrize(
    "text, expected",
    [(";; doc", True), (";;; title", True), (";;", True), ("; code", False), (";", False), ("#!/bin/bb", False)],
)
def test_is_doc_comment(text: str, expected: bool) -> None:
    assert is_doc_comment(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [(";; doc", "doc"), (";;;; Title", "Title"), (";;   indented", "  indented"), (";;", "")],
)
def test_strip_comment_marker(text: str, expected: str) -> None:
    assert strip_comment_marker(text) == expected


def test_decode_string_literal() -> None:
    assert decode_string_literal('"a\\u0041\\101\\tb"') == "aAA\tb"
    assert decode_string_literal('"back\\\\slash"') == "back\\slash"


def test_cut_spans_drops_lines_left_blank() -> None:
    text = "(a\n  ;; x\n  b)"
    start = text.index(";;")
    assert cut_spans(text, [(start, start + 4)]) == "(a\n  b)"


def test_cut_spans_on_last_line() -> None:
    text = "(a\n  b)\n  ;; x"
    start = text.index(";;")
    assert cut_spans(text, [(start, len(text))]) == "(a\n  b)"


def test_cut_spans_leading_removal_takes_following_space() -> None:
    text = '(f\n  "doc" [x])'
    start = text.index('"doc"')
    assert cut_spans(text, [(start, start + 5)]) == "(f\n  [x])"
