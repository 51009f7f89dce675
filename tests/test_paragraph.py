from __future__ import annotations

from scholia.models import CommentFragment, DocContent
from scholia.reader import read_forms
from scholia.segmenters import ParagraphGrouper


def _frag(text: str, line: int, depth: int = 1) -> CommentFragment:
    return CommentFragment(text=text, line=line, depth=depth)


def test_adjacent_lines_share_a_paragraph() -> None:
    grouper = ParagraphGrouper()
    assert grouper.group([_frag("B", 4), _frag("C", 5)]) == ["B\nC"]


def test_line_gap_starts_a_new_paragraph() -> None:
    grouper = ParagraphGrouper()
    assert grouper.group([_frag("B", 4), _frag("C", 5), _frag("D", 7)]) == ["B\nC", "D"]


def test_depth_change_starts_a_new_paragraph() -> None:
    grouper = ParagraphGrouper()
    assert grouper.group([_frag("outer", 3, 1), _frag("inner", 4, 2)]) == ["outer", "inner"]


def test_group_of_nothing_is_empty() -> None:
    assert ParagraphGrouper().group([]) == []


def test_blank_only_paragraphs_are_dropped() -> None:
    grouper = ParagraphGrouper()
    assert grouper.group([_frag("", 3)]) == []
    assert grouper.group([_frag("", 3), _frag("B", 5)]) == ["B"]
    assert grouper.prelude_paragraphs(read_forms(";;\n;;")[0]) == []


def test_prelude_paragraphs_keep_blank_marker_lines() -> None:
    form = read_forms(";; A\n;;\n;; B")[0]
    assert ParagraphGrouper().prelude_paragraphs(form) == ["A\n\nB"]


def test_merge_without_extra_content_returns_docstring() -> None:
    grouper = ParagraphGrouper()
    assert grouper.merge(DocContent(docstring="doc")) == "doc"
    assert grouper.merge(DocContent()) is None


def test_merge_lifted_only() -> None:
    content = DocContent(docstring="docstring", lifted_paragraphs=("A",))
    assert ParagraphGrouper().merge(content) == "docstring\n\n\nA"


def test_merge_prelude_only() -> None:
    content = DocContent(docstring="docstring", prelude_paragraphs=("A",))
    assert ParagraphGrouper().merge(content) == "docstring\n\nA"


def test_merge_prelude_and_lifted() -> None:
    content = DocContent(
        docstring="docstring",
        prelude_paragraphs=("A",),
        lifted_paragraphs=("B", "C"),
    )
    assert ParagraphGrouper().merge(content) == "docstring\n\nA\n\nB\n\nC"


def test_merge_without_docstring() -> None:
    content = DocContent(prelude_paragraphs=("Prose.",))
    assert ParagraphGrouper().merge(content) == "\n\nProse."
