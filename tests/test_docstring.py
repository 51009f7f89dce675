from __future__ import annotations

import logging

import pytest

from scholia.extractors import DocstringExtractor
from scholia.models import DefinitionShape, Form
from scholia.reader import read_forms


def _form(text: str) -> Form:
    return read_forms(text)[0]


@pytest.fixture
def extractor() -> DocstringExtractor:
    return DocstringExtractor()


@pytest.mark.parametrize(
    "text, shape, docstring",
    [
        ('(ns demo.core "Demo." (:require [a]))', DefinitionShape.NAMESPACE, "Demo."),
        ('(ns demo "Only a docstring.")', DefinitionShape.NAMESPACE, "Only a docstring."),
        ('(def x "The x." 42)', DefinitionShape.VALUE, "The x."),
        ('(defonce cache "Shared." (atom {}))', DefinitionShape.VALUE, "Shared."),
        ('(defn f "Fn." [x] x)', DefinitionShape.FUNCTION, "Fn."),
        ('(defn- g "Private." [] 1)', DefinitionShape.FUNCTION, "Private."),
        ('(defmacro m "Macro." [& body] body)', DefinitionShape.FUNCTION, "Macro."),
        ('(defmulti area "Area." :kind)', DefinitionShape.MULTIMETHOD, "Area."),
        ('(defprotocol Shape "Shapes." (area [s]))', DefinitionShape.PROTOCOL, "Shapes."),
        ('(defschema User "A user." {:a 1})', DefinitionShape.GENERIC, "A user."),
    ],
)
def test_docstring_by_shape(
    extractor: DocstringExtractor, text: str, shape: DefinitionShape, docstring: str
) -> None:
    extracted = extractor.extract(_form(text))
    assert extracted.shape is shape
    assert extracted.docstring == docstring


def test_value_definition_string_is_not_a_docstring(extractor: DocstringExtractor) -> None:
    extracted = extractor.extract(_form('(def greeting "hello")'))
    assert extracted.shape is DefinitionShape.VALUE
    assert extracted.name == "greeting"
    assert extracted.docstring is None


@pytest.mark.parametrize(
    "text",
    [
        '(defmethod area :circle "not a docstring" [c] 1)',
        '(defrecord Point [x y])',
        '(deftype Box [v])',
    ],
)
def test_shapes_without_docstrings(extractor: DocstringExtractor, text: str) -> None:
    extracted = extractor.extract(_form(text))
    assert extracted.shape is DefinitionShape.NO_DOCSTRING
    assert extracted.docstring is None
    assert extracted.spans == ()


def test_docstring_is_removed_from_displayed_code(extractor: DocstringExtractor) -> None:
    form = _form('(defn inc1\n  "Adds one."\n  [x]\n  (inc x))')
    assert extractor.display_code(form) == "(defn inc1\n  [x]\n  (inc x))"


def test_docstring_on_the_name_line_is_cut_inline(extractor: DocstringExtractor) -> None:
    form = _form('(defn f "Doc." [x]\n  x)')
    assert extractor.display_code(form) == "(defn f [x]\n  x)"


def test_qualified_head(extractor: DocstringExtractor) -> None:
    extracted = extractor.extract(_form('(clojure.core/defn f "Doc." [] 1)'))
    assert extracted.shape is DefinitionShape.FUNCTION
    assert extracted.docstring == "Doc."


def test_metadata_on_name_is_skipped(extractor: DocstringExtractor) -> None:
    extracted = extractor.extract(_form('(defn ^:private f "Hidden." [] 1)'))
    assert extracted.name == "f"
    assert extracted.docstring == "Hidden."


def test_docstring_from_doc_metadata(extractor: DocstringExtractor) -> None:
    form = _form('(defn ^{:doc "From meta."} f [x] x)')
    assert extractor.extract(form).docstring == "From meta."
    assert extractor.display_code(form) == "(defn f [x] x)"


def test_doc_metadata_with_other_keys_stays_in_code(extractor: DocstringExtractor) -> None:
    form = _form('(defn ^{:doc "D." :added "1.0"} f [] 1)')
    assert extractor.extract(form).docstring == "D."
    assert extractor.display_code(form) == form.raw_text


def test_discarded_string_is_not_the_docstring(extractor: DocstringExtractor) -> None:
    extracted = extractor.extract(_form('(defn f #_"old" "Real." [] 1)'))
    assert extracted.docstring == "Real."


def test_escapes_are_decoded(extractor: DocstringExtractor) -> None:
    extracted = extractor.extract(_form('(defn f "One\\nTwo \\"q\\"" [] 1)'))
    assert extracted.docstring == 'One\nTwo "q"'


def test_unsupported_forms_fall_back_to_no_docstring(
    extractor: DocstringExtractor, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="scholia.extractors.docstring"):
        bare = extractor.extract(_form("(defn)"))
        unnamed = extractor.extract(_form('(def "oops" 1)'))

    assert bare.docstring is None
    assert bare.shape is DefinitionShape.FUNCTION
    assert unnamed.docstring is None
    assert "No docstring position" in caplog.text


@pytest.mark.parametrize("text", ['(println "hi" 1)', "(:a m)", "[1 2]", ":kw", '"str"'])
def test_non_definitions_have_no_shape(extractor: DocstringExtractor, text: str) -> None:
    extracted = extractor.extract(_form(text))
    assert extracted.shape is None
    assert extracted.docstring is None


def test_find_namespace(extractor: DocstringExtractor) -> None:
    forms = read_forms(";; header\n(comment 1)\n(ns a.b)\n(ns c)")
    assert extractor.find_namespace(forms) == "a.b"
    assert extractor.find_namespace(read_forms("(def x 1)")) is None
