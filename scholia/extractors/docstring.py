"""Docstring extraction for definition forms."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from scholia.exceptions import UnsupportedFormError
from scholia.models import DefinitionShape, Form, Node, NodeKind
from scholia.utils.text import cut_spans, decode_string_literal

logger = logging.getLogger(__name__)

Span = Tuple[int, int]


@dataclass(frozen=True)
class ShapeRule:
    """Where a definition shape keeps its docstring.

    The docstring, when present, is the string right after the name.
    `requires_body` means that string only counts when something follows it,
    so `(def greeting "hello")` is a value, not a docstring.
    """

    shape: DefinitionShape
    has_docstring: bool = True
    requires_body: bool = True


SHAPE_RULES: Dict[DefinitionShape, ShapeRule] = {
    DefinitionShape.NAMESPACE: ShapeRule(DefinitionShape.NAMESPACE, requires_body=False),
    DefinitionShape.VALUE: ShapeRule(DefinitionShape.VALUE),
    DefinitionShape.FUNCTION: ShapeRule(DefinitionShape.FUNCTION),
    DefinitionShape.MULTIMETHOD: ShapeRule(DefinitionShape.MULTIMETHOD),
    DefinitionShape.PROTOCOL: ShapeRule(DefinitionShape.PROTOCOL, requires_body=False),
    DefinitionShape.GENERIC: ShapeRule(DefinitionShape.GENERIC),
    DefinitionShape.NO_DOCSTRING: ShapeRule(
        DefinitionShape.NO_DOCSTRING, has_docstring=False, requires_body=False
    ),
}

DEFINITION_HEADS: Dict[str, DefinitionShape] = {
    "ns": DefinitionShape.NAMESPACE,
    "def": DefinitionShape.VALUE,
    "defonce": DefinitionShape.VALUE,
    "defn": DefinitionShape.FUNCTION,
    "defn-": DefinitionShape.FUNCTION,
    "defmacro": DefinitionShape.FUNCTION,
    "defmulti": DefinitionShape.MULTIMETHOD,
    "defprotocol": DefinitionShape.PROTOCOL,
    "defmethod": DefinitionShape.NO_DOCSTRING,
    "defrecord": DefinitionShape.NO_DOCSTRING,
    "deftype": DefinitionShape.NO_DOCSTRING,
    "definterface": DefinitionShape.NO_DOCSTRING,
    "defstruct": DefinitionShape.NO_DOCSTRING,
}


@dataclass(frozen=True)
class ExtractedDocstring:
    """Docstring found on a form, plus the spans to cut from its code."""

    docstring: Optional[str] = None
    shape: Optional[DefinitionShape] = None
    name: Optional[str] = None
    spans: Tuple[Span, ...] = ()


def head_name(node: Node) -> Optional[str]:
    """Unqualified name of a list's head symbol, e.g. `defn` for `clojure.core/defn`."""
    if node.kind is not NodeKind.LIST:
        return None
    head = node.head
    if head is None or head.kind is not NodeKind.SYMBOL:
        return None
    text = head.text
    if "/" in text[1:]:
        text = text.rsplit("/", 1)[1]
    return text


class DocstringExtractor:
    """Finds docstrings by the grammatical shape of definition forms."""

    def classify(self, node: Node) -> Optional[DefinitionShape]:
        """Return the definition shape of `node`, or None for non-definitions."""
        name = head_name(node)
        if name is None:
            return None
        shape = DEFINITION_HEADS.get(name)
        if shape is None and name.startswith("def"):
            shape = DefinitionShape.GENERIC
        return shape

    def extract(self, form: Form) -> ExtractedDocstring:
        """Extract the docstring attached to an expression form.

        Args:
            form: Top-level form

        Returns:
            The docstring (None when the form has none) and the spans,
            relative to the form, that hold it in the displayed code
        """
        if not form.is_expression or form.node is None:
            return ExtractedDocstring()

        shape = self.classify(form.node)
        if shape is None:
            return ExtractedDocstring()

        try:
            return self._extract_for_shape(form, form.node, SHAPE_RULES[shape])
        except UnsupportedFormError as e:
            logger.debug(f"No docstring position on line {form.start_line}: {e}")
            return ExtractedDocstring(shape=shape)

    def display_code(self, form: Form) -> str:
        """The form's code with its docstring removed."""
        return cut_spans(form.raw_text, self.extract(form).spans)

    def find_namespace(self, forms: Sequence[Form]) -> Optional[str]:
        """Name of the first `ns` form, if there is one."""
        for form in forms:
            if form.node is None or self.classify(form.node) is not DefinitionShape.NAMESPACE:
                continue
            extracted = self.extract(form)
            if extracted.name:
                return extracted.name
        return None

    def _extract_for_shape(
        self, form: Form, node: Node, rule: ShapeRule
    ) -> ExtractedDocstring:
        elements = node.elements
        head = elements[0].text

        if len(elements) < 2:
            raise UnsupportedFormError(f"({head}) has no name", head=head)

        name_node, wrappers = self._unwrap_meta(elements[1])
        if name_node.kind is not NodeKind.SYMBOL:
            raise UnsupportedFormError(
                f"({head} ...) names a {name_node.kind.value}, not a symbol", head=head
            )

        if not rule.has_docstring:
            return ExtractedDocstring(shape=rule.shape, name=name_node.text)

        candidate = elements[2] if len(elements) > 2 else None
        if (
            candidate is not None
            and candidate.kind is NodeKind.STRING
            and (len(elements) > 3 or not rule.requires_body)
        ):
            return ExtractedDocstring(
                docstring=decode_string_literal(candidate.text),
                shape=rule.shape,
                name=name_node.text,
                spans=((candidate.start - form.start, candidate.end - form.start),),
            )

        for wrapper in wrappers:
            found = self._metadata_docstring(form, wrapper)
            if found is not None:
                docstring, spans = found
                return ExtractedDocstring(
                    docstring=docstring,
                    shape=rule.shape,
                    name=name_node.text,
                    spans=spans,
                )

        return ExtractedDocstring(shape=rule.shape, name=name_node.text)

    @staticmethod
    def _unwrap_meta(node: Node) -> Tuple[Node, List[Node]]:
        wrappers: List[Node] = []
        while node.kind is NodeKind.META:
            wrappers.append(node)
            node = node.children[1]
        return node, wrappers

    @staticmethod
    def _metadata_docstring(
        form: Form, wrapper: Node
    ) -> Optional[Tuple[str, Tuple[Span, ...]]]:
        """Docstring from `^{:doc "..."}` metadata on the name.

        The metadata is cut from the code only when `:doc` is all it holds.
        """
        meta, target = wrapper.children
        if meta.kind is not NodeKind.MAP:
            return None

        entries = meta.elements
        for k in range(0, len(entries) - 1, 2):
            key, value = entries[k], entries[k + 1]
            if key.kind is NodeKind.KEYWORD and key.text == ":doc" and value.kind is NodeKind.STRING:
                spans: Tuple[Span, ...] = ()
                if len(entries) == 2:
                    spans = ((wrapper.start - form.start, target.start - form.start),)
                return decode_string_literal(value.text), spans
        return None
