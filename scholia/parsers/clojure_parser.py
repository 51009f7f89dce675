"""Clojure source parser."""

import logging
from typing import List, Optional

from scholia.config import ParseOptions
from scholia.extractors import DocstringExtractor
from scholia.models import Document
from scholia.parsers.assembler import SectionAssembler
from scholia.parsers.base import SourceParser
from scholia.reader import FormReader

logger = logging.getLogger(__name__)


class ClojureParser(SourceParser):
    """Parser for Clojure, ClojureScript and cljc/cljx sources."""

    def __init__(self) -> None:
        """Initialize the Clojure parser."""
        self._reader = FormReader()
        self._extractor = DocstringExtractor()

    def supported_extensions(self) -> List[str]:
        """Return supported file extensions."""
        return [".clj", ".cljs", ".cljc", ".cljx"]

    def parse_text(
        self,
        text: str,
        options: Optional[ParseOptions] = None,
        filename: str = "<string>",
    ) -> Document:
        """Parse Clojure source text into sections.

        Args:
            text: Source text
            options: Parse flags; defaults to no lifting
            filename: Name recorded on the document

        Returns:
            Document with sections in source order

        Raises:
            ScholiaSyntaxError: On unterminated literals or unbalanced nesting
        """
        forms = self._reader.read(text)
        assembler = SectionAssembler(options=options, extractor=self._extractor)
        sections = assembler.assemble(forms)
        namespace = self._extractor.find_namespace(forms)

        logger.debug(
            f"Parsed {filename}: {len(forms)} forms, {len(sections)} sections"
        )

        return Document(
            filename=filename,
            sections=tuple(sections),
            namespace=namespace,
            raw_text=text,
        )


def parse(text: str, options: Optional[ParseOptions] = None) -> Document:
    """Parse Clojure source text.

    Args:
        text: Source text
        options: Parse flags

    Returns:
        Parsed document
    """
    return ClojureParser().parse_text(text, options=options)
