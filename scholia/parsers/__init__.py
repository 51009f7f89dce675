"""Source parsers for Scholia."""

from scholia.parsers.base import SourceParser
from scholia.parsers.assembler import SectionAssembler
from scholia.parsers.clojure_parser import ClojureParser, parse
from scholia.parsers.factory import ParserFactory

__all__ = [
    "SourceParser",
    "SectionAssembler",
    "ClojureParser",
    "ParserFactory",
    "parse",
]
