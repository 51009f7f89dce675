"""Source reader for Scholia: lexer and top-level form reader."""

from scholia.reader.lexer import Lexer, tokenize
from scholia.reader.forms import FormReader, read_forms

__all__ = [
    "Lexer",
    "tokenize",
    "FormReader",
    "read_forms",
]
