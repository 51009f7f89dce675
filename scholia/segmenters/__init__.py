"""Paragraph segmentation for Scholia doc text."""

from scholia.segmenters.paragraph import ParagraphGrouper, PARAGRAPH_SEPARATOR

__all__ = [
    "ParagraphGrouper",
    "PARAGRAPH_SEPARATOR",
]
