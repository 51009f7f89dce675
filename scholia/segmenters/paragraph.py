"""Paragraph grouper for comment text."""

from typing import List, Optional, Sequence

from scholia.models import CommentFragment, DocContent, Form

PARAGRAPH_SEPARATOR = "\n\n"


class ParagraphGrouper:
    """Groups comment lines into paragraphs and merges a form's doc text."""

    def group(self, fragments: Sequence[CommentFragment]) -> List[str]:
        """Group comment fragments into paragraphs.

        Fragments on adjacent lines at the same depth share a paragraph and
        are joined with a single newline. Anything else starts a new one.
        Paragraphs made only of blank comment lines are dropped.

        Args:
            fragments: Comment fragments in source order

        Returns:
            Paragraph texts in source order
        """
        paragraphs: List[str] = []
        current: List[str] = []
        previous: Optional[CommentFragment] = None

        for fragment in fragments:
            if previous is not None and not self._continues(previous, fragment):
                self._flush(paragraphs, current)
                current = []
            current.append(fragment.text)
            previous = fragment

        self._flush(paragraphs, current)
        return paragraphs

    def prelude_paragraphs(self, form: Form) -> List[str]:
        """Paragraphs of a leading comment form."""
        fragments = [
            CommentFragment(text=line, line=form.start_line + offset)
            for offset, line in enumerate(form.lines)
        ]
        return self.group(fragments)

    def merge(self, content: DocContent) -> Optional[str]:
        """Merge a form's doc pieces into its final docstring.

        Order: docstring, a blank line, the prelude, then the lifted block.
        The lifted block opens with a newline, so it sits two blank lines
        below the docstring when there is no prelude. A blank `;;` line at
        the end of a prelude adds one more.

        Args:
            content: Unmerged doc pieces

        Returns:
            Merged docstring, or the bare docstring when there is nothing to add
        """
        if content.is_empty:
            return content.docstring

        text = (content.docstring or "") + PARAGRAPH_SEPARATOR

        if content.prelude_paragraphs:
            text += PARAGRAPH_SEPARATOR.join(content.prelude_paragraphs)
            if content.lifted_paragraphs:
                text += "\n"

        if content.lifted_paragraphs:
            text += "\n" + PARAGRAPH_SEPARATOR.join(content.lifted_paragraphs)

        return text

    @staticmethod
    def _flush(paragraphs: List[str], lines: List[str]) -> None:
        text = "\n".join(lines)
        if text.strip():
            paragraphs.append(text)

    @staticmethod
    def _continues(previous: CommentFragment, fragment: CommentFragment) -> bool:
        return fragment.line == previous.line + 1 and fragment.depth == previous.depth
