"""Section assembler - turns forms into ordered sections."""

from typing import List, Optional, Sequence, Tuple

from scholia.config import ParseOptions
from scholia.extractors import CommentLifter, DocstringExtractor
from scholia.models import DocContent, Form, Section, SectionType
from scholia.segmenters import ParagraphGrouper
from scholia.utils.text import cut_spans


class SectionAssembler:
    """Walks forms in order and emits one section per unit of output.

    A comment form directly above an expression (no blank line between) is
    that expression's prelude and is folded into its docstring. Any other
    comment form becomes a standalone comment section.
    """

    def __init__(
        self,
        options: Optional[ParseOptions] = None,
        extractor: Optional[DocstringExtractor] = None,
        grouper: Optional[ParagraphGrouper] = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            options: Parse flags; defaults to no lifting
            extractor: Docstring extractor
            grouper: Paragraph grouper
        """
        self._options = options or ParseOptions()
        self._extractor = extractor or DocstringExtractor()
        self._grouper = grouper or ParagraphGrouper()
        self._lifter = CommentLifter(exclude_lifted=self._options.exclude_lifted_comments)

    @property
    def options(self) -> ParseOptions:
        return self._options

    def assemble(self, forms: Sequence[Form]) -> List[Section]:
        """Assemble sections from forms.

        Args:
            forms: Forms in source order

        Returns:
            Sections in source order
        """
        sections: List[Section] = []
        pending: Optional[Form] = None

        for form in forms:
            if form.is_comment:
                if pending is not None:
                    sections.append(self._comment_section(pending))
                pending = form
                continue

            prelude: Optional[Form] = None
            if pending is not None:
                if pending.end_line + 1 == form.start_line:
                    prelude = pending
                else:
                    sections.append(self._comment_section(pending))
                pending = None

            section = self._code_section(form, prelude)

            previous = sections[-1] if sections else None
            if (
                self._options.merge_adjacent_code
                and prelude is None
                and previous is not None
                and previous.is_code
                and previous.end_line + 1 == section.start_line
            ):
                sections[-1] = self._merge_code(previous, section)
            else:
                sections.append(section)

        if pending is not None:
            sections.append(self._comment_section(pending))

        return sections

    def doc_content(self, form: Form, prelude: Optional[Form] = None) -> DocContent:
        """Collect the unmerged doc pieces of an expression form."""
        content, _ = self._collect(form, prelude)
        return content

    def _collect(
        self, form: Form, prelude: Optional[Form]
    ) -> Tuple[DocContent, List[Tuple[int, int]]]:
        extracted = self._extractor.extract(form)
        spans = list(extracted.spans)

        lifted_paragraphs: Tuple[str, ...] = ()
        if self._options.lift_inline_comments:
            lifted = self._lifter.lift(form)
            spans.extend(lifted.spans)
            lifted_paragraphs = tuple(self._grouper.group(lifted.fragments))

        prelude_paragraphs: Tuple[str, ...] = ()
        if prelude is not None:
            prelude_paragraphs = tuple(self._grouper.prelude_paragraphs(prelude))

        content = DocContent(
            docstring=extracted.docstring,
            prelude_paragraphs=prelude_paragraphs,
            lifted_paragraphs=lifted_paragraphs,
        )
        return content, spans

    def _code_section(self, form: Form, prelude: Optional[Form]) -> Section:
        content, spans = self._collect(form, prelude)
        return Section(
            type=SectionType.CODE,
            raw=cut_spans(form.raw_text, spans),
            docstring=self._grouper.merge(content),
            start_line=prelude.start_line if prelude is not None else form.start_line,
            end_line=form.end_line,
        )

    @staticmethod
    def _comment_section(form: Form) -> Section:
        return Section(
            type=SectionType.COMMENT,
            raw=form.raw_text,
            docstring=form.raw_text,
            start_line=form.start_line,
            end_line=form.end_line,
        )

    @staticmethod
    def _merge_code(first: Section, second: Section) -> Section:
        docstring: Optional[str] = None
        if first.docstring is not None or second.docstring is not None:
            docstring = (first.docstring or "") + "\n\n" + (second.docstring or "")
        return Section(
            type=SectionType.CODE,
            raw=first.raw + "\n" + second.raw,
            docstring=docstring,
            start_line=first.start_line,
            end_line=second.end_line,
        )
