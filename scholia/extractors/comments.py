"""Comment lifter - pulls comments out of a code form's body."""

from dataclasses import dataclass
from typing import List, Tuple

from scholia.models import CommentFragment, Form, TokenKind
from scholia.utils.text import cut_spans, is_doc_comment, strip_comment_marker

Span = Tuple[int, int]


@dataclass(frozen=True)
class LiftedComments:
    """Comments found inside a form, and the code left after lifting."""

    fragments: Tuple[CommentFragment, ...]
    code: str
    spans: Tuple[Span, ...] = ()  # Cut from the code; empty when not excluding

    @property
    def has_comments(self) -> bool:
        return bool(self.fragments)


class CommentLifter:
    """Collects the documentation comments embedded in a form.

    Each fragment keeps its line and nesting depth so the paragraph grouper
    can tell which lines belong together. Plain `;` comments stay in the code.
    """

    def __init__(self, exclude_lifted: bool = False) -> None:
        """Initialize the comment lifter.

        Args:
            exclude_lifted: Also remove lifted comments from the displayed code
        """
        self._exclude_lifted = exclude_lifted

    def lift(self, form: Form) -> LiftedComments:
        """Lift comments out of an expression form.

        Args:
            form: Top-level form; comment forms yield nothing

        Returns:
            Fragments in source order, with the displayed code
        """
        if not form.is_expression:
            return LiftedComments(fragments=(), code=form.raw_text)

        fragments: List[CommentFragment] = []
        depth = 0

        for token in form.tokens:
            if token.kind is TokenKind.OPEN:
                depth += 1
            elif token.kind is TokenKind.CLOSE:
                depth -= 1
            elif token.kind is TokenKind.COMMENT and is_doc_comment(token.text):
                fragments.append(
                    CommentFragment(
                        text=strip_comment_marker(token.text),
                        line=token.line,
                        depth=depth,
                        start=token.start - form.start,
                        end=token.end - form.start,
                    )
                )

        spans: Tuple[Span, ...] = ()
        code = form.raw_text
        if self._exclude_lifted and fragments:
            spans = tuple((f.start, f.end) for f in fragments)
            code = cut_spans(code, spans)

        return LiftedComments(fragments=tuple(fragments), code=code, spans=spans)
