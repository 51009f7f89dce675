"""Lexer for Clojure source text.

Splits text into tokens so that comment markers inside strings, regexes and
character literals are never mistaken for comments.
"""

from typing import List

from scholia.exceptions import ScholiaSyntaxError
from scholia.models import Token, TokenKind

# Characters that end a symbol, keyword or number.
_TERMINATING = set('";@^`~()[]{}\\,')
_PREFIXES = ("~@", "'", "`", "~", "@", "^")
BOM = "\ufeff"


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() or ch == ","


def _is_terminator(ch: str) -> bool:
    return ch.isspace() or ch in _TERMINATING


class Lexer:
    """Tokenizer for a single source text."""

    def __init__(self, text: str) -> None:
        """Initialize the lexer.

        Args:
            text: Source text to tokenize
        """
        self._text = text
        # A leading byte-order mark is not source text.
        self._pos = 1 if text.startswith(BOM) else 0
        self._line = 1

    def tokenize(self) -> List[Token]:
        """Tokenize the whole text.

        Returns:
            Tokens in source order; concatenated, their texts equal the input
            minus any leading byte-order mark

        Raises:
            ScholiaSyntaxError: On unterminated strings, regexes or characters
        """
        tokens: List[Token] = []
        while self._pos < len(self._text):
            tokens.append(self._next_token())
        return tokens

    def _next_token(self) -> Token:
        text = self._text
        pos = self._pos
        ch = text[pos]

        if _is_whitespace(ch):
            end = pos
            while end < len(text) and _is_whitespace(text[end]):
                end += 1
            return self._emit(TokenKind.WHITESPACE, end)

        if ch == ";":
            return self._read_line_comment()

        if ch == '"':
            return self._read_string(TokenKind.STRING, pos + 1, "string")

        if ch == "\\":
            return self._read_char()

        if ch in "([{":
            return self._emit(TokenKind.OPEN, pos + 1)

        if ch in ")]}":
            return self._emit(TokenKind.CLOSE, pos + 1)

        if ch == "#":
            return self._read_dispatch()

        for prefix in _PREFIXES:
            if text.startswith(prefix, pos):
                return self._emit(TokenKind.PREFIX, pos + len(prefix))

        return self._read_atom(pos)

    def _emit(self, kind: TokenKind, end: int) -> Token:
        start = self._pos
        text = self._text[start:end]
        line = self._line
        self._line += text.count("\n")
        self._pos = end
        return Token(kind=kind, text=text, start=start, end=end, line=line, end_line=self._line)

    def _read_line_comment(self) -> Token:
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        elif end > self._pos and self._text[end - 1] == "\r":
            end -= 1
        return self._emit(TokenKind.COMMENT, end)

    def _read_string(self, kind: TokenKind, body_start: int, label: str) -> Token:
        text = self._text
        i = body_start
        while i < len(text):
            ch = text[i]
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                return self._emit(kind, i + 1)
            i += 1
        raise ScholiaSyntaxError(f"Unterminated {label} literal", line=self._line)

    def _read_char(self) -> Token:
        text = self._text
        i = self._pos + 1
        if i >= len(text):
            raise ScholiaSyntaxError("Unterminated character literal", line=self._line)
        first = text[i]
        i += 1
        # Named and unicode characters: \newline, \space, λ, \o101
        if first.isalnum():
            while i < len(text) and not _is_terminator(text[i]):
                i += 1
        return self._emit(TokenKind.CHAR, i)

    def _read_dispatch(self) -> Token:
        text = self._text
        pos = self._pos
        nxt = text[pos + 1] if pos + 1 < len(text) else ""

        if nxt == "":
            raise ScholiaSyntaxError("Unexpected end of input after '#'", line=self._line)

        if nxt == '"':
            return self._read_string(TokenKind.REGEX, pos + 2, "regex")

        if nxt in "({":
            return self._emit(TokenKind.OPEN, pos + 2)

        if nxt == "?":
            if text.startswith("@(", pos + 2):
                return self._emit(TokenKind.OPEN, pos + 4)
            if text.startswith("(", pos + 2):
                return self._emit(TokenKind.OPEN, pos + 3)
            return self._read_atom(pos)

        if nxt == ":":
            end = pos + 2
            while end < len(text) and not _is_terminator(text[end]):
                end += 1
            if text.startswith("{", end):
                return self._emit(TokenKind.OPEN, end + 1)
            return self._read_atom(pos)

        if nxt in "_'^=":
            return self._emit(TokenKind.PREFIX, pos + 2)

        if nxt == "!":
            return self._read_line_comment()

        if nxt == "#":
            return self._read_atom(pos)

        # Tagged literal such as #inst or #js
        end = pos + 1
        while end < len(text) and not _is_terminator(text[end]):
            end += 1
        return self._emit(TokenKind.PREFIX, end)

    def _read_atom(self, start: int) -> Token:
        end = start + 1
        while end < len(self._text) and not _is_terminator(self._text[end]):
            end += 1
        return self._emit(TokenKind.ATOM, end)


def tokenize(text: str) -> List[Token]:
    """Tokenize source text.

    Args:
        text: Source text

    Returns:
        List of tokens in source order
    """
    return Lexer(text).tokenize()
