# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for schema source text.

Produces classified tokens one at a time from a source string. The scanner
keeps no token buffer: each call to :meth:`Scanner.next_token` scans exactly
one token starting at the current cursor.
"""

from __future__ import annotations

import enum
import string
from collections.abc import Iterator
from dataclasses import dataclass, replace

from protoschema.config.settings import ParserOptions
from protoschema.parser.errors import LexicalError, UnterminatedStringError

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds known to the scanner."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string literal"
    NUMBER = "number"
    SYMBOL = "symbol"
    # Reserved; comments are not recognized by the scanner.
    COMMENT = "comment"
    EOF = "end of input"


KEYWORDS: frozenset[str] = frozenset({"message", "enum", "repeated", "optional"})


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        kind: The kind of token.
        text: The raw text of the token (string contents without quotes for
            STRING_LITERAL tokens, empty for EOF).
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    kind: TokenKind
    text: str
    line: int
    column: int


@dataclass
class Cursor:
    """Scan position within the source: offset plus 1-based line and column."""

    pos: int = 0
    line: int = 1
    column: int = 1


class Scanner:
    """Pull-based scanner over a single source string."""

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._cursor = Cursor()

    @property
    def cursor(self) -> Cursor:
        """A snapshot of the current scan position."""
        return replace(self._cursor)

    def next_token(self) -> Token:
        """Scan and return the next token.

        Once the input is exhausted every further call returns an EOF token at
        the end position.

        Raises:
            LexicalError: On a character outside every token category.
            UnterminatedStringError: On an unterminated string literal when
                strict string handling is enabled.
        """
        self._skip_whitespace()
        ch = self._current()
        line = self._cursor.line
        col = self._cursor.column

        if ch == "":
            return Token(TokenKind.EOF, "", line, col)
        if ch in _IDENT_START:
            return self._scan_word(line, col)
        if ch in _DIGITS:
            return self._scan_number(line, col)
        if ch == '"':
            return self._scan_string(line, col)
        if ch in _PUNCTUATION:
            self._advance()
            return Token(TokenKind.SYMBOL, ch, line, col)
        raise LexicalError(f"Unexpected character: {ch!r}", line, col, ch)

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the cursor, or '' at end of input."""
        if self._cursor.pos < len(self._source):
            return self._source[self._cursor.pos]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update line/column, and return it."""
        ch = self._source[self._cursor.pos]
        self._cursor.pos += 1
        if ch == "\n":
            self._cursor.line += 1
            self._cursor.column = 1
        else:
            self._cursor.column += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._current() in _WHITESPACE:
            self._advance()

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _consume_run(self, chars: frozenset[str]) -> str:
        """Consume the maximal run of characters drawn from *chars*."""
        start = self._cursor.pos
        while self._current() in chars:
            self._advance()
        return self._source[start : self._cursor.pos]

    def _scan_word(self, line: int, col: int) -> Token:
        """Scan an identifier and classify it as a keyword if applicable."""
        word = self._consume_run(_IDENT_CHARS)
        kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
        return Token(kind, word, line, col)

    def _scan_number(self, line: int, col: int) -> Token:
        """Scan an unsigned decimal integer literal."""
        return Token(TokenKind.NUMBER, self._consume_run(_DIGITS), line, col)

    def _scan_string(self, line: int, col: int) -> Token:
        """Scan a double-quoted string literal verbatim (no escape sequences).

        An unterminated literal swallows the rest of the input unless strict
        string handling is enabled.
        """
        self._advance()  # opening "
        start = self._cursor.pos
        while self._current() not in ('"', ""):
            self._advance()
        value = self._source[start : self._cursor.pos]
        if self._current() == '"':
            self._advance()  # closing "
        elif self._options.strict_strings:
            raise UnterminatedStringError("Unterminated string literal", line, col, '"' + value)
        return Token(TokenKind.STRING_LITERAL, value, line, col)


def iter_tokens(source: str, options: ParserOptions | None = None) -> Iterator[Token]:
    """Yield the tokens of *source* lazily, ending with exactly one EOF token."""
    scanner = Scanner(source, options)
    while True:
        tok = scanner.next_token()
        yield tok
        if tok.kind is TokenKind.EOF:
            return


# ################
# Implementation
# ################

_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
# "@" is outside the symbol alphabet and is rejected like any unknown character.
_PUNCTUATION = frozenset(string.punctuation) - {"@"}
_WHITESPACE = frozenset(" \t\r\n")
