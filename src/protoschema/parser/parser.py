# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for schema source text.

Pulls tokens from a :class:`~protoschema.parser.scanner.Scanner` with a single
token of lookahead and builds a :class:`~protoschema.model.entities.SchemaFile`.

Grammar::

    File      := (Message | Enum | <skip-one-token>)* EOF
    Message   := "message" Identifier "{" Field* "}"
    Field     := ("repeated")? ("optional")? Identifier Identifier "=" Number (";")?
    Enum      := "enum" Identifier "{" EnumValue* "}"
    EnumValue := Identifier "=" Number (";")?

Unrecognized tokens at the top level are skipped one at a time. Inside a
message or enum block every mismatch is fatal.
"""

from __future__ import annotations

import enum
import logging

from protoschema.config.settings import ParserOptions
from protoschema.model.entities import Enum, EnumValue, Field, Message, SchemaFile
from protoschema.parser.errors import ParseError, ParserStateError, SchemaError
from protoschema.parser.scanner import Scanner, Token, TokenKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParserState(enum.Enum):
    """Lifecycle of a single-use parser."""

    READY = "ready"
    DONE = "done"
    FAILED = "failed"


def parse(source: str, options: ParserOptions | None = None) -> SchemaFile:
    """Parse schema source text into a SchemaFile.

    Args:
        source: The full text of one schema file.
        options: Optional strictness switches; defaults are permissive.

    Returns:
        A SchemaFile holding messages and enums in declaration order.

    Raises:
        LexicalError: If the source contains a character the scanner rejects.
        ParseError: If the source is syntactically invalid.
    """
    return Parser(source, options).parse_file()


class Parser:
    """Single-use recursive-descent parser over one source string.

    The constructor scans the first token, so a lexical error at the very
    start of the input is raised from here.
    """

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        self._options = options or ParserOptions()
        self._scanner = Scanner(source, self._options)
        self._state = ParserState.READY
        self._current = self._scanner.next_token()

    @property
    def current(self) -> Token:
        """The lookahead token."""
        return self._current

    @property
    def state(self) -> ParserState:
        return self._state

    def parse_file(self) -> SchemaFile:
        """Parse the whole input and return the schema tree.

        Raises:
            ParserStateError: If this parser already completed or failed.
        """
        if self._state is not ParserState.READY:
            raise ParserStateError(f"Parser cannot be reused once {self._state.value}")
        try:
            result = self._parse_declarations()
        except SchemaError:
            self._state = ParserState.FAILED
            raise
        self._state = ParserState.DONE
        logger.debug("Parsed %d message(s) and %d enum(s)", len(result.messages), len(result.enums))
        return result

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def advance(self) -> None:
        """Discard the lookahead token and pull the next one from the scanner."""
        self._current = self._scanner.next_token()

    def expect(self, kind: TokenKind, text: str | None = None) -> Token:
        """Check the lookahead token without consuming it.

        Raises ParseError if its kind differs from *kind*, or if *text* is
        given and differs from the token text.
        """
        tok = self._current
        if tok.kind is not kind or (text is not None and tok.text != text):
            expected = repr(text) if text is not None else kind.value
            found = "<EOF>" if tok.kind is TokenKind.EOF else repr(tok.text)
            raise ParseError(f"Expected {expected}, got {found}", tok.line, tok.column, tok.text)
        return tok

    def _consume(self, kind: TokenKind, text: str | None = None) -> Token:
        """Expect a token and advance past it."""
        tok = self.expect(kind, text)
        self.advance()
        return tok

    def _check(self, kind: TokenKind, text: str) -> bool:
        return self._current.kind is kind and self._current.text == text

    def _accept(self, kind: TokenKind, text: str) -> Token | None:
        """Consume the lookahead token if it matches, otherwise leave it in place."""
        if not self._check(kind, text):
            return None
        tok = self._current
        self.advance()
        return tok

    def _consume_number(self) -> int:
        tok = self._consume(TokenKind.NUMBER)
        try:
            return int(tok.text)
        except ValueError as exc:
            # int() refuses digit runs beyond the interpreter's conversion limit.
            raise ParseError(
                f"Number literal too long ({len(tok.text)} digits)",
                tok.line,
                tok.column,
                tok.text,
            ) from exc

    # ------------------------------------------------------------------
    # Top-level declarations
    # ------------------------------------------------------------------

    def _parse_declarations(self) -> SchemaFile:
        messages: list[Message] = []
        enums: list[Enum] = []
        while self._current.kind is not TokenKind.EOF:
            if self._check(TokenKind.KEYWORD, "message"):
                messages.append(self.parse_message())
            elif self._check(TokenKind.KEYWORD, "enum"):
                enums.append(self.parse_enum())
            else:
                tok = self._current
                logger.debug(
                    "Skipping top-level token %r at line %d, column %d",
                    tok.text,
                    tok.line,
                    tok.column,
                )
                self.advance()
        return SchemaFile(messages=messages, enums=enums)

    # ------------------------------------------------------------------
    # Message declarations
    # ------------------------------------------------------------------

    def parse_message(self) -> Message:
        """Parse: message <Name> { <Field>* }"""
        self._consume(TokenKind.KEYWORD, "message")
        name_tok = self._consume(TokenKind.IDENTIFIER)
        self._consume(TokenKind.SYMBOL, "{")
        fields: list[Field] = []
        # parse_field fails on EOF, so an unclosed block cannot loop forever.
        while not self._check(TokenKind.SYMBOL, "}"):
            fields.append(self.parse_field())
        self.advance()  # consume }
        return Message(name=name_tok.text, fields=fields)

    def parse_field(self) -> Field:
        """Parse: [repeated] [optional] <Type> <name> = <number> [;]"""
        repeated = self._accept(TokenKind.KEYWORD, "repeated") is not None
        optional_tok = self._accept(TokenKind.KEYWORD, "optional")
        if repeated and optional_tok is not None and self._options.reject_conflicting_modifiers:
            raise ParseError(
                "Field cannot be both 'repeated' and 'optional'",
                optional_tok.line,
                optional_tok.column,
                optional_tok.text,
            )
        type_tok = self._consume(TokenKind.IDENTIFIER)
        name_tok = self._consume(TokenKind.IDENTIFIER)
        self._consume(TokenKind.SYMBOL, "=")
        number = self._consume_number()
        self._accept(TokenKind.SYMBOL, ";")
        return Field(
            type_name=type_tok.text,
            name=name_tok.text,
            number=number,
            repeated=repeated,
            optional=optional_tok is not None,
        )

    # ------------------------------------------------------------------
    # Enum declarations
    # ------------------------------------------------------------------

    def parse_enum(self) -> Enum:
        """Parse: enum <Name> { <EnumValue>* }"""
        self._consume(TokenKind.KEYWORD, "enum")
        name_tok = self._consume(TokenKind.IDENTIFIER)
        self._consume(TokenKind.SYMBOL, "{")
        values: list[EnumValue] = []
        while not self._check(TokenKind.SYMBOL, "}"):
            values.append(self.parse_enum_value())
        self.advance()  # consume }
        return Enum(name=name_tok.text, values=values)

    def parse_enum_value(self) -> EnumValue:
        """Parse: <Name> = <number> [;]"""
        name_tok = self._consume(TokenKind.IDENTIFIER)
        self._consume(TokenKind.SYMBOL, "=")
        number = self._consume_number()
        self._accept(TokenKind.SYMBOL, ";")
        return EnumValue(name=name_tok.text, number=number)
