# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error types raised while scanning and parsing schema source text."""

# ###############
# Public Interface
# ###############


class SchemaError(Exception):
    """Base class for all positioned scanning and parsing failures.

    Attributes:
        line: 1-based line number of the offending input.
        column: 1-based column number of the offending input.
        text: The offending token text (or character), empty at end of input.
    """

    def __init__(self, message: str, line: int, column: int, text: str = "") -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column
        self.text = text


class LexicalError(SchemaError):
    """Raised when the scanner meets a character it cannot classify."""


class UnterminatedStringError(LexicalError):
    """Raised in strict mode when a string literal runs into end of input."""


class ParseError(SchemaError):
    """Raised when the current token does not fit the grammar position."""


class ParserStateError(Exception):
    """Raised when a parser is used again after it finished or failed."""
