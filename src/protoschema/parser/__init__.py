# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and parser for schema source text."""

from protoschema.parser.errors import (
    LexicalError,
    ParseError,
    ParserStateError,
    SchemaError,
    UnterminatedStringError,
)
from protoschema.parser.parser import Parser, ParserState, parse
from protoschema.parser.scanner import KEYWORDS, Cursor, Scanner, Token, TokenKind, iter_tokens

__all__ = [
    "KEYWORDS",
    "Cursor",
    "LexicalError",
    "ParseError",
    "Parser",
    "ParserState",
    "ParserStateError",
    "Scanner",
    "SchemaError",
    "Token",
    "TokenKind",
    "UnterminatedStringError",
    "iter_tokens",
    "parse",
]
