# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""ProtoSchema: scanner and recursive-descent parser for message/enum schemas."""

from protoschema.config.settings import ParserOptions
from protoschema.model.entities import Enum, EnumValue, Field, Message, SchemaFile
from protoschema.parser.errors import (
    LexicalError,
    ParseError,
    ParserStateError,
    SchemaError,
    UnterminatedStringError,
)
from protoschema.parser.parser import Parser, parse

__all__ = [
    "Enum",
    "EnumValue",
    "Field",
    "LexicalError",
    "Message",
    "ParseError",
    "Parser",
    "ParserOptions",
    "ParserStateError",
    "SchemaError",
    "SchemaFile",
    "UnterminatedStringError",
    "parse",
]
