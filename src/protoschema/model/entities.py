# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema tree produced by the parser.

Type names are kept exactly as written; nothing here resolves references,
checks field-number uniqueness, or detects name collisions.
"""

from __future__ import annotations

from pydantic import BaseModel, NonNegativeInt
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Field(BaseModel):
    """A field declaration: [repeated] [optional] <type> <name> = <number>"""

    type_name: str
    name: str
    number: NonNegativeInt
    repeated: bool = False
    optional: bool = False


class Message(BaseModel):
    """A message definition. Field order is declaration order."""

    name: str
    fields: list[Field] = _Field(default_factory=list)


class EnumValue(BaseModel):
    """A single symbolic name bound to an integer inside an enum."""

    name: str
    number: NonNegativeInt


class Enum(BaseModel):
    """An enumeration definition. Value order is declaration order."""

    name: str
    values: list[EnumValue] = _Field(default_factory=list)


class SchemaFile(BaseModel):
    """Top-level model representing the parsed contents of one schema source."""

    messages: list[Message] = _Field(default_factory=list)
    enums: list[Enum] = _Field(default_factory=list)
