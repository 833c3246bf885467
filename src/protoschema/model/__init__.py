# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema model for ProtoSchema (messages, enums, fields)."""

from protoschema.model.entities import (
    Enum,
    EnumValue,
    Field,
    Message,
    SchemaFile,
)

__all__ = [
    "Field",
    "Message",
    "EnumValue",
    "Enum",
    "SchemaFile",
]
