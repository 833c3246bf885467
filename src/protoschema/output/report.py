# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text listing of a parsed SchemaFile for terminal output."""

from protoschema.model.entities import Field, SchemaFile


def format_summary(schema: SchemaFile) -> str:
    """Render messages and enums as an indented listing.

    The listing is diagnostic output; it is not valid schema source.
    """
    lines = ["Messages:"]
    for message in schema.messages:
        lines.append(f"- {message.name}")
        lines.extend(f"  -- {_describe_field(f)}" for f in message.fields)
    lines.append("")
    lines.append("Enums:")
    for enum in schema.enums:
        lines.append(f"- {enum.name}")
        lines.extend(f"  -- {v.name} = {v.number}" for v in enum.values)
    return "\n".join(lines) + "\n"


def _describe_field(f: Field) -> str:
    modifiers = ("repeated " if f.repeated else "") + ("optional " if f.optional else "")
    return f"{modifiers}{f.type_name} {f.name} = {f.number}"
