# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed SchemaFile artifacts.

Artifacts are compact JSON documents handed to downstream consumers such as
code generators. The format is versioned so future schema changes can be
detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from protoschema.model.entities import Enum, EnumValue, Field, Message, SchemaFile

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".schema.json"


class ArtifactError(ValueError):
    """Raised when an artifact cannot be decoded."""


def serialize(schema: SchemaFile) -> str:
    """Serialize a SchemaFile to a compact JSON string."""
    return json.dumps(_schema_to_dict(schema), separators=(",", ":"))


def deserialize(data: str) -> SchemaFile:
    """Deserialize a SchemaFile from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`SchemaFile` model.

    Raises:
        ArtifactError: If the data is not JSON, the format version is not
            recognised, or the document does not have the artifact structure.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ArtifactError(f"Artifact is not valid JSON: {exc}") from exc
    version = obj.get("v") if isinstance(obj, dict) else None
    if version != ARTIFACT_FORMAT_VERSION:
        raise ArtifactError(f"Unsupported artifact format version: {version!r}")
    try:
        return _schema_from_dict(obj)
    except (KeyError, TypeError, ValueError) as exc:
        raise ArtifactError(f"Malformed artifact: {exc}") from exc


def write_artifact(schema: SchemaFile, path: Path) -> None:
    """Write an artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(schema), encoding="utf-8")


def read_artifact(path: Path) -> SchemaFile:
    """Read and deserialize an artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _schema_to_dict(schema: SchemaFile) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "messages": [_message_to_dict(m) for m in schema.messages],
        "enums": [_enum_to_dict(e) for e in schema.enums],
    }


def _schema_from_dict(obj: dict[str, Any]) -> SchemaFile:
    return SchemaFile(
        messages=[_message_from_dict(m) for m in obj.get("messages", [])],
        enums=[_enum_from_dict(e) for e in obj.get("enums", [])],
    )


def _message_to_dict(message: Message) -> dict[str, Any]:
    return {"name": message.name, "fields": [_field_to_dict(f) for f in message.fields]}


def _message_from_dict(obj: dict[str, Any]) -> Message:
    return Message(name=obj["name"], fields=[_field_from_dict(f) for f in obj.get("fields", [])])


def _field_to_dict(f: Field) -> dict[str, Any]:
    d: dict[str, Any] = {"type": f.type_name, "name": f.name, "number": f.number}
    if f.repeated:
        d["repeated"] = True
    if f.optional:
        d["optional"] = True
    return d


def _field_from_dict(obj: dict[str, Any]) -> Field:
    return Field(
        type_name=obj["type"],
        name=obj["name"],
        number=obj["number"],
        repeated=obj.get("repeated", False),
        optional=obj.get("optional", False),
    )


def _enum_to_dict(enum: Enum) -> dict[str, Any]:
    return {"name": enum.name, "values": [[v.name, v.number] for v in enum.values]}


def _enum_from_dict(obj: dict[str, Any]) -> Enum:
    return Enum(
        name=obj["name"],
        values=[EnumValue(name=name, number=number) for name, number in obj.get("values", [])],
    )
