# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output formats for parsed schemas: JSON artifacts and text summaries."""

from protoschema.output.artifact import (
    ARTIFACT_FORMAT_VERSION,
    ARTIFACT_SUFFIX,
    ArtifactError,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)
from protoschema.output.report import format_summary

__all__ = [
    "ARTIFACT_FORMAT_VERSION",
    "ARTIFACT_SUFFIX",
    "ArtifactError",
    "deserialize",
    "format_summary",
    "read_artifact",
    "serialize",
    "write_artifact",
]
