# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser configuration for ProtoSchema."""

from protoschema.config.settings import (
    CONFIG_FILE_NAME,
    STRICT_OPTIONS,
    ConfigError,
    ParserOptions,
    load_parser_options,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ParserOptions",
    "STRICT_OPTIONS",
    "load_parser_options",
]
