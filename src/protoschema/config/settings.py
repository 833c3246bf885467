# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser options and the YAML loader for the ProtoSchema configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".protoschema.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ParserOptions:
    """Switches that tighten the scanner and parser beyond their default behaviour.

    Attributes:
        strict_strings: Raise on a string literal that reaches end of input
            instead of silently consuming the rest of the source.
        reject_conflicting_modifiers: Raise on a field that carries both the
            ``repeated`` and the ``optional`` modifier.
    """

    strict_strings: bool = False
    reject_conflicting_modifiers: bool = False


STRICT_OPTIONS = ParserOptions(strict_strings=True, reject_conflicting_modifiers=True)


def load_parser_options(path: Path) -> ParserOptions:
    """Load parser options from a YAML configuration file.

    Args:
        path: Path to the `.protoschema.yaml` file.

    Returns:
        A ParserOptions instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_parser_options(text, source_label=str(path))


# ################
# Implementation
# ################

_KEYS: dict[str, str] = {
    "strict-strings": "strict_strings",
    "reject-conflicting-modifiers": "reject_conflicting_modifiers",
}


def _parse_parser_options(text: str, source_label: str = "<string>") -> ParserOptions:
    """Parse configuration YAML text into ParserOptions.

    An empty document yields the default options.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ParserOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown config keys: {', '.join(unknown)}")

    values: dict[str, bool] = {}
    for key, attr in _KEYS.items():
        if key in data:
            values[attr] = _require_bool(data, key, source_label)
    return ParserOptions(**values)


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{source_label}: '{key}' must be a boolean")
    return value
