"""Conversions between flat dotted keys and one-level nested mappings.

``{"main": {"version": 7}, "debug": True}`` flattens to
``{"main.version": "7", "debug": "true"}`` and back. YAML files holding
such a mapping can be imported and exported.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

import yaml

from nconfig.codecs import format_value, join_list
from nconfig.errors import ConfigError, ConfigNotFoundError, ConfigParseError, UnsupportedTypeError
from nconfig.inifile import join_key, split_key

__all__ = ["flatten_mapping", "nest_mapping", "load_yaml", "dump_yaml"]

logger = logging.getLogger(__name__)


def _to_text(path: str, value: Any, delimiter: str) -> str:
    try:
        if isinstance(value, (list, tuple)):
            return join_list(value, delimiter)
        return format_value(value)
    except (UnsupportedTypeError, ConfigError) as e:
        raise ConfigError(
            f"Unsupported value at '{path}': {e.message}",
            details={"key": path},
            cause=e,
        ) from e


def flatten_mapping(data: Mapping[str, Any], delimiter: str = ",") -> dict[str, str]:
    """Flatten a mapping of sections and scalars into dotted keys.

    Raises:
        ConfigError: If a section holds another mapping, or a value is not
            a str, bool, int, float or a list of those.
    """
    entries: dict[str, str] = {}
    for name, value in data.items():
        name = str(name)
        if isinstance(value, Mapping):
            for subkey, sub_value in value.items():
                key = join_key(name, str(subkey))
                if isinstance(sub_value, Mapping):
                    raise ConfigError(
                        f"Sections cannot be nested: '{key}'",
                        details={"key": key},
                    )
                entries[key] = _to_text(key, sub_value, delimiter)
        else:
            entries[name] = _to_text(name, value, delimiter)
    return entries


def nest_mapping(entries: Mapping[str, str]) -> dict[str, Any]:
    """Group dotted keys into one dict per section.

    Raises:
        ConfigError: If a key without a section has the same name as a
            section.
    """
    result: dict[str, Any] = {}
    for key, value in entries.items():
        section, subkey = split_key(key)
        if not section:
            if isinstance(result.get(key), dict):
                raise ConfigError(f"Key '{key}' collides with a section of the same name")
            result[key] = value
            continue
        bucket = result.setdefault(section, {})
        if not isinstance(bucket, dict):
            raise ConfigError(f"Key '{section}' collides with a section of the same name")
        bucket[subkey] = value
    return result


def load_yaml(yaml_path: str) -> dict[str, Any]:
    """Read a YAML file whose root is a mapping.

    An empty file yields an empty mapping.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigParseError: If the YAML is invalid or its root is not a mapping.
    """
    if not os.path.isfile(yaml_path):
        raise ConfigNotFoundError(config_path=yaml_path)

    with open(yaml_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(config_path=yaml_path, reason=f"YAML parse error: {e}", cause=e) from e

    if data is None:
        logger.debug("YAML file %s is empty", yaml_path)
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            config_path=yaml_path,
            reason=f"root must be a mapping, got {type(data).__name__}",
        )
    return data


def dump_yaml(data: Mapping[str, Any]) -> str:
    """Render a nested mapping as YAML, keys in insertion order."""
    return yaml.safe_dump(dict(data), sort_keys=False, default_flow_style=False, allow_unicode=True)
