"""Configuration for the utility layer."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import tomli
import yaml
from pydantic import BaseModel, Field, ValidationError

LONG_MAX = 2**63 - 1


class UtilsConfig(BaseModel):
    """Limits and policies used by the utility functions.

    Attributes
    ----------
    link_buffer_size
        Size in bytes of the first buffer used to read a symlink target.
    growth_increment
        Default growth policy for new arrays (<= 1 means doubling).
    size_limit
        Largest allocation size in bytes before an overflow is reported.
    line_count_limit
        Largest line count `count_lines` may reach.
    """

    link_buffer_size: int = Field(default=100, ge=1)
    growth_increment: int = Field(default=0, ge=0)
    size_limit: int = Field(default=sys.maxsize, ge=1)
    line_count_limit: int = Field(default=LONG_MAX, ge=1)

    model_config = {"frozen": True, "extra": "forbid"}


DEFAULT_CONFIG = UtilsConfig()


def load_config(path: Path) -> UtilsConfig:
    """Load a `UtilsConfig` from a TOML or YAML file.

    Settings may sit at the top level or under a ``utils`` table.

    Parameters
    ----------
    path
        Path to a ``.toml``, ``.yaml`` or ``.yml`` file.

    Returns
    -------
    UtilsConfig
        Validated configuration.

    Raises
    ------
    ValueError
        If the file cannot be read, parsed or validated.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Failed to read config file: {path}") from e

    suffix = path.suffix.lower()
    if suffix == ".toml":
        try:
            data: Any = tomli.loads(text)
        except tomli.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse TOML: {path}") from e
    elif suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {path}") from e
    else:
        raise ValueError(f"Unsupported config file type: {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    section = data.get("utils", data)
    if not isinstance(section, dict):
        raise ValueError(f"Config section 'utils' must be a mapping: {path}")

    try:
        return UtilsConfig(**section)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e
