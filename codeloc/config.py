"""Configuration models for codeloc."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Mapping

import typer
import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .logging import LEVEL_NAMES

DEFAULT_CONFIG_FILE = "codeloc.yaml"


class CodelocConfig(BaseModel):
    log_level: str = "WARNING"
    output_format: Literal["json", "msgpack"] = "json"
    json_indent: bool = True

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(LEVEL_NAMES)}")
        return level


def load_yaml_config(path: Path) -> dict[str, object]:
    """Return the mapping stored in ``path``, or an empty one if it does not exist."""
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise typer.BadParameter(f"Failed to parse {path}: {error}") from error
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path.name} must contain a mapping")
    return data


def merge_config(path: Path, cli_options: Mapping[str, object]) -> CodelocConfig:
    """Overlay explicitly given CLI options on the file configuration."""
    file_overrides = load_yaml_config(path)
    given = {key: value for key, value in cli_options.items() if value is not None}
    merged: dict[str, object] = {**file_overrides, **given}
    try:
        return CodelocConfig(**merged)
    except ValidationError as error:
        raise typer.BadParameter(f"Invalid configuration in {path}: {error}") from error


__all__ = ["CodelocConfig", "DEFAULT_CONFIG_FILE", "load_yaml_config", "merge_config"]
