"""Pydantic models for converter configuration."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConverterOptions(BaseModel):
    """Settings that shape the generated Falco.Markup code."""

    indent_size: int = Field(
        4, ge=1, description="Spaces added per nesting level of a child list."
    )
    body_only: bool = Field(
        False,
        description="Emit only the children of <body> when the document has one.",
    )

    model_config = ConfigDict(extra="forbid")


def load_options(path: Path) -> ConverterOptions:
    """Load converter options from a YAML file."""

    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of options.")
    try:
        return ConverterOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid options in {path}: {exc}") from exc
