"""Render configuration schema and YAML loader."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from styles import COLORS


class RenderConfig(BaseModel):
    """Settings that shape the DOT output but not its structure."""

    indent: str = Field("  ", description="Indentation unit for nested blocks")
    palette: list[str] = Field(default_factory=lambda: list(COLORS), description="Family colors, cycled")
    styles: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Style classes layered over the built-in ones"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING", description="CLI log level")

    @field_validator("palette")
    @classmethod
    def _non_empty_palette(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("palette must contain at least one color")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


def load_config(path: Path) -> RenderConfig:
    """Load render settings from YAML; an empty file gives the defaults."""
    with path.open("r", encoding="utf-8") as fp:
        data: dict[str, Any] | None = yaml.safe_load(fp)
    return RenderConfig(**(data or {}))
