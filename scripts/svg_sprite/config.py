"""Configuration models, data models and loaders for sprite compilation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SpriteConfig(BaseModel):
    """Configuration for sprite compilation."""

    default_view_box: str = Field("0 0 24 24", description="viewBox used when a fragment has none")
    min_markup_length: int = Field(10, ge=0, description="Raw markup shorter than this is rejected")
    strict_ids: bool = Field(False, description="Replace every char outside [a-z0-9-] in ids")
    id_prefix: str = Field("", description="Prepended to every symbol id")
    placeholder_text: str = Field("No Content", description="Label shown in placeholder symbols")
    indent: str = Field("  ", description="Indentation unit for the compiled document")


class Fragment(BaseModel):
    """One exported unit of raw SVG markup plus its user-supplied name."""

    name: str
    raw_markup: str

    @field_validator("raw_markup", mode="before")
    @classmethod
    def _decode_bytes(cls, value: Any) -> Any:
        # Exporters hand back raw bytes
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        return value


class ExtractedBody(BaseModel):
    """Inner markup of a fragment with its outer <svg> removed."""

    inner_markup: str
    view_box: str
    namespaces: dict[str, str] = Field(
        default_factory=dict, description="Prefixed xmlns declarations of the removed <svg>"
    )


class ExtractionFailure(BaseModel):
    """Per-fragment extraction problem; recoverable via placeholder."""

    reason: str


class SymbolUnit(BaseModel):
    """A single <symbol> in the compiled sprite."""

    model_config = ConfigDict(frozen=True)

    symbol_id: str
    css_class: str
    view_box: str
    body: str
    source_name: str = ""
    placeholder: bool = False


class CompiledDocument(BaseModel):
    """The assembled sprite and the symbols it is made of, in input order."""

    model_config = ConfigDict(frozen=True)

    markup: str
    symbols: list[SymbolUnit] = Field(default_factory=list)
    diagnostics: list[str] = Field(default_factory=list)

    @property
    def symbol_ids(self) -> list[str]:
        return [symbol.symbol_id for symbol in self.symbols]

    @property
    def placeholder_count(self) -> int:
        return sum(1 for symbol in self.symbols if symbol.placeholder)

    def __str__(self) -> str:
        return self.markup


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_sprite_config(path: Path) -> SpriteConfig:
    """Load sprite configuration from YAML file.

    Settings may sit at the top level or under a ``sprite:`` section.
    """
    if not path.exists():
        return SpriteConfig()

    data = load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    section = data.get("sprite", data)
    if not isinstance(section, dict):
        raise ValueError(f"'sprite' section in {path} must be a mapping")
    return SpriteConfig(**section)


def apply_overrides(config: SpriteConfig, **overrides: Any) -> SpriteConfig:
    """Return a copy of config with non-None overrides applied.

    Args:
        config: Base configuration (usually loaded from YAML)
        **overrides: Field values from the command line; None means unset

    Returns:
        Updated SpriteConfig
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return SpriteConfig(**{**config.model_dump(), **changes})
