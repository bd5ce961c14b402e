"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, incrctl.toml only contains
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class OperandsConfig(BaseModel):
    """[operands] section."""

    model_config = {"frozen": True}

    default_variant: str = "text"
    disabled: list[str] = Field(default_factory=list)

    @field_validator("default_variant")
    @classmethod
    def _normalize_default(cls, value: str) -> str:
        tag = value.strip().lower()
        if not tag:
            msg = "default_variant must not be empty"
            raise ValueError(msg)
        return tag


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    entry_points: bool = True
    local_dir: str = ".incrctl/plugins"
