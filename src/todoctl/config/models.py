"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, todoctl.toml only contains
overrides. A fresh data directory needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NewConfig(BaseModel):
    """[new] section — defaults for ``todoctl new``."""

    model_config = {"frozen": True, "extra": "forbid"}

    template: str = "task"
    tags: list[str] = Field(default_factory=list)
