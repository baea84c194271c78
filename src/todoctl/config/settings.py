"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TODOCTL_*`` prefix
  3. TOML file    — ``todoctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from todoctl.config.discovery import find_config
from todoctl.config.models import NewConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``todoctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class TodoSettings(BaseSettings):
    """Settings for a single todoctl invocation.

    Attributes:
        base_dir: Directory holding ``todoctl.toml``, or CWD if none found.
        data_dir: Explicit data directory (``--data-dir``); wins over
            *base_dir* when set.
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TODOCTL_",
        "env_nested_delimiter": "__",
    }

    base_dir: Path = Field(default_factory=Path.cwd)
    data_dir: Path | None = None
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    new: NewConfig = Field(default_factory=NewConfig)

    @property
    def data_root(self) -> Path:
        """The directory that holds ``tasks/`` and ``templates/``.

        A relative ``data_dir`` from env or TOML is taken relative to *base_dir*.
        """
        if self.data_dir is None:
            return self.base_dir.resolve()
        return (self.base_dir / self.data_dir).resolve()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        data_dir: str | Path | None = None,
        base_dir: Path | None = None,
        **cli_flags: Any,
    ) -> TodoSettings:
        """Construct settings from a CLI invocation.

        Discovers ``todoctl.toml`` via walk-up from *base_dir* (or uses the
        explicit *config_path*). A relative *data_dir* is resolved against
        the working directory.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(base_dir)

        resolved_base = base_dir
        if resolved_base is None:
            resolved_base = toml_path.parent.resolve() if toml_path else Path.cwd()

        overrides: dict[str, Any] = dict(cli_flags)
        if data_dir is not None:
            overrides["data_dir"] = Path(data_dir).resolve()

        _tls.toml_path = toml_path
        try:
            return cls(
                base_dir=resolved_base,
                config_path=toml_path,
                **overrides,
            )
        finally:
            _tls.toml_path = None
