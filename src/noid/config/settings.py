"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NOID_*`` prefix (``NOID_NOID__SCHEME=doi:``)
  3. TOML file    — ``noid.toml`` discovered via walk-up
  4. Code defaults — baked into :class:`NoidConfig`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from noid.config.discovery import CONFIG_SECTION, config_warnings, find_config
from noid.config.models import NoidConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the ``[noid]`` section from a TOML file.

    Files without that section contribute nothing.  Problems that fall back
    to defaults are collected in :attr:`warnings`.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        self.warnings: list[str] = []
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                parsed = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            self.warnings = config_warnings(parsed, toml_path)
            section = parsed.get(CONFIG_SECTION)
            if isinstance(section, dict):
                self._data = {CONFIG_SECTION: section}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class NoidSettings(BaseSettings):
    """Unified settings for the noid CLI.

    Stored on the :class:`~noid.commands._context.AppContext` created by the
    root CLI group.

    Attributes:
        config_path: The TOML file that was read, or None.
        config_warnings: Config problems that fell back to defaults.
        noid: The resolved ``[noid]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NOID_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    config_warnings: tuple[str, ...] = ()

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML section ---
    noid: NoidConfig = Field(default_factory=NoidConfig)

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
        toml_source = getattr(_tls, "toml_source", None)
        if toml_source is None:
            toml_source = TomlSettingsSource(settings_cls, None)
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> NoidSettings:
        """Construct settings from CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``noid.toml`` by walking up from *cwd*.  CLI flags are merged as
        highest-priority overrides.
        """
        toml_path: Path | None = None
        warnings: list[str] = []
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
            else:
                warnings.append(f"config file '{p}' not found; ignoring config file")
        else:
            toml_path = find_config(cwd)

        source = TomlSettingsSource(cls, toml_path)
        warnings.extend(source.warnings)

        _tls.toml_source = source
        try:
            return cls(
                config_path=toml_path,
                config_warnings=tuple(warnings),
                **cli_flags,
            )
        except ValidationError as exc:
            import click

            msg = f"Invalid noid configuration: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_source = None
