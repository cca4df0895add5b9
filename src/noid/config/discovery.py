"""Config file discovery and loading.

Walk-up finder locates noid.toml, similar to how git finds .git/.
Supports NOID_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from noid.config.models import NoidConfig

CONFIG_FILENAME = "noid.toml"
CONFIG_ENV_VAR = "NOID_CONFIG"
CONFIG_SECTION = "noid"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for noid.toml.

    Returns the path to the config file, or None if not found.
    Checks NOID_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def config_warnings(data: dict[str, Any], path: Path) -> list[str]:
    """List problems with a parsed config that fall back to defaults.

    A file without a ``[noid]`` section is ignored entirely; a section that
    leaves out an option keeps that option's default.
    """
    section = data.get(CONFIG_SECTION)
    if not isinstance(section, dict):
        return [f"config file '{path}' lacks '{CONFIG_SECTION}' section; ignoring config file"]
    defaults = NoidConfig()
    return [
        f"config missing option '{name}'; using default value ({getattr(defaults, name)!r})"
        for name in NoidConfig.model_fields
        if name not in section
    ]

