"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, noid.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_TEMPLATE = "zeeddk"
DEFAULT_SCHEME = "ark:/"
DEFAULT_NAA = ""


class NoidConfig(BaseModel):
    """[noid] section.

    Numeric values such as ``naa = 83812`` are read as strings.
    """

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    template: str = DEFAULT_TEMPLATE
    scheme: str = DEFAULT_SCHEME
    naa: str = DEFAULT_NAA
