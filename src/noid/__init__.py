"""noid — nice opaque identifiers.

Mint template-driven identifiers with optional check digits and validate them.
"""

from __future__ import annotations

from noid.domain.alphabet import DIGIT, XDIGIT
from noid.domain.checkdigit import calculate_check_digit, validate
from noid.domain.minter import mint

__version__ = "0.1.0"

__all__ = [
    "DIGIT",
    "XDIGIT",
    "__version__",
    "calculate_check_digit",
    "mint",
    "validate",
]
