"""Weighted check digit over the extended alphabet.

Each symbol's XDIGIT index is weighted by its 1-based position; the sum
modulo ``len(XDIGIT)`` selects the check symbol.
"""

from __future__ import annotations

import logging

from noid.domain.alphabet import XDIGIT

logger = logging.getLogger(__name__)


def _strip_scheme(noid: str) -> str:
    """Drop a three-letter scheme such as ``ark:/`` or ``doi:``."""
    if len(noid) > 3 and noid[3] == ":":
        return noid[4:].lstrip("/")
    return noid


def _index(char: str) -> int:
    try:
        return XDIGIT.index(char)
    except ValueError:
        # Unknown symbols weigh nothing; existing identifiers depend on it.
        logger.debug("Invalid character %r; digits should be in %r", char, "".join(XDIGIT))
        return 0


def unknown_symbols(noid: str) -> list[str]:
    """Characters of *noid* outside XDIGIT, in order of first appearance.

    These count as index 0 in the check digit sum.
    """
    body = _strip_scheme(noid)
    return list(dict.fromkeys(char for char in body if char not in XDIGIT))


def calculate_check_digit(noid: str) -> str:
    """Return the check digit to append to *noid*.

    A leading three-letter scheme (``ark:/``, ``doi:``) is ignored.  Other
    schemes are not recognised, so pass bare bodies when in doubt.
    """
    body = _strip_scheme(noid)
    total = sum(_index(char) * position for position, char in enumerate(body, start=1))
    return XDIGIT[total % len(XDIGIT)]


def validate(noid: str) -> bool:
    """Whether the last character of *noid* is its correct check digit.

    Only meaningful for noids minted from a ``k`` template.
    """
    if not noid:
        return False
    return calculate_check_digit(noid[:-1]) == noid[-1]
