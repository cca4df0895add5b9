"""Mixed-radix conversion between an index and a mask-conformant noid.

Each digit-type position of the mask carries its own radix.  Digits are
consumed least-significant first (right to left).  A leading ``z`` lets the
namespace expand: once the literal positions are used up, further symbols
are produced with the radix of the first digit position.
"""

from __future__ import annotations

import logging
import secrets

from noid.domain.alphabet import GENTYPES, RADIX, XDIGIT
from noid.domain.masks import get_noid_range

logger = logging.getLogger(__name__)


def generate_noid(mask: str, n: int) -> str:
    """Encode *n* as a noid body following *mask*.

    A negative *n* draws a random index from the mask's namespace.
    Returns ``""`` when *n* does not fit a non-expanding mask.
    """
    if n < 0:
        if mask and mask[0] in GENTYPES:
            mask = mask[1:]
        n = secrets.randbelow(get_noid_range(mask))
    counter = n

    symbols: list[str] = []
    for char in reversed(mask):
        radix = RADIX.get(char)
        if radix is None:
            continue
        n, value = divmod(n, radix)
        symbols.append(XDIGIT[value])

    if mask.startswith("z"):
        char = mask[1:2]
        radix = RADIX.get(char)
        while n > 0:
            if radix is None:
                logger.warning("Template mask is corrupt; cannot expand on %r", char)
                return ""
            n, value = divmod(n, radix)
            symbols.append(XDIGIT[value])

    if n > 0:
        logger.warning("Cannot mint a noid for counter %d within mask %r", counter, mask)
        return ""
    return "".join(reversed(symbols))


def decode_noid(mask: str, noid: str) -> int | None:
    """Recover the index that :func:`generate_noid` encoded as *noid*.

    *noid* is the bare body: no scheme, NAA, prefix, or check digit.
    Returns None if *noid* cannot have been produced by *mask*.  A rolled-over
    noid never starts with a zero symbol.
    """
    radices = [RADIX[char] for char in mask if char in RADIX]
    extra = len(noid) - len(radices)
    if extra < 0:
        return None
    if extra:
        expand_radix = RADIX.get(mask[1:2]) if mask.startswith("z") else None
        if expand_radix is None or noid[0] == XDIGIT[0]:
            return None
        radices = [expand_radix] * extra + radices

    n = 0
    for symbol, radix in zip(noid, radices):
        try:
            value = XDIGIT.index(symbol)
        except ValueError:
            return None
        if value >= radix:
            return None
        n = n * radix + value
    return n
