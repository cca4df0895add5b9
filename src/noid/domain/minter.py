"""Compose scheme, NAA, template prefix, body, and check digit into a noid."""

from __future__ import annotations

from noid.domain.alphabet import CHECKDIG
from noid.domain.checkdigit import calculate_check_digit
from noid.domain.codec import generate_noid
from noid.domain.masks import remove_prefix, validate_mask


def mint(template: str = "zek", n: int = -1, scheme: str = "", naa: str = "") -> str:
    """Mint a noid from *template*, prefixed by *scheme* and *naa*.

    Args:
        template: ``[prefix.]mask``, e.g. ``"zeeddk"`` or ``"empiar.dddddk"``.
        n: Index to encode.  Negative means a random index in the namespace.
        scheme: e.g. ``"ark:/"``, ``"doi:"``, ``"https://"``.
        naa: Name assigning authority; followed by ``/`` when non-empty.

    Returns:
        ``scheme + naa/ + prefix + body [+ check digit]``, or ``""`` when the
        mask is invalid or *n* does not fit.

    Nothing prevents reminting the same noid; callers control reuse via *n*.
    """
    prefix, mask = remove_prefix(template)
    if not validate_mask(mask):
        return ""
    if naa:
        naa += "/"
    body = generate_noid(mask, n)
    if not body:
        return ""
    noid = f"{scheme}{naa}{prefix}{body}"
    if mask[-1] in CHECKDIG:
        noid += calculate_check_digit(body)
    return noid
