"""Template and mask rules.

A template is ``[prefix.]mask``.  A mask is an optional generator type
(``r``, ``s`` or ``z``), one or more digit types (``d`` or ``e``), and an
optional trailing check-digit marker (``k``)::

    d          0, 1, 2, 3
    zek        00, xt, 3f0, 338bh
    123.zek    123.00, 123.xt, 123.3f0, 123.338bh
    seddee     00000, k50gh, 637qg
"""

from __future__ import annotations

from noid.domain.alphabet import CHECKDIG, DIGTYPES, GENTYPES, RADIX


def validate_mask(mask: str) -> bool:
    """Check that *mask* follows ``[r|s|z](d|e)+[k]``.

    A mask with no digit-type character (``zk``) has nothing to encode
    and is rejected.
    """
    if not mask:
        return False
    if not (mask[0] in GENTYPES or mask[0] in DIGTYPES):
        return False
    if not (mask[-1] in CHECKDIG or mask[-1] in DIGTYPES):
        return False
    if any(char not in DIGTYPES for char in mask[1:-1]):
        return False
    return any(char in DIGTYPES for char in mask)


def get_noid_range(mask: str) -> int:
    """Return the number of noids addressable by *mask* without rollover.

    Generator and check-digit characters are ignored; only digit types count.
    """
    total = 1
    for char in mask:
        total *= RADIX.get(char, 1)
    return total


def remove_prefix(template: str) -> tuple[str, str]:
    """Split *template* into ``(prefix, mask)`` on its last ``.``.

    The prefix keeps the trailing dot so it can be re-emitted verbatim.
    """
    if "." not in template:
        return "", template
    prefix, mask = template.rsplit(".", 1)
    return f"{prefix}.", mask


def is_expandable(mask: str) -> bool:
    """Whether *mask* grows its first digit position past its literal capacity."""
    return mask.startswith("z")
