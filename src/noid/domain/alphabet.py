"""Symbol tables for noid masks.

``d`` positions draw from DIGIT (base 10), ``e`` positions from XDIGIT.
XDIGIT leaves out letters that are easily misread (``l``, ``I``, ``O``, ``Q``).
"""

from __future__ import annotations

DIGIT: tuple[str, ...] = tuple("0123456789")

XDIGIT: tuple[str, ...] = (
    *DIGIT,
    *"abcdefghijkmnopqrstuvwxyz",
    *"ABCDEFGHJKLMNPRSTUVWXYZ",
)

GENTYPES: tuple[str, ...] = ("r", "s", "z")
DIGTYPES: tuple[str, ...] = ("d", "e")
CHECKDIG: tuple[str, ...] = ("k",)

RADIX: dict[str, int] = {
    "d": len(DIGIT),
    "e": len(XDIGIT),
}
