"""NoidService — mint, validate, and inspect noids.

Wraps the sentinel-returning domain functions and reports failures as
structured :class:`ServiceError` codes.
"""

from __future__ import annotations

import logging
from typing import Any

from noid.config.models import NoidConfig
from noid.domain.alphabet import CHECKDIG
from noid.domain.checkdigit import calculate_check_digit, unknown_symbols, validate
from noid.domain.codec import decode_noid
from noid.domain.masks import get_noid_range, is_expandable, remove_prefix, validate_mask
from noid.domain.minter import mint
from noid.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

INVALID_TEMPLATE = "INVALID_TEMPLATE"
NAMESPACE_OVERFLOW = "NAMESPACE_OVERFLOW"
INVALID_NOID = "INVALID_NOID"
INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"
MISSING_NOID = "MISSING_NOID"


def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def _missing(op: str) -> ServiceResult:
    return _error(op, MISSING_NOID, "No noid given")


def _symbol_warnings(noid: str) -> list[str]:
    return [
        f"character {char!r} is outside the alphabet; counted as 0"
        for char in unknown_symbols(noid)
    ]


class NoidService:
    """Noid operations with defaults taken from the ``[noid]`` config section.

    Explicit arguments always win over the configured template, scheme,
    and NAA.
    """

    def __init__(self, config: NoidConfig | None = None) -> None:
        self._config = config or NoidConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def mint(
        self,
        *,
        template: str | None = None,
        n: int = -1,
        scheme: str | None = None,
        naa: str | None = None,
    ) -> ServiceResult:
        """Mint one noid; ``n < 0`` picks a random index."""
        op = "mint"
        template = self._config.template if template is None else template
        scheme = self._config.scheme if scheme is None else scheme
        naa = self._config.naa if naa is None else naa
        logger.debug(
            "Generating noid using template=%s, n=%d, scheme=%s, naa=%s",
            template,
            n,
            scheme,
            naa,
        )

        _prefix, mask = remove_prefix(template)
        if not validate_mask(mask):
            return _error(
                op,
                INVALID_TEMPLATE,
                f"Invalid template mask: {mask!r}",
                template=template,
            )

        noid = mint(template, n, scheme, naa)
        if not noid:
            return _error(
                op,
                NAMESPACE_OVERFLOW,
                f"Cannot mint a noid for index {n} within this namespace",
                template=template,
                index=n,
                capacity=get_noid_range(mask),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": noid,
                "template": template,
                "index": n,
                "scheme": scheme,
                "naa": naa,
            },
        )

    def validate(self, noid: str) -> ServiceResult:
        """Report whether the trailing check digit of *noid* is correct."""
        op = "validate"
        if not noid:
            return _missing(op)
        logger.debug("Validating %r", noid)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": noid, "valid": validate(noid)},
            warnings=_symbol_warnings(noid[:-1]),
        )

    def check_digit(self, noid: str) -> ServiceResult:
        """Compute the check digit that belongs after *noid*."""
        op = "check_digit"
        if not noid:
            return _missing(op)
        logger.debug("Computing check digit for %r", noid)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": noid, "check_digit": calculate_check_digit(noid)},
            warnings=_symbol_warnings(noid),
        )

    def decode(
        self,
        noid: str,
        *,
        template: str | None = None,
        scheme: str | None = None,
        naa: str | None = None,
    ) -> ServiceResult:
        """Recover the index a noid was minted from.

        Scheme, NAA, and template prefix are stripped when present.  For
        ``k`` templates the check digit is verified and dropped first.
        """
        op = "decode"
        if not noid:
            return _missing(op)
        template = self._config.template if template is None else template
        scheme = self._config.scheme if scheme is None else scheme
        naa = self._config.naa if naa is None else naa

        prefix, mask = remove_prefix(template)
        if not validate_mask(mask):
            return _error(
                op,
                INVALID_TEMPLATE,
                f"Invalid template mask: {mask!r}",
                template=template,
            )

        body = noid
        for head in (scheme, f"{naa}/" if naa else "", prefix):
            if head and body.startswith(head):
                body = body[len(head) :]

        if mask[-1] in CHECKDIG:
            if not validate(body):
                return _error(
                    op,
                    INVALID_CHECK_DIGIT,
                    f"Check digit does not match for {noid!r}",
                    id=noid,
                )
            body = body[:-1]

        index = decode_noid(mask, body)
        if index is None:
            return _error(
                op,
                INVALID_NOID,
                f"{noid!r} does not fit template {template!r}",
                id=noid,
                template=template,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": noid, "template": template, "index": index},
        )

    def capacity(self, *, template: str | None = None) -> ServiceResult:
        """Report how many noids the template's mask can address."""
        op = "capacity"
        template = self._config.template if template is None else template
        _prefix, mask = remove_prefix(template)
        if not validate_mask(mask):
            return _error(
                op,
                INVALID_TEMPLATE,
                f"Invalid template mask: {mask!r}",
                template=template,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "template": template,
                "mask": mask,
                "capacity": get_noid_range(mask),
                "expandable": is_expandable(mask),
                "check_digit": mask[-1] in CHECKDIG,
            },
        )
