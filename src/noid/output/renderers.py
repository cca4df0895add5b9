"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from noid.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from noid.services.result import ServiceResult

# Data key printed on its own in --quiet mode, per op.
_QUIET_KEYS: dict[str, str] = {
    "mint": "id",
    "validate": "valid",
    "check_digit": "check_digit",
    "decode": "index",
    "capacity": "capacity",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the bare value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "noid.ok"), (f"  {result.op}", "noid.op")))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    if not style and (key == "id" or key.endswith("_id")):
        style = "noid.id"
    console.print(Text.assemble((f"  {key}: ", "noid.key"), (str(value), style)))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="noid.error")
    op = Text(f"  {result.op}", style="noid.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_mint(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the minted noid, plus its inputs when verbose."""
    _status_line(console, result)
    _field(console, "id", result.data.get("id", ""))
    if verbose:
        for key in ("template", "index", "scheme", "naa"):
            if key in result.data:
                _field(console, key, result.data[key])


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "id", result.data.get("id", ""))
    valid = bool(result.data.get("valid"))
    _field(console, "valid", valid, style="noid.valid" if valid else "noid.invalid")


def _render_check_digit(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _field(console, "id", result.data.get("id", ""))
    _field(console, "check_digit", result.data.get("check_digit", ""), style="noid.id")


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("id", "template"):
        if key in result.data:
            _field(console, key, result.data[key])
    _field(console, "index", result.data.get("index", ""), style="noid.number")


def _render_capacity(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render namespace size with thousands separators."""
    d = result.data
    _status_line(console, result)
    for key in ("template", "mask"):
        if key in d:
            _field(console, key, d[key])
    capacity = d.get("capacity")
    if isinstance(capacity, int):
        _field(console, "capacity", f"{capacity:,}", style="noid.number")
    for key in ("expandable", "check_digit"):
        if key in d:
            _field(console, key, d[key])


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "mint": _render_mint,
    "validate": _render_validate,
    "check_digit": _render_check_digit,
    "decode": _render_decode,
    "capacity": _render_capacity,
}
