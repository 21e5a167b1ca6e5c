"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from nestform.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from nestform.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    renderer = _OP_RENDERERS.get(result.op, _render_generic)
    renderer(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    if result.ok:
        console.print(Text.assemble(("OK", "nf.ok"), (f"  {result.op}", "nf.op")))
        return
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text.assemble(("ERROR", "nf.error"), (f"  {result.op}", "nf.op"), f" — {msg}"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "nf.key"), str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One block per form; invalid forms list ``path: message`` rows."""
    _status_line(console, result)
    forms = result.data.get("forms", [])
    for form in forms:
        label = form.get("name") or f"form {form['index']}"
        if form["ok"]:
            console.print(Text.assemble(("  ✓ ", "nf.ok"), (label, "nf.title")))
            continue
        console.print(Text.assemble(("  ✗ ", "nf.error"), (label, "nf.title")))
        table = Table(show_header=False, box=None, padding=(0, 1, 0, 4))
        table.add_column("path", style="nf.path", no_wrap=True)
        table.add_column("message")
        for violation in form["violations"]:
            table.add_row(".".join(str(p) for p in violation["path"]), violation["message"])
        console.print(table)
    if result.error and result.error.code == "INVALID_SHAPE":
        for err in result.error.detail.get("errors", []):
            loc = ".".join(str(p) for p in err["loc"]) or "<root>"
            console.print(Text.assemble((f"    {loc}", "nf.path"), f"  {err['msg']}"))
    if verbose:
        _render_meta(console, result)


def _render_limits(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "locale", result.data["locale"])
    table = Table(title="bounds", title_justify="left", padding=(0, 2))
    table.add_column("component")
    table.add_column("min", justify="right")
    table.add_column("max", justify="right")
    for name, bounds in result.data["bounds"].items():
        table.add_row(name, str(bounds["min"]), str(bounds["max"]))
    console.print(table)
    for key, value in result.data["range"].items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "validate": _render_validate,
    "limits": _render_limits,
}
