"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from patternctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from patternctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    for key in ("class", "handled_by"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pat.ok")
    op = Text(f"  {result.op}", style="pat.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pat.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    elif key in ("class", "factory"):
        v = Text(str(value), style="pat.class")
    else:
        v = Text(str(value))
    console.print(k, v)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="pat.error"), Text(f"  {result.op}", style="pat.op"), msg)

    if err and err.detail.get("allowed"):
        console.print(f"  allowed: {', '.join(err.detail['allowed'])}")
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Pattern renderers ─────────────────────────────────────────────────


def _render_support(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Show the chain with the servicing desk highlighted."""
    _status_line(console, result)
    d = result.data
    _field(console, "type", d.get("type"))
    _field(console, "query", d.get("query"))

    handled_by = d.get("handled_by")
    style = "pat.handled" if d.get("handled") else "pat.unhandled"
    path = Text("  chain: ", style="pat.key")
    for i, desk in enumerate(d.get("chain", [])):
        if i:
            path.append(" -> ")
        path.append(desk, style=f"bold {style}" if desk == handled_by else "dim")
    console.print(path)


def _render_clone(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Side-by-side table of original and copy."""
    _status_line(console, result)
    original = result.data.get("original", {})
    duplicate = result.data.get("copy", {})

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="pat.key")
    table.add_column("Original")
    table.add_column("Copy")
    for key in ("name", "age", "address", "hobbies"):
        a, b = original.get(key), duplicate.get(key)
        if isinstance(a, list):
            a, b = ", ".join(a), ", ".join(b or [])
        table.add_row(key, str(a), str(b))
    console.print(table)

    _field(console, "style", result.data.get("style"))
    _field(console, "shares_hobbies", result.data.get("shares_hobbies"))


def _render_singletons(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Variant")
    table.add_column("Class", style="pat.class")
    table.add_column("Identical")
    table.add_column("Guard")
    if verbose:
        table.add_column("Instance", style="dim")

    for item in result.data.get("items", []):
        guard = item.get("guard_holds")
        row = [
            str(item.get("variant", "")),
            str(item.get("class", "")),
            "yes" if item.get("identical") else "NO",
            "n/a" if guard is None else ("holds" if guard else "BROKEN"),
        ]
        if verbose:
            row.append(str(item.get("instance_id", "")))
        table.add_row(*row)
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "document_lifecycle": _render_generic,
    "gui_render": _render_generic,
    "build_person": _render_generic,
    "clone_person": _render_clone,
    "support_dispatch": _render_support,
    "singleton_inspect": _render_singletons,
}
