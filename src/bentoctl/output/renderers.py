"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from bentoctl.output.console import SEVERITY_STYLES, create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bentoctl.services.result import ServiceResult

VALID_MESSAGE = "Bento layout is valid!"


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
    """Render minimal output for ``--quiet`` mode.

    Validation results print one finding message per line, or the bare
    status line when there is nothing to report.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    findings = result.data.get("findings")
    if findings:
        return "\n".join(str(f.get("message", "")) for f in findings)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="bento.ok"), Text(f"  {result.op}", style="bento.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="bento.key"), Text(str(value)), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="bento.error"),
        Text(f"  {result.op}", style="bento.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Validate renderer ─────────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render findings in emission order, or the valid banner."""
    data = result.data
    findings = data.get("findings", [])

    if data.get("valid"):
        console.print(Text("OK", style="bento.ok"), Text(f"  {VALID_MESSAGE}"), sep="")
    elif not findings:
        console.print(Text("OK", style="bento.ok"), Text("  No issues at this severity."), sep="")
    else:
        console.print(Text("Validation Issues:", style="bold"))
        for finding in findings:
            sev = str(finding.get("severity", "error"))
            console.print(
                Text("  "),
                Text(sev, style=SEVERITY_STYLES.get(sev, "")),
                Text(f": {finding.get('message', '')}"),
                sep="",
            )

    if verbose:
        console.print()
        _field(console, "layout_type", data.get("layout_type", ""))
        _field(console, "target_content_type", data.get("target_content_type", ""))
        _field(console, "card_count", data.get("card_count", 0))
        for index, card in enumerate(data.get("cards", [])):
            _field(console, f"card[{index}]", f"{card.get('id')} ({card.get('contentType')})")

    if findings:
        errors = int(data.get("error_count", 0))
        warnings = int(data.get("warning_count", 0))
        console.print(f"\n{errors} errors, {warnings} warnings")


# ── Inspect renderer ──────────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "layout_type", data.get("layout_type", ""))
    _field(console, "target_content_type", data.get("target_content_type", ""))
    _field(console, "total_entries", data.get("total_entries", 0))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Index", justify="right")
    table.add_column("Slot", style="bento.slot")
    table.add_column("Expected Types", style="bento.type")
    table.add_column("Limit", justify="right")

    limits: dict[str, int] = data.get("type_limits", {})
    for pos in data.get("positions", []):
        expected = list(pos.get("expected_types", []))
        caps = [f"{t}≤{limits[t]}" for t in expected if t in limits]
        table.add_row(
            str(pos.get("index", "")),
            str(pos.get("name", "")),
            ", ".join(expected),
            ", ".join(caps) or "-",
        )
    console.print()
    console.print(table)

    if verbose and limits:
        console.print(Text("  type_limits:", style="dim"))
        for content_type, maximum in limits.items():
            console.print(Text(f"    {content_type}: {maximum}"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "inspect_layout": _render_inspect,
}
