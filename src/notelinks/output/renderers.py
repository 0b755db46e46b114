"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Ops without a renderer print only their status line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from notelinks.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from notelinks.services.result import ServiceResult

HEADER_SECTION_TITLE = "File Property's Links"
BODY_SECTION_TITLE = "Note's Links"
NO_LINKS_MESSAGE = "No links found in the current note."


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op)
        if renderer is None:
            _status_line(console, result)
        else:
            renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Extraction prints one URL per line; location prints ``line:column``.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "extract_links":
        links = [*result.data.get("header", []), *result.data.get("body", [])]
        return "\n".join(link["url"] for link in links)
    if result.op == "locate_link":
        start = result.data["span"]["start"]
        return f"{start['line']}:{start['column']}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="nl.ok"), Text(f"  {result.op}", style="nl.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="nl.key"), Text(str(value)), sep="")


def _position(span: dict[str, dict[str, int]]) -> str:
    start, end = span["start"], span["end"]
    return f"{start['line']}:{start['column']}-{end['line']}:{end['column']}"


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_telemetry_tree(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_telemetry_tree(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="nl.error"),
        Text(f"  {result.op}", style="nl.op"),
        Text(" — "),
        msg,
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}")


# ── Link renderers ────────────────────────────────────────────────────


def _header_table(links: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Property", style="nl.property", no_wrap=True)
    table.add_column("URL", style="nl.url", overflow="fold")
    for i, link in enumerate(links, start=1):
        table.add_row(str(i), str(link.get("property_key") or ""), link["url"])
    return table


def _body_table(links: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("URL", style="nl.url", overflow="fold")
    table.add_column("Position", style="nl.position", no_wrap=True)
    table.add_column("Tags", style="nl.tag")
    for i, link in enumerate(links, start=1):
        table.add_row(str(i), link["url"], _position(link["span"]), ", ".join(link["tags"]))
    return table


def _render_links(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render extraction results as header and body sections."""
    header = result.data.get("header", [])
    body = result.data.get("body", [])
    if not header and not body:
        console.print(Text(NO_LINKS_MESSAGE, style="nl.empty"))
    if header:
        console.print(Text(HEADER_SECTION_TITLE, style="nl.section"))
        console.print(_header_table(header))
    if body:
        if header:
            console.print()
        console.print(Text(BODY_SECTION_TITLE, style="nl.section"))
        console.print(_body_table(body))
    if verbose:
        _field(console, "source", result.data.get("source", ""))
        _field(console, "dedupe", result.data.get("dedupe", False))
        _render_meta(console, result)


def _render_locate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "url", d["url"])
    if d.get("property_key"):
        _field(console, "property", d["property_key"])
    _field(console, "position", _position(d["span"]))
    _field(console, "selected", d["selected"])
    _field(console, "line", d["line_text"])
    if d.get("tags"):
        _field(console, "tags", ", ".join(d["tags"]))
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "extract_links": _render_links,
    "locate_link": _render_locate,
}
