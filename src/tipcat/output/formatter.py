"""Low-level text helpers shared by the renderer and the CLI."""

from __future__ import annotations

import json
import re

from tipcat import __version__

_BACKTICK_RUN = re.compile(r"`+")


def fence_for(text: str) -> str:
    """Shortest backtick fence (min 3) that cannot be closed by *text*."""
    longest = max((len(m) for m in _BACKTICK_RUN.findall(text)), default=0)
    return "`" * max(3, longest + 1)


def code_block(text: str, info: str = "") -> str:
    fence = fence_for(text)
    return f"{fence}{info}\n{text}\n{fence}"


def tip_heading(ordinal: int, title: str) -> str:
    return f"{ordinal}. {title}"


def truncate(text: str, max_len: int = 60) -> str:
    text = " ".join(text.split())
    if len(text) > max_len:
        return text[:max_len - 3] + "..."
    return text


def format_table(headers: list[str], rows: list[list[str]],
                 budget: int = 0) -> str:
    if not rows:
        return "(none)"
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(str(cell)))
    lines = []
    lines.append("  ".join(h.ljust(widths[i]) for i, h in enumerate(headers)).rstrip())
    lines.append("  ".join("-" * w for w in widths))
    display_rows = rows
    if budget and len(rows) > budget:
        display_rows = rows[:budget]
    for row in display_rows:
        line = "  ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row))
        lines.append(line.rstrip())
    if budget and len(rows) > budget:
        lines.append(f"(+{len(rows) - budget} more)")
    return "\n".join(lines)


def to_json(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def json_envelope(command: str, summary: dict | None = None, **payload) -> dict:
    """Standard wrapper for ``--json`` command output."""
    envelope = {
        "command": command,
        "version": __version__,
        "summary": summary or {},
    }
    envelope.update(payload)
    return envelope
