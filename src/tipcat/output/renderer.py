"""Render tip entries as plain text, Markdown or JSON.

Each format is a function ``(entry) -> str`` for one tip plus a joiner
that assembles a whole catalog. ``render_all`` and ``render_one`` share
the per-entry functions, so a catalog render is exactly the sequence of
single-entry renders.
"""

from __future__ import annotations

import json
import logging
import re

from tipcat.catalog.store import CatalogStore, TipEntry
from tipcat.exit_codes import UnsupportedFormatError, ValidationError
from tipcat.output.formatter import code_block, tip_heading, to_json

log = logging.getLogger(__name__)

# a line CommonMark would read as an opening or closing code fence
_FENCE_LINE = re.compile(r"^( {0,3})(`{3,}|~{3,})", re.M)


# ---------------------------------------------------------------------------
# Per-entry emitters
# ---------------------------------------------------------------------------

def _plain_entry(entry: TipEntry) -> str:
    parts = [tip_heading(entry.ordinal, entry.title)]
    if entry.explanation:
        parts.append(entry.explanation)
    parts.append(code_block(entry.sample))
    return "\n".join(parts)


def _escape_fences(text: str) -> str:
    """Backslash-escape fence lines so prose cannot open a code block."""
    return _FENCE_LINE.sub(r"\1\\\2", text)


def _markdown_entry(entry: TipEntry) -> str:
    parts = [f"## {tip_heading(entry.ordinal, entry.title)}", ""]
    if entry.explanation:
        parts.extend([_escape_fences(entry.explanation), ""])
    parts.append(code_block(entry.sample, entry.language))
    return "\n".join(parts)


def _json_object(entry: TipEntry) -> dict:
    return entry.to_record()


# ---------------------------------------------------------------------------
# Catalog joiners
# ---------------------------------------------------------------------------

def _plain_join(entries, title: str | None) -> str:
    blocks = [_plain_entry(e) for e in entries]
    if title:
        blocks.insert(0, title)
    return "\n\n".join(blocks) + "\n"


def _markdown_join(entries, title: str | None) -> str:
    blocks = [_markdown_entry(e) for e in entries]
    if title:
        blocks.insert(0, f"# {title}")
    return "\n\n".join(blocks) + "\n"


def _json_join(entries, title: str | None) -> str:
    # title is a display concern; the JSON form stays a bare array
    return to_json([_json_object(e) for e in entries]) + "\n"


# name -> (single-entry emitter, catalog joiner)
FORMATS = {
    "plain": (_plain_entry, _plain_join),
    "markdown": (_markdown_entry, _markdown_join),
    "json": (lambda e: to_json(_json_object(e)), _json_join),
}


def supported_formats() -> tuple[str, ...]:
    return tuple(FORMATS)


def normalize_format(fmt: str) -> str:
    """Return the canonical format name or raise UnsupportedFormatError."""
    key = (fmt or "").strip().lower()
    if key not in FORMATS:
        raise UnsupportedFormatError(fmt, supported_formats())
    return key


def render_one(entry: TipEntry, fmt: str) -> str:
    emit, _ = FORMATS[normalize_format(fmt)]
    return emit(entry) + "\n"


def render_all(store: CatalogStore, fmt: str, title: str | None = None) -> str:
    """Render every entry of *store* in ordinal order.

    The format is checked before any entry is touched, so an unsupported
    format produces no partial output.
    """
    key = normalize_format(fmt)
    _, join = FORMATS[key]
    log.debug("Rendering %d tips as %s", len(store), key)
    return join(store.all(), title)


def parse_json(text: str) -> list[TipEntry]:
    """Read back the output of ``render_all(store, "json")``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"invalid rendered JSON: {exc}") from exc
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValidationError("rendered JSON must be an array of tip objects")
    return [TipEntry.from_record(item) for item in data]
