"""Read tip records from a JSON file, a Markdown tip list, or the built-ins."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from tipcat.catalog.store import CatalogStore
from tipcat.exit_codes import NotFoundError, ValidationError

log = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}
MARKDOWN_SUFFIXES = {".md", ".markdown"}

# "1. Title", "## 1. Title", "**1. Title**", "### 3) Title"
_HEADING_RE = re.compile(
    r"^\s*(?:#{1,6}\s+)?(?:\*\*)?(\d+)[.)]\s+(.+?)(?:\*\*)?\s*$"
)
_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})\s*([\w#+.-]*)\s*$")


def parse_markdown(text: str) -> list[dict]:
    """Split a numbered Markdown tip document into records.

    Everything between one numbered heading and the next belongs to that
    tip: prose before the first fenced block is the explanation, the first
    fenced block is the sample. Prose outside fences after the sample is
    appended to the explanation. Text before the first heading is ignored.
    """
    records: list[dict] = []
    current: dict | None = None
    prose: list[str] = []
    fence: str | None = None
    body: list[str] = []

    def flush():
        if current is None:
            return
        current["explanation"] = "\n".join(prose).strip()
        current.setdefault("sample", "")
        records.append(current)

    for line in text.splitlines():
        if fence is not None:
            # inside a code block: only the matching fence closes it
            if line.strip() == fence:
                if current is not None and "sample" not in current:
                    current["sample"] = "\n".join(body)
                fence = None
                body = []
            else:
                body.append(line)
            continue

        m = _FENCE_RE.match(line)
        if m:
            fence = m.group(1)
            if current is not None and m.group(2) and "sample" not in current:
                current["language"] = m.group(2)
            continue

        h = _HEADING_RE.match(line)
        if h:
            flush()
            current = {"ordinal": int(h.group(1)), "title": h.group(2).strip()}
            prose = []
            continue

        if current is not None:
            prose.append(line)

    if fence is not None:
        raise ValidationError("unterminated code fence in Markdown tip document")
    flush()
    log.debug("Parsed %d tips from Markdown", len(records))
    return records


def parse_json_records(text: str) -> list[dict]:
    """Accept either a bare array of records or ``{"tips": [...]}``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"invalid JSON tip file: {exc}") from exc
    if isinstance(data, dict):
        data = data.get("tips")
    if not isinstance(data, list):
        raise ValidationError("JSON tip file must be an array or an object with a 'tips' array")
    return data


def load_records(path: str | Path) -> list[dict]:
    """Read records from *path*, dispatching on the file extension."""
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"tip source not found: {path}")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in JSON_SUFFIXES:
        records = parse_json_records(text)
    elif suffix in MARKDOWN_SUFFIXES:
        records = parse_markdown(text)
    else:
        raise ValidationError(
            f"cannot load tips from {path.name}: expected .json, .md or .markdown"
        )
    log.debug("Read %d records from %s", len(records), path)
    return records


def load_catalog(path: str | Path | None = None) -> CatalogStore:
    """Build a store from *path*, or from the built-in catalog when None."""
    if path is None:
        from tipcat.catalog.builtin import TIPS
        log.debug("Using built-in catalog")
        return CatalogStore.load(TIPS)
    return CatalogStore.load(load_records(path))
