"""Per-project configuration (.tipcat/config.json) and setting resolution.

Resolution order for each setting: explicit CLI value, then the
``TIPCAT_FORMAT`` / ``TIPCAT_SOURCE`` env-vars, then the project config,
then the built-in default.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from tipcat.exit_codes import ValidationError

log = logging.getLogger(__name__)

CONFIG_DIR = ".tipcat"
CONFIG_NAME = "config.json"
DEFAULT_FORMAT = "plain"

ENV_VARS = {
    "format": "TIPCAT_FORMAT",
    "source": "TIPCAT_SOURCE",
}
KNOWN_KEYS = tuple(ENV_VARS)


def find_project_root(start: str = ".") -> Path:
    """Find the project root by looking for .git directory."""
    current = Path(start).resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return Path(start).resolve()


def get_config_path(project_root: Path | None = None) -> Path:
    if project_root is None:
        project_root = find_project_root()
    return project_root / CONFIG_DIR / CONFIG_NAME


def load_project_config(project_root: Path | None = None) -> dict:
    """Return the saved config, or ``{}`` when there is none."""
    path = get_config_path(project_root)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"invalid config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValidationError(f"config file {path} must contain a JSON object")
    return data


def write_project_config(updates: dict, project_root: Path | None = None) -> Path:
    """Merge *updates* into the saved config and return the file path."""
    unknown = sorted(set(updates) - set(KNOWN_KEYS))
    if unknown:
        raise ValidationError(f"unknown config key(s): {', '.join(unknown)}")
    path = get_config_path(project_root)
    current = load_project_config(project_root)
    current.update(updates)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(current, indent=2) + "\n", encoding="utf-8")
    log.debug("Wrote config %s: %s", path, current)
    return path


def resolve_setting(key: str, cli_value=None, project_root: Path | None = None):
    """Pick the effective value for *key* (``format`` or ``source``)."""
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get(ENV_VARS[key])
    if env_value:
        return env_value
    saved = load_project_config(project_root).get(key)
    if saved:
        return saved
    return DEFAULT_FORMAT if key == "format" else None
