"""Shared test fixtures and helpers for tipcat tests."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner


SAMPLE_RECORDS = [
    {"ordinal": 1, "title": "Use LINQ", "explanation": "Query collections declaratively.",
     "sample": "var x = a.Where(i => i > 0);"},
    {"ordinal": 2, "title": "Use using", "explanation": "Dispose resources deterministically.",
     "sample": "using (var s = Open())\n{\n}"},
]

SAMPLE_MARKDOWN = """\
# C# tips

Some intro text that is not a tip.

## 1. Use LINQ

Query collections declaratively.

```csharp
var x = a.Where(i => i > 0);
```

## 2. Use using

Dispose resources deterministically.

```cs
using (var s = Open())
{
}
```
"""


def tipcat(*args, cwd=None):
    """Run the tipcat CLI in a subprocess and return (output, returncode)."""
    result = subprocess.run(
        [sys.executable, "-m", "tipcat"] + list(args),
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        timeout=60,
    )
    return result.stdout + result.stderr, result.returncode


def invoke_cli(runner, args, cwd=None, json_mode=False):
    """Invoke the CLI in-process, optionally from *cwd* and with --json."""
    from tipcat.cli import cli

    full_args = (["--json"] if json_mode else []) + list(args)
    old_cwd = os.getcwd()
    try:
        if cwd is not None:
            os.chdir(str(cwd))
        return runner.invoke(cli, full_args, catch_exceptions=False)
    finally:
        os.chdir(old_cwd)


def parse_json_output(result, command=""):
    """Parse a CliRunner result as JSON, failing with the raw output."""
    assert result.exit_code == 0, f"{command} failed: {result.output}"
    try:
        return json.loads(result.output)
    except json.JSONDecodeError:
        pytest.fail(f"{command} did not print JSON:\n{result.output}")


def assert_json_envelope(data, command):
    assert data["command"] == command
    assert "version" in data
    assert isinstance(data["summary"], dict)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's TIPCAT_* settings out of the tests."""
    monkeypatch.delenv("TIPCAT_FORMAT", raising=False)
    monkeypatch.delenv("TIPCAT_SOURCE", raising=False)


@pytest.fixture
def cli_runner():
    # mix_stderr was removed in Click 8.2; both versions expose result.output
    return CliRunner()


@pytest.fixture
def sample_records():
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def sample_store(sample_records):
    from tipcat.catalog import CatalogStore
    return CatalogStore.load(sample_records)


@pytest.fixture
def project(tmp_path):
    """An empty project directory with a .git marker and tip files."""
    (tmp_path / ".git").mkdir()
    (tmp_path / "tips.json").write_text(json.dumps(SAMPLE_RECORDS), encoding="utf-8")
    (tmp_path / "tips.md").write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return tmp_path
