"""Tests for loading tips from JSON, Markdown and the built-in catalog."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))
from conftest import SAMPLE_MARKDOWN, SAMPLE_RECORDS

from tipcat.catalog import load_catalog, load_records, parse_markdown
from tipcat.catalog.builtin import TIPS
from tipcat.exit_codes import NotFoundError, ValidationError


class TestBuiltin:

    def test_twenty_unique_ordinals(self):
        store = load_catalog()
        assert store.ordinals() == list(range(1, 21))

    def test_every_tip_has_content(self):
        for tip in TIPS:
            assert tip["title"].strip()
            assert tip["explanation"].strip()
            assert tip["sample"].strip()


class TestParseMarkdown:

    def test_parses_tips_in_order(self):
        records = parse_markdown(SAMPLE_MARKDOWN)
        assert [r["ordinal"] for r in records] == [1, 2]
        assert [r["title"] for r in records] == ["Use LINQ", "Use using"]

    def test_explanation_and_sample(self):
        first, second = parse_markdown(SAMPLE_MARKDOWN)
        assert first["explanation"] == "Query collections declaratively."
        assert first["sample"] == "var x = a.Where(i => i > 0);"
        assert second["sample"] == "using (var s = Open())\n{\n}"

    def test_fence_info_becomes_language(self):
        first, second = parse_markdown(SAMPLE_MARKDOWN)
        assert first["language"] == "csharp"
        assert second["language"] == "cs"

    def test_matches_json_source(self):
        records = parse_markdown(SAMPLE_MARKDOWN)
        for parsed, expected in zip(records, SAMPLE_RECORDS):
            for key in ("ordinal", "title", "explanation", "sample"):
                assert parsed[key] == expected[key]

    def test_plain_numbered_and_bold_headings(self):
        text = (
            "1. First\n"
            "Explain one.\n"
            "```\n"
            "a();\n"
            "```\n"
            "**2. Second**\n"
            "Explain two.\n"
        )
        records = parse_markdown(text)
        assert [(r["ordinal"], r["title"]) for r in records] == [(1, "First"), (2, "Second")]
        assert records[1]["sample"] == ""

    def test_numbered_lines_inside_fence_ignored(self):
        text = "## 1. Loops\nText.\n```\n1. not a heading\n```\n"
        records = parse_markdown(text)
        assert len(records) == 1
        assert records[0]["sample"] == "1. not a heading"

    def test_numbered_fence_line_between_tips(self):
        text = (
            "## 1. Ordered\nSteps.\n```cs\n2. Not a tip\n10) nor this\n```\n"
            "## 2. Next\nReal.\n```cs\nn();\n```\n"
        )
        records = parse_markdown(text)
        assert [(r["ordinal"], r["title"]) for r in records] == [(1, "Ordered"), (2, "Next")]
        assert records[0]["sample"] == "2. Not a tip\n10) nor this"

    def test_only_first_fence_is_sample(self):
        text = "## 1. T\nE.\n```\nfirst\n```\nMore.\n```\nsecond\n```\n"
        (record,) = parse_markdown(text)
        assert record["sample"] == "first"
        assert "More." in record["explanation"]

    def test_unterminated_fence_fails(self):
        with pytest.raises(ValidationError, match="fence"):
            parse_markdown("## 1. T\n```\nopen forever\n")

    def test_no_tips(self):
        assert parse_markdown("# Just a title\n\nNo numbered items.\n") == []


class TestLoadRecords:

    def test_json_array(self, project):
        assert load_records(project / "tips.json") == SAMPLE_RECORDS

    def test_json_object_with_tips(self, tmp_path):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"tips": SAMPLE_RECORDS}), encoding="utf-8")
        assert load_records(path) == SAMPLE_RECORDS

    def test_json_wrong_shape(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"items": []}), encoding="utf-8")
        with pytest.raises(ValidationError, match="tips"):
            load_records(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ValidationError, match="invalid JSON"):
            load_records(path)

    def test_markdown_file(self, project):
        assert len(load_records(project / "tips.md")) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(NotFoundError):
            load_records(tmp_path / "nope.json")

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "tips.yaml"
        path.write_text("- 1\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="expected"):
            load_records(path)


class TestLoadCatalog:

    def test_json_and_markdown_agree(self, project):
        from_json = load_catalog(project / "tips.json")
        from_md = load_catalog(project / "tips.md")
        assert [(e.ordinal, e.title, e.sample) for e in from_json] == \
            [(e.ordinal, e.title, e.sample) for e in from_md]

    def test_empty_json_array_fails(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ValidationError, match="empty"):
            load_catalog(path)

    def test_duplicate_markdown_ordinals_fail(self, tmp_path):
        path = tmp_path / "dupe.md"
        path.write_text("1. A\nx\n1. B\ny\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="duplicate"):
            load_catalog(path)
