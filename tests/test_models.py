"""
Unit tests for core/models.py
Covers SortDirection, KeySpec, SortStats and SortParams validation.
"""
import pytest

from sortrules.core.models import KeySpec, RecordFormat, SortDirection, SortParams, SortStats


# =============================================================================
# 1. ENUMS
# =============================================================================
class TestSortDirection:

    def test_from_flag(self):
        assert SortDirection.from_flag(True) is SortDirection.ASCENDING
        assert SortDirection.from_flag(False) is SortDirection.DESCENDING

    def test_is_ascending(self):
        assert SortDirection.ASCENDING.is_ascending is True
        assert SortDirection.DESCENDING.is_ascending is False

    def test_display_names(self):
        assert SortDirection.ASCENDING.display_name == "Ascending"
        assert SortDirection.DESCENDING.display_name == "Descending"

    def test_record_format_values(self):
        assert RecordFormat("json") is RecordFormat.JSON
        assert RecordFormat("jsonl") is RecordFormat.JSON_LINES


# =============================================================================
# 2. KEY SPEC
# =============================================================================
class TestKeySpec:

    def test_parse_default_direction(self):
        spec = KeySpec.parse("last_name")
        assert spec.field == "last_name"
        assert spec.direction is SortDirection.ASCENDING
        assert spec.ascending is True

    def test_parse_descending(self):
        spec = KeySpec.parse("age:desc")
        assert spec == KeySpec("age", SortDirection.DESCENDING)
        assert spec.ascending is False

    def test_str(self):
        assert str(KeySpec("age", SortDirection.DESCENDING)) == "age:desc"

    def test_blank_field_rejected(self):
        with pytest.raises(ValueError):
            KeySpec(" ")


# =============================================================================
# 3. SORT STATS
# =============================================================================
class TestSortStats:

    def test_counters(self):
        stats = SortStats()
        stats.record_comparison()
        stats.record_comparison()
        stats.record_extraction_failure()
        assert stats.comparisons == 2
        assert stats.extraction_failures == 1

    def test_summary_mentions_failures_only_when_present(self):
        stats = SortStats(comparisons=5)
        assert "Comparisons: 5" in stats.print_summary()
        assert "absent" not in stats.print_summary()

        stats.record_extraction_failure()
        assert "sorted as absent): 1" in stats.print_summary()


# =============================================================================
# 4. SORT PARAMS
# =============================================================================
class TestSortParams:

    def test_valid_params(self):
        params = SortParams(input_path="in.json", keys=[KeySpec("a")])
        assert params.output_path is None
        assert params.input_format is RecordFormat.JSON

    def test_output_format_defaults_to_input_format(self):
        params = SortParams(input_path="in.jsonl", keys=[KeySpec("a")], input_format=RecordFormat.JSON_LINES)
        assert params.output_format is RecordFormat.JSON_LINES

    def test_explicit_output_format(self):
        params = SortParams(
            input_path="in.jsonl",
            keys=[KeySpec("a")],
            input_format=RecordFormat.JSON_LINES,
            output_format=RecordFormat.JSON,
        )
        assert params.output_format is RecordFormat.JSON

    def test_empty_input_path(self):
        with pytest.raises(ValueError, match="Input path"):
            SortParams(input_path="", keys=[KeySpec("a")])

    def test_no_keys(self):
        with pytest.raises(ValueError, match="sort key"):
            SortParams(input_path="in.json", keys=[])

    def test_blank_output_path(self):
        with pytest.raises(ValueError):
            SortParams(input_path="in.json", keys=[KeySpec("a")], output_path="  ")

    def test_from_human_readable(self):
        params = SortParams.from_human_readable(
            "in.json", ["last_name", "age:desc", "  "], output_path="out.jsonl", output_format="jsonl")

        assert params.keys == [KeySpec("last_name"), KeySpec("age", SortDirection.DESCENDING)]
        assert params.input_format is RecordFormat.JSON
        assert params.output_format is RecordFormat.JSON_LINES
        assert params.output_path == "out.jsonl"

    def test_from_human_readable_bad_format(self):
        with pytest.raises(ValueError):
            SortParams.from_human_readable("in.json", ["a"], input_format="xml")

    def test_from_human_readable_accepts_format_alias(self):
        params = SortParams.from_human_readable("in.jsonl", ["a"], input_format="ndjson", output_format="JSON")

        assert params.input_format is RecordFormat.JSON_LINES
        assert params.output_format is RecordFormat.JSON

    def test_from_human_readable_bad_direction(self):
        with pytest.raises(ValueError):
            SortParams.from_human_readable("in.json", ["a:sideways"])
