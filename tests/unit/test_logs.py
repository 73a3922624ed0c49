"""
Unit tests for log field extraction.

Tests the independent extraction passes:
- rls_sts tri-state flag
- relay_start_time / duration integers
- [timestamp] [LOG] prefix stripping
"""

import pytest

from connectivity_analyzer.events import LogExtraction
from connectivity_analyzer.logs import (
    clean_display_message,
    extract_all,
    extract_flag,
    extract_log_fields,
    extract_relay_duration,
    extract_relay_start,
)

RELAY_LINE = '"rls_sts": true, "relay_start_time": 1700000000, "duration": 45'


class TestFlagExtraction:
    def test_true(self):
        assert extract_flag(RELAY_LINE) is True

    @pytest.mark.parametrize("line", [
        '{"rls_sts": false}',
        '{"RLS_STS": FALSE}',
        'rls_sts=False',
    ])
    def test_false_case_insensitive(self, line):
        assert extract_flag(line) is False

    def test_quoted_literal(self):
        assert extract_flag('{"rls_sts": "TRUE"}') is True

    def test_absent_is_unknown(self):
        assert extract_flag("heartbeat ok") is None

    def test_non_boolean_value_is_unknown(self):
        assert extract_flag('"rls_sts": 1') is None


class TestRelayFields:
    def test_both_present(self):
        assert extract_relay_start(RELAY_LINE) == 1700000000
        assert extract_relay_duration(RELAY_LINE) == 45

    def test_absent_fields_are_none_not_zero(self):
        assert extract_relay_start("heartbeat ok") is None
        assert extract_relay_duration("heartbeat ok") is None

    def test_fields_independent(self):
        assert extract_relay_start('"duration": 12') is None
        assert extract_relay_duration('"duration": 12') == 12

    def test_duration_not_matched_inside_longer_key(self):
        assert extract_relay_duration('"relay_duration": 99') is None

    def test_leading_zeros_are_base_ten(self):
        assert extract_relay_duration('"duration": 010') == 10


class TestDisplayMessage:
    def test_prefix_stripped(self):
        assert clean_display_message("[09.12.2025 10:00:00] [LOG]   device booted") == "device booted"

    def test_tag_case_insensitive(self):
        assert clean_display_message("[x] [log] hello") == "hello"

    def test_empty_after_strip_returns_original(self):
        line = "[09.12.2025 10:00:00] [LOG]    "
        assert clean_display_message(line) == line

    def test_no_prefix_unchanged(self):
        assert clean_display_message("device booted") == "device booted"

    def test_no_prefix_keeps_surrounding_whitespace(self):
        assert clean_display_message("  heartbeat ok ") == "  heartbeat ok "

    def test_whitespace_only_line_unchanged(self):
        assert clean_display_message("   ") == "   "

    def test_other_tags_not_stripped(self):
        line = "[09.12.2025 10:00:00] [WARN] low battery"
        assert clean_display_message(line) == line

    def test_prefix_only_at_start(self):
        line = "boot [09.12.2025] [LOG] done"
        assert clean_display_message(line) == line


class TestExtractLogFields:
    def test_full_line(self):
        result = extract_log_fields(RELAY_LINE)
        assert result == LogExtraction(
            flag=True,
            relay_start_epoch=1700000000,
            relay_duration_seconds=45,
            display_message=RELAY_LINE,
        )

    def test_extract_all_preserves_order(self, sample_log_lines):
        results = extract_all(sample_log_lines)

        assert len(results) == len(sample_log_lines)
        assert [r.flag for r in results] == [True, None, False, None, None]
        assert results[0].relay_duration_seconds == 45
        assert results[0].display_message.startswith("relay update")
        assert results[1].display_message == "device booted"
        assert results[3].display_message == "heartbeat ok"
        assert results[4].display_message == sample_log_lines[4]

    def test_extract_all_accepts_generators(self):
        results = extract_all(line for line in ["a", "b"])
        assert [r.display_message for r in results] == ["a", "b"]
