"""Tests for gitguide.lib.timefmt module."""

from datetime import datetime, timedelta, timezone

import pytest

from gitguide.lib.timefmt import format_log_date, format_time_ago, parse_iso, to_iso

NOW = datetime(2026, 10, 18, 9, 30, 0, tzinfo=timezone.utc)


class TestIso:

    def test_to_iso_uses_z_suffix_and_millis(self):
        assert to_iso(NOW) == "2026-10-18T09:30:00.000Z"

    def test_naive_treated_as_utc(self):
        assert to_iso(datetime(2026, 10, 18, 9, 30)) == "2026-10-18T09:30:00.000Z"

    def test_parse_accepts_z(self):
        assert parse_iso("2026-10-18T09:30:00.000Z") == NOW

    def test_log_date(self):
        assert format_log_date("2026-10-18T09:30:00.000Z") == "Sun Oct 18 09:30:00 2026 +0000"


class TestTimeAgo:

    @pytest.mark.parametrize("delta,expected", [
        (timedelta(seconds=30), "just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=5), "5 minutes ago"),
        (timedelta(hours=1), "1 hour ago"),
        (timedelta(hours=3), "3 hours ago"),
        (timedelta(days=1), "1 day ago"),
        (timedelta(days=9), "9 days ago"),
    ])
    def test_buckets(self, delta, expected):
        assert format_time_ago(to_iso(NOW - delta), now=NOW) == expected
