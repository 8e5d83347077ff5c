"""Unit tests for the attendance cycle calculator."""
from datetime import date, timedelta

import pytest

from hotdesk.utils.cycle import cycle_bounds, describe, is_weekend, week_type, weekday_name


@pytest.mark.unit
class TestCycle:
    def test_weekday_names(self):
        assert weekday_name(date(2025, 1, 13)) == "Mon"
        assert weekday_name(date(2025, 1, 17)) == "Fri"
        assert weekday_name(date(2025, 1, 19)) == "Sun"

    def test_weekend(self):
        assert is_weekend(date(2025, 1, 18))
        assert is_weekend(date(2025, 1, 19))
        assert not is_weekend(date(2025, 1, 17))

    def test_week_parity_follows_iso_week(self):
        # ISO week 3 (odd) then week 4 (even)
        assert week_type(date(2025, 1, 13)) == "week1"
        assert week_type(date(2025, 1, 20)) == "week2"

    def test_cycle_starts_on_odd_week_monday(self):
        assert cycle_bounds(date(2025, 1, 15)) == (date(2025, 1, 13), date(2025, 1, 26))

    def test_every_date_of_a_cycle_reports_the_same_bounds(self):
        start, end = date(2025, 1, 13), date(2025, 1, 26)
        day = start
        while day <= end:
            assert cycle_bounds(day) == (start, end)
            day += timedelta(days=1)

    def test_boundaries_do_not_overlap(self):
        # Sunday ending one cycle and Monday opening the next
        assert cycle_bounds(date(2025, 1, 26))[1] == date(2025, 1, 26)
        assert cycle_bounds(date(2025, 1, 27))[0] == date(2025, 1, 27)

    def test_cycle_crossing_a_year_boundary(self):
        # 2024-12-30 opens ISO week 1 of 2025
        assert cycle_bounds(date(2025, 1, 8)) == (date(2024, 12, 30), date(2025, 1, 12))

    def test_week_53_is_a_cycle_of_its_own(self):
        # 2020 has 53 ISO weeks: week 53 runs 2020-12-28 .. 2021-01-03
        assert cycle_bounds(date(2020, 12, 30)) == (date(2020, 12, 28), date(2021, 1, 3))
        assert cycle_bounds(date(2021, 1, 4)) == (date(2021, 1, 4), date(2021, 1, 17))
        assert cycle_bounds(date(2020, 12, 21)) == (date(2020, 12, 14), date(2020, 12, 27))

    def test_describe(self):
        info = describe(date(2025, 1, 23))
        assert info.weekday == "Thu"
        assert info.week_type == "week2"
        assert (info.start, info.end) == (date(2025, 1, 13), date(2025, 1, 26))
