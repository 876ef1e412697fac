"""
Test college cost amortization across staggered kids.
"""

import math

import pytest

from retirement_projection.projection import (
    college_overlay,
    college_schedule,
    college_surcharge,
    college_years,
    project,
)


class TestCollegeYears:
    """Distinct college years are deduplicated and clipped to the window."""

    def test_staggered_kids_are_deduplicated(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs)
        assert college_years(inputs) == [50, 51, 52, 53, 54]

    def test_window_clips_years(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs, collegeEndAge=52)
        assert college_years(inputs) == [50, 51]

    def test_reversed_window_uses_min_and_max(self, make_inputs, college_inputs):
        # Start 55 / end 50: window is still [50, 55), kids start at 55 and 56
        inputs = make_inputs(college_inputs, collegeStartAge=55, collegeEndAge=50)
        assert college_years(inputs) == []

    def test_no_kids(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs, numKids=0)
        assert college_years(inputs) == []


class TestCollegeSurcharge:
    """The total bill is spread evenly over the distinct college years."""

    def test_surcharges_sum_to_total(self, make_inputs, college_inputs, tolerance):
        inputs = make_inputs(college_inputs)
        total = sum(college_overlay(inputs, age) for age in college_years(inputs))
        assert abs(total - 2 * 50000 * 4) < tolerance

    def test_flat_per_year_amount(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs)
        assert college_surcharge(inputs) == pytest.approx(400000 / 5)

    def test_overlay_outside_college_years(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs)
        assert college_overlay(inputs, 49) == 0
        assert college_overlay(inputs, 55) == 0

    def test_overlay_disabled(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs, collegeCostsEnabled=False)
        assert college_overlay(inputs, 50) == 0

    def test_clipped_window_concentrates_cost(self, make_inputs, college_inputs):
        # The whole bill lands on the two years left inside the window
        inputs = make_inputs(college_inputs, collegeEndAge=52)
        assert college_surcharge(inputs) == pytest.approx(400000 / 2)

    def test_schedule_matches_components(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs)
        schedule = college_schedule(inputs)
        assert schedule.years == frozenset(college_years(inputs))
        assert schedule.total == 400000
        assert schedule.surcharge == college_surcharge(inputs)


class TestEmptyCollegeWindow:
    """An empty set of college years divides by zero without raising."""

    def test_zero_duration_gives_nan(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs, collegeDuration=0)
        assert math.isnan(college_surcharge(inputs))

    def test_non_overlapping_window_gives_inf(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs, collegeStartAge=50, collegeEndAge=50)
        assert math.isinf(college_surcharge(inputs))

    def test_rows_stay_finite(self, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs, collegeStartAge=50, collegeEndAge=50)
        baseline = make_inputs(college_inputs, collegeCostsEnabled=False)
        rows = project(inputs, start_year=2025)
        assert all(math.isfinite(r.spending_need) for r in rows)
        assert all(math.isfinite(r.surplus_deficit) for r in rows)
        assert rows == project(baseline, start_year=2025)
