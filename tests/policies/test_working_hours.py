"""
tests/policies/test_working_hours.py

Covers:
  - Default 9–17 shift
  - Custom shifts and shift length
  - Parameter validation
  - Custom subclasses of the abstract policy
"""

import pytest

from worktime import PolicyError
from worktime.policies import FixedWorkingHours, WorkingHourPolicy


class TestFixedWorkingHours:

    def test_defaults(self):
        hours = FixedWorkingHours()
        assert hours.start_hour() == 9
        assert hours.end_hour() == 17
        assert hours.shift_hours() == 8

    def test_custom_shift(self):
        hours = FixedWorkingHours(6, 14)
        assert (hours.start_hour(), hours.end_hour(), hours.shift_hours()) == (6, 14, 8)

    def test_full_day_range(self):
        assert FixedWorkingHours(0, 23).shift_hours() == 23

    @pytest.mark.parametrize("start, end", [(17, 9), (9, 9), (-1, 5), (9, 24), (9.0, 17), (True, 17), ("9", "17")])
    def test_invalid_hours_raise(self, start, end):
        with pytest.raises(PolicyError):
            FixedWorkingHours(start, end)

    def test_policy_error_is_value_error(self):
        with pytest.raises(ValueError):
            FixedWorkingHours(12, 8)

    def test_repr(self):
        assert repr(FixedWorkingHours(8, 16)) == "FixedWorkingHours(start_hour=8, end_hour=16)"


class TestWorkingHourPolicy:

    def test_abstract_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            WorkingHourPolicy()

    def test_subclass_gets_shift_hours(self):
        class Night(WorkingHourPolicy):
            def start_hour(self):
                return 14

            def end_hour(self):
                return 22

        assert Night().shift_hours() == 8
