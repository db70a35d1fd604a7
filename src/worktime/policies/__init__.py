"""
worktime.policies
~~~~~~~~~~~~~~~~~

The two collaborators consulted by the end date calculator: a working hour
policy (when does the daily shift start and end) and a working day policy
(which calendar dates are worked at all).

Basic usage::

    from worktime.policies import FixedWorkingHours, WeekdayPolicy

    hours = FixedWorkingHours()                  # 09:00 – 17:00
    days  = WeekdayPolicy(holidays=["2017-07-25"])
    days.is_working_day(date(2017, 7, 24))       # → True

Public API
----------
WorkingHourPolicy  Abstract shift definition.
FixedWorkingHours  Fixed start/end hour shift.
WorkingDayPolicy   Abstract working day predicate.
WeekdayPolicy      Weekmask + holiday predicate backed by numpy.busdaycalendar.
"""

from __future__ import annotations

from worktime.policies.working_days import WeekdayPolicy, WorkingDayPolicy
from worktime.policies.working_hours import FixedWorkingHours, WorkingHourPolicy

__all__ = [
    "FixedWorkingHours",
    "WeekdayPolicy",
    "WorkingDayPolicy",
    "WorkingHourPolicy",
]
