"""
worktime
~~~~~~~~

Working-time arithmetic: when does a project that starts at a given moment
and needs a given number of working hours finish, given a daily shift and a
set of working days.
"""

from __future__ import annotations

from worktime._exceptions import (
    CalculationError,
    ConfigError,
    InvalidInputError,
    NonWorkingDayError,
    OutOfWorkingHoursError,
    PolicyError,
    WorktimeError,
)
from worktime.calculator import EndDateCalculator
from worktime.config import WorktimeConfig, load_config
from worktime.policies import (
    FixedWorkingHours,
    WeekdayPolicy,
    WorkingDayPolicy,
    WorkingHourPolicy,
)

__all__ = [
    "CalculationError",
    "ConfigError",
    "EndDateCalculator",
    "FixedWorkingHours",
    "InvalidInputError",
    "NonWorkingDayError",
    "OutOfWorkingHoursError",
    "PolicyError",
    "WeekdayPolicy",
    "WorkingDayPolicy",
    "WorkingHourPolicy",
    "WorktimeConfig",
    "WorktimeError",
    "load_config",
]
