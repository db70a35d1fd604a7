"""
worktime.calculator
~~~~~~~~~~~~~~~~~~~

Project end date calculation over a daily shift and a working day policy.

Basic usage::

    from datetime import datetime
    from worktime.calculator import EndDateCalculator
    from worktime.policies import FixedWorkingHours, WeekdayPolicy

    calc = EndDateCalculator(FixedWorkingHours(9, 17), WeekdayPolicy())
    calc.calculate(datetime(2017, 7, 24, 9), 10)    # → 2017-07-25 11:00:00

NumPy arrays are accepted by ``calculate_many``::

    import numpy as np
    starts = np.array(["2017-07-24T09:00", "2017-07-28T13:00"], dtype="datetime64[s]")
    calc.calculate_many(starts, 10)

Public API
----------
EndDateCalculator       The main class.
CalculationError        Base exception for start dates that cannot be used.
NonWorkingDayError      The start date is not a working day.
OutOfWorkingHoursError  The start time is outside the shift window.
InvalidInputError       The planned hours are not a positive integer.
"""

from __future__ import annotations

from worktime._exceptions import (
    CalculationError,
    InvalidInputError,
    NonWorkingDayError,
    OutOfWorkingHoursError,
)
from worktime.calculator.calculator import EndDateCalculator

__all__ = [
    "CalculationError",
    "EndDateCalculator",
    "InvalidInputError",
    "NonWorkingDayError",
    "OutOfWorkingHoursError",
]
