from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional, Union

import numpy as np
import numpy.typing as npt

from .._exceptions import (
    CalculationError,
    InvalidInputError,
    NonWorkingDayError,
    OutOfWorkingHoursError,
    PolicyError,
)
from ..policies import WorkingDayPolicy, WorkingHourPolicy

logger = logging.getLogger(__name__)

HoursLike = Union[int, "np.integer", npt.ArrayLike]


def _check_planned_hours(planned_hours: object) -> int:
    is_int = isinstance(planned_hours, (int, np.integer)) and not isinstance(
        planned_hours, (bool, np.bool_)
    )
    if not is_int or planned_hours <= 0:  # type: ignore[operator]
        raise InvalidInputError(
            "The planned hours must be an integer and greater than zero!"
        )
    return int(planned_hours)


class EndDateCalculator:
    """
    Project end date from a start timestamp and a number of planned hours.

    The start must lie on a working day and inside that day's shift window.
    Work is consumed up to the shift end of the start day, then whole shifts
    are consumed on each following working day until the planned time runs
    out.  Finishing exactly at a shift end stays on that day.
    """

    DAY_IN_SECONDS: int = 86400
    HOUR_IN_SECONDS: int = 3600

    def __init__(
        self,
        working_hour: WorkingHourPolicy,
        working_day: WorkingDayPolicy,
        max_idle_days: Optional[int] = 366,
    ) -> None:
        if max_idle_days is not None and (
            isinstance(max_idle_days, bool)
            or not isinstance(max_idle_days, int)
            or max_idle_days < 1
        ):
            raise PolicyError(
                f"max_idle_days must be an integer of at least 1 or None; got {max_idle_days!r}."
            )
        self._working_hour = working_hour
        self._working_day = working_day
        self._max_idle_days = max_idle_days

    # ── public API ───────────────────────────────────────────────────────

    def calculate(self, start_date: datetime, planned_hours: int) -> datetime:
        hours = _check_planned_hours(planned_hours)
        start = start_date.replace(microsecond=0)
        if not self._working_day.is_working_day(start.date()):
            raise NonWorkingDayError("The start date is a non-working day!")
        if not self.is_in_working_hours(start):
            raise OutOfWorkingHoursError("The start hour is out of working hours!")

        planned_seconds = hours * self.HOUR_IN_SECONDS
        difference = int((self._shift_end(start) - start).total_seconds())
        logger.debug(
            "Calculating end date: start=%s planned_seconds=%d first_day_remaining=%d",
            start, planned_seconds, difference,
        )

        if planned_seconds < difference:
            return start + timedelta(seconds=planned_seconds)

        end_date = start + timedelta(seconds=difference)
        planned_seconds -= difference
        if planned_seconds > 0:
            end_date = self._calculate_by_shifts(end_date, planned_seconds)
        return end_date

    def is_in_working_hours(self, time: datetime) -> bool:
        start = time.replace(
            hour=self._working_hour.start_hour(), minute=0, second=0, microsecond=0
        )
        end = start + timedelta(hours=self._working_hour.shift_hours())
        return start <= time <= end

    def calculate_many(
        self, starts: npt.ArrayLike, planned_hours: HoursLike
    ) -> Union[np.ndarray, "np.datetime64"]:
        """
        Element-wise ``calculate`` over broadcast arrays of start timestamps
        and planned hours.  Returns a ``datetime64[s]`` array in the broadcast
        shape, or a single ``datetime64[s]`` value when both inputs are scalars.
        """
        scalar = np.ndim(starts) == 0 and np.ndim(planned_hours) == 0
        s = np.asarray(starts, dtype="datetime64[s]")
        h = np.asarray(planned_hours)
        if h.dtype.kind not in "iu":
            raise InvalidInputError(
                "The planned hours must be an integer and greater than zero!"
            )
        s, h = np.broadcast_arrays(s, h)

        result = np.empty(s.shape, dtype="datetime64[s]")
        for idx in np.ndindex(s.shape):
            start = s[idx].item()
            if start is None:
                raise InvalidInputError(f"Missing start date at index {idx}.")
            result[idx] = np.datetime64(self.calculate(start, h[idx]), "s")
        return result[()] if scalar else result

    # ── shift stepping ───────────────────────────────────────────────────

    def _calculate_by_shifts(self, end_date: datetime, planned_seconds: int) -> datetime:
        shift_seconds = self._working_hour.shift_hours() * self.HOUR_IN_SECONDS
        day_gap = timedelta(seconds=self.DAY_IN_SECONDS - shift_seconds)
        whole_day = timedelta(seconds=self.DAY_IN_SECONDS)

        end_date += day_gap
        idle_days = 0
        while planned_seconds > 0:
            if not self._working_day.is_working_day(end_date.date()):
                idle_days += 1
                if self._max_idle_days is not None and idle_days > self._max_idle_days:
                    raise CalculationError(
                        f"No working day found within {self._max_idle_days} "
                        f"consecutive days up to {end_date.date()}!"
                    )
                logger.debug("Skipping non-working day %s", end_date.date())
                end_date += whole_day
                continue
            idle_days = 0

            if planned_seconds < shift_seconds:
                end_date += timedelta(seconds=planned_seconds)
                break

            planned_seconds -= shift_seconds
            end_date += timedelta(seconds=shift_seconds)
            if planned_seconds > 0:
                end_date += day_gap
        return end_date

    def _shift_end(self, day: datetime) -> datetime:
        return day.replace(
            hour=self._working_hour.end_hour(), minute=0, second=0, microsecond=0
        )

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def working_hour(self) -> WorkingHourPolicy:
        return self._working_hour

    @property
    def working_day(self) -> WorkingDayPolicy:
        return self._working_day

    @property
    def max_idle_days(self) -> Optional[int]:
        return self._max_idle_days

    def __repr__(self) -> str:
        return (
            f"EndDateCalculator(working_hour={self._working_hour!r}, "
            f"working_day={self._working_day!r}, "
            f"max_idle_days={self._max_idle_days})"
        )
