from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Iterable, Union

import numpy as np

from .._exceptions import PolicyError

DateLike = Union[date, str, "np.datetime64"]


def _to_date(day: DateLike) -> date:
    if isinstance(day, datetime):
        return day.date()
    if isinstance(day, date):
        return day
    try:
        return np.datetime64(day, "D").item()
    except (TypeError, ValueError) as exc:
        raise PolicyError(f"Cannot interpret {day!r} as a calendar date.") from exc


class WorkingDayPolicy(ABC):
    """
    Predicate over calendar dates.  Only the date component matters; a
    datetime is reduced to its date before evaluation.
    """

    @abstractmethod
    def is_working_day(self, day: date) -> bool: ...


class WeekdayPolicy(WorkingDayPolicy):
    """
    Working days given by a weekly mask with optional holiday overrides.
    The default mask is Monday–Friday.

    The mask follows numpy's busday conventions: either seven 0/1 characters
    starting on Monday ("1111100") or weekday abbreviations ("Mon Tue Wed").
    """

    DEFAULT_WEEKMASK: str = "1111100"

    def __init__(
        self,
        weekmask: str = DEFAULT_WEEKMASK,
        holidays: Iterable[DateLike] | None = None,
    ) -> None:
        self._weekmask = weekmask
        self._holidays: set[date] = {_to_date(d) for d in holidays or ()}
        self._build()

    # ── busday calendar management ───────────────────────────────────────

    def _build(self) -> None:
        try:
            self._busdaycal = np.busdaycalendar(
                weekmask=self._weekmask,
                holidays=np.array(sorted(self._holidays), dtype="datetime64[D]"),
            )
        except ValueError as exc:
            raise PolicyError(f"Invalid weekmask {self._weekmask!r}: {exc}") from exc

    # ── holiday management ───────────────────────────────────────────────

    def add_holiday(self, day: DateLike) -> None:
        self._holidays.add(_to_date(day))
        self._build()

    def remove_holiday(self, day: DateLike) -> None:
        d = _to_date(day)
        if d in self._holidays:
            self._holidays.discard(d)
            self._build()

    # ── predicate ────────────────────────────────────────────────────────

    def is_working_day(self, day: date) -> bool:
        d = np.datetime64(_to_date(day), "D")
        return bool(np.is_busday(d, busdaycal=self._busdaycal))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def weekmask(self) -> str:
        return "".join("1" if w else "0" for w in self._busdaycal.weekmask)

    @property
    def holidays(self) -> tuple[date, ...]:
        return tuple(sorted(self._holidays))

    def __repr__(self) -> str:
        return (
            f"WeekdayPolicy(weekmask={self.weekmask!r}, "
            f"holidays={len(self._holidays)})"
        )
