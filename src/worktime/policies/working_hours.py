from __future__ import annotations

from abc import ABC, abstractmethod

from .._exceptions import PolicyError


class WorkingHourPolicy(ABC):
    """
    Daily shift definition: the hour the shift starts, the hour it ends and
    its length in hours.  Implementations must keep end_hour > start_hour.
    """

    @abstractmethod
    def start_hour(self) -> int: ...

    @abstractmethod
    def end_hour(self) -> int: ...

    def shift_hours(self) -> int:
        return self.end_hour() - self.start_hour()


class FixedWorkingHours(WorkingHourPolicy):

    def __init__(self, start_hour: int = 9, end_hour: int = 17) -> None:
        for name, hour in (("start_hour", start_hour), ("end_hour", end_hour)):
            if isinstance(hour, bool) or not isinstance(hour, int):
                raise PolicyError(f"{name} must be an integer; got {hour!r}.")
            if not 0 <= hour <= 23:
                raise PolicyError(f"{name} must be in [0, 23]; got {hour}.")
        if end_hour <= start_hour:
            raise PolicyError(
                f"end_hour must be greater than start_hour; got {start_hour}–{end_hour}."
            )
        self._start_hour = start_hour
        self._end_hour = end_hour

    def start_hour(self) -> int:
        return self._start_hour

    def end_hour(self) -> int:
        return self._end_hour

    def __repr__(self) -> str:
        return (
            f"FixedWorkingHours(start_hour={self._start_hour}, "
            f"end_hour={self._end_hour})"
        )
