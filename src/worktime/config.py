from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from datetime import date
from os import PathLike
from typing import Any, Mapping, Optional, Union

from ._exceptions import ConfigError
from .calculator import EndDateCalculator
from .policies import FixedWorkingHours, WeekdayPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WorktimeConfig:
    """
    Policy parameters for an end date calculation.

    JSON layout (every key optional)::

        {
            "start_hour": 9,
            "end_hour": 17,
            "weekmask": "1111100",
            "holidays": ["2017-12-25", "2017-12-26"],
            "max_idle_days": 366
        }
    """

    start_hour: int = 9
    end_hour: int = 17
    weekmask: str = WeekdayPolicy.DEFAULT_WEEKMASK
    holidays: tuple[date, ...] = ()
    max_idle_days: Optional[int] = 366

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> WorktimeConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}.")

        values = dict(data)
        if "holidays" in values:
            try:
                values["holidays"] = tuple(
                    date.fromisoformat(d) for d in values["holidays"]
                )
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid holiday list: {exc}") from exc
        if "max_idle_days" in values:
            idle = values["max_idle_days"]
            if idle is not None and (
                isinstance(idle, bool) or not isinstance(idle, int) or idle < 1
            ):
                raise ConfigError(
                    f"max_idle_days must be an integer of at least 1 or null; got {idle!r}."
                )
        return cls(**values)

    def working_hour_policy(self) -> FixedWorkingHours:
        return FixedWorkingHours(self.start_hour, self.end_hour)

    def working_day_policy(self) -> WeekdayPolicy:
        return WeekdayPolicy(self.weekmask, self.holidays)

    def calculator(self) -> EndDateCalculator:
        return EndDateCalculator(
            self.working_hour_policy(),
            self.working_day_policy(),
            max_idle_days=self.max_idle_days,
        )


def load_config(path: Union[str, PathLike[str]]) -> WorktimeConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a JSON object.")
    logger.debug("Loaded configuration from %s: %s", path, data)
    return WorktimeConfig.from_mapping(data)
