class WorktimeError(Exception):
    """Base class for all worktime errors."""


class InvalidInputError(WorktimeError, ValueError):
    """The planned hours are not a positive integer."""


class CalculationError(WorktimeError):
    """The end date cannot be calculated from the given start date."""


class NonWorkingDayError(CalculationError):
    pass


class OutOfWorkingHoursError(CalculationError):
    pass


class PolicyError(WorktimeError, ValueError):
    """A working hour or working day policy was given invalid parameters."""


class ConfigError(WorktimeError):
    pass
