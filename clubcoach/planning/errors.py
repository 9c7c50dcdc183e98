"""Domain-specific errors for class planning.

This module defines error classes for plan generation, regeneration
and persistence, enabling precise error handling by callers.
"""


class PlannerError(Exception):
    """Base exception for all planning errors."""

    pass


class PlanGenerationError(PlannerError):
    """Raised when generation parameters are unusable (e.g., week number < 1)."""

    pass


class RegenerationNotConfirmedError(PlannerError):
    """Raised when a destructive regeneration is requested without confirmation."""

    pass


class PlanNotFoundError(PlannerError):
    """Raised when an update targets a plan id that is not stored."""

    pass


class InvalidWeekError(PlannerError):
    """Raised when a week number falls outside the class cycle."""

    def __init__(self, week_number: int, cycle_length: int):
        self.week_number = week_number
        self.cycle_length = cycle_length
        super().__init__(f"Week {week_number} is outside the cycle (1-{cycle_length})")
