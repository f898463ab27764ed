"""Cycle time calculation."""

import math

from models.errors import InvalidCycleTimeError, InvalidGoalError


def calculate_cycle_time(total_available_time: float, production_goal: float) -> float:
    """
    Time budget per station for meeting a production goal.

    Args:
        total_available_time: Production time available in the period
        production_goal: Units to produce in the same period

    Returns:
        total_available_time / production_goal

    Raises:
        InvalidGoalError: If production_goal is zero, negative or not finite
        InvalidCycleTimeError: If total_available_time is zero, negative or not finite
    """
    if not production_goal > 0 or not math.isfinite(production_goal):
        raise InvalidGoalError(production_goal)
    if not total_available_time > 0 or not math.isfinite(total_available_time):
        raise InvalidCycleTimeError(total_available_time, what="available time")
    return total_available_time / production_goal
