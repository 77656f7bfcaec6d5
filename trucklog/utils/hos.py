from dataclasses import dataclass

from ..models import CYCLE_LIMIT_HOURS

# Constants
AVERAGE_SPEED_MPH = 55.0
PLACEHOLDER_DISTANCE_MILES = 750.0
PLACEHOLDER_DRIVING_HOURS = 13.6


@dataclass(frozen=True)
class DrivingEstimate:
    distance_miles: float
    driving_hours: float
    pending: bool = False  # True while showing the placeholder, not a real result


def total_trip_hours(logs) -> float:
    """Driving plus on-duty hours the trip adds to the 70-hour cycle."""
    return sum(day.total_driving + day.total_on_duty for day in logs)


def remaining_cycle_hours(current_cycle_used_hours: float, trip_hours: float) -> float:
    return max(0.0, CYCLE_LIMIT_HOURS - (current_cycle_used_hours + trip_hours))


def estimated_driving_hours(total_distance_miles: float) -> float:
    return total_distance_miles / AVERAGE_SPEED_MPH


def driving_estimate(total_distance_miles=None) -> DrivingEstimate:
    """
    Distance/time pair for the route summary.
    Without a distance (no result yet) the fixed placeholder is returned, tagged pending.
    """
    if total_distance_miles is None:
        return DrivingEstimate(PLACEHOLDER_DISTANCE_MILES, PLACEHOLDER_DRIVING_HOURS, pending=True)
    return DrivingEstimate(total_distance_miles, estimated_driving_hours(total_distance_miles))


def daily_total(day) -> float:
    # No 24h check: the trip service guarantees full days.
    return day.total_driving + day.total_on_duty + day.total_sleeper + day.total_off_duty
