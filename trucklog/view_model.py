"""
Display state for the planner page.

Everything here is derived from the form fields and the lifecycle snapshot
on every call; nothing is cached between calls.
"""
from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

from .models import CYCLE_LIMIT_HOURS
from .utils.geo import describe_coordinates, describe_route
from .utils.hos import daily_total, driving_estimate, remaining_cycle_hours, total_trip_hours

SUBMIT_LABEL = 'Generate Route & ELD Logs'
SUBMITTING_LABEL = 'Generating Logs...'
MAP_NOTE = 'Map shows route based on locations only.'
FUEL_STOPS = 1
PICKUP_DROPOFF_HOURS = 2


@dataclass(frozen=True)
class ActivityBlock:
    activity: str
    duration_hours: float
    color_tag: str
    label: str


@dataclass(frozen=True)
class DayCard:
    day: int
    title: str
    blocks: Tuple[ActivityBlock, ...]
    driving: str
    on_duty: str
    sleeper: str
    off_duty: str
    total_hours: str


@dataclass(frozen=True)
class RouteSummary:
    description: str
    coordinates: Optional[str]
    distance: str
    driving_time: str
    estimate_pending: bool
    fuel_stops: int
    pickup_dropoff_hours: int
    map_note: Optional[str]


@dataclass(frozen=True)
class ComplianceBanner:
    cycle_used_hours: float
    trip_hours: float
    remaining_hours: float
    text: str


@dataclass(frozen=True)
class PlannerViewModel:
    route: RouteSummary
    days: Tuple[DayCard, ...]
    compliance: Optional[ComplianceBanner]
    error: Optional[str]
    is_submitting: bool
    submit_label: str

    def to_dict(self):
        return asdict(self)


def _hours(value):
    return f"{value:.1f}"


def _activity_block(entry):
    duration = f"{entry.duration_hours:g}"
    return ActivityBlock(
        activity=entry.activity.value,
        duration_hours=entry.duration_hours,
        color_tag=entry.color_tag,
        label=f"{entry.activity.value} ({duration}h)",
    )


def _day_card(day):
    return DayCard(
        day=day.day,
        title=f"Day {day.day}",
        blocks=tuple(_activity_block(entry) for entry in day.entries),
        driving=_hours(day.total_driving),
        on_duty=_hours(day.total_on_duty),
        sleeper=_hours(day.total_sleeper),
        off_duty=_hours(day.total_off_duty),
        total_hours=_hours(daily_total(day)),
    )


def _route_summary(labels, result):
    route = result.route if result is not None else None
    estimate = driving_estimate(route.total_distance_miles if route else None)
    if estimate.pending:
        distance = f"{estimate.distance_miles:g} (estimate pending)"
        driving_time = f"{estimate.driving_hours:g} (estimate pending)"
    else:
        distance = _hours(estimate.distance_miles)
        driving_time = _hours(estimate.driving_hours)
    return RouteSummary(
        description=describe_route(labels),
        coordinates=describe_coordinates(route.points) if route else None,
        distance=distance,
        driving_time=driving_time,
        estimate_pending=estimate.pending,
        fuel_stops=FUEL_STOPS,
        pickup_dropoff_hours=PICKUP_DROPOFF_HOURS,
        map_note=MAP_NOTE if route else None,
    )


def _compliance_banner(cycle_used, logs):
    trip_hours = total_trip_hours(logs)
    remaining = remaining_cycle_hours(cycle_used, trip_hours)
    text = (
        f"This log complies with FMCSA {CYCLE_LIMIT_HOURS:g}-hour/8-day rule. "
        f"Driver has used {cycle_used:g} hrs before trip. "
        f"Total trip adds ~{_hours(trip_hours)} hrs. "
        f"Remaining cycle: {_hours(remaining)} hrs."
    )
    return ComplianceBanner(cycle_used, trip_hours, remaining, text)


class ViewModelAssembler:

    def assemble(self, fields, snapshot) -> PlannerViewModel:
        """
        fields: current form values (the four TripRequest keys).
        snapshot: lifecycle Snapshot.

        Once a result exists, the route description and the cycle hours come
        from the request that produced it, so a later failed submission with
        other values only changes the error banner.
        """
        result = snapshot.result
        source = snapshot.request if result is not None else None
        if source is not None:
            labels = source.labels()
            cycle_used = source.current_cycle_used_hours
        else:
            labels = {
                'current': fields['current_location'],
                'pickup': fields['pickup_location'],
                'dropoff': fields['dropoff_location'],
            }
            cycle_used = fields['current_cycle_used_hours']

        logs = result.logs if result is not None else ()
        days: List[DayCard] = [_day_card(day) for day in logs]
        compliance = None
        if logs:
            compliance = _compliance_banner(float(cycle_used), logs)

        return PlannerViewModel(
            route=_route_summary(labels, result),
            days=tuple(days),
            compliance=compliance,
            error=snapshot.error or None,
            is_submitting=snapshot.is_submitting,
            submit_label=SUBMITTING_LABEL if snapshot.is_submitting else SUBMIT_LABEL,
        )
