from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .exceptions import ContractViolation

CYCLE_LIMIT_HOURS = 70.0
ROUTE_ROLES = ('current', 'pickup', 'dropoff')

RoutePoint = Tuple[float, float]  # (latitude, longitude)


class Activity(Enum):
    DRIVING = 'Driving'
    ON_DUTY = 'On Duty'
    SLEEPER_BERTH = 'Sleeper Berth'
    OFF_DUTY = 'Off Duty'

    @classmethod
    def parse(cls, value):
        """Accept the spellings the trip service uses ("On-Duty", "on_duty", ...)."""
        key = str(value).strip().lower().replace('-', ' ').replace('_', ' ')
        key = ' '.join(key.split())
        for activity in cls:
            if activity.value.lower() == key:
                return activity
        if key == 'sleeper':
            return cls.SLEEPER_BERTH
        raise ContractViolation(f"Unknown duty activity: {value!r}")


@dataclass(frozen=True)
class TripRequest:
    current_location: str
    pickup_location: str
    dropoff_location: str
    current_cycle_used_hours: float

    def __post_init__(self):
        if not 0 <= self.current_cycle_used_hours <= CYCLE_LIMIT_HOURS:
            raise ContractViolation(
                f"current_cycle_used_hours must be within [0, {CYCLE_LIMIT_HOURS:g}], "
                f"got {self.current_cycle_used_hours}"
            )

    def to_payload(self):
        return {
            'currentLocation': self.current_location,
            'pickupLocation': self.pickup_location,
            'dropoffLocation': self.dropoff_location,
            'currentCycleUsed': self.current_cycle_used_hours,
        }

    def labels(self):
        return {
            'current': self.current_location,
            'pickup': self.pickup_location,
            'dropoff': self.dropoff_location,
        }


@dataclass(frozen=True)
class Route:
    points: Tuple[RoutePoint, ...]
    total_distance_miles: float

    def __post_init__(self):
        check_route(self.points)

    def by_role(self):
        return dict(zip(ROUTE_ROLES, self.points))


@dataclass(frozen=True)
class ActivityEntry:
    activity: Activity
    duration_hours: float
    color_tag: str = ''


@dataclass(frozen=True)
class DayLog:
    day: int
    entries: Tuple[ActivityEntry, ...] = ()
    total_driving: float = 0.0
    total_on_duty: float = 0.0
    total_sleeper: float = 0.0
    total_off_duty: float = 0.0


@dataclass(frozen=True)
class TripResult:
    success: bool
    route: Route
    logs: Tuple[DayLog, ...] = field(default_factory=tuple)
    error: Optional[str] = None


def check_route(points):
    """Fail fast on anything that is not a [current, pickup, dropoff] triple."""
    if points is None or len(points) != len(ROUTE_ROLES):
        count = 'no' if points is None else len(points)
        raise ContractViolation(f"A route needs exactly 3 points, got {count}")
    for point in points:
        if len(point) != 2:
            raise ContractViolation(f"Route point must be (lat, lng), got {point!r}")


# -----------------------------
# Wire format -> dataclasses
# -----------------------------
def _require(data, key):
    try:
        return data[key]
    except (KeyError, TypeError):
        raise ContractViolation(f"Trip service reply is missing '{key}'") from None


def parse_route(data) -> Route:
    raw_points = _require(data, 'route_points')
    check_route(raw_points)
    points = tuple((float(lat), float(lng)) for lat, lng in raw_points)
    return Route(points=points, total_distance_miles=float(_require(data, 'total_distance')))


def parse_day_log(data) -> DayLog:
    entries = tuple(
        ActivityEntry(
            activity=Activity.parse(_require(entry, 'activity')),
            duration_hours=float(_require(entry, 'duration')),
            color_tag=entry.get('color', ''),
        )
        for entry in data.get('entries', [])
    )
    return DayLog(
        day=int(_require(data, 'day')),
        entries=entries,
        total_driving=float(_require(data, 'total_driving')),
        total_on_duty=float(_require(data, 'total_on_duty')),
        total_sleeper=float(_require(data, 'total_sleeper')),
        total_off_duty=float(_require(data, 'total_off_duty')),
    )


def parse_trip_result(data) -> TripResult:
    """Build a TripResult from a successful reply body in one step."""
    return TripResult(
        success=bool(_require(data, 'success')),
        route=parse_route(_require(data, 'route')),
        logs=tuple(parse_day_log(day) for day in _require(data, 'logs')),
        error=data.get('error'),
    )
