from ..models import ROUTE_ROLES

ROLE_TITLES = {
    'current': 'Current Location',
    'pickup': 'Pickup',
    'dropoff': 'Dropoff',
}
SHORT_ROLE_TITLES = {
    'current': 'Start',
    'pickup': 'Pickup',
    'dropoff': 'Dropoff',
}


def format_point(point, precision=4):
    lat, lng = point
    return f"{lat:.{precision}f},{lng:.{precision}f}"


def describe_coordinates(points):
    """e.g. "Start: 41.8781,-87.6298 | Pickup: ... | Dropoff: ..." """
    return ' | '.join(
        f"{SHORT_ROLE_TITLES[role]}: {format_point(point)}"
        for role, point in zip(ROUTE_ROLES, points)
    )


def describe_route(labels):
    return ' → '.join(labels[role] for role in ROUTE_ROLES)


def popup_text(role, location_name):
    return f"{ROLE_TITLES[role]}: {location_name}"


def bounding_box(points):
    """[[south, west], [north, east]] covering every point."""
    lats = [lat for lat, _ in points]
    lngs = [lng for _, lng in points]
    return [[min(lats), min(lngs)], [max(lats), max(lngs)]]
