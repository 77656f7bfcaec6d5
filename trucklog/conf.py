import os

from django.conf import settings

DEFAULTS = {
    'TRUCKLOG_SERVICE_URL': 'http://localhost:8000',
    'TRUCKLOG_REQUEST_TIMEOUT': 30,
    'TRUCKLOG_TILE_URL': 'https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png',
    'TRUCKLOG_TILE_ATTRIBUTION': (
        '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
    ),
    'TRUCKLOG_DEFAULT_CENTER': (41.8781, -87.6298),
    'TRUCKLOG_DEFAULT_ZOOM': 5,
    'TRUCKLOG_MAP_HEIGHT': '400px',
}

# Form defaults (Chicago -> St. Louis -> Atlanta)
DEFAULT_TRIP = {
    'current_location': 'Chicago, IL',
    'pickup_location': 'St. Louis, MO',
    'dropoff_location': 'Atlanta, GA',
    'current_cycle_used_hours': 22.5,
}


def get(name):
    """Django setting, then environment variable, then built-in default."""
    value = getattr(settings, name, None)
    if value is None:
        value = os.environ.get(name)
    if value is None:
        value = DEFAULTS[name]
    return value


def service_url():
    return str(get('TRUCKLOG_SERVICE_URL')).rstrip('/')


def request_timeout():
    return float(get('TRUCKLOG_REQUEST_TIMEOUT'))
