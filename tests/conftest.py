import copy

import pytest

from trucklog.models import TripRequest, parse_trip_result

CHICAGO = (41.8781, -87.6298)
ST_LOUIS = (38.627, -90.1994)
ATLANTA = (33.749, -84.388)

SAMPLE_REPLY = {
    'success': True,
    'route': {
        'route_points': [list(CHICAGO), list(ST_LOUIS), list(ATLANTA)],
        'total_distance': 770.0,
    },
    'logs': [
        {
            'day': 1,
            'entries': [
                {'activity': 'On Duty', 'duration': 1, 'color': 'bg-yellow-500'},
                {'activity': 'Driving', 'duration': 11, 'color': 'bg-green-500'},
                {'activity': 'On Duty', 'duration': 3, 'color': 'bg-yellow-500'},
                {'activity': 'Sleeper Berth', 'duration': 8, 'color': 'bg-blue-500'},
                {'activity': 'Off Duty', 'duration': 1, 'color': 'bg-gray-500'},
            ],
            'total_driving': 11.0,
            'total_on_duty': 4.0,
            'total_sleeper': 8.0,
            'total_off_duty': 1.0,
        },
        {
            'day': 2,
            'entries': [
                {'activity': 'Driving', 'duration': 10, 'color': 'bg-green-500'},
                {'activity': 'On Duty', 'duration': 5, 'color': 'bg-yellow-500'},
                {'activity': 'Sleeper Berth', 'duration': 9, 'color': 'bg-blue-500'},
            ],
            'total_driving': 10.0,
            'total_on_duty': 5.0,
            'total_sleeper': 9.0,
            'total_off_duty': 0.0,
        },
    ],
}


@pytest.fixture
def reply():
    return copy.deepcopy(SAMPLE_REPLY)


@pytest.fixture
def trip_result(reply):
    return parse_trip_result(reply)


@pytest.fixture
def trip_request():
    return TripRequest('Chicago, IL', 'St. Louis, MO', 'Atlanta, GA', 22.5)


@pytest.fixture
def other_result(reply):
    reply['route']['route_points'] = [[40.7128, -74.006], [39.9526, -75.1652], [38.9072, -77.0369]]
    reply['route']['total_distance'] = 230.0
    reply['logs'] = reply['logs'][:1]
    return parse_trip_result(reply)
