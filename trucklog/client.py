import logging

import requests

from . import conf
from .exceptions import ContractViolation, ServiceError, TransportError
from .models import parse_trip_result

logger = logging.getLogger(__name__)

TRIP_PATH = '/api/trip/'


class TripPlannerClient:
    """Blocking client for the external trip-planning service."""

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or conf.service_url()).rstrip('/')
        self.timeout = timeout if timeout is not None else conf.request_timeout()
        self.session = session or requests.Session()

    @property
    def trip_url(self):
        return f"{self.base_url}{TRIP_PATH}"

    def plan_trip(self, trip_request):
        """
        POST the trip and return a TripResult.
        Raises TransportError, ServiceError or ContractViolation.
        """
        try:
            r = self.session.post(
                self.trip_url,
                json=trip_request.to_payload(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError() from exc

        try:
            data = r.json()
        except ValueError as exc:
            if not r.ok:
                raise ServiceError(status_code=r.status_code) from exc
            raise TransportError() from exc
        logger.debug("Trip service replied %s: %s", r.status_code, data)

        # Non-2xx or success=false is a failure whatever the body looks like.
        if not r.ok or not isinstance(data, dict) or not data.get('success'):
            message = data.get('error') if isinstance(data, dict) else None
            raise ServiceError(message, status_code=r.status_code)

        try:
            return parse_trip_result(data)
        except (ValueError, TypeError) as exc:
            raise ContractViolation(f"Malformed trip service reply: {exc}") from exc
