import logging
import threading

from branca.element import Figure

from . import conf
from .client import TripPlannerClient
from .lifecycle import RequestLifecycle
from .map_sync import MapSyncController
from .view_model import ViewModelAssembler

logger = logging.getLogger(__name__)


class PlannerSession:
    """
    One driver's planner: form fields, request lifecycle, map and view model.

    The lifecycle fires on_result_changed once per stored result; that single
    notification rebuilds the map. The view model is assembled on demand
    from whatever is current.
    """

    def __init__(self, lifecycle, map_controller=None, assembler=None):
        # Last submitted values; only used to re-fill the form
        self.fields = dict(conf.DEFAULT_TRIP)
        self.lifecycle = lifecycle
        self.map = map_controller or MapSyncController()
        self.assembler = assembler or ViewModelAssembler()
        self.map.initialize(Figure(height=conf.get('TRUCKLOG_MAP_HEIGHT')))
        lifecycle.on_result_changed(self._result_changed)

    @classmethod
    def for_client(cls, client=None):
        return cls(RequestLifecycle.for_client(client or TripPlannerClient()))

    def _result_changed(self, result, trip_request):
        self.map.apply_route(result.route.points, trip_request.labels())

    async def submit(self, trip_request):
        self.fields = {
            'current_location': trip_request.current_location,
            'pickup_location': trip_request.pickup_location,
            'dropoff_location': trip_request.dropoff_location,
            'current_cycle_used_hours': trip_request.current_cycle_used_hours,
        }
        return await self.lifecycle.submit(trip_request)

    def view_model(self):
        return self.assembler.assemble(self.fields, self.lifecycle.snapshot())

    def close(self):
        self.map.teardown()


class SessionRegistry:
    """PlannerSession per Django session key."""

    def __init__(self, factory=None):
        self._factory = factory or PlannerSession.for_client
        self._sessions = {}
        self._lock = threading.Lock()

    def get(self, key):
        with self._lock:
            session = self._sessions.get(key)
            if session is None:
                session = self._sessions[key] = self._factory()
                logger.debug("Opened planner session %s", key)
            return session

    def discard(self, key):
        with self._lock:
            session = self._sessions.pop(key, None)
        if session is not None:
            session.close()

    def clear(self):
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()

    def __len__(self):
        return len(self._sessions)
