import asyncio
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .exceptions import GENERIC_NETWORK_ERROR, TripPlannerError
from .models import TripRequest, TripResult

logger = logging.getLogger(__name__)


class State(Enum):
    IDLE = 'idle'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'
    ERROR = 'error'


class Outcome(Enum):
    APPLIED = 'applied'
    STALE = 'stale'  # a newer submit() superseded this call; its reply was dropped


@dataclass(frozen=True)
class Snapshot:
    state: State
    result: Optional[TripResult]
    error: str
    sequence: int
    request: Optional[TripRequest] = None  # the request that produced result

    @property
    def is_submitting(self):
        return self.state is State.SUBMITTING


class RequestLifecycle:
    """
    Idle -> Submitting -> Success | Error, and back to Submitting on the next submit.

    Every submit() is tagged with a monotonically increasing sequence number;
    only the reply carrying the latest number is applied. A successful reply
    replaces the stored TripResult and the request that produced it in one
    step, then the on_result_changed listeners are called with
    (result, request). Errors never clear the last good result.

    Listeners run under a notification lock, one thread at a time. A result
    stored while another thread is notifying is picked up by that thread
    once its round ends, so listeners always finish on the latest result.
    """

    def __init__(self, dispatch):
        # dispatch: coroutine function TripRequest -> TripResult
        self._dispatch = dispatch
        self._lock = threading.Lock()
        self._notify_lock = threading.Lock()
        self._state = State.IDLE
        self._result = None
        self._result_request = None
        self._result_sequence = 0
        self._notified_sequence = 0
        self._error = ''
        self._sequence = 0
        self._listeners: List[Callable[[TripResult, TripRequest], None]] = []

    @classmethod
    def for_client(cls, client):
        """Run a blocking TripPlannerClient off the event loop."""
        async def dispatch(trip_request):
            return await asyncio.to_thread(client.plan_trip, trip_request)
        return cls(dispatch)

    # -----------------------------
    # Accessors
    # -----------------------------
    @property
    def state(self):
        return self._state

    @property
    def result(self):
        return self._result

    @property
    def result_request(self):
        return self._result_request

    @property
    def error(self):
        return self._error

    @property
    def sequence(self):
        return self._sequence

    @property
    def is_submitting(self):
        return self._state is State.SUBMITTING

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot(self._state, self._result, self._error, self._sequence,
                            self._result_request)

    def on_result_changed(self, listener):
        self._listeners.append(listener)
        return listener

    # -----------------------------
    # Transitions
    # -----------------------------
    def _begin(self):
        with self._lock:
            self._sequence += 1
            self._state = State.SUBMITTING
            self._error = ''
            return self._sequence

    def _is_latest(self, sequence):
        return sequence == self._sequence

    def _succeed(self, sequence, result, trip_request):
        with self._lock:
            if not self._is_latest(sequence):
                return False
            self._result = result
            self._result_request = trip_request
            self._result_sequence = sequence
            self._state = State.SUCCESS
        return True

    def _fail(self, sequence, message):
        with self._lock:
            if not self._is_latest(sequence):
                return False
            self._error = message
            self._state = State.ERROR
        return True

    def _pending_notification(self):
        with self._lock:
            if self._result_sequence == self._notified_sequence:
                return None
            return self._result_sequence, self._result, self._result_request

    def _notify(self):
        while self._pending_notification() is not None:
            if not self._notify_lock.acquire(blocking=False):
                return  # the notifying thread will pick up our result
            try:
                pending = self._pending_notification()
                if pending is None:
                    return
                sequence, result, trip_request = pending
                self._notified_sequence = sequence
                for listener in list(self._listeners):
                    if self._result_sequence != sequence:
                        break  # superseded mid-round; the next round applies it
                    listener(result, trip_request)
            finally:
                self._notify_lock.release()

    async def submit(self, trip_request) -> Outcome:
        sequence = self._begin()
        logger.info("Submitting trip #%d: %s -> %s -> %s", sequence,
                    trip_request.current_location, trip_request.pickup_location,
                    trip_request.dropoff_location)
        try:
            result = await self._dispatch(trip_request)
        except TripPlannerError as exc:
            applied = self._fail(sequence, exc.message)
            if applied:
                logger.warning("Trip #%d failed: %s", sequence, exc.message)
        except Exception:
            applied = self._fail(sequence, GENERIC_NETWORK_ERROR)
            if applied:
                logger.exception("Trip #%d failed unexpectedly", sequence)
        else:
            applied = self._succeed(sequence, result, trip_request)
            if applied:
                logger.info("Trip #%d planned: %d day(s), %.1f miles", sequence,
                            len(result.logs), result.route.total_distance_miles)
                self._notify()

        if not applied:
            logger.debug("Discarding stale reply for trip #%d (latest is #%d)",
                         sequence, self._sequence)
            return Outcome.STALE
        return Outcome.APPLIED
