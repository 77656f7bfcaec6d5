"""Tests for the planner session pipeline and registry."""

import asyncio
import threading
from unittest import mock

from trucklog.exceptions import ServiceError
from trucklog.lifecycle import RequestLifecycle
from trucklog.models import TripRequest
from trucklog.session import PlannerSession, SessionRegistry


def session_with(*outcomes):
    dispatch = mock.AsyncMock(side_effect=list(outcomes))
    return PlannerSession(RequestLifecycle(dispatch))


class TestPlannerSession:

    def test_map_ready_before_first_result(self):
        planner = session_with()
        assert planner.map.initialized
        assert planner.map.layer_set.markers == {}
        assert planner.view_model().route.estimate_pending

    def test_result_rebuilds_map_with_request_labels(self, trip_request, trip_result):
        planner = session_with(trip_result)
        asyncio.run(planner.submit(trip_request))
        markers = planner.map.layer_set.markers
        assert set(markers) == {'current', 'pickup', 'dropoff'}
        assert markers['dropoff'].location == [33.749, -84.388]
        assert planner.fields['pickup_location'] == 'St. Louis, MO'

    def test_failed_resubmit_keeps_route_and_logs(self, trip_request, trip_result):
        planner = session_with(trip_result, ServiceError('Dropoff location not found'))
        asyncio.run(planner.submit(trip_request))
        markers = planner.map.layer_set.markers
        asyncio.run(planner.submit(trip_request))

        vm = planner.view_model()
        assert vm.error == 'Dropoff location not found'
        assert len(vm.days) == 2
        assert planner.map.layer_set.markers == markers

    def test_failed_resubmit_with_other_trip_keeps_previous_summary(self, trip_request, trip_result):
        planner = session_with(trip_result, ServiceError('Pickup location not found'))
        asyncio.run(planner.submit(trip_request))
        before = planner.view_model()
        asyncio.run(planner.submit(TripRequest('Seattle, WA', 'Boise, ID', 'Denver, CO', 60)))

        after = planner.view_model()
        assert after.error == 'Pickup location not found'
        assert after.route == before.route
        assert after.days == before.days
        assert after.compliance == before.compliance
        assert after.compliance.cycle_used_hours == 22.5
        assert planner.fields['pickup_location'] == 'Boise, ID'

    def test_map_follows_newer_result_stored_from_another_thread(
            self, trip_request, trip_result, other_result):
        newer = TripRequest('New York, NY', 'Philadelphia, PA', 'Washington, DC', 10)

        async def dispatch(req):
            return other_result if req is newer else trip_result

        lifecycle = RequestLifecycle(dispatch)
        started = []

        @lifecycle.on_result_changed
        def submit_newer_from_worker(result, req):
            # Runs before the map rebuild for the first result
            if req is trip_request and not started:
                started.append(True)
                worker = threading.Thread(target=lambda: asyncio.run(planner.submit(newer)))
                worker.start()
                worker.join()

        planner = PlannerSession(lifecycle)
        asyncio.run(planner.submit(trip_request))

        assert lifecycle.result is other_result
        assert lifecycle.result_request is newer
        assert planner.map.layer_set.markers['dropoff'].location == list(other_result.route.points[2])
        pickup = planner.map.layer_set.markers['pickup']
        assert pickup.location == list(other_result.route.points[1])

    def test_close_tears_down_map(self):
        planner = session_with()
        planner.close()
        assert not planner.map.initialized


class TestSessionRegistry:

    def test_one_session_per_key(self):
        factory = mock.Mock(side_effect=lambda: mock.Mock(spec=PlannerSession))
        registry = SessionRegistry(factory)
        assert registry.get('a') is registry.get('a')
        assert registry.get('a') is not registry.get('b')
        assert len(registry) == 2

    def test_discard_closes(self):
        registry = SessionRegistry(lambda: mock.Mock(spec=PlannerSession))
        planner = registry.get('a')
        registry.discard('a')
        planner.close.assert_called_once_with()
        assert len(registry) == 0
        registry.discard('a')
