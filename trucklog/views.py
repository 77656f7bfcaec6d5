import logging
import uuid

from asgiref.sync import async_to_sync
from django.apps import apps
from django.shortcuts import render
from django.utils.safestring import mark_safe
from django.views import View
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from .forms import TripForm
from .lifecycle import Outcome, State
from .serializers import TripRequestSerializer

logger = logging.getLogger(__name__)

SESSION_KEY = 'trucklog_planner'


# -----------------------------
# Helpers
# -----------------------------
def get_planner(request):
    """PlannerSession bound to this browser session, created on first use."""
    planner_id = request.session.get(SESSION_KEY)
    if planner_id is None:
        planner_id = request.session[SESSION_KEY] = uuid.uuid4().hex
    return apps.get_app_config('trucklog').sessions.get(planner_id)


def state_payload(planner, outcome=None):
    snapshot = planner.lifecycle.snapshot()
    payload = planner.view_model().to_dict()
    payload['state'] = snapshot.state.value
    payload['sequence'] = snapshot.sequence
    if outcome is not None:
        payload['outcome'] = outcome.value
    return payload


# -----------------------------
# HTML planner page
# -----------------------------
class PlannerView(View):
    template_name = 'trucklog/planner.html'

    def render_page(self, request, planner, form):
        context = {
            'form': form,
            'vm': planner.view_model(),
            'map_html': mark_safe(planner.map.render()),
        }
        return render(request, self.template_name, context)

    def get(self, request):
        planner = get_planner(request)
        return self.render_page(request, planner, TripForm(initial=planner.fields))

    def post(self, request):
        planner = get_planner(request)
        form = TripForm(request.POST)
        if not form.is_valid():
            return self.render_page(request, planner, form)
        async_to_sync(planner.submit)(form.trip_request())
        return self.render_page(request, planner, TripForm(initial=planner.fields))


# -----------------------------
# JSON API
# -----------------------------
class TripView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    renderer_classes = [JSONRenderer]

    def get(self, request):
        planner = get_planner(request)
        return Response(state_payload(planner), status=status.HTTP_200_OK)

    def post(self, request):
        serializer = TripRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        planner = get_planner(request)
        outcome = async_to_sync(planner.submit)(serializer.save())
        logger.debug("Trip API submit finished: %s", outcome.value)

        if outcome is Outcome.STALE:
            code = status.HTTP_409_CONFLICT
        elif planner.lifecycle.state is State.ERROR:
            code = status.HTTP_502_BAD_GATEWAY
        else:
            code = status.HTTP_200_OK
        return Response(state_payload(planner, outcome), status=code)
