from django.urls import path # type: ignore
from .views import PlannerView, TripView

app_name = 'trucklog'

urlpatterns = [
    path('', PlannerView.as_view(), name='planner'),
    path('trip/', TripView.as_view(), name='trip'),
]
