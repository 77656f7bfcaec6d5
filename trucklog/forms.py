from django import forms

from . import conf
from .models import CYCLE_LIMIT_HOURS, TripRequest


class TripForm(forms.Form):
    current_location = forms.CharField(
        max_length=255, initial=conf.DEFAULT_TRIP['current_location'],
        widget=forms.TextInput(attrs={'placeholder': 'e.g., Chicago, IL'}))
    pickup_location = forms.CharField(
        max_length=255, initial=conf.DEFAULT_TRIP['pickup_location'],
        widget=forms.TextInput(attrs={'placeholder': 'e.g., St. Louis, MO'}))
    dropoff_location = forms.CharField(
        max_length=255, initial=conf.DEFAULT_TRIP['dropoff_location'],
        widget=forms.TextInput(attrs={'placeholder': 'e.g., Atlanta, GA'}))
    current_cycle_used_hours = forms.FloatField(
        label='Current Cycle Used (hrs)', min_value=0, max_value=CYCLE_LIMIT_HOURS,
        initial=conf.DEFAULT_TRIP['current_cycle_used_hours'],
        widget=forms.NumberInput(attrs={'step': '0.5'}))

    def trip_request(self):
        return TripRequest(**self.cleaned_data)
