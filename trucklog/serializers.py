from rest_framework import serializers

from .models import CYCLE_LIMIT_HOURS, TripRequest


class TripRequestSerializer(serializers.Serializer):
    # Same camelCase keys the trip service expects
    currentLocation = serializers.CharField(source='current_location', max_length=255)
    pickupLocation = serializers.CharField(source='pickup_location', max_length=255)
    dropoffLocation = serializers.CharField(source='dropoff_location', max_length=255)
    currentCycleUsed = serializers.FloatField(
        source='current_cycle_used_hours', min_value=0, max_value=CYCLE_LIMIT_HOURS)

    def create(self, validated_data):
        return TripRequest(**validated_data)
