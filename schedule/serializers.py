from rest_framework import serializers

from .models import WorkingHours, BlockedSlot, Weekday


class WorkingHoursSerializer(serializers.ModelSerializer):
    startTime = serializers.TimeField(source="start_time", format="%H:%M")
    endTime = serializers.TimeField(source="end_time", format="%H:%M")

    class Meta:
        model = WorkingHours
        fields = ["id", "day", "startTime", "endTime"]
        read_only_fields = ["id"]
        # upserts are keyed on (doctor, day) in the view
        validators = []

    def validate_day(self, value):
        normalized = str(value).strip().capitalize()
        if normalized not in Weekday.values:
            raise serializers.ValidationError("Day must be a weekday name such as Monday.")
        return normalized

    def validate(self, attrs):
        if attrs["start_time"] >= attrs["end_time"]:
            raise serializers.ValidationError({"endTime": "End time must be after start time."})
        return attrs


class BlockedSlotSerializer(serializers.ModelSerializer):
    class Meta:
        model = BlockedSlot
        fields = ["id", "date", "time"]
        read_only_fields = ["id"]
        validators = []

    def validate_time(self, value):
        return value.strip()
