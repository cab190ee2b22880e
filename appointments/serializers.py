from rest_framework import serializers

from authentication.helpers import person_name, doctor_name
from .models import Appointment


def _profile_value(user, field, default=""):
    profile = getattr(user, "profile", None)
    value = getattr(profile, field, None) if profile is not None else None
    return value if value is not None else default


class AppointmentSerializer(serializers.ModelSerializer):
    status = serializers.SerializerMethodField()
    doctor = serializers.SerializerMethodField()
    patient = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Appointment
        fields = ["id", "date", "time", "reason", "notes", "status", "fee", "doctor", "patient", "createdAt"]

    def get_status(self, obj):
        return obj.status.lower()

    def get_doctor(self, obj):
        return {
            "id": str(obj.doctor.user_id),
            "name": doctor_name(obj.doctor),
            "specialty": _profile_value(obj.doctor, "specialization") or "General Physician",
            "hospital": _profile_value(obj.doctor, "city"),
            "phone": _profile_value(obj.doctor, "phone"),
        }

    def get_patient(self, obj):
        return {
            "id": str(obj.patient.user_id),
            "name": person_name(obj.patient),
            "email": obj.patient.email,
            "phone": _profile_value(obj.patient, "phone"),
        }


class AppointmentUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
