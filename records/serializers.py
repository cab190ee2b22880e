from rest_framework import serializers

from authentication.helpers import person_name
from .mapping import format_file_size
from .models import HealthRecord


class HealthRecordSerializer(serializers.ModelSerializer):
    fileName = serializers.CharField(source="file_name", read_only=True)
    fileUrl = serializers.CharField(source="file_url", read_only=True)
    fileSize = serializers.SerializerMethodField()
    fileType = serializers.CharField(source="file_type", read_only=True)
    testResults = serializers.JSONField(source="test_results", read_only=True)
    recordDate = serializers.DateField(source="record_date", read_only=True)
    expiryDate = serializers.DateField(source="expiry_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    patient = serializers.SerializerMethodField()
    doctor = serializers.SerializerMethodField()

    class Meta:
        model = HealthRecord
        fields = [
            "id", "title", "description", "category", "status",
            "fileName", "fileUrl", "fileSize", "fileType",
            "diagnosis", "medications", "testResults", "notes",
            "recordDate", "expiryDate", "patient", "doctor", "createdAt",
        ]

    def get_fileSize(self, obj):
        return format_file_size(obj.file_size)

    def get_patient(self, obj):
        return {
            "id": str(obj.patient.user_id),
            "name": person_name(obj.patient) or obj.patient.email,
            "email": obj.patient.email,
        }

    def get_doctor(self, obj):
        if obj.doctor is None:
            return None
        name = person_name(obj.doctor)
        specialization = getattr(getattr(obj.doctor, "profile", None), "specialization", None)
        return {
            "id": str(obj.doctor.user_id),
            "name": f"Dr. {name}" if name else obj.doctor.email,
            "specialty": specialization or "General",
        }


class HealthRecordCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    category = serializers.CharField()
    recordDate = serializers.DateField(source="record_date", input_formats=["iso-8601", "%Y-%m-%dT%H:%M:%S.%fZ"])
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    fileName = serializers.CharField(source="file_name", max_length=255, required=False, allow_blank=True, allow_null=True)
    fileUrl = serializers.CharField(source="file_url", required=False, allow_blank=True, allow_null=True)
    fileData = serializers.CharField(source="file_data", required=False, allow_blank=True, allow_null=True)
    fileSize = serializers.IntegerField(source="file_size", min_value=0, required=False, allow_null=True)
    fileType = serializers.CharField(source="file_type", max_length=100, required=False, allow_blank=True, allow_null=True)
    diagnosis = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    medications = serializers.JSONField(required=False, allow_null=True)
    testResults = serializers.JSONField(source="test_results", required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    expiryDate = serializers.DateField(
        source="expiry_date", required=False, allow_null=True, input_formats=["iso-8601", "%Y-%m-%dT%H:%M:%S.%fZ"]
    )
    patientId = serializers.UUIDField(source="patient_id", required=False, allow_null=True)
    doctorId = serializers.UUIDField(source="doctor_id", required=False, allow_null=True)


class HealthRecordUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.CharField(required=False)
    diagnosis = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    medications = serializers.JSONField(required=False, allow_null=True)
    testResults = serializers.JSONField(source="test_results", required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    expiryDate = serializers.DateField(
        source="expiry_date", required=False, allow_null=True, input_formats=["iso-8601", "%Y-%m-%dT%H:%M:%S.%fZ"]
    )


class MedicationSerializer(serializers.Serializer):
    name = serializers.CharField()
    dosage = serializers.CharField()
    frequency = serializers.CharField()
    duration = serializers.CharField()
    instructions = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PrescriptionCreateSerializer(serializers.Serializer):
    patientId = serializers.UUIDField(source="patient_id")
    medications = MedicationSerializer(many=True, allow_empty=False)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    isDraft = serializers.BooleanField(source="is_draft", required=False, default=False)
