from django.conf import settings
from django.db import models
import uuid


class RecordCategory(models.TextChoices):
    LAB_REPORT = "LAB_REPORT", "Lab report"
    PRESCRIPTION = "PRESCRIPTION", "Prescription"
    IMAGING = "IMAGING", "Imaging"
    VACCINATION = "VACCINATION", "Vaccination"
    DIAGNOSIS = "DIAGNOSIS", "Diagnosis"
    SURGERY = "SURGERY", "Surgery"
    CONSULTATION = "CONSULTATION", "Consultation"
    OTHER = "OTHER", "Other"


class RecordStatus(models.TextChoices):
    NORMAL = "NORMAL", "Normal"
    ABNORMAL = "ABNORMAL", "Abnormal"
    CRITICAL = "CRITICAL", "Critical"
    PENDING_REVIEW = "PENDING_REVIEW", "Pending review"
    ACTIVE = "ACTIVE", "Active"
    COMPLETED = "COMPLETED", "Completed"
    EXPIRED = "EXPIRED", "Expired"


class HealthRecord(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="health_records")
    doctor = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="assigned_records"
    )

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    category = models.CharField(max_length=20, choices=RecordCategory.choices, default=RecordCategory.OTHER)
    status = models.CharField(max_length=20, choices=RecordStatus.choices, default=RecordStatus.PENDING_REVIEW)

    file_name = models.CharField(max_length=255, blank=True, null=True)
    # base64 data URL for uploaded files
    file_url = models.TextField(blank=True, null=True)
    file_size = models.PositiveIntegerField(blank=True, null=True)
    file_type = models.CharField(max_length=100, blank=True, null=True)

    diagnosis = models.TextField(blank=True, null=True)
    medications = models.JSONField(blank=True, null=True)
    test_results = models.JSONField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)

    record_date = models.DateField()
    expiry_date = models.DateField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-record_date", "-created_at"]
        indexes = [
            models.Index(fields=["patient", "category"], name="records_patient_cat_idx"),
            models.Index(fields=["doctor", "category"], name="records_doctor_cat_idx"),
        ]

    def __str__(self):
        return self.title
