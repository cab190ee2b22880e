from django.conf import settings
from django.db import models
from django.db.models import Q
import uuid


class AppointmentStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    CONFIRMED = "CONFIRMED", "Confirmed"
    COMPLETED = "COMPLETED", "Completed"
    CANCELLED = "CANCELLED", "Cancelled"


ACTIVE_STATUSES = (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED)
DEFAULT_FEE = 500


class Appointment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="patient_appointments"
    )
    doctor = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="doctor_appointments"
    )
    date = models.DateField()
    # free text slot label such as "10:00 AM"
    time = models.CharField(max_length=20)
    reason = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=10, choices=AppointmentStatus.choices, default=AppointmentStatus.PENDING)
    fee = models.PositiveIntegerField(default=DEFAULT_FEE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date", "-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["doctor", "date", "time"],
                condition=Q(status__in=["PENDING", "CONFIRMED"]),
                name="unique_active_doctor_slot",
            ),
        ]
        indexes = [
            models.Index(fields=["patient", "date"], name="appointment_patient_f1c2e8_idx"),
            models.Index(fields=["doctor", "date"], name="appointment_doctor__5b7d3a_idx"),
        ]

    def __str__(self):
        return f"{self.date} {self.time} ({self.status})"
