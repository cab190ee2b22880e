from django.conf import settings
from django.db import models


class Weekday(models.TextChoices):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class WorkingHours(models.Model):
    doctor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="working_hours")
    day = models.CharField(max_length=10, choices=Weekday.choices)
    start_time = models.TimeField()
    end_time = models.TimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["doctor", "day"], name="unique_doctor_working_day"),
        ]

    def __str__(self):
        return f"{self.day} {self.start_time}-{self.end_time}"


class BlockedSlot(models.Model):
    doctor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="blocked_slots")
    date = models.DateField()
    # same free text slot label as Appointment.time
    time = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["date", "time"]
        constraints = [
            models.UniqueConstraint(fields=["doctor", "date", "time"], name="unique_doctor_blocked_slot"),
        ]

    def __str__(self):
        return f"{self.date} {self.time}"


def is_slot_blocked(doctor, date, time) -> bool:
    return BlockedSlot.objects.filter(doctor=doctor, date=date, time=time.strip()).exists()
