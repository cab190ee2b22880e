from django.conf import settings
from django.db import models
import uuid


class UrgencyLevel(models.TextChoices):
    LOW = "LOW", "Low"
    MEDIUM = "MEDIUM", "Medium"
    HIGH = "HIGH", "High"
    EMERGENCY = "EMERGENCY", "Emergency"

    @classmethod
    def rank(cls, value) -> int:
        """Ordinal position, -1 for None."""
        if value is None:
            return -1
        return list(cls.values).index(value)

    @classmethod
    def highest(cls, *values):
        present = [v for v in values if v is not None]
        if not present:
            return None
        return max(present, key=cls.rank)


class ChatSession(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="chat_sessions")
    title = models.CharField(max_length=60)
    # latest assistant turn
    urgency_level = models.CharField(max_length=10, choices=UrgencyLevel.choices, null=True, blank=True)
    # worst turn seen so far
    peak_urgency_level = models.CharField(max_length=10, choices=UrgencyLevel.choices, null=True, blank=True)
    summary = models.TextField(null=True, blank=True)
    suggested_specialties = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at"]

    def __str__(self):
        return self.title


class ChatMessage(models.Model):
    ROLE_USER = "user"
    ROLE_ASSISTANT = "assistant"
    ROLE_CHOICES = [(ROLE_USER, "user"), (ROLE_ASSISTANT, "assistant")]

    session = models.ForeignKey(ChatSession, on_delete=models.CASCADE, related_name="messages")
    role = models.CharField(max_length=10, choices=ROLE_CHOICES)
    content = models.TextField()
    extracted_symptoms = models.JSONField(null=True, blank=True)
    urgency_level = models.CharField(max_length=10, choices=UrgencyLevel.choices, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
