from rest_framework import serializers

from .models import ChatSession, ChatMessage


class ChatMessageSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    urgency = serializers.CharField(source="urgency_level", read_only=True, allow_null=True)
    symptoms = serializers.SerializerMethodField()

    class Meta:
        model = ChatMessage
        fields = ["id", "role", "content", "symptoms", "urgency", "createdAt"]

    def get_symptoms(self, obj):
        return obj.extracted_symptoms or []


class ChatSessionSerializer(serializers.ModelSerializer):
    urgencyLevel = serializers.CharField(source="urgency_level", read_only=True, allow_null=True)
    peakUrgencyLevel = serializers.CharField(source="peak_urgency_level", read_only=True, allow_null=True)
    suggestedSpecialties = serializers.JSONField(source="suggested_specialties", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = ChatSession
        fields = [
            "id", "title", "summary", "urgencyLevel", "peakUrgencyLevel",
            "suggestedSpecialties", "createdAt", "updatedAt",
        ]


class ChatSessionDetailSerializer(ChatSessionSerializer):
    messages = ChatMessageSerializer(many=True, read_only=True)

    class Meta(ChatSessionSerializer.Meta):
        fields = ChatSessionSerializer.Meta.fields + ["messages"]


class ChatSessionListSerializer(ChatSessionSerializer):
    lastMessage = serializers.SerializerMethodField()

    class Meta(ChatSessionSerializer.Meta):
        fields = ChatSessionSerializer.Meta.fields + ["lastMessage"]

    def get_lastMessage(self, obj):
        last = obj.messages.order_by("-created_at", "-id").first()
        return ChatMessageSerializer(last).data if last else None


class SendMessageSerializer(serializers.Serializer):
    message = serializers.CharField(trim_whitespace=True)
    sessionId = serializers.CharField(source="session_id", required=False, allow_null=True, allow_blank=True)
