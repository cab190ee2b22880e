# chat/views.py
import logging

from django_ratelimit.decorators import ratelimit
from rest_framework.decorators import api_view
from rest_framework.response import Response

from utils.monitoring import SentryMonitor, track_transaction
from .llm import GeminiChatClient, GeminiConfig, GeminiConfigError, GeminiError
from .models import ChatSession
from .serializers import (
    ChatSessionDetailSerializer, ChatSessionListSerializer, ChatMessageSerializer, SendMessageSerializer,
)
from .service import ChatTriageService, SessionNotFound, get_user_session

log = logging.getLogger(__name__)

RATE_LIMITED_MSG = "Too many requests. Please try again later."
NOT_CONFIGURED_MSG = "AI service is not configured. Please contact support."
AI_FAILED_MSG = "Failed to get AI response"


def _chat_model():
    return GeminiChatClient(GeminiConfig.from_settings())


@api_view(["GET", "POST", "DELETE"])
@track_transaction("chat.triage")
@ratelimit(key="ip", rate="20/m", method="POST", block=False)
def chat(request):
    """
    GET    ?sessionId=  one session with its messages, or all sessions newest first
    POST   {message, sessionId?}  send a message and get the assistant's reply
    DELETE ?sessionId=  remove a session and its messages
    """
    if request.method == "GET":
        return _get_sessions(request)
    if request.method == "DELETE":
        return _delete_session(request)

    if getattr(request, "limited", False):
        log.warning(f"Chat rate limit exceeded for IP: {request.META.get('REMOTE_ADDR')}")
        return Response({"error": RATE_LIMITED_MSG}, status=429)

    if not str(request.data.get("message") or "").strip():
        return Response({"error": "Message is required"}, status=400)

    serializer = SendMessageSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({"error": "Invalid input", "details": serializer.errors}, status=400)
    message = serializer.validated_data["message"]
    session_id = serializer.validated_data.get("session_id")

    SentryMonitor.set_operation_context("chat", "send", str(request.user.user_id),
                                        {"session_id": str(session_id) if session_id else None})
    try:
        result = ChatTriageService(_chat_model()).send(request.user, message, session_id=session_id)
    except SessionNotFound:
        return Response({"error": "Session not found"}, status=404)
    except GeminiError as e:
        log.exception(f"Chat reply failed for user {request.user.user_id}")
        if isinstance(e, GeminiConfigError) or "API_KEY" in str(e):
            return Response({"error": NOT_CONFIGURED_MSG}, status=500)
        return Response({"error": AI_FAILED_MSG}, status=500)

    reply = ChatMessageSerializer(result.reply).data
    return Response({
        "sessionId": str(result.session.id),
        "message": {
            "id": reply["id"],
            "role": reply["role"],
            "content": reply["content"],
            "createdAt": reply["createdAt"],
            "urgency": str(result.urgency),
            "symptoms": result.symptoms,
            "specialist": result.specialist,
            "bookingSuggestion": result.booking,
        },
    })


def _get_sessions(request):
    session_id = request.GET.get("sessionId")
    if session_id:
        try:
            session = get_user_session(request.user, session_id)
        except SessionNotFound:
            return Response({"error": "Session not found"}, status=404)
        return Response({"session": ChatSessionDetailSerializer(session).data})

    qs = ChatSession.objects.filter(user=request.user).order_by("-updated_at")
    return Response({"sessions": ChatSessionListSerializer(qs, many=True).data})


def _delete_session(request):
    session_id = request.GET.get("sessionId")
    if not session_id:
        return Response({"error": "Session ID is required"}, status=400)
    try:
        session = get_user_session(request.user, session_id)
    except SessionNotFound:
        return Response({"error": "Session not found"}, status=404)

    session.delete()
    log.info(f"Chat session {session_id} deleted by {request.user.user_id}")
    return Response({"message": "Session deleted successfully"})
