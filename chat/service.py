# chat/service.py
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from django.core.exceptions import ValidationError

from utils.monitoring import SentryMonitor, track_service_operation
from .models import ChatSession, ChatMessage, UrgencyLevel
from .prompt import build_turns
from .symptoms import extract_symptoms, specialists_for, summarize
from .triage import classify_urgency, infer_specialist, booking_suggestion

logger = logging.getLogger(__name__)

TITLE_LENGTH = 50


class ChatModel(Protocol):
    def generate(self, turns: Sequence[dict]) -> str:
        ...


class SessionNotFound(Exception):
    pass


@dataclass
class TriageResult:
    session: ChatSession
    reply: ChatMessage
    urgency: str
    specialist: str
    symptoms: List[str] = field(default_factory=list)
    booking: Optional[dict] = None


def session_title(message: str) -> str:
    return message[:TITLE_LENGTH] + ("..." if len(message) > TITLE_LENGTH else "")


def get_user_session(user, session_id) -> ChatSession:
    try:
        return ChatSession.objects.get(pk=session_id, user=user)
    except (ChatSession.DoesNotExist, ValidationError, ValueError):
        raise SessionNotFound(str(session_id))


class ChatTriageService:
    """
    One conversational turn: store the user's message, ask the model with the
    full history, classify the reply and store it.

    The user message is written before the model call, so a failed call still
    leaves it in the session.
    """

    def __init__(self, llm: ChatModel):
        self.llm = llm

    @track_service_operation("chat.triage")
    def send(self, user, message: str, session_id=None) -> TriageResult:
        if session_id:
            session = get_user_session(user, session_id)
        else:
            session = ChatSession.objects.create(user=user, title=session_title(message))

        history = list(session.messages.all())
        symptoms = extract_symptoms(message)

        ChatMessage.objects.create(
            session=session,
            role=ChatMessage.ROLE_USER,
            content=message,
            extracted_symptoms=symptoms or None,
        )
        SentryMonitor.add_breadcrumb(
            "User message stored", category="chat",
            data={"session_id": str(session.id), "history": len(history)},
        )

        reply_text = self.llm.generate(build_turns(history, message))

        urgency = classify_urgency(reply_text, message)
        specialist = infer_specialist(reply_text)

        reply = ChatMessage.objects.create(
            session=session,
            role=ChatMessage.ROLE_ASSISTANT,
            content=reply_text,
            extracted_symptoms=symptoms or None,
            urgency_level=urgency,
        )

        session.urgency_level = urgency
        session.peak_urgency_level = UrgencyLevel.highest(session.peak_urgency_level, urgency)
        if symptoms:
            session.summary = summarize(symptoms)
        suggested = [specialist] + [s for s in specialists_for(symptoms) if s.lower() != specialist]
        session.suggested_specialties = suggested
        session.save(update_fields=[
            "urgency_level", "peak_urgency_level", "summary", "suggested_specialties", "updated_at",
        ])

        if urgency == UrgencyLevel.EMERGENCY:
            logger.warning(f"Emergency triage in session {session.id} for user {user.user_id}")
        else:
            logger.info(f"Triage session {session.id}: urgency={urgency} specialist={specialist}")

        return TriageResult(
            session=session,
            reply=reply,
            urgency=urgency,
            specialist=specialist,
            symptoms=symptoms,
            booking=booking_suggestion(urgency, specialist, symptoms),
        )
