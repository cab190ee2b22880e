"""
Rule-based triage helpers.

classify_urgency() is the only place urgency is derived from text: the
persisted session/message urgency and the booking suggestion shown to the
client both come from its result.
"""
import re
from typing import Optional
from urllib.parse import urlencode

from .models import UrgencyLevel

_URGENCY_MARKER = re.compile(r"urgency(?:\s+level)?(?:\s+is)?\W*(low|medium|high|emergency)\b", re.I)

EMERGENCY_KEYWORDS = (
    "can't breathe",
    "cant breathe",
    "cannot breathe",
    "chest pain",
    "severe pain",
    "blood",
    "suicide",
    "kill myself",
    "seizure",
    "unconscious",
    "severe bleeding",
    "heart attack",
    "stroke",
    "overdose",
)

SPECIALISTS = (
    "gynecologist",
    "cardiologist",
    "neurologist",
    "dermatologist",
    "orthopedist",
    "pediatrician",
    "psychiatrist",
    "general physician",
    "ent specialist",
    "pulmonologist",
    "gastroenterologist",
    "endocrinologist",
    "rheumatologist",
    "urologist",
    "ophthalmologist",
)
FALLBACK_SPECIALIST = "emergency medicine"

_PREGNANCY = re.compile(
    r"pregnan|prenatal|\blabou?r\b|contraction|gynecolog|obstetric|miscarriage|bleeding.*pregnan", re.I | re.S
)
_CARDIAC = re.compile(r"heart|cardiac|chest pain|cardiovascular|angina", re.I)

BOOKING_PATH = "/appointments/book"


def has_emergency_keyword(user_message: str) -> bool:
    text = (user_message or "").lower()
    return any(k in text for k in EMERGENCY_KEYWORDS)


def classify_urgency(reply_text: str, user_message: str) -> str:
    """
    LOW by default; an "Urgency: X" marker in the reply sets the level;
    an emergency keyword in the user's own words always wins.
    """
    level = UrgencyLevel.LOW
    match = _URGENCY_MARKER.search(reply_text or "")
    if match:
        level = UrgencyLevel(match.group(1).upper())
    if has_emergency_keyword(user_message):
        level = UrgencyLevel.EMERGENCY
    return level


def infer_specialist(text: str) -> str:
    text = text or ""
    if _PREGNANCY.search(text):
        return "gynecologist"
    if _CARDIAC.search(text):
        return "cardiologist"
    lowered = text.lower()
    for name in SPECIALISTS:
        if name in lowered:
            return name
    return FALLBACK_SPECIALIST


def booking_suggestion(urgency: str, specialist: str, symptoms) -> Optional[dict]:
    if UrgencyLevel.rank(urgency) < UrgencyLevel.rank(UrgencyLevel.MEDIUM):
        return None
    query = urlencode({
        "specialty": specialist,
        "urgency": str(urgency),
        "symptoms": ", ".join(symptoms or []),
    })
    return {"specialty": specialist, "urgency": str(urgency), "url": f"{BOOKING_PATH}?{query}"}
