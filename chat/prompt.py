# chat/prompt.py
from typing import Iterable, List, Literal

from pydantic import BaseModel

SYSTEM_INSTRUCTIONS = (
    "You are Smart Health Companion, a friendly and careful medical triage assistant. "
    "Help the user describe their symptoms, ask short follow-up questions when details are missing, "
    "and explain possible causes in plain language without giving a definitive diagnosis. "
    "Always recommend the kind of specialist they should see (for example cardiologist, neurologist, "
    "dermatologist, gynecologist, general physician). "
    "End every reply with a line of the form 'Urgency: LOW', 'Urgency: MEDIUM', 'Urgency: HIGH' "
    "or 'Urgency: EMERGENCY'. "
    "If the symptoms could be life threatening, tell the user to call emergency services or go to "
    "the nearest emergency room immediately and use Urgency: EMERGENCY."
)

ACKNOWLEDGEMENT = (
    "Understood. I will help assess symptoms, suggest a specialist, "
    "and finish each reply with an urgency level."
)

_ROLE_MAP = {"user": "user", "assistant": "model"}


class Turn(BaseModel):
    role: Literal["user", "model"]
    parts: List[str]


def _role_and_content(item):
    if isinstance(item, dict):
        return item["role"], item["content"]
    return item.role, item.content


def build_turns(history: Iterable, new_message: str) -> List[dict]:
    """
    Assemble the model conversation for one reply.

    The instructions ride as the first user turn followed by a canned model
    acknowledgment, then the stored history in order and the new message.
    History items are ChatMessage rows or {"role", "content"} dicts.
    """
    turns = [
        Turn(role="user", parts=[SYSTEM_INSTRUCTIONS]),
        Turn(role="model", parts=[ACKNOWLEDGEMENT]),
    ]
    for item in history:
        role, content = _role_and_content(item)
        turns.append(Turn(role=_ROLE_MAP[role], parts=[content]))
    turns.append(Turn(role="user", parts=[new_message]))
    return [t.model_dump() for t in turns]
