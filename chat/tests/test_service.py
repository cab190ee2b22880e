from unittest.mock import Mock

from django.contrib.auth.hashers import make_password
from django.test import TestCase

from authentication.models import User
from chat.llm import GeminiError
from chat.models import ChatSession, ChatMessage, UrgencyLevel
from chat.service import ChatTriageService, SessionNotFound, session_title


class SessionTitleTests(TestCase):
    def test_short_message_kept(self):
        self.assertEqual(session_title("Headache"), "Headache")

    def test_long_message_truncated(self):
        message = "x" * 60
        self.assertEqual(session_title(message), "x" * 50 + "...")


class ChatTriageServiceTests(TestCase):
    def setUp(self):
        self.user = User.objects.create(email="pat@example.com", password=make_password("Password123"))
        self.llm = Mock()
        self.service = ChatTriageService(self.llm)

    def test_first_message_creates_session(self):
        self.llm.generate.return_value = "Could be a tension headache. A general physician can help.\nUrgency: LOW"

        result = self.service.send(self.user, "I have a headache and feel sick")

        session = result.session
        self.assertEqual(session.title, "I have a headache and feel sick")
        self.assertEqual(session.urgency_level, UrgencyLevel.LOW)
        self.assertEqual(session.peak_urgency_level, UrgencyLevel.LOW)
        self.assertEqual(session.summary, "Symptoms: headache, nausea")
        self.assertEqual(session.suggested_specialties[0], "general physician")
        self.assertEqual(result.specialist, "general physician")
        self.assertIsNone(result.booking)

        messages = list(session.messages.all())
        self.assertEqual([m.role for m in messages], ["user", "assistant"])
        self.assertEqual(messages[0].extracted_symptoms, ["headache", "nausea"])
        self.assertIsNone(messages[0].urgency_level)
        self.assertEqual(messages[1].urgency_level, UrgencyLevel.LOW)

    def test_history_is_sent_on_follow_up(self):
        self.llm.generate.return_value = "Noted. Urgency: LOW"
        first = self.service.send(self.user, "I have a cough")

        self.llm.generate.return_value = "Please see a pulmonologist. Urgency: MEDIUM"
        result = self.service.send(self.user, "It has lasted two weeks", session_id=first.session.id)

        turns = self.llm.generate.call_args[0][0]
        self.assertEqual([t["parts"][0] for t in turns[2:]],
                         ["I have a cough", "Noted. Urgency: LOW", "It has lasted two weeks"])
        self.assertEqual(result.session.id, first.session.id)
        self.assertEqual(result.booking["specialty"], "pulmonologist")
        self.assertEqual(ChatMessage.objects.filter(session=first.session).count(), 4)

    def test_urgency_overwritten_but_peak_kept(self):
        self.llm.generate.return_value = "Call emergency services now."
        first = self.service.send(self.user, "I have severe chest pain")

        self.llm.generate.return_value = "Glad you feel better. Urgency: LOW"
        self.service.send(self.user, "The pain went away", session_id=first.session.id)

        session = ChatSession.objects.get(pk=first.session.id)
        self.assertEqual(session.urgency_level, UrgencyLevel.LOW)
        self.assertEqual(session.peak_urgency_level, UrgencyLevel.EMERGENCY)

    def test_model_failure_keeps_user_message(self):
        self.llm.generate.side_effect = GeminiError("empty_response")

        with self.assertRaises(GeminiError):
            self.service.send(self.user, "I feel dizzy")

        message = ChatMessage.objects.get()
        self.assertEqual(message.role, "user")
        self.assertEqual(message.content, "I feel dizzy")
        self.assertIsNone(message.session.urgency_level)

    def test_foreign_session_not_found(self):
        other = User.objects.create(email="other@example.com", password=make_password("Password123"))
        foreign = ChatSession.objects.create(user=other, title="theirs")

        with self.assertRaises(SessionNotFound):
            self.service.send(self.user, "hello", session_id=foreign.id)
        self.llm.generate.assert_not_called()
        self.assertFalse(ChatMessage.objects.exists())
