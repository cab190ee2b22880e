from unittest.mock import patch, Mock

from django.contrib.auth.hashers import make_password
from django.core.cache import cache
from django.test import override_settings
from rest_framework.test import APITestCase

from authentication.models import User
from chat.llm import GeminiError, GeminiConfigError
from chat.models import ChatSession, ChatMessage

URL = "/api/chat/"


def fake_model(reply="Please rest.\nUrgency: LOW", error=None):
    model = Mock()
    if error is not None:
        model.generate.side_effect = error
    else:
        model.generate.return_value = reply
    return model


class ChatViewTestBase(APITestCase):
    def setUp(self):
        self.user = User.objects.create(email="pat@example.com", password=make_password("Password123"))
        self.other = User.objects.create(email="other@example.com", password=make_password("Password123"))
        self.login(self.user)

    def login(self, user):
        session = self.client.session
        session["user_id"] = str(user.user_id)
        session.save()

    def send(self, payload):
        return self.client.post(URL, payload, format="json")


class SendMessageTests(ChatViewTestBase):
    def test_requires_session(self):
        self.client.logout()
        self.assertEqual(self.send({"message": "hi"}).status_code, 401)
        self.assertEqual(self.client.get(URL).status_code, 401)

    def test_empty_message(self):
        response = self.send({"message": "   "})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Message is required")

    @patch("chat.views._chat_model")
    def test_emergency_message(self, mock_model):
        mock_model.return_value = fake_model("I'm sorry to hear that. A cardiologist should see you.")

        response = self.send({"message": "I have severe chest pain and can't breathe"})

        self.assertEqual(response.status_code, 200, response.content)
        body = response.json()
        message = body["message"]
        self.assertEqual(message["role"], "assistant")
        self.assertEqual(message["urgency"], "EMERGENCY")
        self.assertEqual(message["specialist"], "cardiologist")
        self.assertEqual(message["symptoms"], ["chest pain", "shortness of breath"])
        self.assertEqual(message["bookingSuggestion"]["urgency"], "EMERGENCY")
        self.assertIn("/appointments/book?specialty=cardiologist", message["bookingSuggestion"]["url"])

        session = ChatSession.objects.get(pk=body["sessionId"])
        self.assertEqual(session.user, self.user)
        self.assertEqual(session.urgency_level, "EMERGENCY")

    @patch("chat.views._chat_model")
    def test_low_urgency_has_no_booking(self, mock_model):
        mock_model.return_value = fake_model()

        message = self.send({"message": "I have a runny nose"}).json()["message"]

        self.assertEqual(message["urgency"], "LOW")
        self.assertIsNone(message["bookingSuggestion"])

    @patch("chat.views._chat_model")
    def test_continue_session(self, mock_model):
        mock_model.return_value = fake_model()
        session_id = self.send({"message": "first"}).json()["sessionId"]

        response = self.send({"message": "second", "sessionId": session_id})

        self.assertEqual(response.json()["sessionId"], session_id)
        self.assertEqual(ChatMessage.objects.filter(session_id=session_id).count(), 4)

    @patch("chat.views._chat_model")
    def test_unknown_or_foreign_session(self, mock_model):
        mock_model.return_value = fake_model()
        foreign = ChatSession.objects.create(user=self.other, title="theirs")

        missing = self.send({"message": "hi", "sessionId": "00000000-0000-0000-0000-000000000000"})
        stolen = self.send({"message": "hi", "sessionId": str(foreign.id)})

        self.assertEqual(missing.status_code, 404)
        self.assertEqual(stolen.status_code, 404)
        self.assertFalse(foreign.messages.exists())

    @patch("chat.views._chat_model")
    def test_malformed_session_id_is_404(self, mock_model):
        mock_model.return_value = fake_model()

        response = self.send({"message": "hi", "sessionId": "not-a-uuid"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "Session not found")
        self.assertFalse(ChatSession.objects.exists())

    @patch("chat.views._chat_model")
    def test_model_failure_is_500_and_keeps_user_message(self, mock_model):
        mock_model.return_value = fake_model(error=GeminiError("empty_response"))

        response = self.send({"message": "I feel dizzy"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "Failed to get AI response")
        self.assertEqual(list(ChatMessage.objects.values_list("role", flat=True)), ["user"])

    @patch("chat.views._chat_model")
    def test_missing_api_key_is_reported(self, mock_model):
        mock_model.return_value = fake_model(error=GeminiConfigError("GEMINI_API_KEY missing"))

        response = self.send({"message": "hello"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "AI service is not configured. Please contact support.")

    @override_settings(RATELIMIT_ENABLE=True)
    @patch("chat.views._chat_model")
    def test_rate_limited(self, mock_model):
        cache.clear()
        mock_model.return_value = fake_model()

        statuses = [self.send({"message": f"msg {i}"}).status_code for i in range(21)]

        self.assertEqual(statuses[:20], [200] * 20)
        self.assertEqual(statuses[20], 429)
        cache.clear()


class SessionReadDeleteTests(ChatViewTestBase):
    def setUp(self):
        super().setUp()
        self.session = ChatSession.objects.create(user=self.user, title="Cough", summary="Symptoms: cough")
        ChatMessage.objects.create(session=self.session, role="user", content="I have a cough",
                                   extracted_symptoms=["cough"])
        ChatMessage.objects.create(session=self.session, role="assistant", content="Urgency: LOW",
                                   urgency_level="LOW")
        ChatSession.objects.create(user=self.other, title="Not mine")

    def test_list_sessions(self):
        response = self.client.get(URL)

        sessions = response.json()["sessions"]
        self.assertEqual(len(sessions), 1)
        self.assertEqual(sessions[0]["title"], "Cough")
        self.assertEqual(sessions[0]["lastMessage"]["content"], "Urgency: LOW")

    def test_get_session_with_messages(self):
        response = self.client.get(URL, {"sessionId": str(self.session.id)})

        self.assertEqual(response.status_code, 200)
        session = response.json()["session"]
        self.assertEqual([m["role"] for m in session["messages"]], ["user", "assistant"])
        self.assertEqual(session["messages"][0]["symptoms"], ["cough"])

    def test_get_missing_session(self):
        self.assertEqual(self.client.get(URL, {"sessionId": "not-a-uuid"}).status_code, 404)

    def test_delete_requires_id(self):
        response = self.client.delete(URL)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Session ID is required")

    def test_delete_removes_session_and_messages(self):
        response = self.client.delete(f"{URL}?sessionId={self.session.id}")

        self.assertEqual(response.status_code, 200)
        self.assertFalse(ChatMessage.objects.filter(session_id=self.session.id).exists())
        self.assertEqual(self.client.get(URL, {"sessionId": str(self.session.id)}).status_code, 404)

    def test_cannot_delete_foreign_session(self):
        foreign = ChatSession.objects.get(title="Not mine")

        response = self.client.delete(f"{URL}?sessionId={foreign.id}")

        self.assertEqual(response.status_code, 404)
        self.assertTrue(ChatSession.objects.filter(pk=foreign.id).exists())
