from django.test import TestCase, Client
from django.urls import reverse
from django.contrib.auth.hashers import make_password, check_password
from authentication.models import User, Profile, Role
import json


class RegisterEndpointTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.url = reverse("authentication:register")
        self.payload = {
            "email": "Jane.Doe@Example.com",
            "password": "longenough1",
            "role": "PATIENT",
            "firstName": "Jane",
            "lastName": "Doe",
            "phone": "555-0100",
        }

    def _post_json(self, payload):
        return self.client.post(self.url, data=json.dumps(payload), content_type="application/json")

    def test_register_creates_user_and_profile(self):
        response = self._post_json(self.payload)

        self.assertEqual(response.status_code, 201, response.content)
        body = response.json()
        self.assertEqual(body["message"], "User registered successfully")
        self.assertNotIn("password", body["user"])
        self.assertEqual(body["user"]["email"], "jane.doe@example.com")
        self.assertEqual(body["user"]["profile"]["firstName"], "Jane")

        user = User.objects.get(email="jane.doe@example.com")
        self.assertTrue(check_password("longenough1", user.password))
        self.assertEqual(user.role, Role.PATIENT)
        self.assertEqual(user.profile.phone, "555-0100")

    def test_register_doctor_keeps_doctor_fields(self):
        payload = dict(self.payload, role="DOCTOR", specialization="Cardiology", licenseNumber="LIC-1")
        response = self._post_json(payload)

        self.assertEqual(response.status_code, 201)
        profile = Profile.objects.get(user__email="jane.doe@example.com")
        self.assertEqual(profile.specialization, "Cardiology")
        self.assertEqual(profile.license_number, "LIC-1")

    def test_short_password_rejected(self):
        response = self._post_json(dict(self.payload, password="short"))

        self.assertEqual(response.status_code, 400)
        self.assertIn("password", response.json()["details"])
        self.assertFalse(User.objects.exists())

    def test_unknown_role_rejected(self):
        response = self._post_json(dict(self.payload, role="NURSE"))

        self.assertEqual(response.status_code, 400)
        self.assertIn("role", response.json()["details"])

    def test_missing_names_rejected(self):
        payload = dict(self.payload)
        payload.pop("firstName")
        payload["lastName"] = "   "
        response = self._post_json(payload)

        self.assertEqual(response.status_code, 400)
        details = response.json()["details"]
        self.assertIn("first_name", details)
        self.assertIn("last_name", details)

    def test_invalid_email_rejected(self):
        response = self._post_json(dict(self.payload, email="not-an-email"))

        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.json()["details"])

    def test_duplicate_email_rejected(self):
        User.objects.create(email="jane.doe@example.com", password=make_password("whatever1"))

        response = self._post_json(self.payload)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "User with this email already exists")
        self.assertEqual(User.objects.count(), 1)

    def test_invalid_json_returns_400(self):
        response = self.client.post(self.url, data="not-a-json{", content_type="application/json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Invalid payload")

    def test_get_not_allowed(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 405)
