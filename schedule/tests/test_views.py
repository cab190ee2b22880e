import datetime

from django.contrib.auth.hashers import make_password
from rest_framework.test import APITestCase

from authentication.models import User
from schedule.models import WorkingHours, BlockedSlot, is_slot_blocked


class ScheduleTestBase(APITestCase):
    def setUp(self):
        self.doctor = User.objects.create(email="doc@example.com", password=make_password("Password123"), role="DOCTOR")
        self.patient = User.objects.create(email="pat@example.com", password=make_password("Password123"))

    def login(self, user):
        session = self.client.session
        session["user_id"] = str(user.user_id)
        session.save()


class WorkingHoursTests(ScheduleTestBase):
    url = "/api/schedule/working-hours/"

    def test_patient_forbidden(self):
        self.login(self.patient)
        response = self.client.post(self.url, {"day": "Monday", "startTime": "09:00", "endTime": "17:00"}, format="json")

        self.assertEqual(response.status_code, 403)

    def test_missing_fields(self):
        self.login(self.doctor)
        response = self.client.post(self.url, {"day": "Monday"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Day, start time, and end time are required")

    def test_upsert_replaces_existing_day(self):
        self.login(self.doctor)
        self.client.post(self.url, {"day": "Monday", "startTime": "09:00", "endTime": "17:00"}, format="json")
        response = self.client.post(self.url, {"day": "monday", "startTime": "10:00", "endTime": "14:00"}, format="json")

        self.assertEqual(response.status_code, 200, response.content)
        hours = WorkingHours.objects.get()
        self.assertEqual(hours.day, "Monday")
        self.assertEqual(hours.start_time, datetime.time(10, 0))
        self.assertEqual(response.json()["data"]["endTime"], "14:00")

    def test_start_must_precede_end(self):
        self.login(self.doctor)
        response = self.client.post(self.url, {"day": "Friday", "startTime": "17:00", "endTime": "09:00"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(WorkingHours.objects.exists())

    def test_unknown_day(self):
        self.login(self.doctor)
        response = self.client.post(self.url, {"day": "Funday", "startTime": "09:00", "endTime": "10:00"}, format="json")

        self.assertEqual(response.status_code, 400)

    def test_list(self):
        WorkingHours.objects.create(doctor=self.doctor, day="Tuesday",
                                    start_time=datetime.time(8), end_time=datetime.time(12))
        self.login(self.doctor)

        response = self.client.get(self.url)

        self.assertEqual(response.json()["workingHours"][0]["startTime"], "08:00")


class BlockedSlotTests(ScheduleTestBase):
    url = "/api/schedule/block/"

    def test_block_slot(self):
        self.login(self.doctor)
        response = self.client.post(self.url, {"date": "2025-06-01", "time": "10:00 AM"}, format="json")

        self.assertEqual(response.status_code, 201, response.content)
        self.assertTrue(is_slot_blocked(self.doctor, datetime.date(2025, 6, 1), " 10:00 AM "))

    def test_duplicate_block_conflicts(self):
        BlockedSlot.objects.create(doctor=self.doctor, date=datetime.date(2025, 6, 1), time="10:00 AM")
        self.login(self.doctor)

        response = self.client.post(self.url, {"date": "2025-06-01", "time": "10:00 AM"}, format="json")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"], "This time slot is already blocked")

    def test_patient_forbidden(self):
        self.login(self.patient)
        response = self.client.post(self.url, {"date": "2025-06-01", "time": "10:00 AM"}, format="json")

        self.assertEqual(response.status_code, 403)
