import datetime

from django.contrib.auth.hashers import make_password
from django.test import SimpleTestCase
from rest_framework.test import APITestCase

from appointments.models import Appointment
from authentication.models import User, Profile
from patient.views import calculate_age


class CalculateAgeTests(SimpleTestCase):
    def test_birthday_not_reached_yet(self):
        self.assertEqual(calculate_age(datetime.date(1990, 12, 31), today=datetime.date(2025, 6, 1)), 34)

    def test_birthday_passed(self):
        self.assertEqual(calculate_age(datetime.date(1990, 1, 1), today=datetime.date(2025, 6, 1)), 35)

    def test_unknown_birthday(self):
        self.assertIsNone(calculate_age(None))


class PatientListTests(APITestCase):
    url = "/api/patients/"

    def setUp(self):
        self.doctor = User.objects.create(email="doc@example.com", password=make_password("Password123"), role="DOCTOR")
        self.other_doctor = User.objects.create(email="doc2@example.com", password=make_password("Password123"), role="DOCTOR")
        self.mine = User.objects.create(email="mine@example.com", password=make_password("Password123"))
        Profile.objects.create(user=self.mine, first_name="Min", last_name="E", blood_group="O+", gender="female")
        self.no_profile = User.objects.create(email="anon.person@example.com", password=make_password("Password123"))
        self.theirs = User.objects.create(email="theirs@example.com", password=make_password("Password123"))

        for patient, doctor, time in [
            (self.mine, self.doctor, "09:00 AM"),
            (self.mine, self.doctor, "10:00 AM"),
            (self.no_profile, self.doctor, "11:00 AM"),
            (self.theirs, self.other_doctor, "09:00 AM"),
        ]:
            Appointment.objects.create(patient=patient, doctor=doctor, date=datetime.date(2025, 6, 1), time=time)

    def login(self, user):
        session = self.client.session
        session["user_id"] = str(user.user_id)
        session.save()

    def test_patients_cannot_list(self):
        self.login(self.mine)
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_anonymous_is_401(self):
        self.assertEqual(self.client.get(self.url).status_code, 401)

    def test_doctor_sees_only_their_patients_once(self):
        self.login(self.doctor)
        patients = self.client.get(self.url).json()["patients"]

        self.assertEqual(len(patients), 2)
        self.assertEqual({p["patientId"] for p in patients}, {"P-1234", "P-1235"})
        by_email = {p["email"]: p for p in patients}
        self.assertEqual(set(by_email), {"mine@example.com", "anon.person@example.com"})
        self.assertEqual(by_email["mine@example.com"]["name"], "Min E")
        self.assertEqual(by_email["mine@example.com"]["bloodGroup"], "O+")
        self.assertEqual(by_email["anon.person@example.com"]["name"], "anon.person")
        self.assertIsNone(by_email["anon.person@example.com"]["age"])

    def test_last_visit_is_latest_appointment_with_caller(self):
        Appointment.objects.create(patient=self.mine, doctor=self.doctor, date=datetime.date(2025, 6, 20), time="09:00 AM")
        Appointment.objects.create(patient=self.mine, doctor=self.other_doctor, date=datetime.date(2025, 8, 1), time="09:00 AM")
        self.login(self.doctor)

        by_email = {p["email"]: p for p in self.client.get(self.url).json()["patients"]}

        self.assertEqual(by_email["mine@example.com"]["lastVisit"], "2025-06-20")
        self.assertEqual(by_email["anon.person@example.com"]["lastVisit"], "2025-06-01")

    def test_doctor_without_appointments_gets_empty_list(self):
        lonely = User.objects.create(email="lonely@example.com", password=make_password("Password123"), role="DOCTOR")
        self.login(lonely)
        self.assertEqual(self.client.get(self.url).json()["patients"], [])
