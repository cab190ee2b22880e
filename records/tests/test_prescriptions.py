from datetime import date, timedelta
from types import SimpleNamespace

from django.test import SimpleTestCase

from records.prescriptions import calculate_expiry_date, duration_days, prescription_title

TODAY = date(2025, 3, 1)


class ExpiryTests(SimpleTestCase):
    def test_known_durations(self):
        self.assertEqual(duration_days("14 days"), 14)
        self.assertEqual(duration_days("3 months"), 90)
        self.assertEqual(duration_days("Ongoing"), 365)

    def test_unknown_duration_defaults_to_a_week(self):
        self.assertEqual(duration_days("until better"), 7)
        self.assertEqual(duration_days(None), 7)

    def test_expiry_follows_longest_course(self):
        meds = [{"duration": "5 days"}, {"duration": "1 month"}, {"duration": "10 days"}]
        self.assertEqual(calculate_expiry_date(meds, today=TODAY), TODAY + timedelta(days=30))

    def test_expiry_never_shorter_than_a_week(self):
        self.assertEqual(calculate_expiry_date([{"duration": "5 days"}], today=TODAY), TODAY + timedelta(days=7))


class TitleTests(SimpleTestCase):
    def test_title_uses_patient_name(self):
        patient = SimpleNamespace(profile=SimpleNamespace(first_name="Ana", last_name="Lim"))
        self.assertEqual(prescription_title(patient), "Prescription for Ana Lim")

    def test_title_without_profile(self):
        self.assertEqual(prescription_title(SimpleNamespace(profile=None)), "Prescription for Patient")
