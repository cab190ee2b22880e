from django.test import SimpleTestCase

from chat.symptoms import extract_symptoms, specialists_for, summarize


class ExtractSymptomsTests(SimpleTestCase):
    def test_direct_mentions(self):
        self.assertEqual(extract_symptoms("Fever and a bad cough"), ["cough", "fever"])

    def test_aliases(self):
        found = extract_symptoms("I can't sleep and my tummy ache is back")
        self.assertEqual(found, ["insomnia", "stomach pain"])

    def test_alias_does_not_duplicate_direct_mention(self):
        self.assertEqual(extract_symptoms("chest pain, my chest hurts"), ["chest pain"])

    def test_nothing_found(self):
        self.assertEqual(extract_symptoms("hello there"), [])
        self.assertEqual(extract_symptoms(None), [])


class SpecialistsTests(SimpleTestCase):
    def test_union_keeps_first_seen_order(self):
        self.assertEqual(
            specialists_for(["rash", "itching", "runny nose"]),
            ["Dermatologist", "Allergist", "ENT Specialist"],
        )

    def test_summary(self):
        self.assertEqual(summarize(["fever", "cough"]), "Symptoms: fever, cough")
