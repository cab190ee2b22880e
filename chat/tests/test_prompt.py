from types import SimpleNamespace as NS

from django.test import SimpleTestCase

from chat.prompt import build_turns, SYSTEM_INSTRUCTIONS, ACKNOWLEDGEMENT


class BuildTurnsTests(SimpleTestCase):
    def test_first_message(self):
        turns = build_turns([], "I have a headache")

        self.assertEqual(turns, [
            {"role": "user", "parts": [SYSTEM_INSTRUCTIONS]},
            {"role": "model", "parts": [ACKNOWLEDGEMENT]},
            {"role": "user", "parts": ["I have a headache"]},
        ])

    def test_history_is_relabelled_in_order(self):
        history = [
            NS(role="user", content="My throat hurts"),
            NS(role="assistant", content="How long? Urgency: LOW"),
            {"role": "user", "content": "Three days"},
        ]

        turns = build_turns(history, "Now I have a fever")

        self.assertEqual([t["role"] for t in turns], ["user", "model", "user", "model", "user", "user"])
        self.assertEqual(turns[3]["parts"], ["How long? Urgency: LOW"])
        self.assertEqual(turns[-1]["parts"], ["Now I have a fever"])

    def test_same_input_same_output(self):
        history = [NS(role="user", content="a"), NS(role="assistant", content="b")]
        self.assertEqual(build_turns(history, "c"), build_turns(history, "c"))

    def test_system_instructions_ask_for_urgency_line(self):
        self.assertIn("Urgency: EMERGENCY", SYSTEM_INSTRUCTIONS)
