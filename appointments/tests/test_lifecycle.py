from itertools import product

from django.test import SimpleTestCase

from appointments.lifecycle import (
    check_transition, can_transition, InvalidTransition, TransitionForbidden, TERMINAL_STATUSES,
)
from appointments.models import AppointmentStatus

STATUSES = list(AppointmentStatus.values)


class LifecycleTests(SimpleTestCase):
    def test_terminal_states_accept_no_transition(self):
        for current, target, is_doctor in product(TERMINAL_STATUSES, STATUSES, (True, False)):
            with self.subTest(current=current, target=target, is_doctor=is_doctor):
                self.assertFalse(can_transition(current, target, is_doctor))

    def test_doctor_transitions(self):
        allowed = {
            ("PENDING", "CONFIRMED"),
            ("PENDING", "COMPLETED"),
            ("PENDING", "CANCELLED"),
            ("CONFIRMED", "COMPLETED"),
            ("CONFIRMED", "CANCELLED"),
        }
        for current, target in product(STATUSES, STATUSES):
            with self.subTest(current=current, target=target):
                self.assertEqual(can_transition(current, target, True), (current, target) in allowed)

    def test_patient_may_only_cancel_active_appointments(self):
        allowed = {("PENDING", "CANCELLED"), ("CONFIRMED", "CANCELLED")}
        for current, target in product(STATUSES, STATUSES):
            with self.subTest(current=current, target=target):
                self.assertEqual(can_transition(current, target, False), (current, target) in allowed)

    def test_patient_non_cancel_is_forbidden(self):
        with self.assertRaises(TransitionForbidden):
            check_transition("PENDING", "CONFIRMED", is_doctor=False)

    def test_leaving_terminal_state_is_invalid(self):
        with self.assertRaises(InvalidTransition):
            check_transition("COMPLETED", "CANCELLED", is_doctor=True)
        with self.assertRaises(InvalidTransition):
            check_transition("CANCELLED", "CANCELLED", is_doctor=False)

    def test_backwards_move_is_invalid(self):
        with self.assertRaises(InvalidTransition):
            check_transition("CONFIRMED", "PENDING", is_doctor=True)

    def test_error_status_codes(self):
        self.assertEqual(TransitionForbidden.status_code, 403)
        self.assertEqual(InvalidTransition.status_code, 409)
