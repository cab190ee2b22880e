from django.test import TestCase
from django.contrib.auth.hashers import make_password
from django.utils import timezone
from datetime import timedelta
from authentication.models import User, Role


class SecurityFeaturesTest(TestCase):
    """Account locking and failed login tracking on the User model"""

    def setUp(self):
        self.user = User.objects.create(
            email="security@example.com",
            password=make_password("TestSecPass1"),
        )

    def test_new_user_is_authenticated_patient(self):
        self.assertTrue(self.user.is_authenticated)
        self.assertFalse(self.user.is_anonymous)
        self.assertEqual(self.user.role, Role.PATIENT)
        self.assertFalse(self.user.is_doctor)

    def test_inactive_user_is_not_authenticated(self):
        self.user.is_active = False
        self.user.save()
        self.assertFalse(self.user.is_authenticated)

    def test_increment_failed_login_before_limit(self):
        self.user.failed_login_attempts = 3
        self.user.save()

        self.assertFalse(self.user.increment_failed_login())
        self.assertEqual(self.user.failed_login_attempts, 4)
        self.assertIsNone(self.user.account_locked_until)
        self.assertEqual(self.user.get_remaining_login_attempts(), 1)

    def test_increment_failed_login_locks_at_limit(self):
        self.user.failed_login_attempts = 4
        self.user.save()

        self.assertTrue(self.user.increment_failed_login())
        self.assertTrue(self.user.is_account_locked())
        self.assertFalse(self.user.is_authenticated)

    def test_expired_lock_is_cleared(self):
        self.user.failed_login_attempts = 5
        self.user.account_locked_until = timezone.now() - timedelta(minutes=1)
        self.user.save()

        self.assertFalse(self.user.is_account_locked())
        self.user.refresh_from_db()
        self.assertEqual(self.user.failed_login_attempts, 0)
        self.assertIsNone(self.user.account_locked_until)

    def test_full_name_without_profile(self):
        self.assertEqual(self.user.full_name, "")
