from django.db import models
import uuid
from django.utils import timezone
from datetime import timedelta

MAX_FAILED_LOGINS = 5
LOCKOUT_MINUTES = 30


class Role(models.TextChoices):
    PATIENT = "PATIENT", "Patient"
    DOCTOR = "DOCTOR", "Doctor"
    ADMIN = "ADMIN", "Admin"


class User(models.Model):
    user_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    email = models.EmailField(
        unique=True
    )
    password = models.CharField(
        max_length=255
    )
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        default=Role.PATIENT
    )

    is_verified = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Security fields for failed login attempts
    failed_login_attempts = models.IntegerField(default=0)
    account_locked_until = models.DateTimeField(null=True, blank=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['role']

    def __str__(self):
        return self.email

    @property
    def is_anonymous(self):
        return False

    @property
    def is_authenticated(self):
        """
        A user is considered authenticated when the row exists, the account
        is active and it is not locked after repeated failed logins.
        """
        if not getattr(self, 'user_id', None):
            return False

        if not getattr(self, 'is_active', True):
            return False

        if self.is_account_locked():
            return False

        return True

    @property
    def is_doctor(self):
        return self.role == Role.DOCTOR

    @property
    def full_name(self):
        profile = getattr(self, 'profile', None)
        if profile is None:
            return ""
        return f"{profile.first_name} {profile.last_name}".strip()

    def is_account_locked(self):
        """Check if account is currently locked due to failed login attempts"""
        if not self.account_locked_until:
            return False

        # Lock period expired: clear lock time and reset failed attempts
        if timezone.now() >= self.account_locked_until:
            self.account_locked_until = None
            self.failed_login_attempts = 0
            self.save(update_fields=['account_locked_until', 'failed_login_attempts'])
            return False

        return True

    def increment_failed_login(self):
        """Increment failed login attempts and lock account if limit reached"""
        self.failed_login_attempts += 1

        if self.failed_login_attempts >= MAX_FAILED_LOGINS:
            self.account_locked_until = timezone.now() + timedelta(minutes=LOCKOUT_MINUTES)
            self.save(update_fields=['failed_login_attempts', 'account_locked_until'])
            return True
        self.save(update_fields=['failed_login_attempts'])
        return False

    def reset_failed_login_attempts(self):
        self.failed_login_attempts = 0
        self.account_locked_until = None
        self.save(update_fields=['failed_login_attempts', 'account_locked_until'])

    def get_remaining_login_attempts(self):
        return max(0, MAX_FAILED_LOGINS - self.failed_login_attempts)


class Profile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    phone = models.CharField(max_length=30, blank=True, null=True)
    date_of_birth = models.DateField(blank=True, null=True)
    gender = models.CharField(max_length=20, blank=True, null=True)
    address = models.CharField(max_length=255, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    state = models.CharField(max_length=100, blank=True, null=True)
    zip_code = models.CharField(max_length=20, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)

    # patient fields
    blood_group = models.CharField(max_length=10, blank=True, null=True)
    allergies = models.TextField(blank=True, null=True)
    emergency_contact = models.CharField(max_length=100, blank=True, null=True)

    # doctor fields
    specialization = models.CharField(max_length=100, blank=True, null=True)
    license_number = models.CharField(max_length=100, blank=True, null=True)
    experience = models.PositiveIntegerField(blank=True, null=True)
    education = models.TextField(blank=True, null=True)
    bio = models.TextField(blank=True, null=True)
    consultation_fee = models.PositiveIntegerField(blank=True, null=True)

    profile_image = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.first_name} {self.last_name}"
