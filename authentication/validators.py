from django import forms
import re

MIN_PASSWORD_LENGTH = 8
DUPLICATE_EMAIL_MSG = "User with this email already exists"


def validate_password(password: str):
    if not password:
        raise forms.ValidationError("Password cannot be empty.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise forms.ValidationError("Password must be at least 8 characters")
    return password


def validate_person_name(name: str, label: str):
    if not name or not name.strip():
        raise forms.ValidationError(f"{label} is required")
    if re.search(r'[<>"/\\]', name):
        raise forms.ValidationError(f'{label} cannot contain <, >, ", /, or \\ characters.')
    return name.strip()


def validate_email(email: str, model_cls):
    if not email or not email.strip():
        raise forms.ValidationError("Email is required.")

    email = email.lower().strip()
    if model_cls.objects.filter(email=email).exists():
        raise forms.ValidationError(DUPLICATE_EMAIL_MSG)

    return email
