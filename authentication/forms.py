# authentication/forms.py
from django import forms
from django.contrib.auth.hashers import check_password
from authentication.models import User, Role
from authentication.validators import validate_password, validate_person_name, validate_email


class LoginForm(forms.Form):
    email = forms.EmailField(
        required=True,
        error_messages={
            'required': 'Email is required.',
            'invalid': 'Invalid email address',
        }
    )
    password = forms.CharField(
        max_length=255,
        strip=False,
        required=True,
        error_messages={
            'required': 'Password is required.',
            'max_length': 'Password must be 255 characters or less.'
        }
    )

    def clean_email(self):
        return self.cleaned_data['email'].strip().lower()

    def authenticate(self):
        if not self.is_valid():
            return None
        try:
            user = User.objects.get(email=self.cleaned_data['email'])
        except User.DoesNotExist:
            return None
        if check_password(self.cleaned_data['password'], user.password):
            return user
        return None


class RegistrationForm(forms.Form):
    email = forms.EmailField(
        required=True,
        error_messages={
            'required': 'Email is required.',
            'invalid': 'Invalid email address',
        }
    )
    password = forms.CharField(
        max_length=255,
        strip=False,
        required=True,
        error_messages={
            'required': 'Password is required.',
            'max_length': 'Password must be 255 characters or less.'
        }
    )
    role = forms.ChoiceField(
        choices=Role.choices,
        required=True,
        error_messages={
            'required': 'Role is required.',
            'invalid_choice': 'Role must be one of PATIENT, DOCTOR or ADMIN.',
        }
    )
    first_name = forms.CharField(max_length=100, required=False)
    last_name = forms.CharField(max_length=100, required=False)
    phone = forms.CharField(max_length=30, required=False)
    specialization = forms.CharField(max_length=100, required=False)
    license_number = forms.CharField(max_length=100, required=False)

    def clean_password(self):
        return validate_password(self.cleaned_data.get('password'))

    def clean_first_name(self):
        return validate_person_name(self.cleaned_data.get('first_name'), "First name")

    def clean_last_name(self):
        return validate_person_name(self.cleaned_data.get('last_name'), "Last name")

    def clean_email(self):
        return validate_email(self.cleaned_data.get('email'), User)

    @classmethod
    def from_payload(cls, data):
        """Map the camelCase JSON body onto form fields."""
        return cls({
            'email': data.get('email'),
            'password': data.get('password'),
            'role': data.get('role'),
            'first_name': data.get('firstName'),
            'last_name': data.get('lastName'),
            'phone': data.get('phone'),
            'specialization': data.get('specialization'),
            'license_number': data.get('licenseNumber'),
        })
