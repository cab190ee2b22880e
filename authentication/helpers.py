import json
from django.http import JsonResponse
from authentication.models import User

INVALID_PAYLOAD_MSG = "Invalid payload"


def parse_json_body(request):
    raw = request.body or b''
    if not raw.strip():
        return {}, None
    try:
        data = json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None, JsonResponse({"error": INVALID_PAYLOAD_MSG}, status=400)
    if not isinstance(data, dict):
        return None, JsonResponse({"error": INVALID_PAYLOAD_MSG}, status=400)
    return data, None


def get_user_or_none(email):
    try:
        return User.objects.get(email=(email or "").strip().lower())
    except User.DoesNotExist:
        return None


def handle_failed_login(user):
    account_locked = user.increment_failed_login()
    if account_locked:
        return JsonResponse({
            "error": "Account temporarily locked. Please try again later."
        }, status=423)
    return JsonResponse({"error": "Invalid credentials"}, status=401)


def set_user_session(request, user):
    request.session.cycle_key()
    request.session['user_id'] = str(user.user_id)
    request.session['role'] = user.role


def form_errors(form):
    errors = {}
    for field, error_list in form.errors.items():
        errors[field] = error_list[0] if isinstance(error_list, list) else str(error_list)
    return errors


def serialize_profile(profile):
    if profile is None:
        return None
    return {
        "id": profile.pk,
        "firstName": profile.first_name,
        "lastName": profile.last_name,
        "phone": profile.phone,
        "dateOfBirth": profile.date_of_birth.isoformat() if profile.date_of_birth else None,
        "gender": profile.gender,
        "address": profile.address,
        "city": profile.city,
        "state": profile.state,
        "zipCode": profile.zip_code,
        "country": profile.country,
        "bloodGroup": profile.blood_group,
        "allergies": profile.allergies,
        "emergencyContact": profile.emergency_contact,
        "specialization": profile.specialization,
        "licenseNumber": profile.license_number,
        "experience": profile.experience,
        "education": profile.education,
        "bio": profile.bio,
        "consultationFee": profile.consultation_fee,
        "profileImage": profile.profile_image,
    }


def serialize_user(user):
    """Public view of a user; never includes the password hash."""
    return {
        "id": str(user.user_id),
        "email": user.email,
        "role": user.role,
        "isVerified": user.is_verified,
        "createdAt": user.created_at.isoformat() if user.created_at else None,
        "updatedAt": user.updated_at.isoformat() if user.updated_at else None,
        "profile": serialize_profile(getattr(user, 'profile', None)),
    }


def person_name(user):
    profile = getattr(user, 'profile', None)
    if profile is None:
        return ""
    return f"{profile.first_name or ''} {profile.last_name or ''}".strip()


def doctor_name(user):
    return f"Dr. {person_name(user)}".strip()
