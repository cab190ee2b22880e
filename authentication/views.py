from django.http import JsonResponse
from django.views.decorators.http import require_POST, require_GET
from django.views.decorators.csrf import csrf_exempt
from django.db import transaction, IntegrityError
from django.contrib.auth.hashers import make_password
from django_ratelimit.decorators import ratelimit

from .forms import LoginForm, RegistrationForm
from authentication.models import User, Profile
from authentication.helpers import (
    parse_json_body, get_user_or_none, handle_failed_login, set_user_session,
    form_errors, serialize_user,
)
from authentication.validators import DUPLICATE_EMAIL_MSG

import logging

logger = logging.getLogger(__name__)

RATE_LIMITED_MSG = "Too many requests. Please try again later."


@csrf_exempt
@require_POST
@ratelimit(key='ip', rate='10/m', method='POST', block=False)
def register(request):
    if getattr(request, 'limited', False):
        logger.warning(f"Registration rate limit exceeded for IP: {request.META.get('REMOTE_ADDR')}")
        return JsonResponse({"error": RATE_LIMITED_MSG}, status=429)

    data, error = parse_json_body(request)
    if error:
        return error

    form = RegistrationForm.from_payload(data)
    if not form.is_valid():
        errors = form_errors(form)
        if errors.get('email') == DUPLICATE_EMAIL_MSG:
            return JsonResponse({"error": DUPLICATE_EMAIL_MSG}, status=400)
        return JsonResponse({"error": "Invalid input", "details": errors}, status=400)

    cleaned = form.cleaned_data
    try:
        with transaction.atomic():
            user = User.objects.create(
                email=cleaned['email'],
                password=make_password(cleaned['password']),
                role=cleaned['role'],
            )
            Profile.objects.create(
                user=user,
                first_name=cleaned['first_name'],
                last_name=cleaned['last_name'],
                phone=cleaned.get('phone') or None,
                specialization=cleaned.get('specialization') or None,
                license_number=cleaned.get('license_number') or None,
            )
    except IntegrityError:
        # concurrent registration with the same email
        return JsonResponse({"error": DUPLICATE_EMAIL_MSG}, status=400)

    logger.info(f"Registered {user.role} account {user.user_id}")
    return JsonResponse(
        {"message": "User registered successfully", "user": serialize_user(user)},
        status=201
    )


@csrf_exempt
@require_POST
@ratelimit(key='ip', rate='10/m', method='POST', block=False)
def login(request):
    if getattr(request, 'limited', False):
        logger.warning(f"Login rate limit exceeded for IP: {request.META.get('REMOTE_ADDR')}")
        return JsonResponse({"error": RATE_LIMITED_MSG}, status=429)

    data, error = parse_json_body(request)
    if error:
        return error

    form = LoginForm(data)
    if not form.is_valid():
        return JsonResponse({"error": "Invalid input", "details": form_errors(form)}, status=400)

    user = get_user_or_none(form.cleaned_data['email'])
    if user is None:
        return JsonResponse({"error": "Invalid credentials"}, status=401)

    if user.is_account_locked():
        return JsonResponse({
            "error": "Account temporarily locked. Please try again later."
        }, status=423)

    if not user.is_active:
        return JsonResponse({"error": "Invalid credentials"}, status=401)

    if form.authenticate() is None:
        logger.warning(f"Failed login for user {user.user_id}")
        return handle_failed_login(user)

    user.reset_failed_login_attempts()
    set_user_session(request, user)
    return JsonResponse({"message": "Login successful", "user": serialize_user(user)}, status=200)


@csrf_exempt
@require_POST
def logout(request):
    request.session.flush()
    return JsonResponse({'message': 'Logged out'}, status=200)


@require_GET
def session_user(request):
    user = getattr(request, 'user', None)
    if not user or not user.is_authenticated:
        return JsonResponse({"error": "Unauthorized"}, status=401)
    return JsonResponse({"user": serialize_user(user)}, status=200)
