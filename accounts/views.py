# accounts/views.py
import logging

from django.views.decorators.http import require_POST
from django.views.decorators.csrf import csrf_exempt
from django.http import JsonResponse, HttpRequest
from django.contrib.auth.hashers import make_password
from django_ratelimit.decorators import ratelimit

from authentication.helpers import parse_json_body, get_user_or_none
from authentication.validators import MIN_PASSWORD_LENGTH
from .services import cache_store as cs
from .services.emailer import send_password_reset_email
from .utils import generate_reset_token

logger = logging.getLogger(__name__)

RESET_REQUESTED_MSG = "If an account exists with this email, you will receive a password reset link."


@csrf_exempt
@require_POST
@ratelimit(key='ip', rate='5/m', method='POST', block=False)
def forgot_password(request: HttpRequest) -> JsonResponse:
    """
    Mail a reset link when the email is registered.
    Unknown emails get the same answer so accounts cannot be enumerated.
    """
    if getattr(request, 'limited', False):
        logger.warning(f"Password reset rate limit exceeded for IP: {request.META.get('REMOTE_ADDR')}")
        return JsonResponse({"error": "Too many requests. Please try again later."}, status=429)

    data, error = parse_json_body(request)
    if error:
        return error

    email = (data.get("email") or "").strip().lower()
    if not email:
        return JsonResponse({"error": "Email is required"}, status=400)

    user = get_user_or_none(email)
    if user is None:
        return JsonResponse({"message": RESET_REQUESTED_MSG})

    token = generate_reset_token()
    cs.store_reset_token(email, token)
    try:
        send_password_reset_email(email, token)
    except Exception:
        logger.exception(f"Failed to send password reset email for user {user.user_id}")
        cs.delete_reset_token(token)
        return JsonResponse({"error": "Failed to process request. Please try again."}, status=500)

    return JsonResponse({"message": RESET_REQUESTED_MSG})


def _validate_reset_fields(token, new_pw):
    if not token or not new_pw:
        return "Token and password are required"
    if len(new_pw) < MIN_PASSWORD_LENGTH:
        return "Password must be at least 8 characters"
    return None


@csrf_exempt
@require_POST
def reset_password(request: HttpRequest) -> JsonResponse:
    data, error = parse_json_body(request)
    if error:
        return error

    token = (data.get("token") or "").strip()
    new_password = data.get("password") or ""

    message = _validate_reset_fields(token, new_password)
    if message:
        return JsonResponse({"error": message}, status=400)

    email = cs.get_reset_email(token)
    user = get_user_or_none(email) if email else None
    if user is None:
        return JsonResponse({"error": "Invalid or expired reset token"}, status=400)

    user.password = make_password(new_password)
    user.failed_login_attempts = 0
    user.account_locked_until = None
    user.save(update_fields=["password", "failed_login_attempts", "account_locked_until", "updated_at"])
    cs.delete_reset_token(token)

    logger.info(f"Password reset completed for user {user.user_id}")
    return JsonResponse({"message": "Password has been reset successfully"})
