from django.core.mail import send_mail
from django.conf import settings


def build_reset_url(token: str) -> str:
    base = getattr(settings, "FRONTEND_URL", "").rstrip("/")
    return f"{base}/auth/reset-password?token={token}"


def send_password_reset_email(to_email: str, token: str):
    reset_url = build_reset_url(token)
    body = (
        "Reset Your Password\n\n"
        "We received a request to reset the password for your account.\n"
        f"Click this link to reset your password: {reset_url}\n\n"
        "This link expires in 1 hour.\n"
        "If you didn't request a password reset, you can safely ignore this email.\n"
    )
    html = (
        "<h2>Reset Your Password</h2>"
        "<p>We received a request to reset the password for your account. "
        "Click the link below to create a new password.</p>"
        f'<p><a href="{reset_url}">Reset Password</a></p>'
        "<p><strong>This link expires in 1 hour.</strong><br>"
        "If you didn't request a password reset, you can safely ignore this email. "
        "Your password will remain unchanged.</p>"
    )
    send_mail(
        subject="Reset Your Password - Smart Health Companion",
        message=body,
        from_email=getattr(settings, "DEFAULT_FROM_EMAIL", None),
        recipient_list=[to_email],
        html_message=html,
        fail_silently=False,
    )
