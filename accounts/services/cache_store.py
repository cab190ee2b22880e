from django.conf import settings
from django.core.cache import cache


def _ttl():
    return getattr(settings, "PASSWORD_RESET_TTL_S", 60 * 60)


def store_reset_token(email: str, token: str):
    """Keep one live token per email; issuing a new one drops the old."""
    previous = cache.get(f"pwdreset:email:{email}")
    if previous:
        cache.delete(f"pwdreset:token:{previous}")
    cache.set(f"pwdreset:token:{token}", email, _ttl())
    cache.set(f"pwdreset:email:{email}", token, _ttl())


def get_reset_email(token: str):
    return cache.get(f"pwdreset:token:{token}")


def delete_reset_token(token: str):
    email = cache.get(f"pwdreset:token:{token}")
    cache.delete(f"pwdreset:token:{token}")
    if email:
        cache.delete(f"pwdreset:email:{email}")
