from django.utils.deprecation import MiddlewareMixin
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import ValidationError

User = get_user_model()


class SessionAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware to set request.user based on session data.
    This lets DRF authentication and permissions see our custom User model.
    """
    def process_request(self, request):
        user_id = request.session.get('user_id')

        if not user_id:
            request.user = AnonymousUser()
            return

        try:
            user = User.objects.select_related('profile').get(user_id=user_id)
        except (User.DoesNotExist, ValidationError, ValueError):
            request.user = AnonymousUser()
            return

        request.user = user if user.is_authenticated else AnonymousUser()
