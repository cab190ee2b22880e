from rest_framework.authentication import SessionAuthentication


class SessionUserAuthentication(SessionAuthentication):
    """
    Reads the user resolved by SessionAuthenticationMiddleware.

    Returning a value from authenticate_header makes DRF answer 401 instead
    of 403 when no session user is present.
    """

    def authenticate_header(self, request):
        return 'Session'
