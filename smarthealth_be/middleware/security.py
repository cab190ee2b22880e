"""
Security middleware for request size limiting.
"""
import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)

DEFAULT_MAX_REQUEST_SIZE_MB = 15


class RequestSizeLimitMiddleware:
    """
    Rejects write requests whose declared body is larger than
    MAX_REQUEST_SIZE_MB. The default leaves room for a base64 encoded
    10MB lab report plus its JSON envelope.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    @property
    def max_size(self):
        max_mb = getattr(settings, "MAX_REQUEST_SIZE_MB", DEFAULT_MAX_REQUEST_SIZE_MB)
        return int(max_mb) * 1024 * 1024

    def __call__(self, request):
        if request.method in ['POST', 'PUT', 'PATCH']:
            content_length = request.META.get('CONTENT_LENGTH')

            if content_length:
                try:
                    content_length = int(content_length)
                except (ValueError, TypeError):
                    # unparseable header, Django rejects the body later
                    content_length = 0

                if content_length > self.max_size:
                    logger.warning(
                        f"Request size limit exceeded: {content_length} bytes from IP {request.META.get('REMOTE_ADDR')}"
                    )
                    return JsonResponse({
                        'error': 'Request too large',
                        'max_size_mb': self.max_size / (1024 * 1024),
                        'your_size_mb': round(content_length / (1024 * 1024), 2)
                    }, status=413)

        return self.get_response(request)
