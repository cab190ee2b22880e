import logging

from rest_framework.decorators import api_view
from rest_framework.response import Response

from authentication.helpers import serialize_user
from authentication.models import Profile
from utils.monitoring import track_transaction
from .serializers import ProfileUpdateSerializer

logger = logging.getLogger(__name__)


@api_view(["GET", "PUT"])
@track_transaction("profile.detail")
def user_profile(request):
    """
    GET: the session user with their profile.
    PUT: validate and upsert the profile.
    """
    user = request.user

    if request.method == "GET":
        return Response({"user": serialize_user(user)})

    serializer = ProfileUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Profile update rejected for user {user.user_id}: {serializer.errors}")
        return Response({"error": "Invalid input", "details": serializer.errors}, status=400)

    profile, created = Profile.objects.update_or_create(user=user, defaults=serializer.validated_data)
    logger.info(f"Profile {'created' if created else 'updated'} for user {user.user_id}")

    user.profile = profile
    return Response({"message": "Profile updated successfully", "user": serialize_user(user)})
