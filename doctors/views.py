import logging
import re
from collections import Counter

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from authentication.models import User, Role
from .filters import DoctorFilter
from .serializers import DoctorSerializer

logger = logging.getLogger(__name__)


def _specialties():
    """Distinct specializations across every doctor, with head counts."""
    counts = Counter(
        User.objects.filter(role=Role.DOCTOR, profile__specialization__isnull=False)
        .exclude(profile__specialization="")
        .values_list("profile__specialization", flat=True)
    )
    return [
        {"id": re.sub(r"\s+", "-", name.lower()), "name": name, "doctorCount": count}
        for name, count in counts.items()
    ]


@api_view(["GET"])
@permission_classes([AllowAny])
def doctors(request):
    qs = User.objects.filter(role=Role.DOCTOR).select_related("profile").order_by("-created_at")
    filterset = DoctorFilter(request.GET, queryset=qs)
    if not filterset.is_valid():
        return Response({"error": "Invalid filters", "details": filterset.errors}, status=400)

    found = list(filterset.qs)
    logger.debug(f"Doctor search returned {len(found)} doctors")
    return Response({
        "doctors": DoctorSerializer(found, many=True).data,
        "specialties": _specialties(),
    })
