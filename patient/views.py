import logging
from datetime import date

from django.db.models import Max, Q
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from authentication.models import User, Role
from authentication.permissions import IsDoctor

logger = logging.getLogger(__name__)

PATIENT_LIST_LIMIT = 20
DISPLAY_ID_BASE = 1234


def calculate_age(born, today=None):
    if not born:
        return None
    today = today or date.today()
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


def _patient_row(patient, index):
    profile = getattr(patient, "profile", None)
    if profile is not None:
        name = f"{profile.first_name} {profile.last_name}".strip()
    else:
        name = patient.email.split("@")[0]
    return {
        "id": str(patient.user_id),
        "patientId": f"P-{DISPLAY_ID_BASE + index}",
        "name": name,
        "email": patient.email,
        "age": calculate_age(getattr(profile, "date_of_birth", None)),
        "phone": getattr(profile, "phone", None),
        "bloodGroup": getattr(profile, "blood_group", None),
        "allergies": getattr(profile, "allergies", None),
        "gender": getattr(profile, "gender", None),
        "lastVisit": patient.last_visit.isoformat() if patient.last_visit else None,
    }


@api_view(["GET"])
@permission_classes([IsDoctor])
def patient_list(request):
    """Patients who have at least one appointment with the calling doctor."""
    patients = (
        User.objects.filter(role=Role.PATIENT, patient_appointments__doctor=request.user)
        .annotate(last_visit=Max("patient_appointments__date",
                                 filter=Q(patient_appointments__doctor=request.user)))
        .select_related("profile")
        .distinct()
        .order_by("created_at")[:PATIENT_LIST_LIMIT]
    )
    rows = [_patient_row(patient, index) for index, patient in enumerate(patients)]
    return Response({"patients": rows})
