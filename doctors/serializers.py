from rest_framework import serializers

from appointments.models import DEFAULT_FEE
from authentication.helpers import doctor_name


class DoctorSerializer(serializers.Serializer):
    """Read-only listing shape for a DOCTOR account and its profile."""

    def to_representation(self, doctor):
        profile = getattr(doctor, "profile", None)
        specialization = getattr(profile, "specialization", None)
        experience = getattr(profile, "experience", None)
        return {
            "id": str(doctor.user_id),
            "name": doctor_name(doctor),
            "email": doctor.email,
            "specialty": specialization.lower() if specialization else "general",
            "specialtyName": specialization or "General Physician",
            "experience": f"{experience} years" if experience else "N/A",
            "education": getattr(profile, "education", None) or "",
            "bio": getattr(profile, "bio", None) or "",
            "fee": getattr(profile, "consultation_fee", None) or DEFAULT_FEE,
            "phone": getattr(profile, "phone", None) or "",
            "city": getattr(profile, "city", None) or "",
            "profileImage": getattr(profile, "profile_image", None),
            "available": True,
        }
