import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils.dateparse import parse_date
from rest_framework.decorators import api_view
from rest_framework.response import Response

from authentication.models import User, Role
from authentication.helpers import doctor_name
from schedule.models import is_slot_blocked
from utils.monitoring import track_transaction
from .lifecycle import check_transition, TransitionError
from .models import Appointment, AppointmentStatus, ACTIVE_STATUSES, DEFAULT_FEE
from .serializers import AppointmentSerializer, AppointmentUpdateSerializer

logger = logging.getLogger(__name__)

SLOT_TAKEN_MSG = "This time slot is already booked"


def _parse_day(value):
    """Accepts "2025-06-01" as well as full ISO timestamps from the frontend."""
    if not value:
        return None
    try:
        return parse_date(str(value)[:10])
    except ValueError:
        return None


def _get_doctor_or_none(doctor_id):
    try:
        return User.objects.select_related("profile").get(user_id=doctor_id, role=Role.DOCTOR)
    except (User.DoesNotExist, ValidationError, ValueError):
        return None


def _get_appointment_or_none(appointment_id):
    try:
        return Appointment.objects.select_related("patient__profile", "doctor__profile").get(pk=appointment_id)
    except Appointment.DoesNotExist:
        return None


def _is_participant(user, appointment):
    return user.user_id in (appointment.patient_id, appointment.doctor_id)


@api_view(["GET", "POST"])
@track_transaction("appointments.list")
def appointments(request):
    """
    GET: appointments of the caller (as doctor for DOCTOR accounts, as patient otherwise).
    POST: {doctorId, date, time, reason?} books a PENDING appointment.
    """
    user = request.user

    if request.method == "GET":
        qs = Appointment.objects.select_related("patient__profile", "doctor__profile")
        if user.role == Role.DOCTOR:
            qs = qs.filter(doctor=user)
        else:
            qs = qs.filter(patient=user)
        data = AppointmentSerializer(qs.order_by("-date", "-created_at"), many=True).data
        return Response({"appointments": data})

    data = request.data
    doctor_id = data.get("doctorId")
    time = str(data.get("time") or "").strip()
    if not doctor_id or not data.get("date") or not time:
        return Response({"error": "Doctor, date, and time are required"}, status=400)

    day = _parse_day(data.get("date"))
    if day is None:
        return Response({"error": "Invalid date"}, status=400)

    doctor = _get_doctor_or_none(doctor_id)
    if doctor is None:
        return Response({"error": "Doctor not found"}, status=404)

    if is_slot_blocked(doctor, day, time):
        return Response({"error": SLOT_TAKEN_MSG}, status=409)

    fee = getattr(getattr(doctor, "profile", None), "consultation_fee", None) or DEFAULT_FEE
    try:
        with transaction.atomic():
            taken = Appointment.objects.filter(
                doctor=doctor, date=day, time=time, status__in=ACTIVE_STATUSES
            ).exists()
            if taken:
                return Response({"error": SLOT_TAKEN_MSG}, status=409)
            appointment = Appointment.objects.create(
                patient=user,
                doctor=doctor,
                date=day,
                time=time,
                reason=data.get("reason") or None,
                fee=fee,
                status=AppointmentStatus.PENDING,
            )
    except IntegrityError:
        # lost the race against a concurrent booking of the same slot
        logger.warning(f"Concurrent booking rejected for doctor {doctor.user_id} at {day} {time}")
        return Response({"error": SLOT_TAKEN_MSG}, status=409)

    logger.info(f"Appointment {appointment.id} booked with doctor {doctor.user_id}")
    return Response({
        "message": "Appointment booked successfully",
        "appointment": {
            "id": str(appointment.id),
            "date": appointment.date.isoformat(),
            "time": appointment.time,
            "status": appointment.status.lower(),
            "fee": appointment.fee,
            "doctor": {
                "name": doctor_name(doctor),
                "specialty": getattr(getattr(doctor, "profile", None), "specialization", None) or "General Physician",
            },
        },
    }, status=201)


def _apply_status(request, appointment, target):
    """Run the lifecycle check; returns an error Response or None."""
    try:
        check_transition(appointment.status, target, request.user.role == Role.DOCTOR)
    except TransitionError as exc:
        logger.warning(
            f"Rejected status change {appointment.status}->{target} on {appointment.id} "
            f"by {request.user.user_id}: {exc}"
        )
        return Response({"error": str(exc)}, status=exc.status_code)
    appointment.status = target
    return None


@api_view(["PATCH", "DELETE"])
@track_transaction("appointments.detail")
def appointment_detail(request, appointment_id):
    """
    PATCH: {status?, notes?} moves the appointment through its lifecycle.
    DELETE: cancels the appointment.
    """
    if request.method == "PATCH":
        serializer = AppointmentUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": "Invalid input", "details": serializer.errors}, status=400)
        target = (serializer.validated_data.get("status") or "").upper()
        if target and target not in AppointmentStatus.values:
            return Response({"error": "Invalid status"}, status=400)
    else:
        target = AppointmentStatus.CANCELLED

    appointment = _get_appointment_or_none(appointment_id)
    if appointment is None:
        return Response({"error": "Appointment not found"}, status=404)

    if not _is_participant(request.user, appointment):
        return Response({"error": "Not authorized"}, status=403)

    update_fields = ["updated_at"]
    if target:
        error = _apply_status(request, appointment, target)
        if error is not None:
            return error
        update_fields.append("status")

    if request.method == "PATCH" and "notes" in serializer.validated_data:
        appointment.notes = serializer.validated_data["notes"]
        update_fields.append("notes")

    appointment.save(update_fields=update_fields)

    if request.method == "DELETE":
        return Response({"message": "Appointment cancelled"})
    return Response({
        "message": "Appointment updated successfully",
        "appointment": {"id": str(appointment.id), "status": appointment.status.lower()},
    })
