import logging

from django.db import IntegrityError, transaction
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from authentication.permissions import IsDoctor
from utils.monitoring import track_transaction
from .models import WorkingHours, BlockedSlot
from .serializers import WorkingHoursSerializer, BlockedSlotSerializer

logger = logging.getLogger(__name__)


@api_view(["GET", "POST"])
@permission_classes([IsDoctor])
@track_transaction("schedule.working_hours")
def working_hours(request):
    """
    GET: the doctor's weekly working hours.
    POST: {day, startTime, endTime} creates or replaces one day.
    """
    if request.method == "GET":
        qs = WorkingHours.objects.filter(doctor=request.user)
        return Response({"workingHours": WorkingHoursSerializer(qs, many=True).data})

    data = request.data
    if not data.get("day") or not data.get("startTime") or not data.get("endTime"):
        return Response({"error": "Day, start time, and end time are required"}, status=400)

    serializer = WorkingHoursSerializer(data=data)
    if not serializer.is_valid():
        return Response({"error": "Invalid input", "details": serializer.errors}, status=400)

    hours, _ = WorkingHours.objects.update_or_create(
        doctor=request.user,
        day=serializer.validated_data["day"],
        defaults={
            "start_time": serializer.validated_data["start_time"],
            "end_time": serializer.validated_data["end_time"],
        },
    )
    return Response({
        "success": True,
        "message": "Working hours updated successfully",
        "data": WorkingHoursSerializer(hours).data,
    })


@api_view(["GET", "POST"])
@permission_classes([IsDoctor])
@track_transaction("schedule.blocked_slots")
def blocked_slots(request):
    """
    GET: the doctor's blocked slots.
    POST: {date, time} blocks a slot so patients cannot book it.
    """
    if request.method == "GET":
        qs = BlockedSlot.objects.filter(doctor=request.user)
        return Response({"blockedSlots": BlockedSlotSerializer(qs, many=True).data})

    data = request.data
    if not data.get("date") or not data.get("time"):
        return Response({"error": "Date and time are required"}, status=400)

    serializer = BlockedSlotSerializer(data=data)
    if not serializer.is_valid():
        return Response({"error": "Invalid input", "details": serializer.errors}, status=400)

    try:
        with transaction.atomic():
            slot = serializer.save(doctor=request.user)
    except IntegrityError:
        return Response({"error": "This time slot is already blocked"}, status=409)

    logger.info(f"Doctor {request.user.user_id} blocked {slot.date} {slot.time}")
    return Response({
        "success": True,
        "message": "Time slot blocked successfully",
        "data": BlockedSlotSerializer(slot).data,
    }, status=201)
