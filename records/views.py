import logging
from datetime import date

from django.core.exceptions import ValidationError
from django.db.models import Q
from rest_framework.decorators import api_view
from rest_framework.response import Response

from authentication.models import User, Role
from utils.monitoring import track_transaction
from .mapping import lookup_category, lookup_status, category_or_other, status_or_pending
from .models import HealthRecord, RecordCategory, RecordStatus
from .prescriptions import calculate_expiry_date, prescription_title
from .serializers import (
    HealthRecordSerializer, HealthRecordCreateSerializer, HealthRecordUpdateSerializer,
    PrescriptionCreateSerializer,
)
from .uploads import inspect_upload, UploadRejected

logger = logging.getLogger(__name__)


def _records_for(user):
    qs = HealthRecord.objects.select_related("patient__profile", "doctor__profile")
    if user.role == Role.PATIENT:
        return qs.filter(patient=user)
    if user.role == Role.DOCTOR:
        return qs.filter(doctor=user)
    return qs


def _get_user_with_role(user_id, role):
    try:
        return User.objects.select_related("profile").get(user_id=user_id, role=role)
    except (User.DoesNotExist, ValidationError, ValueError):
        return None


def _invalid(serializer):
    return Response({"error": "Invalid input", "details": serializer.errors}, status=400)


@api_view(["GET", "POST"])
@track_transaction("records.list")
def records(request):
    """
    GET: ?category=&search= over the caller's records.
    POST: create a record; patients may upload a lab report inline as fileData.
    """
    user = request.user

    if request.method == "GET":
        qs = _records_for(user)
        category = request.GET.get("category")
        if category and category != "all":
            mapped = lookup_category(category)
            if mapped:
                qs = qs.filter(category=mapped)
        search = (request.GET.get("search") or "").strip()
        if search:
            qs = qs.filter(
                Q(title__icontains=search) | Q(description__icontains=search) | Q(diagnosis__icontains=search)
            )
        return Response({"records": HealthRecordSerializer(qs, many=True).data})

    data = request.data
    if not data.get("title") or not data.get("category") or not data.get("recordDate"):
        return Response({"error": "Title, category, and record date are required"}, status=400)

    serializer = HealthRecordCreateSerializer(data=data)
    if not serializer.is_valid():
        return _invalid(serializer)
    fields = dict(serializer.validated_data)

    patient, doctor = user, None
    patient_id = fields.pop("patient_id", None)
    doctor_id = fields.pop("doctor_id", None)
    if user.role == Role.DOCTOR:
        if not patient_id:
            return Response({"error": "Patient ID is required for doctors"}, status=400)
        patient = _get_user_with_role(patient_id, Role.PATIENT)
        if patient is None:
            return Response({"error": "Patient not found"}, status=404)
        doctor = user
    elif doctor_id:
        doctor = _get_user_with_role(doctor_id, Role.DOCTOR)
        if doctor is None:
            return Response({"error": "Doctor not found"}, status=404)

    file_data = fields.pop("file_data", None)
    if not file_data and (fields.get("file_url") or "").lower().startswith("data:"):
        file_data = fields["file_url"]
    if file_data:
        try:
            mime, size = inspect_upload(file_data, fields.get("file_type"), fields.get("file_name"))
        except UploadRejected as exc:
            logger.warning(f"Upload rejected for user {user.user_id}: {exc}")
            return Response({"error": str(exc)}, status=400)
        fields.update(file_url=file_data, file_type=mime, file_size=size)

    fields["category"] = category_or_other(fields["category"])
    fields["status"] = status_or_pending(fields.get("status"))

    record = HealthRecord.objects.create(patient=patient, doctor=doctor, **fields)
    logger.info(f"Record {record.id} ({record.category}) created by {user.user_id}")
    return Response({
        "message": "Record created successfully",
        "record": {
            "id": str(record.id),
            "title": record.title,
            "category": record.category,
            "recordDate": record.record_date.isoformat(),
        },
    }, status=201)


@api_view(["GET", "PATCH", "DELETE"])
@track_transaction("records.detail")
def record_detail(request, record_id):
    user = request.user
    record = (
        HealthRecord.objects.select_related("patient__profile", "doctor__profile")
        .filter(pk=record_id)
        .first()
    )
    if record is None:
        return Response({"error": "Record not found"}, status=404)

    if request.method == "GET":
        if user.role == Role.PATIENT and record.patient_id != user.user_id:
            return Response({"error": "Unauthorized"}, status=403)
        if user.role == Role.DOCTOR and record.doctor_id != user.user_id:
            return Response({"error": "Unauthorized"}, status=403)
        return Response({"record": HealthRecordSerializer(record).data})

    if request.method == "DELETE":
        if record.patient_id != user.user_id:
            return Response({"error": "Only the record owner can delete this record"}, status=403)
        record.delete()
        logger.info(f"Record {record_id} deleted by {user.user_id}")
        return Response({"message": "Record deleted successfully"})

    if user.user_id not in (record.patient_id, record.doctor_id):
        return Response({"error": "Unauthorized"}, status=403)

    serializer = HealthRecordUpdateSerializer(data=request.data, partial=True)
    if not serializer.is_valid():
        return _invalid(serializer)
    changes = dict(serializer.validated_data)

    if "status" in changes:
        status = lookup_status(changes["status"]) or str(changes["status"]).upper()
        if status not in RecordStatus.values:
            return Response({"error": "Invalid status"}, status=400)
        changes["status"] = status

    for field, value in changes.items():
        setattr(record, field, value)
    record.save()

    return Response({"message": "Record updated successfully", "record": HealthRecordSerializer(record).data})


@api_view(["GET", "POST"])
@track_transaction("records.prescriptions")
def prescriptions(request):
    """
    GET: ?patientId=&status= prescriptions written by (doctor) or for (patient) the caller.
    POST: doctors write a prescription for a patient.
    """
    user = request.user

    if request.method == "GET":
        qs = HealthRecord.objects.select_related("patient__profile", "doctor__profile").filter(
            category=RecordCategory.PRESCRIPTION
        )
        if user.role == Role.DOCTOR:
            qs = qs.filter(doctor=user)
            patient_id = request.GET.get("patientId")
            if patient_id:
                try:
                    qs = qs.filter(patient_id=patient_id)
                except ValidationError:
                    return Response({"error": "Invalid patientId"}, status=400)
        else:
            qs = qs.filter(patient=user)

        status = request.GET.get("status")
        if status:
            qs = qs.filter(status=lookup_status(status) or status.upper())
        return Response({"prescriptions": HealthRecordSerializer(qs.order_by("-created_at"), many=True).data})

    if user.role != Role.DOCTOR:
        return Response({"error": "Only doctors can create prescriptions"}, status=403)

    data = request.data
    if not data.get("patientId"):
        return Response({"error": "Patient ID is required"}, status=400)
    if not data.get("medications"):
        return Response({"error": "At least one medication is required"}, status=400)

    serializer = PrescriptionCreateSerializer(data=data)
    if not serializer.is_valid():
        return _invalid(serializer)
    validated = serializer.validated_data

    patient = _get_user_with_role(validated["patient_id"], Role.PATIENT)
    if patient is None:
        return Response({"error": "Patient not found"}, status=404)

    medications = [dict(m) for m in validated["medications"]]
    is_draft = validated.get("is_draft", False)
    notes = validated.get("notes") or None
    record = HealthRecord.objects.create(
        patient=patient,
        doctor=user,
        title=prescription_title(patient),
        description=notes,
        category=RecordCategory.PRESCRIPTION,
        status=RecordStatus.PENDING_REVIEW if is_draft else RecordStatus.ACTIVE,
        medications=medications,
        notes=notes,
        record_date=date.today(),
        expiry_date=calculate_expiry_date(medications),
    )
    logger.info(f"Prescription {record.id} written by {user.user_id} for {patient.user_id}")
    return Response({
        "message": "Draft saved successfully" if is_draft else "Prescription created successfully",
        "prescription": HealthRecordSerializer(record).data,
    }, status=201)
