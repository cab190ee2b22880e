from typing import Optional

from .models import RecordCategory, RecordStatus

CATEGORY_ALIASES = {
    "lab": RecordCategory.LAB_REPORT,
    "labreport": RecordCategory.LAB_REPORT,
    "lab_report": RecordCategory.LAB_REPORT,
    "prescription": RecordCategory.PRESCRIPTION,
    "imaging": RecordCategory.IMAGING,
    "vaccination": RecordCategory.VACCINATION,
    "diagnosis": RecordCategory.DIAGNOSIS,
    "surgery": RecordCategory.SURGERY,
    "consultation": RecordCategory.CONSULTATION,
    "other": RecordCategory.OTHER,
}

STATUS_ALIASES = {
    "normal": RecordStatus.NORMAL,
    "abnormal": RecordStatus.ABNORMAL,
    "critical": RecordStatus.CRITICAL,
    "pendingreview": RecordStatus.PENDING_REVIEW,
    "pending_review": RecordStatus.PENDING_REVIEW,
    "active": RecordStatus.ACTIVE,
    "completed": RecordStatus.COMPLETED,
    "expired": RecordStatus.EXPIRED,
}


def lookup_category(value) -> Optional[str]:
    if not value:
        return None
    return CATEGORY_ALIASES.get(str(value).strip().lower())


def lookup_status(value) -> Optional[str]:
    if not value:
        return None
    return STATUS_ALIASES.get(str(value).strip().lower())


def category_or_other(value) -> str:
    return lookup_category(value) or RecordCategory.OTHER


def status_or_pending(value) -> str:
    return lookup_status(value) or RecordStatus.PENDING_REVIEW


def format_file_size(size) -> Optional[str]:
    if not size:
        return None
    return f"{size / (1024 * 1024):.1f} MB"
