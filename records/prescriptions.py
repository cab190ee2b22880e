from datetime import date, timedelta

DEFAULT_DURATION_DAYS = 7

DURATION_DAYS = {
    "5 days": 5,
    "7 days": 7,
    "10 days": 10,
    "14 days": 14,
    "21 days": 21,
    "1 month": 30,
    "2 months": 60,
    "3 months": 90,
    "6 months": 180,
    "ongoing": 365,
}


def duration_days(duration) -> int:
    return DURATION_DAYS.get(str(duration or "").strip().lower(), DEFAULT_DURATION_DAYS)


def calculate_expiry_date(medications, today=None) -> date:
    """Expiry follows the longest course, never shorter than a week."""
    today = today or date.today()
    longest = max([DEFAULT_DURATION_DAYS] + [duration_days(m.get("duration")) for m in medications])
    return today + timedelta(days=longest)


def prescription_title(patient) -> str:
    profile = getattr(patient, "profile", None)
    first = getattr(profile, "first_name", None) or "Patient"
    last = getattr(profile, "last_name", None) or ""
    return f"Prescription for {first} {last}".strip()
