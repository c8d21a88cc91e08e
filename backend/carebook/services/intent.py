import re
from typing import Callable, Sequence

from ..schemas import Doctor, Intent, IntentDetails, IntentResult

TIME_WITH_MINUTES = re.compile(r"[0-9]{1,2}:[0-9]{2}\s*(?:am|pm)", re.IGNORECASE)
TIME_HOUR_ONLY = re.compile(r"[0-9]{1,2}\s*(?:am|pm)", re.IGNORECASE)
DATE_WORDS = re.compile(
    r"tomorrow|today|monday|tuesday|wednesday|thursday|friday|saturday|sunday",
    re.IGNORECASE,
)

Extractor = Callable[[str, Sequence[Doctor]], IntentDetails]


def _find_doctor(lowered: str, roster: Sequence[Doctor]) -> Doctor | None:
    for doctor in roster:
        if doctor.name.lower() in lowered or doctor.specialty.lower() in lowered:
            return doctor
    return None


def _extract_time(lowered: str) -> str | None:
    match = TIME_WITH_MINUTES.search(lowered) or TIME_HOUR_ONLY.search(lowered)
    return match.group(0) if match else None


def _extract_date(lowered: str) -> str | None:
    match = DATE_WORDS.search(lowered)
    return match.group(0) if match else None


def _booking_details(lowered: str, roster: Sequence[Doctor]) -> IntentDetails:
    return IntentDetails(
        doctor=_find_doctor(lowered, roster),
        time=_extract_time(lowered),
        date=_extract_date(lowered),
    )


def _availability_details(lowered: str, roster: Sequence[Doctor]) -> IntentDetails:
    for doctor in roster:
        if doctor.specialty.lower() in lowered:
            return IntentDetails(specialty=doctor.specialty)
    return IntentDetails()


def _no_details(lowered: str, roster: Sequence[Doctor]) -> IntentDetails:
    return IntentDetails()


# Order matters: the first rule with a matching keyword wins.
RULES: tuple[tuple[tuple[str, ...], Intent, Extractor], ...] = (
    (("book", "schedule", "appointment"), "book", _booking_details),
    (("available", "availability", "free"), "check_availability", _availability_details),
    (("list", "show me", "who are"), "list_doctors", _no_details),
    (("my appointment", "my booking"), "view_appointments", _no_details),
)


def classify(message: str, roster: Sequence[Doctor]) -> IntentResult:
    """Map a free-text message onto an intent and the slots it carries.

    Matching is plain substring search on the lower-cased message, checked
    against RULES in order. Messages that match nothing are "general".
    """
    lowered = message.lower()
    for keywords, intent, extract in RULES:
        if any(keyword in lowered for keyword in keywords):
            return IntentResult(intent=intent, details=extract(lowered, roster))
    return IntentResult(intent="general")
