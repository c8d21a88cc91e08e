from typing import Sequence

from ..schemas import Appointment, AppointmentData, ChatResponse, Doctor, IntentDetails

DEFAULT_DATE = "Tomorrow"

HELP_MENU = (
    "I can help you with:\n"
    "• Booking doctor appointments\n"
    "• Checking doctor availability\n"
    "• Viewing your scheduled appointments\n"
    "• Finding specialists\n\n"
    "What would you like to do?"
)

NO_APPOINTMENTS = (
    "You don't have any appointments scheduled yet. Would you like to book one?"
)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _slots(doctor: Doctor) -> str:
    return ", ".join(doctor.availability)


def _book(details: IntentDetails, roster: Sequence[Doctor]) -> ChatResponse:
    doctor = details.doctor
    if doctor and details.time:
        date = details.date or DEFAULT_DATE
        reply = (
            f"Perfect! I'm booking an appointment with {doctor.name} "
            f"({doctor.specialty}) for {date} at {details.time}. "
            "You'll receive a confirmation shortly."
        )
        return ChatResponse(
            reply=reply,
            action="book_appointment",
            appointment_data=AppointmentData(
                doctor_name=doctor.name,
                specialty=doctor.specialty,
                date=_capitalize_first(date),
                time=details.time,
            ),
        )
    if doctor:
        reply = (
            f"I can help you book with {doctor.name}. "
            f"They have availability at: {_slots(doctor)}. "
            "Which time works best for you?"
        )
        return ChatResponse(reply=reply)

    lines = "\n".join(
        f"• {d.name} - {d.specialty} (Rating: {d.rating})" for d in roster
    )
    reply = (
        "I can help you book an appointment. Here are our available doctors:\n\n"
        f"{lines}\n\n"
        "Which doctor would you like to see?"
    )
    return ChatResponse(reply=reply)


def _check_availability(
    details: IntentDetails, roster: Sequence[Doctor]
) -> ChatResponse:
    specialty = details.specialty
    doctors = [d for d in roster if d.specialty == specialty] if specialty else roster
    blocks = "\n\n".join(f"{d.name}: {_slots(d)}" for d in doctors)
    reply = (
        f"Here's the availability for {specialty or 'all doctors'}:\n\n"
        f"{blocks}\n\n"
        "Would you like to book an appointment?"
    )
    return ChatResponse(reply=reply)


def _list_doctors(roster: Sequence[Doctor]) -> ChatResponse:
    blocks = "\n\n".join(
        f"• {d.name} - {d.specialty}\n"
        f"  Rating: {d.rating}/5 | {len(d.availability)} slots available"
        for d in roster
    )
    reply = (
        f"We have {len(roster)} excellent doctors available:\n\n"
        f"{blocks}\n\n"
        "Who would you like to book with?"
    )
    return ChatResponse(reply=reply)


def _view_appointments(appointments: Sequence[Appointment]) -> ChatResponse:
    if not appointments:
        return ChatResponse(reply=NO_APPOINTMENTS)
    blocks = "\n\n".join(
        f"• {a.date} at {a.time}\n"
        f"  {a.doctor_name} - {a.specialty}\n"
        f"  Status: {a.status}"
        for a in appointments
    )
    return ChatResponse(reply=f"You have {len(appointments)} appointment(s):\n\n{blocks}")


def generate(
    intent: str,
    details: IntentDetails | None,
    appointments: Sequence[Appointment],
    roster: Sequence[Doctor],
) -> ChatResponse:
    """Render the reply for a classified message.

    Only a booking with both a doctor and a time carries an action; the
    caller is expected to add the appointment to its own list.
    """
    details = details or IntentDetails()
    if intent == "book":
        return _book(details, roster)
    if intent == "check_availability":
        return _check_availability(details, roster)
    if intent == "list_doctors":
        return _list_doctors(roster)
    if intent == "view_appointments":
        return _view_appointments(appointments or [])
    return ChatResponse(reply=HELP_MENU)
