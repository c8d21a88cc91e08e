from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Intent = Literal[
    "book",
    "check_availability",
    "list_doctors",
    "view_appointments",
    "general",
]
Action = Literal["book_appointment"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Doctor(CamelModel):
    id: str
    name: str
    specialty: str
    availability: tuple[str, ...]
    rating: float

    model_config = ConfigDict(frozen=True)


class Appointment(CamelModel):
    id: Optional[str] = None
    doctor_name: str
    specialty: str
    date: str
    time: str
    status: str


class AppointmentData(CamelModel):
    doctor_name: str
    specialty: str
    date: str
    time: str


class IntentDetails(BaseModel):
    """Slots pulled out of a message. Which fields are set depends on the intent."""

    doctor: Optional[Doctor] = None
    time: Optional[str] = None
    date: Optional[str] = None
    specialty: Optional[str] = None


class IntentResult(BaseModel):
    intent: Intent
    details: IntentDetails = Field(default_factory=IntentDetails)


class ChatRequest(CamelModel):
    message: str
    appointments: Optional[list[Appointment]] = None


class ChatResponse(CamelModel):
    reply: str
    action: Optional[Action] = None
    appointment_data: Optional[AppointmentData] = None
