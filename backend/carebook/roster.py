from .schemas import Doctor

ROSTER: tuple[Doctor, ...] = (
    Doctor(
        id="1",
        name="Dr. Sarah Johnson",
        specialty="General Physician",
        availability=("9:00 AM", "11:00 AM", "2:00 PM", "4:00 PM"),
        rating=4.8,
    ),
    Doctor(
        id="2",
        name="Dr. Michael Chen",
        specialty="Cardiologist",
        availability=("10:00 AM", "1:00 PM", "3:00 PM"),
        rating=4.9,
    ),
    Doctor(
        id="3",
        name="Dr. Emily Rodriguez",
        specialty="Dermatologist",
        availability=("9:30 AM", "11:30 AM", "2:30 PM", "4:30 PM"),
        rating=4.7,
    ),
    Doctor(
        id="4",
        name="Dr. James Wilson",
        specialty="Pediatrician",
        availability=("8:00 AM", "10:00 AM", "1:00 PM", "3:00 PM"),
        rating=4.9,
    ),
)


def get_roster() -> tuple[Doctor, ...]:
    return ROSTER
