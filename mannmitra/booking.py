from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Counselor:
    id: str
    name: str
    specialization: str
    experience: str
    rating: float
    languages: tuple
    location: str
    availability: tuple
    avatar: str


COUNSELORS = (
    Counselor(
        id="1",
        name="Dr. Priya Sharma",
        specialization="Student Counseling & Anxiety",
        experience="8 years",
        rating=4.9,
        languages=("English", "Hindi"),
        location="Delhi",
        availability=("09:00", "10:00", "11:00", "14:00", "15:00", "16:00"),
        avatar="👩‍⚕️",
    ),
    Counselor(
        id="2",
        name="Dr. Rajesh Kumar",
        specialization="Depression & Stress Management",
        experience="12 years",
        rating=4.8,
        languages=("English", "Hindi", "Bengali"),
        location="Mumbai",
        availability=("10:00", "11:00", "12:00", "15:00", "16:00", "17:00"),
        avatar="👨‍⚕️",
    ),
    Counselor(
        id="3",
        name="Dr. Anjali Mehta",
        specialization="Academic Pressure & Self-Esteem",
        experience="6 years",
        rating=4.9,
        languages=("English", "Hindi", "Gujarati"),
        location="Bangalore",
        availability=("09:00", "10:00", "13:00", "14:00", "15:00", "18:00"),
        avatar="👩‍💼",
    ),
)


def get_counselor(counselor_id: Optional[str]) -> Optional[Counselor]:
    return next((c for c in COUNSELORS if c.id == counselor_id), None)


def available_times(counselor_id: Optional[str]) -> tuple:
    counselor = get_counselor(counselor_id)
    return counselor.availability if counselor else ()


def build_booking_payload(user_id: str, counselor: Counselor, appointment_date: date, appointment_time: str, notes: str) -> dict:
    return {
        "user_id": user_id,
        "counselor_name": counselor.name,
        "appointment_date": appointment_date.isoformat(),
        "appointment_time": appointment_time,
        "notes": (notes or "").strip(),
        "status": "scheduled",
    }


def confirmation_message(counselor: Counselor, appointment_date: date, appointment_time: str) -> str:
    return f"Your appointment with {counselor.name} is scheduled for {appointment_date:%a %b %d %Y} at {appointment_time}"
