"""
Client-side checks run before any backend request.

Validators return a message naming the unmet condition, or None when the form
may be submitted.
"""

from datetime import date
from typing import Optional


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(**fields) -> list[str]:
    return [name for name, value in fields.items() if is_blank(value)]


def validate_auth(email: str, password: str, full_name: Optional[str] = None, signing_up: bool = False) -> Optional[str]:
    if signing_up and is_blank(full_name):
        return "Please enter your full name, email and password."
    if missing_fields(email=email, password=password):
        return "Please enter your email and password."
    if "@" not in email:
        return "Please enter a valid email address."
    return None


def validate_mood_checkin(mood: Optional[str]) -> Optional[str]:
    if is_blank(mood):
        return "Please select how you are feeling."
    return None


def validate_journal_entry(title: str, content: str) -> Optional[str]:
    if missing_fields(title=title, content=content):
        return "Title and content are required"
    return None


def validate_booking(
    appointment_date: Optional[date],
    appointment_time: Optional[str],
    counselor_id: Optional[str],
    available_times: tuple = (),
    today: Optional[date] = None,
) -> Optional[str]:
    if missing_fields(date=appointment_date, time=appointment_time, counselor=counselor_id):
        return "Please select date, time, and counselor"
    if appointment_date < (today or date.today()):
        return "Please pick a date that is not in the past"
    if appointment_time not in available_times:
        return "That time slot is not available for this counselor"
    return None


def parse_tags(raw: Optional[str]) -> list[str]:
    """'gratitude, , goals' -> ['gratitude', 'goals']"""
    return [t.strip() for t in (raw or "").split(",") if t.strip()]
