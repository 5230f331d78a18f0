"""Unit tests for form validation and payload builders."""
from datetime import date, datetime, time, timedelta, timezone

import pytest
import pytz

from mannmitra import booking, forms, journal, mood
from mannmitra import supabase_client as db
from mannmitra.models import JournalEntry, Mood

TODAY = date(2026, 3, 10)
IST = pytz.timezone("Asia/Kolkata")


class TestValidation:
    def test_missing_fields_reports_blank_names(self):
        assert forms.missing_fields(a="x", b="  ", c=None, d=0) == ["b", "c"]

    @pytest.mark.parametrize("email,password,name,signing_up,ok", [
        ("a@b.co", "pw", None, False, True),
        ("", "pw", None, False, False),
        ("a@b.co", " ", None, False, False),
        ("not-an-email", "pw", None, False, False),
        ("a@b.co", "pw", "", True, False),
        ("a@b.co", "pw", "Asha", True, True),
    ])
    def test_validate_auth(self, email, password, name, signing_up, ok):
        assert (forms.validate_auth(email, password, name, signing_up=signing_up) is None) == ok

    def test_mood_must_be_selected(self):
        assert forms.validate_mood_checkin(None) == "Please select how you are feeling."
        assert forms.validate_mood_checkin("good") is None

    def test_journal_requires_title_and_content(self):
        assert forms.validate_journal_entry("Day one", "   ") == "Title and content are required"
        assert forms.validate_journal_entry("", "text") == "Title and content are required"
        assert forms.validate_journal_entry("Day one", "text") is None

    def test_booking_requires_all_selections(self):
        message = forms.validate_booking(TODAY, None, "1", ("09:00",), today=TODAY)
        assert message == "Please select date, time, and counselor"
        assert forms.validate_booking(None, "09:00", "1", ("09:00",), today=TODAY) == message

    def test_booking_rejects_past_dates_and_unknown_slots(self):
        slots = booking.available_times("1")
        assert "past" in forms.validate_booking(date(2026, 3, 9), "09:00", "1", slots, today=TODAY)
        assert "not available" in forms.validate_booking(TODAY, "12:00", "1", slots, today=TODAY)
        assert forms.validate_booking(TODAY, "09:00", "1", slots, today=TODAY) is None

    def test_parse_tags(self):
        assert forms.parse_tags(" gratitude, ,goals ,") == ["gratitude", "goals"]
        assert forms.parse_tags("") == []
        assert forms.parse_tags(None) == []


class TestBooking:
    def test_available_times(self):
        assert booking.available_times("2")[0] == "10:00"
        assert len(booking.available_times("3")) == 6
        assert booking.available_times("99") == ()
        assert booking.available_times(None) == ()

    def test_payload_and_confirmation(self):
        counselor = booking.get_counselor("1")
        payload = booking.build_booking_payload("u1", counselor, date(2026, 3, 12), "14:00", "  exams  ")

        assert payload == {
            "user_id": "u1",
            "counselor_name": "Dr. Priya Sharma",
            "appointment_date": "2026-03-12",
            "appointment_time": "14:00",
            "notes": "exams",
            "status": "scheduled",
        }
        assert booking.confirmation_message(counselor, date(2026, 3, 12), "14:00") == (
            "Your appointment with Dr. Priya Sharma is scheduled for Thu Mar 12 2026 at 14:00"
        )


def _entry(**overrides):
    data = {
        "id": "1",
        "user_id": "u1",
        "title": "Exam week",
        "content": "Felt calmer after a walk",
        "tags": ["Gratitude", "study"],
        "created_at": datetime(2026, 3, 1, 9, 0),
    }
    data.update(overrides)
    return JournalEntry(**data)


class TestJournal:
    def test_filter_matches_title_content_and_tags(self):
        entries = [
            _entry(id="1"),
            _entry(id="2", title="Family", content="Dinner at home", tags=["family"]),
            _entry(id="3", title="Notes", content="nothing", tags=["GRATITUDE-list"]),
        ]

        assert [e.id for e in journal.filter_entries(entries, "EXAM")] == ["1"]
        assert [e.id for e in journal.filter_entries(entries, "dinner")] == ["2"]
        assert [e.id for e in journal.filter_entries(entries, "gratitude")] == ["1", "3"]
        assert len(journal.filter_entries(entries, "  ")) == 3
        assert journal.filter_entries(entries, "zebra") == []

    def test_split_tags_shows_three(self):
        assert journal.split_tags(["a", "b"]) == (["a", "b"], 0)
        assert journal.split_tags(["a", "b", "c", "d", "e"]) == (["a", "b", "c"], 2)

    def test_entry_payload(self):
        payload = journal.build_entry_payload("u1", " Title ", " Body ", "", "calm, sleep")
        assert payload == {"user_id": "u1", "title": "Title", "content": "Body", "mood": None, "tags": ["calm", "sleep"]}
        assert journal.build_entry_payload("u1", "t", "c", "low", "")["mood"] == "low"


class TestMood:
    def test_five_options_with_three_tips(self):
        assert [o.mood for o in mood.MOOD_OPTIONS] == list(Mood)
        assert all(len(o.tips) == 3 for o in mood.MOOD_OPTIONS)

    def test_option_lookup(self):
        assert mood.mood_option("difficult").label == "Struggling"
        assert mood.mood_option(Mood.GREAT).emoji == "😊"
        assert mood.mood_option(None) is None
        assert mood.mood_emoji("unknown") == ""

    def test_payload(self):
        assert mood.build_mood_payload("u1", "okay", "  ") == {"user_id": "u1", "mood": "okay", "notes": None}
        with pytest.raises(ValueError):
            mood.build_mood_payload("u1", "ecstatic", None)

    def test_streak_counts_consecutive_days(self):
        def at(day):
            return datetime(2026, 3, day, 8, 0, tzinfo=timezone.utc)

        assert mood.mood_streak([], TODAY, IST) == 0
        assert mood.mood_streak([at(10), at(10), at(9), at(8), at(6)], TODAY, IST) == 3
        # A streak is still alive if today's check-in has not happened yet.
        assert mood.mood_streak([at(9), at(8)], TODAY, IST) == 2
        assert mood.mood_streak([at(7)], TODAY, IST) == 0

    def test_streak_uses_the_local_day(self):
        # 10:00 IST on the 29th and 01:30 IST on the 30th; the second is still the 29th in UTC.
        checkins = [
            datetime(2026, 3, 29, 4, 30, tzinfo=timezone.utc),
            datetime(2026, 3, 29, 20, 0, tzinfo=timezone.utc),
        ]
        assert mood.mood_streak(checkins, date(2026, 3, 30), IST) == 2
        assert mood.mood_streak(checkins, date(2026, 3, 30), timezone.utc) == 1

    def test_current_streak_is_not_capped_by_row_count(self, fake_backend):
        today = date(2026, 3, 30)
        start = IST.localize(datetime(2026, 3, 1, 3, 0))
        fake_backend.tables["mood_entries"] = [
            {"user_id": "u1", "mood": "good", "created_at": (start + timedelta(days=d, hours=h)).isoformat()}
            for d in range(30)
            for h in (0, 6, 12)
        ]

        streak = mood.current_streak(lambda since: db.mood_checkin_times("u1", since), today, IST)

        assert streak == 30

    def test_current_streak_widens_the_window(self):
        today = date(2026, 3, 30)
        checkins = [IST.localize(datetime.combine(today - timedelta(days=d), time(12))) for d in range(100)]
        windows = []

        def fetch(since):
            windows.append(since)
            return [ts for ts in checkins if ts >= since]

        assert mood.current_streak(fetch, today, IST, window=30) == 100
        assert len(windows) == 3
