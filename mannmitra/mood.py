from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Optional

from mannmitra import utils
from mannmitra.models import Mood

# Days of check-ins fetched per streak query; widened while the streak fills it.
STREAK_WINDOW_DAYS = 60


@dataclass(frozen=True)
class MoodOption:
    mood: Mood
    label: str
    emoji: str
    description: str
    tips: tuple


MOOD_OPTIONS = (
    MoodOption(
        Mood.GREAT, "Great", "😊", "Feeling amazing and energetic!",
        ("Keep up the great energy!", "Share your joy with others", "Document what made today special"),
    ),
    MoodOption(
        Mood.GOOD, "Good", "🙂", "Pretty good overall",
        ("Maintain this positive momentum", "Try a gratitude practice", "Connect with a friend"),
    ),
    MoodOption(
        Mood.OKAY, "Okay", "😐", "Neutral, neither good nor bad",
        ("Take a mindful walk", "Listen to calming music", "Practice deep breathing"),
    ),
    MoodOption(
        Mood.LOW, "Low", "😔", "Not feeling my best",
        ("Be gentle with yourself", "Try a 5-minute meditation", "Reach out to someone you trust"),
    ),
    MoodOption(
        Mood.DIFFICULT, "Struggling", "😢", "Having a tough time",
        ("You're not alone in this", "Consider talking to a counselor", "Focus on small, manageable steps"),
    ),
)

MOOD_BY_VALUE = {o.mood.value: o for o in MOOD_OPTIONS}


def mood_option(value) -> Optional[MoodOption]:
    if isinstance(value, Mood):
        value = value.value
    return MOOD_BY_VALUE.get(value)


def mood_emoji(value) -> str:
    option = mood_option(value)
    return option.emoji if option else ""


def build_mood_payload(user_id: str, mood, notes: Optional[str]) -> dict:
    return {
        "user_id": user_id,
        "mood": Mood(mood).value,
        "notes": (notes or "").strip() or None,
    }


def mood_streak(checkins: Iterable[datetime], today: date, tz=None) -> int:
    """Consecutive local days with at least one check-in, ending today or yesterday.

    `checkins` are created_at timestamps; `today` must be a date in the same zone.
    """
    days = {utils.to_local(ts, tz).date() for ts in checkins}
    day = today if today in days else today - timedelta(days=1)
    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def current_streak(
    fetch_checkins: Callable[[datetime], list[datetime]],
    today: date,
    tz=None,
    window: int = STREAK_WINDOW_DAYS,
) -> int:
    """Streak over check-ins from `fetch_checkins(since)`, with no cap on its length."""
    while True:
        since = utils.start_of_day_utc(today - timedelta(days=window), tz)
        streak = mood_streak(fetch_checkins(since), today, tz)
        # A shorter streak ended on a gap day inside the window.
        if streak < window:
            return streak
        window *= 2
