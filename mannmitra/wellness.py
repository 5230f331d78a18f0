"""Static wellness content: hub catalog, affirmations, quotes and dashboard features."""

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class ContentItem:
    id: str
    title: str
    description: str
    duration: str
    level: str
    rating: float
    thumbnail: str
    kind: str  # "audio" or "video"


WELLNESS_CONTENT = {
    "meditation": (
        ContentItem("1", "Morning Mindfulness (सुबह का मन:शांति)", "Start your day with 10 minutes of peaceful meditation", "10 min", "Beginner", 4.8, "🧘‍♀️", "audio"),
        ContentItem("2", "Stress Relief Breathing (तनाव मुक्ति)", "Quick breathing exercises for instant calm", "5 min", "Beginner", 4.9, "🌬️", "video"),
        ContentItem("3", "Body Scan Meditation (शरीर स्कैन)", "Release tension with guided body awareness", "15 min", "Intermediate", 4.7, "✨", "audio"),
    ),
    "yoga": (
        ContentItem("4", "Gentle Morning Yoga (सुबह का योग)", "Easy yoga poses to energize your day", "20 min", "Beginner", 4.6, "🕉️", "video"),
        ContentItem("5", "Stress-Relief Asanas (तनाव निवारक आसन)", "Yoga poses specifically for stress relief", "15 min", "Beginner", 4.8, "🧘‍♂️", "video"),
    ),
    "sleep": (
        ContentItem("6", "Sleep Stories (नींद की कहानियां)", "Calming bedtime stories for better sleep", "25 min", "Beginner", 4.9, "🌙", "audio"),
        ContentItem("7", "Deep Sleep Meditation (गहरी नींद ध्यान)", "Fall asleep faster with this guided meditation", "30 min", "Beginner", 4.7, "😴", "audio"),
    ),
    "motivation": (
        ContentItem("8", "Daily Inspiration (दैनिक प्रेरणा)", "Motivational shorts for positive mindset", "2 min", "All", 4.8, "💪", "video"),
        ContentItem("9", "Student Success Stories (छात्र सफलता)", "Real stories from students who overcame challenges", "8 min", "All", 4.9, "🎓", "video"),
    ),
}

CATEGORIES = tuple(WELLNESS_CONTENT)


def filter_content(category: str, term: str) -> list[ContentItem]:
    """Items in category whose title or description contains term (case-insensitive). Unknown category raises KeyError."""
    items = WELLNESS_CONTENT[category]
    needle = (term or "").strip().lower()
    return [i for i in items if needle in i.title.lower() or needle in i.description.lower()]


AFFIRMATIONS = (
    "आपकी मानसिक शांति आपकी सबसे बड़ी शक्ति है। (Your mental peace is your greatest strength.)",
    "हर छोटा कदम आपको बेहतर बनाता है। (Every small step makes you better.)",
    "You are braver than you believe, stronger than you seem, and more loved than you know.",
    "कल्याणम् - Your wellness journey matters, and you matter.",
    "प्रेम और धैर्य से सब कुछ संभव है। (With love and patience, everything is possible.)",
)

# (text, translation, source)
QUOTES = (
    ("मन का शांतिपूर्ण रहना ही जीवन की सबसे बड़ी संपत्ति है।", "A peaceful mind is life's greatest treasure.", "Bhagavad Gita"),
    ("स्वयं को जानना ही सबसे बड़ा ज्ञान है।", "Knowing yourself is the greatest wisdom.", "Ancient Wisdom"),
    ("योग: कर्मसु कौशलम्", "Yoga is skill in action.", "Bhagavad Gita 2.50"),
)


def pick_affirmation(rng: random.Random = None) -> str:
    return (rng or random).choice(AFFIRMATIONS)


def pick_quote(rng: random.Random = None) -> tuple:
    return (rng or random).choice(QUOTES)


@dataclass(frozen=True)
class Feature:
    page: str  # page key in the app, or "" when the screen does not exist yet
    icon: str
    title_key: str
    desc_key: str


FEATURES = (
    Feature("chat", "💬", "features.aiCompanion", "features.aiCompanionDesc"),
    Feature("mood", "💗", "features.moodTracker", "features.moodTrackerDesc"),
    Feature("wellness", "✨", "features.wellnessHub", "features.wellnessHubDesc"),
    Feature("counselor", "📅", "features.bookCounselor", "features.bookCounselorDesc"),
    Feature("", "👥", "features.peerSupport", "features.peerSupportDesc"),
    Feature("journal", "📓", "features.dailyJournal", "features.dailyJournalDesc"),
    Feature("", "📈", "features.myProgress", "features.myProgressDesc"),
    Feature("", "🎮", "features.mindfulGames", "features.mindfulGamesDesc"),
)
