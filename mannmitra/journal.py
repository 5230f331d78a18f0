from typing import Optional

from mannmitra.forms import parse_tags
from mannmitra.models import JournalEntry, Mood

# Cards show this many tags, then a "+N" badge.
VISIBLE_TAGS = 3


def filter_entries(entries: list[JournalEntry], term: str) -> list[JournalEntry]:
    """Case-insensitive match on title, content or any tag. Blank term keeps everything."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(entries)
    return [
        e for e in entries
        if needle in e.title.lower()
        or needle in e.content.lower()
        or any(needle in tag.lower() for tag in e.tags)
    ]


def split_tags(tags: list[str]) -> tuple[list[str], int]:
    """Return the tags to show and how many are hidden."""
    return tags[:VISIBLE_TAGS], max(0, len(tags) - VISIBLE_TAGS)


def build_entry_payload(user_id: str, title: str, content: str, mood: Optional[str], tags: str) -> dict:
    return {
        "user_id": user_id,
        "title": title.strip(),
        "content": content.strip(),
        "mood": Mood(mood).value if mood else None,
        "tags": parse_tags(tags),
    }


def tags_to_text(tags: list[str]) -> str:
    return ", ".join(tags)
