"""
Rule-based wellness companion.

Replies are chosen by keyword lookup, not by a model: the first matching
category wins, in the order listed in CATEGORY_KEYWORDS.
"""

import itertools
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Category(str, Enum):
    STRESS_EXAM = "stress_exam"
    SLEEP = "sleep"
    ANXIETY = "anxiety"
    LONELINESS = "loneliness"
    DEFAULT = "default"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class CompanionReply:
    category: Category
    text: str
    suggestions: tuple


# Priority order matters: "anxious about exam stress" resolves to STRESS_EXAM.
CATEGORY_KEYWORDS = (
    (Category.STRESS_EXAM, ("stress", "exam")),
    (Category.SLEEP, ("sleep", "insomnia")),
    (Category.ANXIETY, ("anxious", "anxiety")),
    (Category.LONELINESS, ("lonely", "alone")),
)

REPLIES = {
    Category.STRESS_EXAM: CompanionReply(
        Category.STRESS_EXAM,
        "मैं समझ सकता हूँ कि परीक्षा का तनाव कितना कठिन हो सकता है। (I understand how difficult exam stress can be.) "
        "Let's try some breathing exercises together. Take a deep breath in for 4 counts, hold for 4, then exhale for 6. "
        "Remember, you've prepared as best you can. 🌸",
        (
            "Can you guide me through a meditation?",
            "What are some study break activities?",
            "How can I manage my time better?",
        ),
    ),
    Category.SLEEP: CompanionReply(
        Category.SLEEP,
        "Sleep troubles are common, especially during stressful times. नींद का न आना बहुत परेशान करने वाला है। "
        "(Not being able to sleep is very troubling.) Let's create a calming bedtime routine. "
        "Have you tried the 4-7-8 breathing technique? 🌙",
        (
            "Tell me about the 4-7-8 technique",
            "What should I avoid before bedtime?",
            "Can you suggest some relaxing activities?",
        ),
    ),
    Category.ANXIETY: CompanionReply(
        Category.ANXIETY,
        "आपकी चिंता स्वाभाविक है। (Your anxiety is natural.) Anxiety about the future is something many students experience. "
        "Let's ground ourselves in the present moment. Can you name 5 things you can see around you right now? "
        "This helps bring us back to the here and now. 💙",
        (
            "Help me with grounding techniques",
            "What causes anxiety?",
            "How can I calm my racing thoughts?",
        ),
    ),
    Category.LONELINESS: CompanionReply(
        Category.LONELINESS,
        "Feeling lonely is deeply human, and you're not alone in feeling this way. आप अकेले नहीं हैं। (You are not alone.) "
        "Even when we feel isolated, there are people who care. "
        "Would you like to explore ways to connect with others or find comfort in solitude? 🤗",
        (
            "How can I make new friends?",
            "What about online communities?",
            "How do I enjoy my own company?",
        ),
    ),
    Category.DEFAULT: CompanionReply(
        Category.DEFAULT,
        "Thank you for sharing that with me. मैं यहाँ आपके साथ हूँ। (I am here with you.) "
        "Your feelings are valid, and it's okay to experience them. "
        "Would you like to talk more about what's on your mind, or shall we try a mindfulness exercise together? 🌺",
        (
            "Let's try a mindfulness exercise",
            "I want to talk more about my feelings",
            "Can you suggest some self-care activities?",
        ),
    ),
}

WELCOME_TEXT = (
    "नमस्ते! I'm your MannMitra AI companion. I'm here to listen and support you. "
    "How are you feeling today?"
)
WELCOME_SUGGESTIONS = (
    "I'm feeling stressed about exams",
    "I'm having trouble sleeping",
    "I feel anxious about the future",
    "I'm feeling lonely",
)

# (i18n label key, phrase sent on click)
QUICK_ACTIONS = (
    ("chat.emergency", "I need urgent help"),
    ("chat.relax", "Can you help me relax?"),
    ("chat.studyTips", "Give me some study tips"),
)


def categorize(text: str) -> Category:
    lowered = (text or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in lowered for k in keywords):
            return category
    return Category.DEFAULT


def select_reply(text: str) -> CompanionReply:
    """Pick the canned reply for text. Total over all strings; blank input is the caller's concern."""
    return REPLIES[categorize(text)]


@dataclass(frozen=True)
class ChatMessage:
    id: int
    role: Role
    content: str
    created_at: datetime
    suggestions: tuple = ()


@dataclass
class PendingReply:
    prompt: str
    due_at: float


@dataclass
class CompanionChat:
    """
    Transcript of one chat view plus at most one pending reply.

    The reply to a user message is held back for typing_delay seconds. poll()
    delivers it once due; cancel() drops it when the view goes away, so a reply
    is never appended to a chat nobody is looking at.
    """

    typing_delay: float = 1.5
    clock: Callable[[], float] = time.monotonic
    messages: list = field(default_factory=list)
    pending: Optional[PendingReply] = None

    def __post_init__(self):
        self._ids = itertools.count(len(self.messages) + 1)
        if not self.messages:
            self._append(Role.ASSISTANT, WELCOME_TEXT, WELCOME_SUGGESTIONS)

    @property
    def is_typing(self) -> bool:
        return self.pending is not None

    def _append(self, role: Role, content: str, suggestions: tuple = ()) -> ChatMessage:
        message = ChatMessage(
            id=next(self._ids),
            role=role,
            content=content,
            created_at=datetime.now(timezone.utc),
            suggestions=tuple(suggestions),
        )
        self.messages.append(message)
        return message

    def send(self, text: str) -> Optional[ChatMessage]:
        """Append a user message and schedule the reply. Blank input, or input while typing, is ignored."""
        content = (text or "").strip()
        if not content or self.is_typing:
            return None
        message = self._append(Role.USER, content)
        self.pending = PendingReply(prompt=content, due_at=self.clock() + self.typing_delay)
        return message

    def seconds_until_reply(self) -> float:
        if self.pending is None:
            return 0.0
        return max(0.0, self.pending.due_at - self.clock())

    def poll(self) -> Optional[ChatMessage]:
        if self.pending is None or self.clock() < self.pending.due_at:
            return None
        reply = select_reply(self.pending.prompt)
        self.pending = None
        logger.debug("Companion reply category=%s", reply.category.value)
        return self._append(Role.ASSISTANT, reply.text, reply.suggestions)

    def cancel(self) -> None:
        if self.pending is not None:
            logger.debug("Dropping pending companion reply")
        self.pending = None
