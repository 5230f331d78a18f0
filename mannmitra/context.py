from dataclasses import dataclass
from typing import Optional

from mannmitra import i18n
from mannmitra.i18n import Language
from mannmitra.models import AuthSession


@dataclass
class AppContext:
    """Per-browser-session state handed to every page: active language and signed-in user."""

    language: Language = Language.EN
    session: Optional[AuthSession] = None

    @property
    def user_id(self) -> Optional[str]:
        return self.session.user_id if self.session else None

    @property
    def signed_in(self) -> bool:
        return self.session is not None

    def t(self, key: str) -> str:
        return i18n.resolve(self.language, key)

    def toggle_language(self) -> None:
        self.language = i18n.toggle(self.language)

    def sign_out(self) -> None:
        self.session = None
