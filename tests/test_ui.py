"""Tests for the page callbacks of the Streamlit app, with session state faked."""
import pytest

from mannmitra import ui
from mannmitra.companion import CompanionChat, Role
from mannmitra.context import AppContext
from mannmitra.models import AuthSession


class FakeSessionState(dict):
    """Dict with attribute access, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def notices(monkeypatch):
    shown = []
    monkeypatch.setattr(ui.st, "toast", lambda message, icon=None: shown.append(("toast", message)))
    monkeypatch.setattr(ui.st, "warning", lambda message: shown.append(("warning", message)))
    return shown


@pytest.fixture
def state(monkeypatch):
    session = AuthSession(user_id="user-1", email="asha@example.com", access_token="access-1", refresh_token="refresh-1")
    fake = FakeSessionState(
        ctx=AppContext(session=session),
        chat=CompanionChat(typing_delay=60),
        active_page="chat",
        profile=None,
        profile_loaded=False,
        mood_submitted=False,
        flash=[],
    )
    monkeypatch.setattr(ui.st, "session_state", fake)
    return fake


class TestNavigation:
    def test_leaving_chat_drops_the_pending_reply(self, state):
        chat = state.chat
        chat.send("I'm stressed about exams")

        ui._navigate("dashboard")

        assert state.active_page == "dashboard"
        assert not chat.is_typing
        assert chat.poll() is None
        assert chat.messages[-1].role is Role.USER

    def test_staying_on_chat_keeps_the_reply(self, state):
        state.chat.send("I can't sleep")
        ui._navigate("chat")
        assert state.chat.is_typing

    def test_opening_mood_starts_a_fresh_check_in(self, state):
        state.active_page = "dashboard"
        state.mood_submitted = True
        ui._navigate("mood")
        assert state.mood_submitted is False


class TestSignOut:
    def test_cancels_reply_and_resets_chat(self, state, fake_backend, notices):
        old_chat = state.chat
        old_chat.send("I feel lonely")
        state.profile_loaded = True

        ui._sign_out(state.ctx)

        assert not old_chat.is_typing
        assert state.chat is not old_chat
        assert len(state.chat.messages) == 1
        assert not state.ctx.signed_in
        assert state.active_page == "auth"
        assert state.profile is None
        assert state.profile_loaded is False
        assert notices == []

    def test_backend_failure_still_signs_out(self, state, fake_backend, notices, monkeypatch):
        def broken():
            raise RuntimeError("network unreachable")

        monkeypatch.setattr(fake_backend.auth, "sign_out", broken)

        ui._sign_out(state.ctx)

        assert not state.ctx.signed_in
        assert state.active_page == "auth"
        assert [kind for kind, _ in notices] == ["toast"]


class TestChatSubmit:
    def test_blank_message_warns_and_is_not_sent(self, state, notices):
        assert ui._submit_chat(state.ctx, "   ") is False
        assert notices == [("warning", state.ctx.t("chat.empty"))]
        assert len(state.chat.messages) == 1
        assert not state.chat.is_typing

    def test_message_is_sent(self, state, notices):
        assert ui._submit_chat(state.ctx, "Give me some study tips") is True
        assert notices == []
        assert state.chat.messages[-1].content == "Give me some study tips"
        assert state.chat.is_typing


class TestProfile:
    def test_loads_once(self, state, fake_backend):
        fake_backend.tables["profiles"] = [{"user_id": "user-1", "full_name": "Asha Rao"}]

        ui._load_profile(state.ctx)
        ui._load_profile(state.ctx)

        assert state.profile.full_name == "Asha Rao"
        assert len(fake_backend.queries) == 1

    def test_failure_is_reported_once(self, state, fake_backend, notices):
        fake_backend.failing_tables.add("profiles")

        ui._load_profile(state.ctx)
        ui._load_profile(state.ctx)

        assert state.profile is None
        assert len(notices) == 1
        assert len(fake_backend.queries) == 1
