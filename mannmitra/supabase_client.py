"""
Supabase access for auth and persistence.

Tables: profiles, mood_entries, journal_entries, counselor_bookings. Every row
is owned by user_id; reads filter on it and writes include it so row-level
security policies apply.
"""

import logging
from datetime import datetime
from typing import Optional

import streamlit as st
from supabase import Client, create_client

from mannmitra import config
from mannmitra.models import (
    AuthSession,
    BackendError,
    CounselorBooking,
    JournalEntry,
    MoodCheckIn,
    MoodEntry,
    Profile,
    parse_rows,
)

logger = logging.getLogger(__name__)

_CLIENT_KEY = "_supabase_client"


def is_supabase_configured() -> bool:
    return bool(config.SUPABASE_URL and config.SUPABASE_ANON_KEY)


def get_client() -> Client:
    """One client per browser session, so auth state is never shared between users."""
    client = st.session_state.get(_CLIENT_KEY)
    if client is None:
        if not is_supabase_configured():
            raise BackendError("Supabase is not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY.")
        client = create_client(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)
        st.session_state[_CLIENT_KEY] = client
    return client


def _error_message(e: Exception) -> str:
    return getattr(e, "message", None) or str(e) or e.__class__.__name__


def _execute(action: str, query):
    try:
        return query.execute()
    except BackendError:
        raise
    except Exception as e:
        logger.warning("Supabase %s failed: %s", action, e)
        raise BackendError(_error_message(e)) from e


def _session_from_response(res) -> Optional[AuthSession]:
    session = getattr(res, "session", None)
    user = getattr(res, "user", None) or getattr(session, "user", None)
    if session is None or user is None:
        return None
    return AuthSession(
        user_id=str(user.id),
        email=getattr(user, "email", None),
        access_token=session.access_token or "",
        refresh_token=session.refresh_token or "",
    )


# ---------- Auth ----------
def auth_sign_in(email: str, password: str):
    """Returns (AuthSession, None) on success, (None, error message) otherwise."""
    try:
        res = get_client().auth.sign_in_with_password({"email": email, "password": password})
    except Exception as e:
        logger.info("Sign-in failed for %s: %s", email, e)
        return None, _error_message(e)
    session = _session_from_response(res)
    if session is None:
        return None, "Sign-in failed. Please check your email and password."
    logger.info("User %s signed in", session.user_id)
    return session, None


def auth_sign_up(email: str, password: str, full_name: str):
    """Create the account and its profile row. Returns (AuthSession | None, error message | None).

    When the project requires email confirmation Supabase returns no session;
    that is reported as a message, not a failure.
    """
    try:
        res = get_client().auth.sign_up(
            {"email": email, "password": password, "options": {"data": {"full_name": full_name}}}
        )
    except Exception as e:
        logger.info("Sign-up failed for %s: %s", email, e)
        return None, _error_message(e)
    session = _session_from_response(res)
    if session is None:
        return None, "Check your inbox to confirm your email, then log in."
    try:
        profile_upsert(session.user_id, full_name)
    except BackendError as e:
        # The account exists; a missing profile only loses the display name.
        logger.warning("Profile creation failed for %s: %s", session.user_id, e)
    return session, None


def auth_sign_out() -> None:
    try:
        get_client().auth.sign_out()
    except Exception as e:
        logger.warning("Sign-out failed: %s", e)
        raise BackendError(_error_message(e)) from e
    finally:
        st.session_state.pop(_CLIENT_KEY, None)


# ---------- Profiles ----------
def profile_get(user_id: str) -> Optional[Profile]:
    res = _execute(
        "profile_get",
        get_client().table("profiles").select("*").eq("user_id", user_id).limit(1),
    )
    rows = parse_rows(Profile, res.data)
    return rows[0] if rows else None


def profile_upsert(user_id: str, full_name: str) -> None:
    _execute(
        "profile_upsert",
        get_client().table("profiles").upsert({"user_id": user_id, "full_name": full_name}, on_conflict="user_id"),
    )


# ---------- Mood entries ----------
def mood_entries_list(user_id: str, limit: int = 60) -> list[MoodEntry]:
    res = _execute(
        "mood_entries_list",
        get_client()
        .table("mood_entries")
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .limit(limit),
    )
    return parse_rows(MoodEntry, res.data)


def mood_checkin_times(user_id: str, since: datetime) -> list[datetime]:
    """created_at of every check-in at or after `since`, newest first. Not row-limited."""
    res = _execute(
        "mood_checkin_times",
        get_client()
        .table("mood_entries")
        .select("created_at")
        .eq("user_id", user_id)
        .gte("created_at", since.isoformat())
        .order("created_at", desc=True),
    )
    return [row.created_at for row in parse_rows(MoodCheckIn, res.data)]


def mood_entry_insert(payload: dict) -> None:
    _execute("mood_entry_insert", get_client().table("mood_entries").insert(payload))


# ---------- Journal entries ----------
def journal_entries_list(user_id: str) -> list[JournalEntry]:
    res = _execute(
        "journal_entries_list",
        get_client()
        .table("journal_entries")
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True),
    )
    return parse_rows(JournalEntry, res.data)


def journal_entry_insert(payload: dict) -> None:
    _execute("journal_entry_insert", get_client().table("journal_entries").insert(payload))


def journal_entry_update(entry_id: str, payload: dict) -> None:
    _execute(
        "journal_entry_update",
        get_client().table("journal_entries").update(payload).eq("id", entry_id),
    )


def journal_entry_delete(entry_id: str) -> None:
    _execute(
        "journal_entry_delete",
        get_client().table("journal_entries").delete().eq("id", entry_id),
    )


# ---------- Counselor bookings ----------
def bookings_list(user_id: str) -> list[CounselorBooking]:
    res = _execute(
        "bookings_list",
        get_client()
        .table("counselor_bookings")
        .select("*")
        .eq("user_id", user_id)
        .order("appointment_date", desc=False),
    )
    return parse_rows(CounselorBooking, res.data)


def booking_insert(payload: dict) -> None:
    _execute("booking_insert", get_client().table("counselor_bookings").insert(payload))
