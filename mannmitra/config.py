import os

import pytz
import streamlit as st
from dotenv import load_dotenv

# --- Environment and secrets ---
# Priority: 1) .env (os.environ), 2) Streamlit Cloud secrets (st.secrets).
load_dotenv()


def _get_secret(name: str, default: str = "") -> str:
    """Read secret from env first, then from st.secrets (Streamlit Cloud). Safe if st.secrets is missing."""
    v = (os.environ.get(name) or "").strip()
    if not v:
        try:
            if hasattr(st, "secrets") and st.secrets:
                v = str(st.secrets.get(name) or "").strip()
        except Exception:
            # No secrets.toml locally; env is the only source.
            v = ""
    return v or default


def _get_float(name: str, default: float) -> float:
    raw = _get_secret(name)
    if not raw:
        return default
    try:
        return max(0.0, float(raw))
    except ValueError:
        return default


def _get_zone(name: str, default: str):
    try:
        return pytz.timezone(_get_secret(name, default))
    except pytz.UnknownTimeZoneError:
        return pytz.timezone(default)


SUPABASE_URL = _get_secret("SUPABASE_URL")
SUPABASE_ANON_KEY = _get_secret("SUPABASE_ANON_KEY")

# Simulated "typing" pause before the companion answers.
TYPING_DELAY_SECONDS = _get_float("MANNMITRA_TYPING_DELAY", 1.5)

LOG_LEVEL = _get_secret("MANNMITRA_LOG_LEVEL", "INFO").upper()

# Supabase stores UTC; check-in days and shown times use this zone.
APP_TIMEZONE = _get_zone("MANNMITRA_TIMEZONE", "Asia/Kolkata")

# India's national mental health helpline, shown on the dashboard and booking page.
KIRAN_HELPLINE = "1800-599-0019"
