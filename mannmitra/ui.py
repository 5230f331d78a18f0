import os
import time

import streamlit as st

# Adjust import paths when launched as `streamlit run mannmitra/ui.py`
try:
    from mannmitra import config
except ImportError:
    import sys
    sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
    from mannmitra import config

from mannmitra import booking, forms, journal, mood, utils, wellness
from mannmitra.companion import QUICK_ACTIONS, CompanionChat, Role
from mannmitra.context import AppContext
from mannmitra.logger import setup_logging
from mannmitra.models import BackendError
from mannmitra.supabase_client import (
    auth_sign_in,
    auth_sign_out,
    auth_sign_up,
    booking_insert,
    bookings_list,
    is_supabase_configured,
    journal_entries_list,
    journal_entry_delete,
    journal_entry_insert,
    journal_entry_update,
    mood_checkin_times,
    mood_entries_list,
    mood_entry_insert,
    profile_get,
)

logger = setup_logging()

# --- Session State Initialization ---
if "ctx" not in st.session_state:
    st.session_state.ctx = AppContext()
if "active_page" not in st.session_state:
    # welcome -> auth -> dashboard; pages below need a signed-in user
    st.session_state.active_page = "welcome"
if "chat" not in st.session_state:
    st.session_state.chat = CompanionChat(typing_delay=config.TYPING_DELAY_SECONDS)
if "profile" not in st.session_state:
    st.session_state.profile = None
if "profile_loaded" not in st.session_state:
    st.session_state.profile_loaded = False  # one fetch per sign-in, even if it failed
if "flash" not in st.session_state:
    st.session_state.flash = []  # (icon, message) shown as toasts on the next run
if "auth_mode" not in st.session_state:
    st.session_state.auth_mode = "login"
if "mood_selected" not in st.session_state:
    st.session_state.mood_selected = None
if "mood_submitted" not in st.session_state:
    st.session_state.mood_submitted = False
if "journal_show_form" not in st.session_state:
    st.session_state.journal_show_form = False
if "journal_editing" not in st.session_state:
    st.session_state.journal_editing = None  # JournalEntry being edited, or None for a new one
if "journal_confirm_delete" not in st.session_state:
    st.session_state.journal_confirm_delete = None
if "booking_counselor" not in st.session_state:
    st.session_state.booking_counselor = None
if "booking_time" not in st.session_state:
    st.session_state.booking_time = None
if "affirmation" not in st.session_state:
    st.session_state.affirmation = wellness.pick_affirmation()
if "quote" not in st.session_state:
    st.session_state.quote = wellness.pick_quote()

PROTECTED_PAGES = ("dashboard", "mood", "chat", "wellness", "counselor", "journal")


# --- Helper Functions ---
def _html(text) -> str:
    return (
        str(text or "")
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("\n", "<br>")
    )


def _flash(message: str, icon: str = "✅") -> None:
    st.session_state.flash.append((icon, message))


def _notify_error(title: str, err: Exception) -> None:
    """Transient notification for a failed backend call; the page stays usable."""
    logger.warning("%s: %s", title, err)
    st.toast(f"{title}: {err}", icon="❌")


def _navigate(page: str) -> None:
    # Leaving the chat drops a reply that is still "typing".
    if st.session_state.active_page == "chat" and page != "chat":
        st.session_state.chat.cancel()
    if page == "mood":
        st.session_state.mood_submitted = False
    st.session_state.active_page = page


def _toggle_language() -> None:
    st.session_state.ctx.toggle_language()


def _sign_out(ctx: AppContext) -> None:
    st.session_state.chat.cancel()
    try:
        auth_sign_out()
    except BackendError as e:
        _notify_error("Logout failed", e)
    ctx.sign_out()
    st.session_state.profile = None
    st.session_state.profile_loaded = False
    st.session_state.chat = CompanionChat(typing_delay=config.TYPING_DELAY_SECONDS)
    st.session_state.active_page = "auth"


def _back_button(ctx: AppContext, key: str) -> None:
    st.button("← " + ctx.t("common.back"), key=key, on_click=_navigate, args=("dashboard",), type="tertiary")


def _page_header(ctx: AppContext, title_key: str, desc_key: str, back_key: str) -> None:
    _back_button(ctx, back_key)
    st.subheader(ctx.t(title_key))
    st.caption(ctx.t(desc_key))


# --- Screens ---
def render_welcome(ctx: AppContext) -> None:
    st.markdown("<h1 class='mm-hero'>🌸 MannMitra</h1>", unsafe_allow_html=True)
    st.markdown("<p class='mm-hero-sub'>" + _html(ctx.t("auth.subtitle")) + "</p>", unsafe_allow_html=True)
    st.caption("आपका मानसिक स्वास्थ्य मित्र - " + ctx.t("welcome.tagline"))
    text, translation, source = st.session_state.quote
    st.markdown(f"""
        <div class="mm-card" style="text-align: center;">
            <div class="mm-quote">"{_html(text)}"</div>
            <div style="opacity: 0.8;">{_html(translation)}</div>
            <div class="mm-cite">- {_html(source)}</div>
        </div>
    """, unsafe_allow_html=True)
    cols = st.columns(4)
    for col, (icon, title, desc) in zip(cols, (
        ("🧠", "AI Support", "24/7 companion for your mental wellness journey"),
        ("💗", "Mindful Living", "Daily practices for stress relief and inner peace"),
        ("👥", "Community", "Anonymous peer support with fellow students"),
        ("✨", "Growth Tracking", "Monitor your mood and celebrate small victories"),
    )):
        with col:
            st.markdown(f"<div class='mm-card' style='text-align: center;'><div style='font-size: 1.6rem;'>{icon}</div><b>{title}</b><br><span style='font-size: 0.9rem;'>{desc}</span></div>", unsafe_allow_html=True)
    st.button(ctx.t("welcome.getStarted"), key="welcome_start", type="primary", use_container_width=True, on_click=_navigate, args=("auth",))
    st.caption("Safe • Anonymous • Culturally Sensitive • Available 24/7")


def render_auth(ctx: AppContext) -> None:
    is_login = st.session_state.auth_mode == "login"
    st.markdown("<span id='mm-auth-page'></span>", unsafe_allow_html=True)
    _, lang_col = st.columns([5, 1])
    with lang_col:
        st.button("🌐 " + ctx.t("common.translate"), key="auth_lang", on_click=_toggle_language)
    st.markdown("<p class='mm-auth-title'>💗 " + _html(ctx.t("auth.welcome")) + "</p>", unsafe_allow_html=True)
    st.markdown("<p class='mm-auth-caption'>" + _html(ctx.t("auth.subtitle")) + "</p>", unsafe_allow_html=True)
    with st.form("auth_form"):
        full_name = "" if is_login else st.text_input(ctx.t("auth.fullName"), key="auth_full_name")
        email = st.text_input(ctx.t("auth.email"), key="auth_email", placeholder="you@example.com")
        password = st.text_input(ctx.t("auth.password"), type="password", key="auth_password")
        label = ctx.t("auth.login") if is_login else ctx.t("auth.createAccount")
        if st.form_submit_button(label, use_container_width=True):
            problem = forms.validate_auth(email, password, full_name, signing_up=not is_login)
            if problem:
                st.warning(problem)
            else:
                with st.spinner("Loading..."):
                    if is_login:
                        session, err = auth_sign_in(email.strip(), password)
                    else:
                        session, err = auth_sign_up(email.strip(), password, full_name.strip())
                if session:
                    ctx.session = session
                    if not is_login:
                        _flash(ctx.t("auth.accountCreated"))
                    st.session_state.active_page = "dashboard"
                    st.rerun()
                else:
                    st.error(err or "Authentication failed. Please try again.")
    if is_login:
        switch_label = ctx.t("auth.noAccount") + " " + ctx.t("auth.signup")
    else:
        switch_label = ctx.t("auth.alreadyAccount") + " " + ctx.t("auth.login")
    if st.button(switch_label, key="auth_switch", type="tertiary"):
        st.session_state.auth_mode = "signup" if is_login else "login"
        st.rerun()


def _load_profile(ctx: AppContext) -> None:
    if st.session_state.profile_loaded:
        return
    st.session_state.profile_loaded = True
    try:
        st.session_state.profile = profile_get(ctx.user_id)
    except BackendError as e:
        _notify_error("Could not load your profile", e)


def render_dashboard(ctx: AppContext) -> None:
    _load_profile(ctx)
    profile = st.session_state.profile
    name = (profile.full_name if profile else None) or ctx.t("dashboard.friend")
    try:
        streak = mood.current_streak(lambda since: mood_checkin_times(ctx.user_id, since), utils.local_today())
    except BackendError as e:
        streak = 0
        _notify_error("Could not load your check-ins", e)

    head, actions = st.columns([3, 2])
    with head:
        st.markdown(f"<h2 style='margin-bottom: 0;'>{_html(ctx.t('dashboard.goodMorning'))}, {_html(name)}! 🌅</h2>", unsafe_allow_html=True)
        st.caption(ctx.t("dashboard.namaste"))
    with actions:
        c1, c2, c3 = st.columns(3)
        with c1:
            st.markdown(f"<div class='mm-badge'>{_html(ctx.t('dashboard.streak'))}: {streak} {_html(ctx.t('dashboard.days'))} 🔥</div>", unsafe_allow_html=True)
        with c2:
            st.button("🌐 " + ctx.t("common.translate"), key="dash_lang", on_click=_toggle_language, use_container_width=True)
        with c3:
            if st.button(ctx.t("common.logout"), key="dash_logout", use_container_width=True):
                _sign_out(ctx)
                st.rerun()

    st.markdown(f"""
        <div class="mm-card" style="text-align: center;">
            <div class="mm-quote">{_html(st.session_state.affirmation)}</div>
            <div style="font-size: 0.85rem; opacity: 0.8;">{_html(ctx.t('dashboard.affirmationCaption'))}</div>
        </div>
    """, unsafe_allow_html=True)

    st.markdown("**💗 " + ctx.t("dashboard.quickMood") + "**")
    mood_cols = st.columns(len(mood.MOOD_OPTIONS))
    for col, option in zip(mood_cols, mood.MOOD_OPTIONS):
        with col:
            if st.button(f"{option.emoji}\n\n{option.label}", key=f"quick_mood_{option.mood.value}", use_container_width=True):
                st.session_state.mood_selected = option.mood.value
                st.session_state.mood_submitted = False
                _navigate("mood")
                st.rerun()

    st.markdown("<div style='height: 12px;'></div>", unsafe_allow_html=True)
    feature_cols = st.columns(4)
    for i, feature in enumerate(wellness.FEATURES):
        with feature_cols[i % 4]:
            st.markdown(f"<div class='mm-card' style='text-align: center; min-height: 120px;'><div style='font-size: 1.6rem;'>{feature.icon}</div><b>{_html(ctx.t(feature.title_key))}</b><br><span style='font-size: 0.85rem;'>{_html(ctx.t(feature.desc_key))}</span></div>", unsafe_allow_html=True)
            if feature.page:
                st.button(ctx.t(feature.title_key), key=f"feature_{i}", use_container_width=True, on_click=_navigate, args=(feature.page,))
            else:
                st.button(ctx.t("dashboard.comingSoon"), key=f"feature_{i}", use_container_width=True, disabled=True)

    _render_helpline(ctx)


def _render_helpline(ctx: AppContext) -> None:
    st.markdown(f"""
        <div class="mm-card mm-emergency" style="text-align: center;">
            <b>{_html(ctx.t('dashboard.emergency'))}</b><br>
            <span style="font-size: 0.9rem;">{_html(ctx.t('dashboard.helpline'))}</span><br>
            <a href="tel:{config.KIRAN_HELPLINE}">📞 {_html(ctx.t('dashboard.kiranCall'))}</a>
        </div>
    """, unsafe_allow_html=True)


def render_mood(ctx: AppContext) -> None:
    _back_button(ctx, "mood_back")
    if st.session_state.mood_submitted:
        st.markdown("<div class='mm-card' style='text-align: center;'><h3>📈</h3>" + _html(ctx.t("mood.thanks")) + "<br><span class='mm-badge'>+10 wellness points earned! 🌟</span></div>", unsafe_allow_html=True)
        if st.button(ctx.t("common.back"), key="mood_done"):
            st.session_state.mood_submitted = False
            st.session_state.mood_selected = None
            _navigate("dashboard")
            st.rerun()
        return

    st.subheader(ctx.t("mood.title") + " 💙")
    st.caption("आज आपका मन कैसा है? - Take a moment to check in with yourself")
    st.markdown("**📅 " + ctx.t("mood.checkin") + "**")
    cols = st.columns(len(mood.MOOD_OPTIONS))
    for col, option in zip(cols, mood.MOOD_OPTIONS):
        with col:
            selected = st.session_state.mood_selected == option.mood.value
            if st.button(f"{option.emoji}\n\n**{option.label}**\n\n{option.description}", key=f"mood_{option.mood.value}", use_container_width=True, type="primary" if selected else "secondary"):
                st.session_state.mood_selected = option.mood.value
                st.rerun()

    option = mood.mood_option(st.session_state.mood_selected)
    if option:
        tips_col, notes_col = st.columns(2)
        with tips_col:
            tips = "".join(f"<li>{_html(t)}</li>" for t in option.tips)
            st.markdown(f"<div class='mm-card'><b>{option.emoji} Feeling {_html(option.label)}</b><p>{_html(ctx.t('mood.tipsIntro'))}</p><ul>{tips}</ul></div>", unsafe_allow_html=True)
        with notes_col:
            notes = st.text_area(ctx.t("mood.notes"), key="mood_notes", height=140, placeholder="What's on your mind? Share anything you'd like to remember about today... (Optional)")
            st.caption(ctx.t("mood.notesHelp"))
    else:
        notes = ""

    if st.button(ctx.t("mood.submit"), key="mood_submit", type="primary", disabled=option is None):
        problem = forms.validate_mood_checkin(st.session_state.mood_selected)
        if problem:
            st.warning(problem)
            return
        try:
            mood_entry_insert(mood.build_mood_payload(ctx.user_id, st.session_state.mood_selected, notes))
        except BackendError as e:
            _notify_error("Could not save your check-in", e)
            return
        st.session_state.mood_submitted = True
        st.session_state.pop("mood_notes", None)
        st.rerun()
    st.caption("Building healthy habits, one check-in at a time 🌱")

    try:
        recent = mood_entries_list(ctx.user_id, limit=7)
    except BackendError as e:
        recent = []
        _notify_error("Could not load your check-ins", e)
    if recent:
        st.markdown("**" + ctx.t("mood.recent") + "**")
        for entry in recent:
            st.caption(f"{mood.mood_emoji(entry.mood)} {utils.to_local(entry.created_at):%d %b %Y, %I:%M %p}" + (f" · {entry.notes}" if entry.notes else ""))


def _send_to_chat(text: str) -> None:
    st.session_state.chat.send(text)


def _submit_chat(ctx: AppContext, text: str) -> bool:
    if forms.is_blank(text):
        st.warning(ctx.t("chat.empty"))
        return False
    st.session_state.chat.send(text)
    return True


def render_chat(ctx: AppContext) -> None:
    chat: CompanionChat = st.session_state.chat
    _back_button(ctx, "chat_back")
    st.markdown("<h3 style='margin-bottom: 0;'>🤖 " + _html(ctx.t("chat.title")) + "</h3>", unsafe_allow_html=True)
    st.caption("मैं आपका मित्र हूँ - " + ctx.t("chat.subtitle"))

    chat_container = st.container(height=420)
    with chat_container:
        last_assistant_id = max((m.id for m in chat.messages if m.role is Role.ASSISTANT), default=None)
        for msg in chat.messages:
            stamp = utils.to_local(msg.created_at).strftime("%I:%M %p")
            if msg.role is Role.USER:
                st.markdown(f"""
                    <div style="display: flex; justify-content: flex-end; margin-bottom: 0.6rem;">
                        <div class="mm-bubble-user">{_html(msg.content)}<div class="mm-stamp">{stamp}</div></div>
                    </div>
                """, unsafe_allow_html=True)
            else:
                st.markdown(f"""
                    <div style="display: flex; justify-content: flex-start; gap: 0.5rem; margin-bottom: 0.6rem;">
                        <div style="font-size: 18px;">🤖</div>
                        <div class="mm-bubble-assistant">{_html(msg.content)}<div class="mm-stamp">{stamp}</div></div>
                    </div>
                """, unsafe_allow_html=True)
                # Only the latest reply's suggestions are clickable; older ones are history.
                for i, suggestion in enumerate(msg.suggestions):
                    st.button(
                        suggestion,
                        key=f"suggest_{msg.id}_{i}",
                        on_click=_send_to_chat,
                        args=(suggestion,),
                        disabled=chat.is_typing or msg.id != last_assistant_id,
                    )
        typing_placeholder = st.empty()

    with st.form("chat_form", clear_on_submit=True):
        text = st.text_input(ctx.t("chat.placeholder"), key="chat_input", placeholder="Type your message... मुझसे कुछ भी पूछें", disabled=chat.is_typing, label_visibility="collapsed")
        if st.form_submit_button("📤 " + ctx.t("chat.send"), disabled=chat.is_typing):
            if _submit_chat(ctx, text):
                st.rerun()

    action_cols = st.columns(len(QUICK_ACTIONS))
    for col, (label_key, phrase) in zip(action_cols, QUICK_ACTIONS):
        with col:
            st.button(ctx.t(label_key), key=f"quick_{label_key}", on_click=_send_to_chat, args=(phrase,), disabled=chat.is_typing, use_container_width=True)

    # Wait out the typing delay in short steps. Each st call lets Streamlit stop
    # this run when the user clicks elsewhere; _navigate then cancels the reply.
    dots = 0
    while chat.is_typing and chat.seconds_until_reply() > 0:
        dots = dots % 3 + 1
        typing_placeholder.markdown("<div class='mm-bubble-assistant'>" + _html(ctx.t("chat.typing")) + " " + "•" * dots + "</div>", unsafe_allow_html=True)
        time.sleep(min(0.25, chat.seconds_until_reply()))
    if chat.poll() is not None:
        st.rerun()


def render_wellness(ctx: AppContext) -> None:
    _page_header(ctx, "features.wellnessHub", "features.wellnessHubDesc", "wellness_back")
    term = st.text_input(ctx.t("wellness.search"), key="wellness_search", label_visibility="collapsed", placeholder=ctx.t("wellness.search"))
    tabs = st.tabs([ctx.t(f"wellness.{c}") for c in wellness.CATEGORIES])
    for tab, category in zip(tabs, wellness.CATEGORIES):
        with tab:
            items = wellness.filter_content(category, term)
            if not items:
                st.info(ctx.t("wellness.noResults"))
                continue
            cols = st.columns(3)
            for i, item in enumerate(items):
                with cols[i % 3]:
                    action = ctx.t("wellness.listen") if item.kind == "audio" else ctx.t("wellness.watch")
                    st.markdown(f"""
                        <div class="mm-card">
                            <div style="font-size: 2rem;">{item.thumbnail}</div>
                            <span class="mm-badge">{_html(item.level)}</span>
                            <div style="font-weight: 600; margin-top: 0.4rem;">{_html(item.title)}</div>
                            <div style="font-size: 0.9rem;">{_html(item.description)}</div>
                            <div style="font-size: 0.85rem; margin-top: 0.4rem;">⏱ {_html(item.duration)} · ⭐ {item.rating} · ▶ {_html(action)}</div>
                        </div>
                    """, unsafe_allow_html=True)
    st.markdown("""
        <div class="mm-card" style="text-align: center;">
            <div class="mm-quote">"Wellness is not a 'medical fix' but a way of living - a lifestyle sensitive and responsive to all the dimensions of body, mind, and spirit."</div>
            <div class="mm-cite">- Greg Anderson</div>
        </div>
    """, unsafe_allow_html=True)


def _select_counselor(counselor_id: str) -> None:
    st.session_state.booking_counselor = counselor_id
    st.session_state.booking_time = None


def render_counselor(ctx: AppContext) -> None:
    _page_header(ctx, "features.bookCounselor", "features.bookCounselorDesc", "counselor_back")
    form_col, list_col = st.columns(2)
    with form_col:
        _render_helpline(ctx)
        st.markdown("**⭐ " + ctx.t("booking.selectCounselor") + "**")
        for c in booking.COUNSELORS:
            selected = st.session_state.booking_counselor == c.id
            st.markdown(f"""
                <div class="mm-card {'mm-selected' if selected else ''}">
                    <span style="font-size: 1.6rem;">{c.avatar}</span> <b>{_html(c.name)}</b> · ⭐ {c.rating}<br>
                    <span style="font-size: 0.9rem;">{_html(c.specialization)}</span><br>
                    <span style="font-size: 0.85rem;">{_html(c.experience)} · 📍 {_html(c.location)} · {_html(', '.join(c.languages))}</span>
                </div>
            """, unsafe_allow_html=True)
            st.button("✓ " + c.name if selected else c.name, key=f"counselor_{c.id}", on_click=_select_counselor, args=(c.id,), type="primary" if selected else "secondary", use_container_width=True)

        st.markdown("**📅 " + ctx.t("booking.selectDateTime") + "**")
        appointment_date = st.date_input("Date", value=utils.local_today(), min_value=utils.local_today(), key="booking_date")
        slots = booking.available_times(st.session_state.booking_counselor)
        if slots:
            st.caption(ctx.t("booking.slots"))
            slot_cols = st.columns(3)
            for i, slot in enumerate(slots):
                with slot_cols[i % 3]:
                    if st.button(slot, key=f"slot_{slot}", type="primary" if st.session_state.booking_time == slot else "secondary", use_container_width=True):
                        st.session_state.booking_time = slot
                        st.rerun()
        notes = st.text_area(ctx.t("booking.notes"), key="booking_notes", height=90, placeholder="Share any specific concerns or topics you'd like to discuss...")

        ready = bool(appointment_date and st.session_state.booking_time and st.session_state.booking_counselor)
        if st.button(ctx.t("booking.confirm"), key="booking_confirm", type="primary", use_container_width=True, disabled=not ready):
            problem = forms.validate_booking(appointment_date, st.session_state.booking_time, st.session_state.booking_counselor, slots, today=utils.local_today())
            if problem:
                st.warning(problem)
            else:
                counselor = booking.get_counselor(st.session_state.booking_counselor)
                try:
                    booking_insert(booking.build_booking_payload(ctx.user_id, counselor, appointment_date, st.session_state.booking_time, notes))
                except BackendError as e:
                    _notify_error("Booking Failed", e)
                else:
                    _flash("Booking Confirmed! " + booking.confirmation_message(counselor, appointment_date, st.session_state.booking_time))
                    st.session_state.booking_counselor = None
                    st.session_state.booking_time = None
                    st.session_state.pop("booking_notes", None)
                    st.rerun()

    with list_col:
        st.markdown("**" + ctx.t("booking.myAppointments") + "**")
        st.caption("Your upcoming and past appointments")
        try:
            appointments = bookings_list(ctx.user_id)
        except BackendError as e:
            appointments = []
            _notify_error("Could not load your appointments", e)
        if not appointments:
            st.markdown("<div class='mm-card' style='text-align: center;'>📅<br>" + _html(ctx.t("booking.noAppointments")) + "</div>", unsafe_allow_html=True)
        for b in appointments:
            notes_html = f"<div class='mm-note'>{_html(b.notes)}</div>" if b.notes else ""
            st.markdown(f"""
                <div class="mm-card mm-appointment">
                    <b>{_html(b.counselor_name)}</b> <span class="mm-badge">{_html(b.status)}</span><br>
                    📅 {b.appointment_date:%a %b %d %Y} · 🕒 {_html(b.appointment_time)}
                    {notes_html}
                </div>
            """, unsafe_allow_html=True)


def _open_journal_form(entry=None) -> None:
    st.session_state.journal_show_form = True
    st.session_state.journal_editing = entry
    st.session_state.journal_title = entry.title if entry else ""
    st.session_state.journal_content = entry.content if entry else ""
    st.session_state.journal_mood = entry.mood.value if entry and entry.mood else ""
    st.session_state.journal_tags = journal.tags_to_text(entry.tags) if entry else ""


def _close_journal_form() -> None:
    st.session_state.journal_show_form = False
    st.session_state.journal_editing = None
    for k in ("journal_title", "journal_content", "journal_mood", "journal_tags"):
        st.session_state.pop(k, None)


def _render_journal_form(ctx: AppContext) -> None:
    editing = st.session_state.journal_editing
    st.markdown("**" + (ctx.t("journal.editEntry") if editing else ctx.t("journal.newEntry")) + "**")
    st.caption("Express your thoughts and feelings in your personal space")
    title = st.text_input(ctx.t("journal.entryTitle"), key="journal_title", placeholder="Give your entry a title...")
    content = st.text_area(ctx.t("journal.content"), key="journal_content", height=180, placeholder="What's on your mind today?")
    c1, c2 = st.columns(2)
    mood_values = [""] + [o.mood.value for o in mood.MOOD_OPTIONS]
    with c1:
        mood_value = st.selectbox(
            ctx.t("journal.mood"),
            options=mood_values,
            format_func=lambda v: "Select your mood" if not v else f"{mood.mood_emoji(v)} {mood.MOOD_BY_VALUE[v].label}",
            key="journal_mood",
        )
    with c2:
        tags = st.text_input(ctx.t("journal.tags"), key="journal_tags", placeholder="gratitude, reflection, goals...")
    s1, s2 = st.columns([1, 3])
    with s1:
        save_label = ctx.t("common.update") if editing else ctx.t("common.save")
        if st.button(save_label, key="journal_save_btn", type="primary"):
            problem = forms.validate_journal_entry(title, content)
            if problem:
                st.warning(problem)
                return
            payload = journal.build_entry_payload(ctx.user_id, title, content, mood_value, tags)
            try:
                with st.spinner("Saving..."):
                    if editing:
                        journal_entry_update(editing.id, payload)
                    else:
                        journal_entry_insert(payload)
            except BackendError as e:
                _notify_error("Error", e)
                return
            _flash(("Entry Updated! " if editing else "Entry Saved! ") + ctx.t("journal.saved"))
            _close_journal_form()
            st.rerun()
    with s2:
        st.button(ctx.t("common.cancel"), key="journal_cancel_btn", on_click=_close_journal_form)


def _delete_journal_entry(entry_id: str, ctx: AppContext) -> None:
    try:
        journal_entry_delete(entry_id)
    except BackendError as e:
        _notify_error("Error", e)
    else:
        _flash("Entry Deleted. " + ctx.t("journal.deleted"), icon="🗑️")
    st.session_state.journal_confirm_delete = None


def render_journal(ctx: AppContext) -> None:
    _page_header(ctx, "features.dailyJournal", "features.dailyJournalDesc", "journal_back")
    if st.session_state.journal_show_form:
        _render_journal_form(ctx)
    else:
        st.button("➕ " + ctx.t("journal.newEntry"), key="journal_add_btn", on_click=_open_journal_form)

    term = st.text_input(ctx.t("journal.search"), key="journal_search", label_visibility="collapsed", placeholder="🔍 " + ctx.t("journal.search"))
    try:
        entries = journal_entries_list(ctx.user_id)
    except BackendError as e:
        entries = []
        _notify_error("Could not load your journal", e)
    shown = journal.filter_entries(entries, term)
    if not shown:
        message = ctx.t("journal.noMatch") if term.strip() else "Start your journaling journey today!"
        st.markdown(f"<div class='mm-card' style='text-align: center;'>📖<br><b>{_html(ctx.t('journal.empty'))}</b><br>{_html(message)}</div>", unsafe_allow_html=True)
    cols = st.columns(3)
    for i, entry in enumerate(shown):
        with cols[i % 3]:
            visible, hidden = journal.split_tags(entry.tags)
            tags_html = "".join(f"<span class='mm-badge'>{_html(t)}</span> " for t in visible)
            if hidden:
                tags_html += f"<span class='mm-badge'>+{hidden}</span>"
            preview = entry.content if len(entry.content) <= 220 else entry.content[:220] + "…"
            st.markdown(f"""
                <div class="mm-card">
                    <div>📖 {mood.mood_emoji(entry.mood)}</div>
                    <div style="font-weight: 600;">{_html(entry.title)}</div>
                    <div class="mm-stamp">{utils.to_local(entry.created_at):%d %b %Y}</div>
                    <div style="font-size: 0.9rem; margin: 0.4rem 0;">{_html(preview)}</div>
                    {tags_html}
                </div>
            """, unsafe_allow_html=True)
            e1, e2 = st.columns(2)
            with e1:
                st.button("✏️ " + ctx.t("common.edit"), key=f"journal_edit_{entry.id}", on_click=_open_journal_form, args=(entry,))
            with e2:
                if st.session_state.journal_confirm_delete == entry.id:
                    st.button("⚠️ " + ctx.t("common.delete") + "?", key=f"journal_del_yes_{entry.id}", on_click=_delete_journal_entry, args=(entry.id, ctx))
                elif st.button("🗑️ " + ctx.t("common.delete"), key=f"journal_del_{entry.id}"):
                    st.session_state.journal_confirm_delete = entry.id
                    st.rerun()

    st.markdown(f"""
        <div class="mm-card" style="text-align: center;">
            <div class="mm-quote">"जर्नलिंग आत्मा की आवाज़ सुनने का एक तरीका है।"</div>
            <div style="opacity: 0.8;">"{_html(ctx.t('journal.quote'))}"</div>
        </div>
    """, unsafe_allow_html=True)


PAGES = {
    "welcome": render_welcome,
    "auth": render_auth,
    "dashboard": render_dashboard,
    "mood": render_mood,
    "chat": render_chat,
    "wellness": render_wellness,
    "counselor": render_counselor,
    "journal": render_journal,
}


# --- Streamlit UI ---
def main_ui():
    st.set_page_config(page_title="MannMitra", page_icon="💗", layout="wide", initial_sidebar_state="collapsed")

    theme_css = """
        <style>
            :root {
                --mm-bg: #f4f7fb;
                --mm-accent: #6d5dd3;
                --mm-mint: #e6f4ef;
                --mm-card-bg: #ffffff;
                --mm-shadow: 0 2px 12px rgba(0,0,0,0.06);
            }
            header { visibility: hidden; }
            #MainMenu { visibility: hidden; }
            footer { visibility: hidden; }
            .stApp { background: var(--mm-bg) !important; }
            [data-testid="stButton"] button { border-radius: 12px; }
            .mm-hero { text-align: center; color: var(--mm-accent); }
            .mm-hero-sub { text-align: center; font-size: 1.2rem; }
            .mm-card { background: var(--mm-card-bg); border-radius: 14px; padding: 1rem; margin-bottom: 1rem; box-shadow: var(--mm-shadow); border: 1px solid rgba(0,0,0,0.06); }
            .mm-selected { border: 2px solid var(--mm-accent); }
            .mm-emergency { background: var(--mm-mint); border-color: rgba(109,93,211,0.2); }
            .mm-appointment { border-left: 4px solid var(--mm-accent); }
            .mm-quote { font-size: 1.1rem; font-weight: 500; margin-bottom: 0.4rem; }
            .mm-cite { font-size: 0.8rem; color: var(--mm-accent); margin-top: 0.3rem; }
            .mm-badge { display: inline-block; background: var(--mm-mint); border-radius: 10px; padding: 0.1rem 0.5rem; font-size: 0.8rem; }
            .mm-note { font-size: 0.9rem; margin-top: 0.4rem; padding: 0.4rem; background: #f3f4f6; border-radius: 8px; }
            .mm-stamp { font-size: 0.75rem; opacity: 0.7; margin-top: 0.3rem; }
            .mm-bubble-user { background: var(--mm-accent); color: #ffffff; border-radius: 14px; padding: 0.65rem 0.9rem; max-width: 78%; text-align: right; word-wrap: break-word; line-height: 1.5; }
            .mm-bubble-assistant { background: var(--mm-mint); border-radius: 14px; padding: 0.65rem 0.9rem; max-width: 78%; word-wrap: break-word; line-height: 1.5; box-shadow: var(--mm-shadow); }
            .block-container:has(#mm-auth-page) { max-width: 520px; }
            .mm-auth-title { font-size: 1.75rem; font-weight: 700; margin-bottom: 0.25rem; text-align: center; }
            .mm-auth-caption { font-size: 1rem; opacity: 0.9; margin-bottom: 1.5rem; text-align: center; }
        </style>
    """
    st.markdown(theme_css, unsafe_allow_html=True)

    if not is_supabase_configured():
        st.error(
            "**SUPABASE_URL** and **SUPABASE_ANON_KEY** are required but not set. "
            "For local dev: add them to a `.env` file in the project root. "
            "For Streamlit Cloud: add them in app Settings → Secrets."
        )
        st.stop()

    for icon, message in st.session_state.flash:
        st.toast(message, icon=icon)
    st.session_state.flash = []

    ctx: AppContext = st.session_state.ctx
    page = st.session_state.active_page
    if page in PROTECTED_PAGES and not ctx.signed_in:
        page = st.session_state.active_page = "auth"
    if page in ("welcome", "auth") and ctx.signed_in:
        page = st.session_state.active_page = "dashboard"

    PAGES.get(page, render_dashboard)(ctx)


if __name__ == "__main__":
    main_ui()
