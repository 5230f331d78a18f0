"""
UI copy in English and Hindi.

Labels, page titles and buttons only; the companion's replies carry their own
bilingual text.
"""

from enum import Enum


class Language(str, Enum):
    EN = "en"
    HI = "hi"


TRANSLATIONS = {
    Language.EN: {
        # Auth
        "auth.login": "Login",
        "auth.signup": "Sign Up",
        "auth.email": "Email",
        "auth.password": "Password",
        "auth.fullName": "Full Name",
        "auth.createAccount": "Create Account",
        "auth.alreadyAccount": "Already have an account?",
        "auth.noAccount": "Don't have an account?",
        "auth.welcome": "Welcome to MannMitra",
        "auth.subtitle": "Your Mental Wellness Companion",
        "auth.accountCreated": "Account created successfully! You can now start your wellness journey.",
        # Dashboard
        "dashboard.goodMorning": "Good morning",
        "dashboard.friend": "Friend",
        "dashboard.namaste": "नमस्ते! How can we support you today?",
        "dashboard.streak": "Streak",
        "dashboard.days": "days",
        "dashboard.quickMood": "Quick Mood Check",
        "dashboard.affirmationCaption": "Daily wisdom for your wellness journey",
        "dashboard.emergency": "Need Immediate Support?",
        "dashboard.helpline": "India's National Mental Health Helpline is available 24/7",
        "dashboard.kiranCall": "Call KIRAN: 1800-599-0019",
        "dashboard.comingSoon": "Coming soon",
        # Features
        "features.aiCompanion": "AI Companion",
        "features.aiCompanionDesc": "Chat with your wellness buddy",
        "features.moodTracker": "Mood Check-in",
        "features.moodTrackerDesc": "How are you feeling today?",
        "features.wellnessHub": "Wellness Hub",
        "features.wellnessHubDesc": "Guided meditations & videos",
        "features.bookCounselor": "Book Counselor",
        "features.bookCounselorDesc": "Professional support available",
        "features.peerSupport": "Peer Support",
        "features.peerSupportDesc": "Anonymous community chat",
        "features.dailyJournal": "Daily Journal",
        "features.dailyJournalDesc": "Reflect and express yourself",
        "features.myProgress": "My Progress",
        "features.myProgressDesc": "Track your wellness journey",
        "features.mindfulGames": "Mindful Games",
        "features.mindfulGamesDesc": "Relaxing interactive activities",
        # Mood
        "mood.title": "How are you feeling today?",
        "mood.checkin": "Today's Mood Check-in",
        "mood.tipsIntro": "It's completely normal to feel this way. Here are some gentle suggestions:",
        "mood.notes": "Optional Notes",
        "mood.notesHelp": "Your notes are private and help you track patterns over time.",
        "mood.submit": "Log My Mood",
        "mood.thanks": "Thank You! Your mood has been logged.",
        "mood.recent": "Recent check-ins",
        # Chat
        "chat.title": "AI Wellness Companion",
        "chat.subtitle": "Always here to listen and support",
        "chat.placeholder": "Type your message...",
        "chat.send": "Send",
        "chat.typing": "Typing…",
        "chat.emergency": "Emergency Support",
        "chat.relax": "Relaxation",
        "chat.studyTips": "Study Tips",
        "chat.empty": "Please type a message first.",
        # Journal
        "journal.newEntry": "New Entry",
        "journal.editEntry": "Edit Entry",
        "journal.entryTitle": "Title",
        "journal.content": "Content",
        "journal.mood": "How are you feeling?",
        "journal.tags": "Tags (comma-separated)",
        "journal.search": "Search your entries...",
        "journal.empty": "No journal entries yet",
        "journal.noMatch": "No entries match your search.",
        "journal.saved": "Your journal entry has been saved.",
        "journal.deleted": "Your journal entry has been deleted.",
        "journal.quote": "Journaling is a way to listen to the voice of the soul.",
        # Booking
        "booking.selectCounselor": "Select Counselor",
        "booking.selectDateTime": "Select Date & Time",
        "booking.slots": "Available Time Slots",
        "booking.notes": "Additional Notes",
        "booking.confirm": "Confirm Booking",
        "booking.myAppointments": "My Appointments",
        "booking.noAppointments": "No appointments scheduled yet",
        # Wellness
        "wellness.search": "Search wellness content...",
        "wellness.meditation": "Meditation",
        "wellness.yoga": "Yoga",
        "wellness.sleep": "Sleep",
        "wellness.motivation": "Motivation",
        "wellness.listen": "Listen",
        "wellness.watch": "Watch",
        "wellness.noResults": "Nothing matches your search.",
        # Welcome
        "welcome.tagline": "Empowering students with culturally-rooted wellness support",
        "welcome.getStarted": "Begin Your Wellness Journey",
        # Common
        "common.save": "Save",
        "common.update": "Update",
        "common.cancel": "Cancel",
        "common.delete": "Delete",
        "common.edit": "Edit",
        "common.back": "Back",
        "common.logout": "Logout",
        "common.translate": "हिंदी",
    },
    Language.HI: {
        # Auth
        "auth.login": "लॉगिन",
        "auth.signup": "साइन अप",
        "auth.email": "ईमेल",
        "auth.password": "पासवर्ड",
        "auth.fullName": "पूरा नाम",
        "auth.createAccount": "खाता बनाएं",
        "auth.alreadyAccount": "पहले से खाता है?",
        "auth.noAccount": "खाता नहीं है?",
        "auth.welcome": "MannMitra में आपका स्वागत है",
        "auth.subtitle": "आपका मानसिक कल्याण साथी",
        "auth.accountCreated": "खाता सफलतापूर्वक बन गया! अब आप अपनी कल्याण यात्रा शुरू कर सकते हैं।",
        # Dashboard
        "dashboard.goodMorning": "सुप्रभात",
        "dashboard.friend": "मित्र",
        "dashboard.namaste": "नमस्ते! आज हम आपकी कैसे सहायता कर सकते हैं?",
        "dashboard.streak": "लगातार",
        "dashboard.days": "दिन",
        "dashboard.quickMood": "त्वरित मूड जांच",
        "dashboard.affirmationCaption": "आपकी कल्याण यात्रा के लिए दैनिक ज्ञान",
        "dashboard.emergency": "तत्काल सहायता चाहिए?",
        "dashboard.helpline": "भारत की राष्ट्रीय मानसिक स्वास्थ्य हेल्पलाइन 24/7 उपलब्ध है",
        "dashboard.kiranCall": "KIRAN कॉल करें: 1800-599-0019",
        "dashboard.comingSoon": "जल्द आ रहा है",
        # Features
        "features.aiCompanion": "AI साथी",
        "features.aiCompanionDesc": "अपने कल्याण मित्र से बात करें",
        "features.moodTracker": "मूड चेक-इन",
        "features.moodTrackerDesc": "आज आप कैसा महसूस कर रहे हैं?",
        "features.wellnessHub": "कल्याण केंद्र",
        "features.wellnessHubDesc": "निर्देशित ध्यान और वीडियो",
        "features.bookCounselor": "परामर्शदाता बुक करें",
        "features.bookCounselorDesc": "पेशेवर सहायता उपलब्ध",
        "features.peerSupport": "साथी सहायता",
        "features.peerSupportDesc": "गुमनाम समुदायिक चैट",
        "features.dailyJournal": "दैनिक डायरी",
        "features.dailyJournalDesc": "चिंतन करें और खुद को व्यक्त करें",
        "features.myProgress": "मेरी प्रगति",
        "features.myProgressDesc": "अपने कल्याण यात्रा को ट्रैक करें",
        "features.mindfulGames": "मन की शांति के खेल",
        "features.mindfulGamesDesc": "आराम देने वाली इंटरैक्टिव गतिविधियां",
        # Mood
        "mood.title": "आज आपका मन कैसा है?",
        "mood.checkin": "आज का मूड चेक-इन",
        "mood.tipsIntro": "ऐसा महसूस करना बिल्कुल सामान्य है। कुछ सौम्य सुझाव:",
        "mood.notes": "वैकल्पिक नोट्स",
        "mood.notesHelp": "आपके नोट्स निजी हैं और समय के साथ पैटर्न समझने में मदद करते हैं।",
        "mood.submit": "मेरा मूड दर्ज करें",
        "mood.thanks": "धन्यवाद! आपका मूड दर्ज हो गया है।",
        "mood.recent": "हाल के चेक-इन",
        # Chat
        "chat.title": "AI कल्याण साथी",
        "chat.subtitle": "मैं आपका मित्र हूँ - हमेशा सुनने के लिए यहाँ",
        "chat.placeholder": "अपना संदेश लिखें...",
        "chat.send": "भेजें",
        "chat.typing": "लिख रहा है…",
        "chat.emergency": "आपातकालीन सहायता",
        "chat.relax": "विश्राम",
        "chat.studyTips": "पढ़ाई के सुझाव",
        "chat.empty": "कृपया पहले एक संदेश लिखें।",
        # Journal
        "journal.newEntry": "नई प्रविष्टि",
        "journal.editEntry": "प्रविष्टि संपादित करें",
        "journal.entryTitle": "शीर्षक",
        "journal.content": "सामग्री",
        "journal.mood": "आप कैसा महसूस कर रहे हैं?",
        "journal.tags": "टैग (अल्पविराम से अलग)",
        "journal.search": "अपनी प्रविष्टियाँ खोजें...",
        "journal.empty": "अभी तक कोई डायरी प्रविष्टि नहीं",
        "journal.noMatch": "आपकी खोज से कोई प्रविष्टि मेल नहीं खाती।",
        "journal.saved": "आपकी डायरी प्रविष्टि सेव हो गई है।",
        "journal.deleted": "आपकी डायरी प्रविष्टि हटा दी गई है।",
        "journal.quote": "जर्नलिंग आत्मा की आवाज़ सुनने का एक तरीका है।",
        # Booking
        "booking.selectCounselor": "परामर्शदाता चुनें",
        "booking.selectDateTime": "तारीख और समय चुनें",
        "booking.slots": "उपलब्ध समय",
        "booking.notes": "अतिरिक्त नोट्स",
        "booking.confirm": "बुकिंग की पुष्टि करें",
        "booking.myAppointments": "मेरी अपॉइंटमेंट",
        "booking.noAppointments": "अभी तक कोई अपॉइंटमेंट नहीं",
        # Wellness
        "wellness.search": "कल्याण सामग्री खोजें...",
        "wellness.meditation": "ध्यान",
        "wellness.yoga": "योग",
        "wellness.sleep": "नींद",
        "wellness.motivation": "प्रेरणा",
        "wellness.listen": "सुनें",
        "wellness.watch": "देखें",
        "wellness.noResults": "आपकी खोज से कुछ मेल नहीं खाता।",
        # Welcome
        "welcome.tagline": "आपका मानसिक स्वास्थ्य मित्र - सांस्कृतिक जड़ों वाला कल्याण सहयोग",
        "welcome.getStarted": "अपनी कल्याण यात्रा शुरू करें",
        # Common
        "common.save": "सेव करें",
        "common.update": "अपडेट करें",
        "common.cancel": "रद्द करें",
        "common.delete": "हटाएं",
        "common.edit": "संपादित करें",
        "common.back": "वापस",
        "common.logout": "लॉगआउट",
        "common.translate": "English",
    },
}


def resolve(language: Language, key: str) -> str:
    """Return the display string for key, or the key itself when the table has no entry."""
    return TRANSLATIONS[Language(language)].get(key, key)


def toggle(language: Language) -> Language:
    return Language.HI if Language(language) is Language.EN else Language.EN
