"""Shared constants across the application"""


class WordListConstants:
    """Constants for the word list document"""

    WORDS_FIELD = "words"
    ENCODING = "utf-8"

    DEFAULT_HEADERS = {
        "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
        "Connection": "keep-alive",
    }


class SpeechConstants:
    """Constants for the pyttsx3 speech engine"""

    RATE_PROPERTY = "rate"
    VOICE_PROPERTY = "voice"
    VOICES_PROPERTY = "voices"

    # Playback rate multiplier must satisfy MIN_RATE < rate <= MAX_RATE
    MIN_RATE = 0.0
    MAX_RATE = 3.0


class ControlConstants:
    """CLI controls and their aliases"""

    START = "start"
    NEXT = "next"
    REPLAY = "replay"
    QUIT = "quit"

    ALIASES = {
        "s": START,
        "start": START,
        "n": NEXT,
        "next": NEXT,
        "r": REPLAY,
        "replay": REPLAY,
        "image": REPLAY,
        "q": QUIT,
        "quit": QUIT,
        "exit": QUIT,
    }

    LABELS = {
        START: "[s] Start",
        NEXT: "[n] Next",
        REPLAY: "[r] Replay (image)",
        QUIT: "[q] Quit",
    }
