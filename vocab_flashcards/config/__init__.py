"""Configuration module for the vocabulary flashcard application"""

from .settings import (
    AppSettings,
    LoggingSettings,
    SpeechSettings,
    WordListSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "WordListSettings",
    "SpeechSettings",
    "LoggingSettings",
    "settings",
]
