"""Data models for the vocabulary flashcard application"""

from .session import PresenterState, SessionState
from .speech import Utterance
from .vocabulary import VocabularyEntry, VocabularyList

__all__ = [
    "VocabularyEntry",
    "VocabularyList",
    "SessionState",
    "PresenterState",
    "Utterance",
]
