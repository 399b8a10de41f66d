"""
Vocabulary flashcards - random word cards read aloud, word then meaning
"""

__version__ = "1.0.0"
__description__ = "Vocabulary flashcard presenter with text-to-speech"

# Export main factory function for easy access
from .core.factory import create_word_presenter

__all__ = ["create_word_presenter"]
