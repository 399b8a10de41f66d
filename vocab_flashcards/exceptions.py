"""Custom exceptions for the vocabulary flashcard application"""

from typing import Any


class FlashcardError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class WordListLoadError(FlashcardError):
    """Raised when the word list cannot be fetched"""

    def __init__(
        self, source: str, reason: str, original_error: Exception | None = None
    ):
        super().__init__(
            f"Failed to load word list from {source}: {reason}",
            {
                "source": source,
                "reason": reason,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.source = source
        self.reason = reason
        self.original_error = original_error


class WordListParseError(WordListLoadError):
    """Raised when the word list payload is malformed"""


class SpeechError(FlashcardError):
    """Raised when the speech engine fails to vocalize an utterance"""

    def __init__(
        self,
        text: str,
        language: str,
        original_error: Exception | None = None,
    ):
        super().__init__(
            f"Failed to speak '{text}' ({language})",
            {
                "text": text[:100] + "..." if len(text) > 100 else text,
                "language": language,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.text = text
        self.language = language
        self.original_error = original_error


class ConfigurationError(FlashcardError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason
