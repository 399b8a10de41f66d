"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import SpeechConstants

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
)


class WordListSettings(BaseSettings):
    """Where and how the vocabulary list is fetched"""

    model_config = _ENV_CONFIG

    url: str = Field(
        default="http://localhost:4000/assets/data/words.json",
        validation_alias=AliasChoices("VOCAB_WORDS_URL"),
    )
    request_timeout: int = Field(
        default=10, validation_alias=AliasChoices("VOCAB_REQUEST_TIMEOUT")
    )
    max_retries: int = Field(
        default=0, validation_alias=AliasChoices("VOCAB_MAX_RETRIES")
    )
    user_agent: str = Field(
        default="vocab-flashcards/1.0",
        validation_alias=AliasChoices("VOCAB_USER_AGENT"),
    )

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate request timeout"""
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v

    @field_validator("max_retries")
    @classmethod
    def validate_retries(cls, v: int) -> int:
        """Validate retry count"""
        if v < 0:
            raise ValueError("Max retries cannot be negative")
        return v


class SpeechSettings(BaseSettings):
    """Text-to-speech configuration"""

    model_config = _ENV_CONFIG

    word_language: str = Field(
        default="en-US", validation_alias=AliasChoices("SPEECH_WORD_LANG")
    )
    meaning_language: str = Field(
        default="vi-VN", validation_alias=AliasChoices("SPEECH_MEANING_LANG")
    )
    rate: float = Field(default=1.0, validation_alias=AliasChoices("SPEECH_RATE"))
    base_words_per_minute: int = Field(
        default=170, validation_alias=AliasChoices("SPEECH_BASE_WPM")
    )
    enable_speech: bool = Field(
        default=True, validation_alias=AliasChoices("ENABLE_SPEECH")
    )

    @field_validator("word_language", "meaning_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Language tags must be non-empty, e.g. en-US"""
        v = v.strip()
        if not v:
            raise ValueError("Language tag cannot be empty")
        return v

    @field_validator("rate")
    @classmethod
    def validate_rate(cls, v: float) -> float:
        if not SpeechConstants.MIN_RATE < v <= SpeechConstants.MAX_RATE:
            raise ValueError(
                f"Speech rate must be in "
                f"({SpeechConstants.MIN_RATE}, {SpeechConstants.MAX_RATE}]"
            )
        return v

    @field_validator("base_words_per_minute")
    @classmethod
    def validate_wpm(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Value must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = _ENV_CONFIG

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = _ENV_CONFIG

    word_list: WordListSettings = Field(default_factory=WordListSettings)
    speech: SpeechSettings = Field(default_factory=SpeechSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))
    verbose: bool = Field(default=False, validation_alias=AliasChoices("VERBOSE"))
    seed: int | None = Field(default=None, validation_alias=AliasChoices("VOCAB_SEED"))


# Global settings instance
settings = AppSettings()
