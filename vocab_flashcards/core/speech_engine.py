"""Text-to-speech engines"""

import re
from typing import Any

from ..config.settings import settings
from ..exceptions import SpeechError
from ..logging_config import get_logger
from ..models.speech import Utterance
from .constants import SpeechConstants
from .interfaces import SpeechEngineInterface

logger = get_logger(__name__)

_TOKEN_SPLIT_RE = re.compile(r"[\s_\-./\\()]+")


def _voice_languages(voice: Any) -> list[str]:
    """Normalized language tags of a pyttsx3 voice.

    espeak reports languages as bytes prefixed with a priority byte
    (``b"\\x05en-us"``); SAPI5 and NSSpeechSynthesizer report plain strings.
    """
    tags: list[str] = []
    for raw in getattr(voice, "languages", None) or []:
        if isinstance(raw, bytes):
            raw = raw[1:] if raw and raw[0] < 32 else raw
            raw = raw.decode("utf-8", errors="ignore")
        tag = str(raw).strip().replace("_", "-").lower()
        if tag:
            tags.append(tag)
    return tags


def _id_tokens(voice: Any) -> list[str]:
    haystack = f"{getattr(voice, 'id', '')} {getattr(voice, 'name', '')}".lower()
    return [token for token in _TOKEN_SPLIT_RE.split(haystack) if token]


def _contains_run(tokens: list[str], run: list[str]) -> bool:
    size = len(run)
    return any(tokens[i : i + size] == run for i in range(len(tokens) - size + 1))


def find_voice_id(voices: list[Any], language: str) -> str | None:
    """Pick the voice that best matches a language tag.

    Exact tag match wins over a primary-subtag match (``vi`` for ``vi-VN``),
    which wins over the tag appearing as whole tokens of the voice id or
    name (``TTS_MS_VI-VN_AN``). Substrings such as ``de`` in ``Desktop``
    never match.
    """
    wanted = language.replace("_", "-").lower()
    subtags = [part for part in wanted.split("-") if part]
    if not subtags:
        return None
    primary = subtags[0]

    for voice in voices:
        if wanted in _voice_languages(voice):
            return str(voice.id)
    for voice in voices:
        if any(tag.split("-")[0] == primary for tag in _voice_languages(voice)):
            return str(voice.id)
    for voice in voices:
        if _contains_run(_id_tokens(voice), subtags):
            return str(voice.id)
    for voice in voices:
        if primary in _id_tokens(voice):
            return str(voice.id)
    return None


class Pyttsx3SpeechEngine(SpeechEngineInterface):
    """Offline speech through pyttsx3.

    ``runAndWait`` blocks until the utterance has been played, so returning
    from :meth:`speak` is the completion signal.
    """

    def __init__(self, base_words_per_minute: int | None = None):
        self.base_words_per_minute = (
            base_words_per_minute or settings.speech.base_words_per_minute
        )
        self._engine: Any = None
        self._voice_cache: dict[str, str | None] = {}

    def _get_engine(self) -> Any:
        if self._engine is None:
            import pyttsx3

            self._engine = pyttsx3.init()
        return self._engine

    def _select_voice(self, engine: Any, language: str) -> None:
        if language not in self._voice_cache:
            voices = engine.getProperty(SpeechConstants.VOICES_PROPERTY) or []
            self._voice_cache[language] = find_voice_id(list(voices), language)
            if self._voice_cache[language] is None:
                logger.warning(f"No voice for '{language}', using the default voice")
        voice_id = self._voice_cache[language]
        if voice_id:
            engine.setProperty(SpeechConstants.VOICE_PROPERTY, voice_id)

    def speak(self, utterance: Utterance) -> None:
        if not utterance.text:
            return
        try:
            engine = self._get_engine()
            self._select_voice(engine, utterance.language)
            engine.setProperty(
                SpeechConstants.RATE_PROPERTY,
                int(self.base_words_per_minute * utterance.rate),
            )
            engine.say(utterance.text)
            engine.runAndWait()
        except Exception as e:
            raise SpeechError(utterance.text, utterance.language, e) from e


class SilentSpeechEngine(SpeechEngineInterface):
    """Speech engine for sessions run with speech disabled"""

    def speak(self, utterance: Utterance) -> None:
        logger.debug(f"(silent) {utterance.language}: {utterance.text}")


def create_speech_engine(enabled: bool | None = None) -> SpeechEngineInterface:
    """Default engine for the configured speech setting"""
    if enabled is None:
        enabled = settings.speech.enable_speech
    return Pyttsx3SpeechEngine() if enabled else SilentSpeechEngine()
